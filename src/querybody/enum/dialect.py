from enum import StrEnum


class Dialect(StrEnum):
    """
    Output shape produced by [`BodyBuilder.build()`][querybody.builders.BodyBuilder.build].

    Being a `StrEnum`, each member compares equal to its plain string value, so
    `build("v1")` and `build(Dialect.V1)` are interchangeable.
    """

    Default = "default"
    """Current query DSL: filters under `query.bool.filter`, aggregations under `aggs`."""

    V1 = "v1"
    """Legacy 1.x query DSL: `query.filtered`, aggregations under `aggregations`."""
