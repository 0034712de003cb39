class NestedBuilderError(TypeError):
    """
    Raised when a nested builder callback does not return a builder.

    Nested callbacks (the `nested=` argument of `query()`, `filter()` and
    `aggregation()`) receive a fresh builder and must return it, or any object
    exposing the accessors the parent reads back (`has_filter`/`get_filter`,
    `has_query`/`get_query`, `has_aggregations`/`get_aggregations`).
    """

    pass
