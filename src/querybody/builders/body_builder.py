"""
This module provides the high-level "Fluent" API for assembling a search request body.

[`BodyBuilder`][querybody.builders.BodyBuilder] combines queries, filters,
aggregations, sorting and pagination on one method chain, and reduces them into
a plain dictionary with [`build()`][querybody.builders.BodyBuilder.build]. The
builder never sends anything: the returned body is meant to be serialized
verbatim as the request of a search endpoint.

Example:
    ```python
    from querybody import bodybuilder

    body = (
        bodybuilder()
        .query("match", "message", "this is a test")
        .filter("term", "user", "kimchy")
        .not_filter("term", "user", "cassie")
        .aggregation("terms", "user")
        .sort("timestamp", "desc")
        .size(20)
        .build()
    )
    ```
"""

import copy
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..enum import Dialect
from ..helpers import deep_merge, normalize_sort_state, set_path, sort_merge
from ..logging_config import get_logger
from .aggregation_builder import AggregationBuilder
from .config import BuilderConfig
from .filter_builder import FilterBuilder
from .mixins import (
    _AggregationComposerMixin,
    _FilterComposerMixin,
    _QueryComposerMixin,
)
from .query_builder import QueryBuilder

# Set the hierarchical logger
logger = get_logger(__name__)

SortSpec = Union[str, Mapping[str, Any], Iterable[Union[str, Mapping[str, Any]]]]


class BodyBuilder(_QueryComposerMixin, _FilterComposerMixin, _AggregationComposerMixin):
    """
    The root builder of a request body.

    It owns the `sort`, `from`, `size` and raw top-level keys, and holds one
    [`QueryBuilder`][querybody.builders.QueryBuilder], one
    [`FilterBuilder`][querybody.builders.FilterBuilder] and one
    [`AggregationBuilder`][querybody.builders.AggregationBuilder] whose methods
    are all available on the same chain.

    Users should get an instance through the
    [`bodybuilder()`][querybody.builders.bodybuilder] factory.
    """

    def __init__(self, config: Optional[BuilderConfig] = None):
        self._config = config or BuilderConfig()
        self._body: Dict[str, Any] = {}
        self._query_builder = QueryBuilder()
        self._filter_builder = FilterBuilder()
        self._aggregation_builder = AggregationBuilder()

    def sort(self, field: SortSpec, direction: Any = None) -> "BodyBuilder":
        """
        Sets a sort direction on a field, or merges several sort criteria at once.

        Sorting twice on the same field updates its direction in place. Only
        `_geo_distance` criteria may appear more than once.

        Example:
            ```python
            bodybuilder().sort("timestamp", "desc")

            bodybuilder().sort([
                {"categories": "desc"},
                "content",
                {"price": {"order": "asc", "mode": "avg"}},
                {"_geo_distance": {"pin.location": [-70, 40], "order": "asc", "unit": "km"}},
            ])
            ```

        Args:
            field: A field name, a mapping of field to direction (or sort
                descriptor), or a sequence mixing both.
            direction: The direction of plain field names. Defaults to the
                configured `sort_direction` (`"asc"`).

        Returns:
            The `BodyBuilder` instance for method chaining.
        """
        direction = direction or self._config.sort_direction
        sorts = normalize_sort_state(self._body.get("sort"))
        self._body["sort"] = sorts

        if isinstance(field, str):
            sort_merge(sorts, field, direction)
            return self

        descriptors = [field] if isinstance(field, Mapping) else field
        for descriptor in descriptors:
            if isinstance(descriptor, str):
                sort_merge(sorts, descriptor, direction)
                continue
            for key, value in descriptor.items():
                sort_merge(sorts, key, value)
        return self

    def from_(self, quantity: int) -> "BodyBuilder":
        """
        Sets the *from* offset for paginating a query.

        Args:
            quantity: The offset of the first result to fetch.
        """
        self._body["from"] = quantity
        return self

    def size(self, quantity: int) -> "BodyBuilder":
        """
        Sets the *size*, the maximum number of results to return.

        Args:
            quantity: Maximum number of results.
        """
        self._body["size"] = quantity
        return self

    def raw_option(self, key: str, value: Any) -> "BodyBuilder":
        """
        Sets any top-level key of the body, such as `_source` or `highlight`.

        Args:
            key: The top-level key.
            value: The value, emitted verbatim.
        """
        self._body[key] = value
        return self

    def build(self, dialect: Optional[Union[Dialect, str]] = None) -> Dict[str, Any]:
        """
        Collects all queries, filters and aggregations and builds the body.

        Each call returns a new, independently owned dictionary; the builder
        state is left untouched, so `build()` may be called repeatedly.

        Args:
            dialect: The output shape. Pass `"v1"` (or `Dialect.V1`) for the
                legacy 1.x query DSL. Defaults to the configured dialect; an
                unknown value falls back to the default dialect.

        Returns:
            The request body.
        """
        try:
            dialect = Dialect(dialect or self._config.dialect)
        except ValueError:
            logger.warning(
                f"Unknown dialect '{dialect}', building with '{Dialect.Default}'"
            )
            dialect = Dialect.Default

        queries = self.get_query()
        filters = self.get_filter()
        aggregations = self.get_aggregations()
        logger.debug(
            f"Building body (dialect '{dialect}', query: {bool(queries)}, "
            f"filter: {bool(filters)}, aggregations: {len(aggregations)})"
        )

        if dialect is Dialect.V1:
            return _build_v1(self._body, queries, filters, aggregations)
        return _build(self._body, queries, filters, aggregations)


def _build_v1(
    body: Dict[str, Any],
    queries: Dict[str, Any],
    filters: Dict[str, Any],
    aggregations: Dict[str, Any],
) -> Dict[str, Any]:
    cloned = copy.deepcopy(body)

    if filters:
        set_path(cloned, "query.filtered.filter", copy.deepcopy(filters))
        if queries:
            set_path(cloned, "query.filtered.query", copy.deepcopy(queries))
    elif queries:
        cloned["query"] = copy.deepcopy(queries)

    if aggregations:
        cloned["aggregations"] = copy.deepcopy(aggregations)
    return cloned


def _build(
    body: Dict[str, Any],
    queries: Dict[str, Any],
    filters: Dict[str, Any],
    aggregations: Dict[str, Any],
) -> Dict[str, Any]:
    cloned = copy.deepcopy(body)

    if filters:
        filter_body = set_path({}, "query.bool.filter", copy.deepcopy(filters))
        query_body: Dict[str, Any] = {}
        if queries.get("bool"):
            set_path(query_body, "query.bool", copy.deepcopy(queries["bool"]))
        elif queries:
            set_path(query_body, "query.bool.must", copy.deepcopy(queries))
        deep_merge(cloned, filter_body, query_body)
    elif queries:
        cloned["query"] = copy.deepcopy(queries)

    if aggregations:
        cloned["aggs"] = copy.deepcopy(aggregations)
    return cloned


def bodybuilder(config: Optional[BuilderConfig] = None) -> BodyBuilder:
    """
    Creates a new, empty [`BodyBuilder`][querybody.builders.BodyBuilder].

    Example:
        ```python
        bodybuilder().query("match", "message", "this is a test").build()
        # {"query": {"match": {"message": "this is a test"}}}
        ```

    Args:
        config: Builder defaults. Defaults to `BuilderConfig()`.
    """
    return BodyBuilder(config)
