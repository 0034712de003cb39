"""
Nested Builders Module.

Nested callbacks let the caller define the inner clauses of a `nested`, `bool`
or bucket clause with the same fluent API used at the top level. Each callback
receives a fresh builder of its own; what it accumulates is read back once and
folded into the parent clause, never into the parent builder.
"""

from typing import Any, Callable, Dict, Optional, Tuple

from ..errors import NestedBuilderError
from ..logging_config import get_logger
from .aggregation_builder import AggregationBuilder
from .filter_builder import FilterBuilder
from .mixins import (
    _AggregationComposerMixin,
    _FilterComposerMixin,
    _QueryComposerMixin,
)
from .protocols import AggregationSource, FilterSource, QuerySource
from .query_builder import QueryBuilder

# Set the hierarchical logger
logger = get_logger(__name__)


class NestedClauseBuilder(_QueryComposerMixin, _FilterComposerMixin):
    """
    Builder handed to the `nested` callback of `query()` and `filter()`.

    Example:
        ```python
        bodybuilder().query(
            "nested",
            "path",
            "obj1",
            nested=lambda q: q.query("match", "obj1.color", "blue"),
        )
        # query: {"nested": {"path": "obj1", "query": {"match": {"obj1.color": "blue"}}}}
        ```
    """

    def __init__(self):
        self._query_builder = QueryBuilder()
        self._filter_builder = FilterBuilder()


class NestedAggregationBuilder(_FilterComposerMixin, _AggregationComposerMixin):
    """Builder handed to the `nested` callback of `aggregation()`."""

    def __init__(self):
        self._filter_builder = FilterBuilder()
        self._aggregation_builder = AggregationBuilder()


def _invoke(callback: Callable[[Any], Any], builder: Any, *protocols: type) -> Any:
    result = callback(builder)
    if not all(isinstance(result, p) for p in protocols):
        callback_name = getattr(callback, "__qualname__", repr(callback))
        message = (
            f"Nested builder callback '{callback_name}' returned an invalid value "
            f"of type '{type(result).__name__}'; it must return the builder it received."
        )
        logger.error(message)
        raise NestedBuilderError(message)
    return result


def _run_nested_clause(callback: Callable[[Any], Any]) -> Dict[str, Dict[str, Any]]:
    """
    Runs a query/filter nested callback.

    Returns:
        The trees the callback produced, keyed by `"query"` and/or `"filter"`;
        absent trees are omitted.
    """
    result = _invoke(callback, NestedClauseBuilder(), QuerySource, FilterSource)
    parts: Dict[str, Dict[str, Any]] = {}
    if result.has_query():
        parts["query"] = result.get_query()
    if result.has_filter():
        parts["filter"] = result.get_filter()
    return parts


def _run_nested_aggregation(
    callback: Callable[[Any], Any],
) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """
    Runs an aggregation nested callback.

    Returns:
        A `(filter, aggregations)` tuple, each `None` when the callback did not
        produce it.
    """
    result = _invoke(
        callback, NestedAggregationBuilder(), FilterSource, AggregationSource
    )
    nested_filter = result.get_filter() if result.has_filter() else None
    nested_aggs = result.get_aggregations() if result.has_aggregations() else None
    return nested_filter, nested_aggs
