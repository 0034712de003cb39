"""
Aggregation Builder Module.

This module provides the `AggregationBuilder`, which accumulates named
aggregation entries, including bucket aggregations whose sub-aggregations and
filter are defined through a nested callback.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from ..logging_config import get_logger
from ..models import AggregationClause

# Set the hierarchical logger
logger = get_logger(__name__)


class AggregationBuilder:
    """
    Accumulates named aggregations, keyed by name in insertion order.

    Names are unique within one builder: adding an aggregation under an
    existing name replaces the previous entry (it keeps its position).

    Example:
        ```python
        from querybody import AggregationBuilder

        ab = (
            AggregationBuilder()
            .aggregation("max", "price")
            .aggregation("terms", "title", options={"_meta": {"color": "blue"}}, name="titles")
        )
        ab.get_aggregations()
        # {"agg_max_price": {"max": {"field": "price"}},
        #  "titles": {"terms": {"field": "title"}, "meta": {"color": "blue"}}}
        ```
    """

    def __init__(self):
        self._aggregations: Dict[str, Dict[str, Any]] = {}

    def aggregation(
        self,
        type: str,
        field: Any = None,
        *,
        name: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "AggregationBuilder":
        """
        Adds an aggregation clause.

        Example:
            ```python
            AggregationBuilder().aggregation(
                "diversified_sampler",
                "user.id",
                options={"shard_size": 200},
                nested=lambda a: a.aggregation("significant_terms", "text", name="keywords"),
            )
            # {"agg_diversified_sampler_user.id": {
            #     "diversified_sampler": {"field": "user.id", "shard_size": 200},
            #     "aggs": {"keywords": {"significant_terms": {"field": "text"}}}}}
            ```

        Args:
            type: Name of the aggregation type, such as `"sum"` or `"terms"`.
            field: Name of the field to aggregate over, `None` if not needed.
            name: Custom name of the aggregation. Defaults to `agg_<type>_<field>`
                (`agg_<type>` when `field` is `None`).
            options: Additional options of the aggregation. The reserved key
                `_meta` is removed and emitted as the sibling `meta` key.
            nested: A function receiving a fresh
                [`NestedAggregationBuilder`][querybody.builders.NestedAggregationBuilder]
                and returning it. Its filter is emitted under `filter` and its
                aggregations under `aggs`.

        Returns:
            The `AggregationBuilder` instance for method chaining.

        Raises:
            NestedBuilderError: If `nested` does not return a builder.
        """
        clause = AggregationClause.from_options(type, field, options)

        if nested is not None:
            # Delayed import to avoid circular dependency
            from .nested import _run_nested_aggregation

            clause.nested_filter, clause.nested_aggs = _run_nested_aggregation(nested)

        agg_name = name if name is not None else clause.default_name()
        if agg_name in self._aggregations:
            logger.debug(f"Overwriting aggregation '{agg_name}'")

        self._aggregations[agg_name] = clause.to_dict()
        return self

    agg = aggregation

    def get_aggregations(self) -> Dict[str, Dict[str, Any]]:
        """Returns the live mapping of aggregation name to entry."""
        return self._aggregations

    def has_aggregations(self) -> bool:
        return bool(self._aggregations)
