"""
Aggregation Clause Module.

Defines `AggregationClause`, the typed record of a single aggregation as it is
accumulated by the [`AggregationBuilder`][querybody.builders.AggregationBuilder],
and its serialization into the request body.
"""

from typing import Any, Dict, Mapping, Optional

import pydantic

from ..helpers import build_clause

META_OPTION_KEY = "_meta"
"""Reserved option key carrying per-aggregation metadata."""


class AggregationClause(pydantic.BaseModel):
    """
    One named aggregation leaf or bucket.

    Attributes:
        type: The aggregation operator (e.g. `"terms"`, `"sum"`). Not validated:
            any value, including a non-string one, is emitted as given.
        field: The aggregated field, `None` for field-less aggregations.
        options: Additional body keys of the aggregation, without `_meta`. Keys
            are emitted verbatim, whatever their type.
        meta: Metadata surfaced as the sibling `meta` key of the entry.
        nested_filter: Filter tree collected from a nested callback.
        nested_aggs: Sub-aggregations collected from a nested callback.
    """

    type: Any
    field: Any = None
    options: Dict[Any, Any] = pydantic.Field(default_factory=dict)
    meta: Any = None
    nested_filter: Optional[Dict[Any, Any]] = None
    nested_aggs: Optional[Dict[Any, Any]] = None

    @classmethod
    def from_options(
        cls,
        type: Any,
        field: Any = None,
        options: Optional[Mapping[Any, Any]] = None,
    ) -> "AggregationClause":
        """
        Creates a clause, moving the reserved `_meta` option into `meta`.

        The caller's `options` mapping is copied, never mutated.
        """
        opts = dict(options or {})
        meta = opts.pop(META_OPTION_KEY, None)
        return cls(type=type, field=field, options=opts, meta=meta)

    def default_name(self) -> str:
        """
        Name used when the caller does not provide one: `agg_<type>_<field>`.

        Field-less aggregations deliberately drop the `_<field>` suffix and
        get `agg_<type>`, rather than a name ending in a placeholder such as
        `agg_filter_None`.
        """
        if self.field is None:
            return f"agg_{self.type}"
        return f"agg_{self.type}_{self.field}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the clause into its request body entry.

        Example Output:
            `{"terms": {"field": "title"}, "meta": {"color": "blue"}, "aggs": {...}}`
        """
        entry: Dict[str, Any] = {
            self.type: build_clause(self.field, None, self.options)
        }
        if self.meta is not None:
            entry["meta"] = self.meta
        if self.nested_filter:
            entry["filter"] = self.nested_filter
        if self.nested_aggs:
            entry["aggs"] = self.nested_aggs
        return entry
