"""
Composer Mixins Module.

Composite builders ([`BodyBuilder`][querybody.builders.BodyBuilder] and the
nested builders) expose the methods of several sub-builders on one chain. Each
mixin below forwards its methods to a sub-builder instance held by the
composite, and returns the composite itself so chaining never leaves it.

The composite's `__init__` is responsible for creating the held instance
(`_query_builder`, `_filter_builder`, `_aggregation_builder`).
"""

from typing import Any, Callable, Dict, Mapping, Optional, Self

from .aggregation_builder import AggregationBuilder
from .filter_builder import FilterBuilder
from .query_builder import QueryBuilder

_Nested = Optional[Callable[[Any], Any]]
_Options = Optional[Mapping[str, Any]]


class _QueryComposerMixin:
    """Forwards the query methods to `self._query_builder`."""

    _query_builder: QueryBuilder

    def query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._query_builder.query(type, field, value, options=options, nested=nested)
        return self

    and_query = query
    add_query = query

    def or_query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._query_builder.or_query(type, field, value, options=options, nested=nested)
        return self

    def not_query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._query_builder.not_query(type, field, value, options=options, nested=nested)
        return self

    def query_minimum_should_match(self, param: Any, override: bool = False) -> Self:
        self._query_builder.query_minimum_should_match(param, override)
        return self

    def has_query(self) -> bool:
        return self._query_builder.has_query()

    def get_query(self) -> Dict[str, Any]:
        return self._query_builder.get_query()


class _FilterComposerMixin:
    """Forwards the filter methods to `self._filter_builder`."""

    _filter_builder: FilterBuilder

    def filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._filter_builder.filter(type, field, value, options=options, nested=nested)
        return self

    and_filter = filter
    add_filter = filter

    def or_filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._filter_builder.or_filter(type, field, value, options=options, nested=nested)
        return self

    def not_filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._filter_builder.not_filter(type, field, value, options=options, nested=nested)
        return self

    def filter_minimum_should_match(self, param: Any, override: bool = False) -> Self:
        self._filter_builder.filter_minimum_should_match(param, override)
        return self

    def has_filter(self) -> bool:
        return self._filter_builder.has_filter()

    def get_filter(self) -> Dict[str, Any]:
        return self._filter_builder.get_filter()


class _AggregationComposerMixin:
    """Forwards the aggregation methods to `self._aggregation_builder`."""

    _aggregation_builder: AggregationBuilder

    def aggregation(
        self,
        type: str,
        field: Any = None,
        *,
        name: Optional[str] = None,
        options: _Options = None,
        nested: _Nested = None,
    ) -> Self:
        self._aggregation_builder.aggregation(
            type, field, name=name, options=options, nested=nested
        )
        return self

    agg = aggregation

    def has_aggregations(self) -> bool:
        return self._aggregation_builder.has_aggregations()

    def get_aggregations(self) -> Dict[str, Dict[str, Any]]:
        return self._aggregation_builder.get_aggregations()
