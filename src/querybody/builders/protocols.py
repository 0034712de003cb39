from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class QuerySource(Protocol):
    """
    Structural protocol for anything that accumulates a query tree.

    Satisfied by [`QueryBuilder`][querybody.builders.QueryBuilder] and by every
    composite builder exposing the query methods (e.g.
    [`BodyBuilder`][querybody.builders.BodyBuilder]).
    """

    def has_query(self) -> bool:
        """Returns `True` if at least one query clause was added."""
        ...

    def get_query(self) -> Dict[str, Any]:
        """Returns the reduced query tree (`{}` when empty)."""
        ...


@runtime_checkable
class FilterSource(Protocol):
    """Structural protocol for anything that accumulates a filter tree."""

    def has_filter(self) -> bool: ...

    def get_filter(self) -> Dict[str, Any]: ...


@runtime_checkable
class AggregationSource(Protocol):
    """Structural protocol for anything that accumulates named aggregations."""

    def has_aggregations(self) -> bool: ...

    def get_aggregations(self) -> Dict[str, Any]: ...
