from typing import Any, Callable, Dict, Mapping, Optional

from ..enum import BoolOccurrence
from .boolean import _BoolClauseBuilder


class FilterBuilder(_BoolClauseBuilder):
    """
    Accumulates non-scoring filter clauses into a boolean filter tree.

    Mirrors [`QueryBuilder`][querybody.builders.QueryBuilder]: `filter()`
    (aliases `and_filter()`/`add_filter()`) appends to `must`, `or_filter()` to
    `should` and `not_filter()` to `must_not`. A single `filter()` call reduces
    to the bare clause, e.g. `{"term": {"user": "kimchy"}}`.

    Example:
        ```python
        from querybody import FilterBuilder

        fb = (
            FilterBuilder()
            .filter("term", "user", "kimchy")
            .not_filter("term", "user", "cassie")
        )
        fb.get_filter()
        # {"bool": {"must": [{"term": {"user": "kimchy"}}],
        #           "must_not": [{"term": {"user": "cassie"}}]}}
        ```
    """

    __clause_kind__ = "filter"

    def filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "FilterBuilder":
        """
        Adds a filter clause that must match.

        Args:
            type: The filter operator, such as `"term"`, `"range"` or `"bool"`.
            field: The target field, or a mapping merged into the clause body.
            value: The value bound to `field`.
            options: Additional keys of the clause body.
            nested: A function receiving a fresh
                [`NestedClauseBuilder`][querybody.builders.NestedClauseBuilder] and
                returning it. With `type="bool"` the nested filter tree becomes
                the body of the `bool` clause.

        Returns:
            The `FilterBuilder` instance for method chaining.

        Raises:
            NestedBuilderError: If `nested` does not return a builder.
        """
        return self._add_clause(
            BoolOccurrence.Must, type, field, value, options, nested
        )

    and_filter = filter
    add_filter = filter

    def or_filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "FilterBuilder":
        """Adds a filter clause that should match (`bool.should`)."""
        return self._add_clause(
            BoolOccurrence.Should, type, field, value, options, nested
        )

    def not_filter(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "FilterBuilder":
        """Adds a filter clause that must not match (`bool.must_not`)."""
        return self._add_clause(
            BoolOccurrence.MustNot, type, field, value, options, nested
        )

    def filter_minimum_should_match(
        self, param: Any, override: bool = False
    ) -> "FilterBuilder":
        """
        Sets `minimum_should_match` on the boolean filter.

        Same emission rule as
        [`query_minimum_should_match()`][querybody.builders.QueryBuilder.query_minimum_should_match].
        """
        return self._set_minimum_should_match(param, override)

    def has_filter(self) -> bool:
        return self._has_clauses()

    def get_filter(self) -> Dict[str, Any]:
        return self._get_tree()
