from typing import Any, Callable, Dict, Mapping, Optional

from ..enum import BoolOccurrence
from .boolean import _BoolClauseBuilder


class QueryBuilder(_BoolClauseBuilder):
    """
    Accumulates scoring query clauses into a boolean query tree.

    `query()` (and its aliases `and_query()`/`add_query()`) appends to `must`,
    `or_query()` to `should` and `not_query()` to `must_not`.

    Example:
        ```python
        from querybody import QueryBuilder

        qb = (
            QueryBuilder()
            .query("match", "message", "this is a test")
            .or_query("term", "user", "kimchy")
            .or_query("term", "user", "cassie")
        )
        qb.get_query()
        # {"bool": {"must": [{"match": {"message": "this is a test"}}],
        #           "should": [{"term": {"user": "kimchy"}}, {"term": {"user": "cassie"}}]}}
        ```

    The builder is usually not used alone: [`BodyBuilder`][querybody.builders.BodyBuilder]
    exposes the same methods and reads the tree back at build time.
    """

    __clause_kind__ = "query"

    def query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "QueryBuilder":
        """
        Adds a query clause that must match.

        Args:
            type: The query operator, such as `"match"`, `"term"` or `"nested"`.
            field: The target field, or a mapping merged into the clause body.
            value: The value bound to `field`.
            options: Additional keys of the clause body.
            nested: A function receiving a fresh
                [`NestedClauseBuilder`][querybody.builders.NestedClauseBuilder] and
                returning it; its query and filter trees are folded into this clause.

        Returns:
            The `QueryBuilder` instance for method chaining.

        Raises:
            NestedBuilderError: If `nested` does not return a builder.
        """
        return self._add_clause(
            BoolOccurrence.Must, type, field, value, options, nested
        )

    and_query = query
    add_query = query

    def or_query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "QueryBuilder":
        """Adds a query clause that should match (`bool.should`)."""
        return self._add_clause(
            BoolOccurrence.Should, type, field, value, options, nested
        )

    def not_query(
        self,
        type: str,
        field: Any = None,
        value: Any = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> "QueryBuilder":
        """Adds a query clause that must not match (`bool.must_not`)."""
        return self._add_clause(
            BoolOccurrence.MustNot, type, field, value, options, nested
        )

    def query_minimum_should_match(
        self, param: Any, override: bool = False
    ) -> "QueryBuilder":
        """
        Sets `minimum_should_match` on the boolean query.

        It is only emitted when there are at least two `should` clauses, unless
        `override` is `True`.
        """
        return self._set_minimum_should_match(param, override)

    def has_query(self) -> bool:
        return self._has_clauses()

    def get_query(self) -> Dict[str, Any]:
        return self._get_tree()
