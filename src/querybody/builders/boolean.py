"""
Boolean clause composition shared by the query and filter builders.

Both builders accumulate leaf clauses into three occurrence lists (`must`,
`should`, `must_not`) and reduce them, on read, into a clause tree: a single
`must` clause is returned as is, anything else is wrapped in a `bool` clause.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Self

from ..enum import BoolOccurrence
from ..helpers import build_clause
from ..logging_config import get_logger

logger = get_logger(__name__)


def _as_bool_body(tree: Dict[str, Any]) -> Dict[str, Any]:
    if set(tree) == {"bool"}:
        return dict(tree["bool"])
    return {BoolOccurrence.Must.value: [tree]}


class _BoolClauseAccumulator:
    """Ordered `must`/`should`/`must_not` clause lists and their reduction."""

    def __init__(self):
        self._clauses: Dict[BoolOccurrence, List[Dict[str, Any]]] = {}
        self._minimum_should_match: Any = None
        self._minimum_should_match_override = False

    def add(self, occurrence: BoolOccurrence, clause: Dict[str, Any]):
        self._clauses.setdefault(occurrence, []).append(clause)

    def set_minimum_should_match(self, param: Any, override: bool = False):
        self._minimum_should_match = param
        self._minimum_should_match_override = override

    def is_empty(self) -> bool:
        return not self._clauses

    def _emits_minimum_should_match(self) -> bool:
        if self._minimum_should_match is None:
            return False
        should = self._clauses.get(BoolOccurrence.Should, [])
        return self._minimum_should_match_override or len(should) >= 2

    def reduce(self) -> Dict[str, Any]:
        if not self._clauses:
            return {}

        emits_msm = self._emits_minimum_should_match()
        must = self._clauses.get(BoolOccurrence.Must, [])
        if len(self._clauses) == 1 and len(must) == 1 and not emits_msm:
            return must[0]

        body: Dict[str, Any] = {
            occurrence.value: list(clauses)
            for occurrence, clauses in self._clauses.items()
        }
        if emits_msm:
            body["minimum_should_match"] = self._minimum_should_match
        return {"bool": body}


class _BoolClauseBuilder:
    """
    Base class of [`QueryBuilder`][querybody.builders.QueryBuilder] and
    [`FilterBuilder`][querybody.builders.FilterBuilder].

    Subclasses set `__clause_kind__` to the key (`"query"` or `"filter"`) under
    which their tree is read back from a nested callback.
    """

    __clause_kind__: str

    def __init__(self):
        self._clauses = _BoolClauseAccumulator()

    def _add_clause(
        self,
        occurrence: BoolOccurrence,
        type: str,
        field: Any = None,
        value: Any = None,
        options: Optional[Mapping[str, Any]] = None,
        nested: Optional[Callable[[Any], Any]] = None,
    ) -> Self:
        body = build_clause(field, value, options)

        if nested is not None:
            # Delayed import to avoid circular dependency
            from .nested import _run_nested_clause

            for kind, tree in _run_nested_clause(nested).items():
                if type == "bool" and kind == self.__clause_kind__:
                    body.update(_as_bool_body(tree))
                else:
                    body[kind] = tree
                logger.debug(f"Folded nested {kind} into '{type}' {self.__clause_kind__}")

        self._clauses.add(occurrence, {type: body})
        return self

    def _set_minimum_should_match(self, param: Any, override: bool) -> Self:
        self._clauses.set_minimum_should_match(param, override)
        return self

    def _has_clauses(self) -> bool:
        return not self._clauses.is_empty()

    def _get_tree(self) -> Dict[str, Any]:
        return self._clauses.reduce()
