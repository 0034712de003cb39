"""
querybody - fluent builder of search engine request bodies.

This package assembles the JSON body of a search request (queries, filters,
aggregations, sorting and pagination) through a chainable API:

- **bodybuilder**: The factory of the root [`BodyBuilder`][querybody.builders.BodyBuilder].
- **Builders**: The query, filter and aggregation builders it is composed of.
- **Dialect**: The two supported output shapes (`"default"` and legacy `"v1"`).

Example:
    >>> from querybody import bodybuilder
    >>> bodybuilder().filter("term", "user", "kimchy").build()
    {'query': {'bool': {'filter': {'term': {'user': 'kimchy'}}}}}
"""

# --- Builders ---
from .builders import (
    bodybuilder as bodybuilder,
    BodyBuilder as BodyBuilder,
    BuilderConfig as BuilderConfig,
    QueryBuilder as QueryBuilder,
    FilterBuilder as FilterBuilder,
    AggregationBuilder as AggregationBuilder,
    NestedClauseBuilder as NestedClauseBuilder,
    NestedAggregationBuilder as NestedAggregationBuilder,
)

# --- Models ---
from .models import AggregationClause as AggregationClause

# --- Helpers ---
from .helpers import build_clause as build_clause, sort_merge as sort_merge

# --- Enums ---
from .enum import Dialect as Dialect, BoolOccurrence as BoolOccurrence

# --- Errors ---
from .errors import NestedBuilderError as NestedBuilderError

from .logging_config import (
    get_logger as get_logger,
    setup_logging as setup_logging,
)

__all__ = [
    # Builders
    "bodybuilder",
    "BodyBuilder",
    "BuilderConfig",
    "QueryBuilder",
    "FilterBuilder",
    "AggregationBuilder",
    "NestedClauseBuilder",
    "NestedAggregationBuilder",
    # Models
    "AggregationClause",
    # Helpers
    "build_clause",
    "sort_merge",
    # Enums
    "Dialect",
    "BoolOccurrence",
    # Errors
    "NestedBuilderError",
    # Logging
    "get_logger",
    "setup_logging",
]


# --- Set up the top-level logger for the package ---

from logging import NullHandler

get_logger().addHandler(NullHandler())
