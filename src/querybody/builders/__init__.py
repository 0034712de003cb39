from .aggregation_builder import AggregationBuilder as AggregationBuilder
from .body_builder import BodyBuilder as BodyBuilder, bodybuilder as bodybuilder
from .config import BuilderConfig as BuilderConfig
from .filter_builder import FilterBuilder as FilterBuilder
from .nested import (
    NestedAggregationBuilder as NestedAggregationBuilder,
    NestedClauseBuilder as NestedClauseBuilder,
)
from .protocols import (
    AggregationSource as AggregationSource,
    FilterSource as FilterSource,
    QuerySource as QuerySource,
)
from .query_builder import QueryBuilder as QueryBuilder
