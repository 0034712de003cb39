from .aggregation import (
    AggregationClause as AggregationClause,
    META_OPTION_KEY as META_OPTION_KEY,
)
