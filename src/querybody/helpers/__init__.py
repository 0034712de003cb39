from .clause import build_clause as build_clause
from .merge import deep_merge as deep_merge, set_path as set_path
from .sort import (
    GEO_DISTANCE_KEY as GEO_DISTANCE_KEY,
    normalize_sort_state as normalize_sort_state,
    sort_merge as sort_merge,
)
