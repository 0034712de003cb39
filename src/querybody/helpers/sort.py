import copy
from typing import Any, List

GEO_DISTANCE_KEY = "_geo_distance"
"""Sort key whose entries are never deduplicated."""


def sort_merge(current: List[Any], field: str, direction: Any) -> List[Any]:
    """
    Inserts or updates the sort entry of `field` in the `current` sort list.

    If an entry keyed by `field` already exists its direction is replaced in
    place, so the entry keeps its tie-break position. Otherwise
    `{field: direction}` is appended.

    Entries keyed by `_geo_distance` are always appended: several geo-distance
    criteria (on different points) may legally coexist in one sort.

    Args:
        current: The sort list, mutated in place.
        field: The sort key (a field name or `_geo_distance`).
        direction: `"asc"`, `"desc"` or a structured sort descriptor.

    Returns:
        The same `current` list.
    """
    if field != GEO_DISTANCE_KEY:
        for entry in current:
            if isinstance(entry, dict) and field in entry:
                entry[field] = direction
                return current

    current.append({field: direction})
    return current


def normalize_sort_state(state: Any) -> List[Any]:
    """
    Returns a private copy of `state` as a sort list.

    A lone criterion (a descriptor mapping or a bare field name, as set through
    `raw_option`) is wrapped into a one-element list. The caller's objects are
    deep-copied so later merges never modify them.
    """
    if state is None:
        return []
    if not isinstance(state, list):
        return [copy.deepcopy(state)]
    return copy.deepcopy(state)
