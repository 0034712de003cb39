from typing import Any, Dict


def set_path(target: Dict[str, Any], path: str, value: Any) -> Dict[str, Any]:
    """
    Sets `value` at the dot-separated `path` of `target`, creating the
    intermediate dictionaries.

    Example:
        `set_path({}, "query.bool.filter", f)` -> `{"query": {"bool": {"filter": f}}}`
    """
    keys = path.split(".")
    node = target
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value
    return target


def deep_merge(target: Dict[str, Any], *sources: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merges each source into `target`, left to right.

    Nested dictionaries are merged key by key; any other value from a later
    source replaces the earlier one.

    Returns:
        The mutated `target`.
    """
    for source in sources:
        for key, value in source.items():
            current = target.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                deep_merge(current, value)
            else:
                target[key] = value
    return target
