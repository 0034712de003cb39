from typing import Any, Dict, Mapping, Optional


def build_clause(
    field: Any = None,
    value: Any = None,
    options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Builds the body of a leaf clause from a field, a value and extra options.

    The options are copied, then the field is folded into them:

    | `field` | `value` | Result |
    | --- | --- | --- |
    | `"user"` | `"kimchy"` | `{"user": "kimchy", **options}` |
    | `{"query": "x"}` | `None` | `{"query": "x", **options}` |
    | `"price"` | `None` | `{"field": "price", **options}` |
    | `None` | `None` | `{**options}` |

    Args:
        field: The target field name, or a mapping merged verbatim.
        value: The value bound to `field`.
        options: Additional keys of the clause body.

    Returns:
        A new dictionary; `options` is never mutated.
    """
    clause = dict(options or {})
    if value is not None:
        clause[field] = value
    elif isinstance(field, Mapping):
        clause.update(field)
    elif field is not None:
        clause["field"] = field
    return clause
