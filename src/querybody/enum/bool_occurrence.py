from enum import StrEnum


class BoolOccurrence(StrEnum):
    """
    Occurrence keys of a boolean clause tree.

    The `and`/`or`/`not` chain methods of the query and filter builders
    (`query`/`or_query`/`not_query`, `filter`/`or_filter`/`not_filter`) append
    their clause to the list stored under the matching key.
    """

    Must = "must"
    Should = "should"
    MustNot = "must_not"
