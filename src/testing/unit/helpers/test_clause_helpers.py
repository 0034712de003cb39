import pytest

from querybody.helpers import build_clause, deep_merge, set_path


@pytest.mark.parametrize(
    "field, value, options, expected",
    [
        ("user", "kimchy", None, {"user": "kimchy"}),
        ("price", None, None, {"field": "price"}),
        (None, None, {"shard_size": 200}, {"shard_size": 200}),
        (None, None, None, {}),
        ({"query": "x", "fields": ["a", "b"]}, None, None, {"query": "x", "fields": ["a", "b"]}),
        ("load_time", None, {"percents": [95, 99]}, {"field": "load_time", "percents": [95, 99]}),
        ("message", {"query": "x", "operator": "and"}, None, {"message": {"query": "x", "operator": "and"}}),
    ],
)
def test_build_clause(field, value, options, expected):
    assert build_clause(field, value, options) == expected


def test_build_clause_does_not_mutate_options():
    options = {"percents": [95, 99]}
    clause = build_clause("load_time", None, options)
    assert options == {"percents": [95, 99]}
    assert clause is not options


def test_build_clause_field_wins_over_options():
    assert build_clause("user", "kimchy", {"user": "other", "boost": 2}) == {
        "user": "kimchy",
        "boost": 2,
    }


def test_set_path_creates_intermediate_dicts():
    target = {"size": 10}
    set_path(target, "query.bool.filter", {"term": {"user": "kimchy"}})
    assert target == {
        "size": 10,
        "query": {"bool": {"filter": {"term": {"user": "kimchy"}}}},
    }


def test_set_path_keeps_existing_siblings():
    target = {"query": {"filtered": {"filter": {"term": {"a": 1}}}}}
    set_path(target, "query.filtered.query", {"match_all": {}})
    assert target == {
        "query": {"filtered": {"filter": {"term": {"a": 1}}, "query": {"match_all": {}}}}
    }


def test_deep_merge_unions_nested_keys():
    target = {"size": 5}
    merged = deep_merge(
        target,
        {"query": {"bool": {"filter": {"term": {"a": 1}}}}},
        {"query": {"bool": {"must": [{"match": {"b": "x"}}]}}},
    )
    assert merged is target
    assert target == {
        "size": 5,
        "query": {
            "bool": {
                "filter": {"term": {"a": 1}},
                "must": [{"match": {"b": "x"}}],
            }
        },
    }


def test_deep_merge_later_source_replaces_leaves():
    assert deep_merge({"a": {"b": 1, "c": [1]}}, {"a": {"c": [2]}}) == {
        "a": {"b": 1, "c": [2]}
    }
