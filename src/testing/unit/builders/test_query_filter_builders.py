import pytest

from querybody import FilterBuilder, NestedBuilderError, QueryBuilder


def test_empty_query_and_filter():
    assert not QueryBuilder().has_query()
    assert QueryBuilder().get_query() == {}
    assert not FilterBuilder().has_filter()
    assert FilterBuilder().get_filter() == {}


def test_single_query_is_unwrapped():
    qb = QueryBuilder().query("match", "message", "this is a test")
    assert qb.has_query()
    assert qb.get_query() == {"match": {"message": "this is a test"}}


def test_query_without_field():
    assert QueryBuilder().query("match_all").get_query() == {"match_all": {}}


def test_query_field_mapping_and_options():
    assert QueryBuilder().query(
        "multi_match", {"query": "quick fox", "fields": ["title", "body"]}
    ).get_query() == {
        "multi_match": {"query": "quick fox", "fields": ["title", "body"]}
    }
    assert QueryBuilder().query(
        "match", "message", "fox", options={"boost": 2}
    ).get_query() == {"match": {"message": "fox", "boost": 2}}


def test_query_aliases():
    qb = QueryBuilder().query("term", "a", 1).and_query("term", "b", 2).add_query("term", "c", 3)
    assert qb.get_query() == {
        "bool": {"must": [{"term": {"a": 1}}, {"term": {"b": 2}}, {"term": {"c": 3}}]}
    }


def test_boolean_query_tree():
    qb = (
        QueryBuilder()
        .query("match", "message", "this is a test")
        .or_query("term", "user", "kimchy")
        .or_query("term", "user", "cassie")
        .not_query("term", "user", "spam")
    )
    assert qb.get_query() == {
        "bool": {
            "must": [{"match": {"message": "this is a test"}}],
            "should": [{"term": {"user": "kimchy"}}, {"term": {"user": "cassie"}}],
            "must_not": [{"term": {"user": "spam"}}],
        }
    }


def test_single_not_filter_is_wrapped():
    assert FilterBuilder().not_filter("term", "user", "cassie").get_filter() == {
        "bool": {"must_not": [{"term": {"user": "cassie"}}]}
    }


def test_filter_aliases_and_not():
    fb = (
        FilterBuilder()
        .filter("term", "user", "kimchy")
        .and_filter("range", "age", {"gte": 18})
        .not_filter("term", "user", "cassie")
    )
    assert fb.get_filter() == {
        "bool": {
            "must": [{"term": {"user": "kimchy"}}, {"range": {"age": {"gte": 18}}}],
            "must_not": [{"term": {"user": "cassie"}}],
        }
    }


def test_minimum_should_match_needs_two_should_clauses():
    fb = FilterBuilder().or_filter("term", "a", 1).filter_minimum_should_match(1)
    assert fb.get_filter() == {"bool": {"should": [{"term": {"a": 1}}]}}

    fb.or_filter("term", "b", 2)
    assert fb.get_filter() == {
        "bool": {
            "should": [{"term": {"a": 1}}, {"term": {"b": 2}}],
            "minimum_should_match": 1,
        }
    }


def test_minimum_should_match_override():
    qb = QueryBuilder().or_query("term", "a", 1).query_minimum_should_match("50%", True)
    assert qb.get_query() == {
        "bool": {"should": [{"term": {"a": 1}}], "minimum_should_match": "50%"}
    }


def test_nested_query():
    qb = QueryBuilder().query(
        "nested",
        "path",
        "obj1",
        nested=lambda q: q.query("match", "obj1.color", "blue"),
    )
    assert qb.get_query() == {
        "nested": {"path": "obj1", "query": {"match": {"obj1.color": "blue"}}}
    }


def test_nested_bool_filter():
    fb = FilterBuilder().filter(
        "bool",
        nested=lambda f: f.or_filter("term", "color", "red").or_filter("term", "color", "blue"),
    )
    assert fb.get_filter() == {
        "bool": {
            "should": [{"term": {"color": "red"}}, {"term": {"color": "blue"}}]
        }
    }


def test_nested_bool_with_single_clause():
    fb = FilterBuilder().filter("bool", nested=lambda f: f.filter("term", "color", "red"))
    assert fb.get_filter() == {"bool": {"must": [{"term": {"color": "red"}}]}}


def test_nested_constant_score_filter():
    qb = QueryBuilder().query(
        "constant_score",
        options={"boost": 1.2},
        nested=lambda q: q.filter("term", "user", "kimchy"),
    )
    assert qb.get_query() == {
        "constant_score": {"boost": 1.2, "filter": {"term": {"user": "kimchy"}}}
    }


def test_empty_nested_callback_adds_nothing():
    qb = QueryBuilder().query("nested", "path", "obj1", nested=lambda q: q)
    assert qb.get_query() == {"nested": {"path": "obj1"}}


def test_nested_callback_must_return_builder():
    with pytest.raises(NestedBuilderError):
        QueryBuilder().query("nested", "path", "obj1", nested=lambda q: None)
    with pytest.raises(NestedBuilderError):
        FilterBuilder().filter("bool", nested=lambda f: "not a builder")
