from querybody.helpers import GEO_DISTANCE_KEY, normalize_sort_state, sort_merge


def test_sort_merge_appends_new_field():
    current = [{"timestamp": "desc"}]
    result = sort_merge(current, "content", "asc")
    assert result is current
    assert current == [{"timestamp": "desc"}, {"content": "asc"}]


def test_sort_merge_updates_in_place():
    current = [{"a": "asc"}, {"b": "desc"}, {"c": "asc"}]
    sort_merge(current, "b", "asc")
    assert current == [{"a": "asc"}, {"b": "asc"}, {"c": "asc"}]


def test_sort_merge_structured_direction():
    current = [{"price": "desc"}]
    sort_merge(current, "price", {"order": "asc", "mode": "avg"})
    assert current == [{"price": {"order": "asc", "mode": "avg"}}]


def test_sort_merge_never_dedups_geo_distance():
    first = {"a.pin.location": [-70, 40], "order": "asc", "unit": "km"}
    second = {"b.pin.location": [-140, 80], "order": "asc", "unit": "km"}
    current = []
    sort_merge(current, GEO_DISTANCE_KEY, first)
    sort_merge(current, GEO_DISTANCE_KEY, second)
    assert current == [{"_geo_distance": first}, {"_geo_distance": second}]


def test_sort_merge_skips_non_mapping_entries():
    current = ["_score", {"a": "asc"}]
    sort_merge(current, "a", "desc")
    assert current == ["_score", {"a": "desc"}]


def test_normalize_sort_state():
    assert normalize_sort_state(None) == []
    assert normalize_sort_state({"a": "asc"}) == [{"a": "asc"}]

    assert normalize_sort_state("timestamp") == ["timestamp"]
    assert normalize_sort_state(("a", "b")) == [("a", "b")]


def test_normalize_sort_state_copies_caller_objects():
    existing = [{"a": "asc"}]
    normalized = normalize_sort_state(existing)

    assert normalized == existing
    assert normalized is not existing
    assert normalized[0] is not existing[0]
