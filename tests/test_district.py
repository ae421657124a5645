import json

import pytest

from codedrills.district import count_connected_components, count_provinces

CLUSTERS = {"a": ["b"], "b": ["c"], "x": ["y"], "p": ["q", "r"]}


def test_two_separate_pairs():
    assert count_connected_components({"a": ["b"], "c": ["d"]}) == 2


def test_chain_is_one_group():
    assert count_connected_components({"a": ["b"], "b": ["c"], "c": ["d"]}) == 1


def test_self_links_are_not_counted():
    assert count_connected_components({"a": ["a"]}) == count_connected_components({})


def test_direction_does_not_matter():
    forward = count_connected_components({"a": ["b"], "c": ["b"]})
    backward = count_connected_components({"b": ["a", "c"]})
    assert forward == backward


def test_redundant_link_changes_nothing():
    extra = dict(CLUSTERS, c=["a"])
    assert count_connected_components(extra) == count_connected_components(CLUSTERS)


def test_disjoint_batches_add_up():
    other = {"m": ["n"], "o": ["o2"]}
    combined = {**CLUSTERS, **other}
    assert count_connected_components(combined) == (
        count_connected_components(CLUSTERS) + count_connected_components(other)
    )


def test_bridging_link_joins_groups():
    bridged = dict(CLUSTERS, y=["p"])
    assert count_connected_components(bridged) == count_connected_components(CLUSTERS) - 1


def test_non_string_links_are_ignored():
    assert count_connected_components({"a": ["b", 3, None]}) == count_connected_components({"a": ["b"]})


def test_count_provinces_matches_batches(tmp_path):
    batches = {
        "1": CLUSTERS,
        "2": {"a": ["b"]},
        "3": {"a": ["b"], "c": ["d"], "e": ["f"]},
        "4": {"k": ["l", "m"], "m": ["n"]},
        "5": {"u": ["v"], "w": ["w"]},
    }
    path = tmp_path / "district.json"
    path.write_text(json.dumps(batches), encoding="utf-8")
    expected = ",".join(str(count_connected_components(batches[str(i)])) for i in range(1, 6))
    assert count_provinces(str(path)) == expected


def test_non_object_batches_are_skipped(tmp_path):
    path = tmp_path / "district.json"
    path.write_text(json.dumps({"1": CLUSTERS, "2": ["a", "b"]}), encoding="utf-8")
    result = count_provinces(str(path))
    assert "," not in result
    assert result == str(count_connected_components(CLUSTERS))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_provinces(str(tmp_path / "absent.json"))