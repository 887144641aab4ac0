"""
Tests for the PathTree wrapper.
"""
import pytest

from pathtree import ConflictPolicy, PathConflictError, PathTree, filter_map


def test_new_tree_is_empty():
    tree = PathTree()
    assert tree.as_map() == {}
    assert tree.get("a") == (None, False)
    tree.set("a.b", 1)
    assert tree.as_map() == {"a": {"b": 1}}


def test_from_map_adopts_by_reference(example: dict):
    tree = PathTree.from_map(example)
    assert tree.as_map() is example
    tree.set("1.3", 13)
    assert example["1"]["3"] == 13
    # and the other way round
    example["2"]["3"] = 23
    assert tree.get("2.3") == (23, True)


def test_from_map_rejects_non_dicts():
    with pytest.raises(TypeError):
        PathTree.from_map([1, 2, 3])


def test_to_dict_is_a_copy(example: dict):
    tree = PathTree.from_map(example)
    copied = tree.to_dict()
    assert copied == example
    copied["1"]["1"] = "changed"
    assert tree.get("1.1") == (11, True)


def test_get(example: dict):
    tree = PathTree.from_map(example)
    assert tree.get("1.1") == (11, True)
    assert tree.get("3.1.1.1") == ("value", True)
    assert tree.get("4") == (None, False)
    assert tree.get("") == (None, False)


def test_get_value(example: dict):
    tree = PathTree.from_map(example)
    assert tree.get_value("2.2") == 22
    assert tree.get_value("2.9") is None
    assert tree.get_value("2.9", default=0) == 0


def test_contains(example: dict):
    tree = PathTree.from_map(example)
    assert "3.1.1" in tree
    assert "3.2" not in tree
    assert "" not in tree
    assert 3 not in tree


def test_set_then_filter(example: dict):
    tree = PathTree.from_map(example)
    tree.set("1.3", 13)
    assert tree.filter(["1"]).as_map() == {"1": {"1": 11, "2": 12, "3": 13}}


def test_set_empty_path_is_noop(example: dict):
    tree = PathTree.from_map(example)
    before = tree.to_dict()
    tree.set("", False)
    assert tree.as_map() == before


def test_strict_policy(example: dict):
    tree = PathTree.from_map(example, policy=ConflictPolicy.ERROR)
    with pytest.raises(PathConflictError):
        tree.set("2.1.x", 0)
    assert tree.get("2.1") == (21, True)


def test_default_policy_overwrites(example: dict):
    tree = PathTree(example)
    tree.set("2.1.x", 0)
    assert tree.get("2.1") == ({"x": 0}, True)


def test_filter(example: dict, subexample: dict):
    tree = PathTree.from_map(example)
    filtered = tree.filter(["1.2", "3", "badPath"])
    assert isinstance(filtered, PathTree)
    assert filtered.as_map() == subexample
    assert filtered.get("3.1.1.1") == ("value", True)
    # a filtered tree is its own tree
    assert filtered.as_map() is not example


def test_filter_keeps_policy(example: dict):
    tree = PathTree(example, policy="error")
    assert tree.filter(["1"]).policy is ConflictPolicy.ERROR


def test_filter_parent_vs_children(example: dict):
    tree = PathTree.from_map(example)
    assert tree.filter(["1"]) == tree.filter(["1.1", "1.2"])


def test_filter_map_matches_filter(example: dict):
    paths = ["1.1", "3.1", "badPath"]
    assert filter_map(example, paths) == PathTree.from_map(example).filter(paths).as_map()


def test_delete(example: dict):
    tree = PathTree.from_map(example)
    assert tree.delete("2") is True
    assert "2" not in tree
    assert tree.delete("2") is False


def test_paths(example: dict):
    tree = PathTree.from_map(example)
    assert list(tree.paths()) == ["1.1", "1.2", "2.1", "2.2", "3.1.1.1"]


def test_eq_and_repr():
    assert PathTree({"a": 1}) == PathTree({"a": 1})
    assert PathTree({"a": 1}) != PathTree({"a": 2})
    assert PathTree({"a": 1}) != {"a": 1}
    assert repr(PathTree({"a": 1})) == "PathTree({'a': 1})"
