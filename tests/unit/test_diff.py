"""Unit tests for the structural diff engine."""

import numpy as np
import pytest

from statekit import Change, ChangeKind, diff, values_equal


@pytest.mark.unit
@pytest.mark.diff
def test_diff_reports_added_key():
    """Keys present only in the next snapshot are reported as added"""
    changes = diff({"a": 1}, {"a": 1, "b": 2})

    assert [c.to_dict() for c in changes] == [
        {"kind": "added", "path": "b", "value": 2}
    ]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_recurses_into_nested_mappings():
    """Nested mapping changes are reported with dotted paths"""
    changes = diff({"a": {"b": 1}}, {"a": {"b": 2}})

    assert [c.to_dict() for c in changes] == [
        {"kind": "updated", "path": "a.b", "old_value": 1, "new_value": 2}
    ]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_reports_removed_key():
    """Keys present only in the previous snapshot are reported as removed"""
    changes = diff({"a": 1, "b": 2}, {"a": 1})

    assert [c.to_dict() for c in changes] == [
        {"kind": "removed", "path": "b", "value": 2}
    ]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_of_identical_snapshots_is_empty():
    """Equal snapshots produce no changes"""
    state = {"a": 1, "b": {"c": [1, 2]}}

    assert diff(state, state) == []
    assert diff(state, {"a": 1, "b": {"c": [1, 2]}}) == []


@pytest.mark.unit
@pytest.mark.diff
def test_diff_orders_next_keys_before_removals():
    """Additions and updates follow next's order, removals follow prev's order"""
    prev = {"x": 1, "gone1": True, "y": 2, "gone2": False}
    nxt = {"y": 3, "new": 0, "x": 1}

    changes = diff(prev, nxt)

    assert [(c.kind, c.path) for c in changes] == [
        (ChangeKind.UPDATED, "y"),
        (ChangeKind.ADDED, "new"),
        (ChangeKind.REMOVED, "gone1"),
        (ChangeKind.REMOVED, "gone2"),
    ]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_treats_lists_as_opaque_values():
    """A changed list yields a single update for its key"""
    changes = diff({"items": [1, 2]}, {"items": [1, 2, 3]})

    assert len(changes) == 1
    assert changes[0].kind is ChangeKind.UPDATED
    assert changes[0].path == "items"
    assert changes[0].old_value == [1, 2]
    assert changes[0].new_value == [1, 2, 3]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_reports_deep_additions_and_removals_with_full_paths():
    """Nested additions and removals carry the full dotted path"""
    prev = {"user": {"profile": {"name": "Ada", "age": 36}}}
    nxt = {"user": {"profile": {"name": "Ada", "email": "ada@example.com"}}}

    changes = diff(prev, nxt)

    assert [c.to_dict() for c in changes] == [
        {"kind": "added", "path": "user.profile.email", "value": "ada@example.com"},
        {"kind": "removed", "path": "user.profile.age", "value": 36},
    ]


@pytest.mark.unit
@pytest.mark.diff
@pytest.mark.edge_case
def test_diff_mapping_replacing_scalar_is_an_update():
    """A mapping replacing a scalar is reported as one update, not a recursion"""
    changes = diff({"a": 1}, {"a": {"b": 1}})

    assert changes == [Change.updated("a", 1, {"b": 1})]


@pytest.mark.unit
@pytest.mark.diff
@pytest.mark.edge_case
def test_diff_scalar_replacing_mapping_is_an_update():
    """A scalar replacing a mapping is reported as one update"""
    changes = diff({"a": {"b": 1}}, {"a": None})

    assert changes == [Change.updated("a", {"b": 1}, None)]


@pytest.mark.unit
@pytest.mark.diff
def test_diff_uses_path_prefix():
    """A path prefix is prepended to every reported path"""
    changes = diff({}, {"k": 1}, path_prefix="root")

    assert changes[0].path == "root.k"


@pytest.mark.unit
@pytest.mark.diff
@pytest.mark.edge_case
def test_diff_handles_numpy_arrays():
    """Numpy arrays compare as whole values without raising"""
    same = diff({"v": np.array([1, 2])}, {"v": np.array([1, 2])})
    changed = diff({"v": np.array([1, 2])}, {"v": np.array([1, 3])})

    assert same == []
    assert len(changed) == 1
    assert changed[0].kind is ChangeKind.UPDATED


@pytest.mark.unit
@pytest.mark.diff
def test_values_equal_prefers_identity():
    """Identical objects are equal even when == would say otherwise"""
    nan = float("nan")

    assert values_equal(nan, nan)
    assert not values_equal(float("nan"), float("nan"))
    assert values_equal([1], [1])
    assert not values_equal(np.array([1]), [1])


@pytest.mark.unit
@pytest.mark.diff
@pytest.mark.edge_case
def test_diff_reports_type_change_between_equal_values():
    """1, 1.0 and True compare equal with == but a change of type is an update"""
    to_bool = diff({"flag": 1}, {"flag": True})
    to_float = diff({"count": 1}, {"count": 1.0})

    assert [c.to_dict() for c in to_bool] == [
        {"kind": "updated", "path": "flag", "old_value": 1, "new_value": True}
    ]
    assert len(to_float) == 1
    assert to_float[0].kind is ChangeKind.UPDATED
    assert type(to_float[0].new_value) is float


@pytest.mark.unit
@pytest.mark.diff
def test_diff_equal_lists_are_not_updates():
    """Distinct list objects with equal contents produce no change"""
    items = [{"id": 1}, {"id": 2}]
    copied = [dict(item) for item in items]

    assert copied is not items
    assert diff({"items": items}, {"items": copied}) == []
    assert diff({"pair": (1, 2)}, {"pair": (1, 2)}) == []


@pytest.mark.unit
@pytest.mark.diff
def test_values_equal_requires_matching_types():
    """Values of different types are never equal"""
    assert not values_equal(1, True)
    assert not values_equal(0, False)
    assert not values_equal(1, 1.0)
    assert not values_equal([1, 2], (1, 2))
    assert values_equal("a", "a")
