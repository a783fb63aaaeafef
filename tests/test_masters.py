"""Tests for master list reorder and append workflows."""

from schedboard.masters import append_item, normalize_order, reorder_item
from schedboard.models import SortOrderRecord


def names(db, resource="channels"):
    return [item.name for item in db.list_items(resource)]


def test_append_item_goes_to_tail(db):
    """New entries are placed after the current maximum."""
    first = append_item(db, "channels", "Main")
    second = append_item(db, "channels", "Shorts")
    db.add_item("channels", "Clips", sort_order=35)
    third = append_item(db, "channels", "Live")

    assert (first.sort_order, second.sort_order, third.sort_order) == (10, 20, 45)
    assert names(db) == ["Main", "Shorts", "Clips", "Live"]


def test_append_item_custom_step(db):
    """Step spaces the appended entries."""
    append_item(db, "task_types", "Plan", step=100)
    item = append_item(db, "task_types", "Edit", step=100)
    assert item.sort_order == 200


def test_reorder_item_persists_only_changes(db):
    """Moving the last row to the front rewrites every shifted row."""
    a = append_item(db, "channels", "A")
    b = append_item(db, "channels", "B")
    c = append_item(db, "channels", "C")

    patches = reorder_item(db, "channels", c.id, a.id, "before")

    assert patches == [
        SortOrderRecord(id=c.id, sort_order=10),
        SortOrderRecord(id=a.id, sort_order=20),
        SortOrderRecord(id=b.id, sort_order=30),
    ]
    assert names(db) == ["C", "A", "B"]


def test_reorder_item_partial_patch(db):
    """Swapping the last two rows does not touch the first."""
    a = append_item(db, "channels", "A")
    b = append_item(db, "channels", "B")
    c = append_item(db, "channels", "C")

    patches = reorder_item(db, "channels", b.id, c.id, "after")

    assert {patch.id for patch in patches} == {b.id, c.id}
    assert db.get_item(a.id).sort_order == 10
    assert names(db) == ["A", "C", "B"]


def test_reorder_item_stale_id_is_noop(db):
    """A drop referencing a deleted row writes nothing."""
    a = append_item(db, "channels", "A")
    append_item(db, "channels", "B")

    assert reorder_item(db, "channels", "deleted", a.id, "before") == []
    assert reorder_item(db, "channels", a.id, a.id, "after") == []
    assert names(db) == ["A", "B"]


def test_normalize_order(db):
    """Unspaced sort orders are rewritten to the step in current order."""
    db.add_item("assignees", "Sato", sort_order=0)
    db.add_item("assignees", "Suzuki", sort_order=3)
    db.add_item("assignees", "Tanaka", sort_order=30)

    patches = normalize_order(db, "assignees")

    assert [patch.sort_order for patch in patches] == [10, 20]
    assert [item.sort_order for item in db.list_items("assignees")] == [10, 20, 30]
    assert normalize_order(db, "assignees") == []


def test_normalize_order_full_respace(db):
    """A tightly packed list gets its gaps back."""
    for index, name in enumerate(["A", "B", "C", "D"]):
        db.add_item("task_statuses", name, sort_order=index + 1)

    normalize_order(db, "task_statuses", step=10)

    assert [item.sort_order for item in db.list_items("task_statuses")] == [10, 20, 30, 40]


def test_reorder_item_stale_id_keeps_gaps(db):
    """A stale drop on a gapped list writes nothing."""
    a = append_item(db, "channels", "A")
    b = append_item(db, "channels", "B")
    append_item(db, "channels", "C")
    db.delete_item(b.id)

    assert reorder_item(db, "channels", "deleted", a.id, "before") == []
    assert reorder_item(db, "channels", a.id, "deleted", "after") == []
    assert [item.sort_order for item in db.list_items("channels")] == [10, 30]


def test_reorder_item_respaces_gapped_list_on_real_move(db):
    """An actual move renumbers the whole list."""
    a = append_item(db, "channels", "A")
    b = append_item(db, "channels", "B")
    c = append_item(db, "channels", "C")
    db.delete_item(b.id)

    reorder_item(db, "channels", c.id, a.id, "before")

    assert names(db) == ["C", "A"]
    assert [item.sort_order for item in db.list_items("channels")] == [10, 20]
