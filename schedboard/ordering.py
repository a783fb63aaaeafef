"""Reordering of user-sorted lists and sparse sort-order reconciliation.

Every function returns a new list. Stale ids and out-of-range indices are
no-ops.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from schedboard.models import DropPosition, Identified, SortOrderRecord

DEFAULT_STEP = 10

T = TypeVar("T")
ItemT = TypeVar("ItemT", bound=Identified)


def move_item(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Relocate the element at from_index to to_index (remove, then insert)."""
    moved = list(items)
    if from_index == to_index:
        return moved
    if not (0 <= from_index < len(moved) and 0 <= to_index < len(moved)):
        return moved

    item = moved.pop(from_index)
    moved.insert(to_index, item)
    return moved


def move_item_by_drop(
    items: Sequence[ItemT],
    dragged_id: str,
    over_id: str,
    position: DropPosition,
) -> list[ItemT]:
    """
    Reinsert the dragged item immediately before or after the drop target.

    The target is located after the dragged item has been removed, so
    dropping "after" the row directly above the dragged one is a no-op.
    """
    if dragged_id == over_id:
        return list(items)

    dragged = next((item for item in items if item.id == dragged_id), None)
    if dragged is None:
        return list(items)

    remaining = [item for item in items if item.id != dragged_id]
    over_index = next((i for i, item in enumerate(remaining) if item.id == over_id), None)
    if over_index is None:
        return list(items)

    insert_index = over_index if position == "before" else over_index + 1
    return [*remaining[:insert_index], dragged, *remaining[insert_index:]]


def renumber_sort_orders(ids: Iterable[str], step: int = DEFAULT_STEP) -> list[SortOrderRecord]:
    """Assign step, 2*step, 3*step... in the given order."""
    return [
        SortOrderRecord(id=item_id, sort_order=(index + 1) * step)
        for index, item_id in enumerate(ids)
    ]


def build_sort_order_patches(
    current_rows: Sequence[SortOrderRecord],
    ordered_ids: Iterable[str],
    step: int = DEFAULT_STEP,
) -> list[SortOrderRecord]:
    """
    Compute the rows whose sort_order must change to match ordered_ids.

    Unknown and repeated ids in ordered_ids are dropped. Current rows the
    caller left out keep their relative order at the tail. The full list is
    renumbered positionally and only the records that differ from the
    persisted value are returned.
    """
    current = {row.id: row.sort_order for row in current_rows}
    seen: set[str] = set()
    normalized: list[str] = []

    for item_id in ordered_ids:
        if item_id not in current or item_id in seen:
            continue
        normalized.append(item_id)
        seen.add(item_id)

    for row in current_rows:
        if row.id in seen:
            continue
        normalized.append(row.id)
        seen.add(row.id)

    return [
        record
        for record in renumber_sort_orders(normalized, step)
        if current[record.id] != record.sort_order
    ]


def get_next_sort_order(existing_sort_orders: Iterable[int], step: int = DEFAULT_STEP) -> int:
    """Sort order for an item appended at the tail of a list."""
    highest = max(existing_sort_orders, default=0)
    return highest + step if highest > 0 else step
