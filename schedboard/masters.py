"""Master list operations combining the ordering rules with the database."""

import logging

from schedboard.database import MasterDatabase
from schedboard.models import DropPosition, MasterItem, MasterResource, SortOrderRecord
from schedboard.ordering import (
    DEFAULT_STEP,
    build_sort_order_patches,
    get_next_sort_order,
    move_item_by_drop,
)

logger = logging.getLogger(__name__)


def append_item(
    db: MasterDatabase,
    resource: "str | MasterResource",
    name: str,
    step: int = DEFAULT_STEP,
    is_done: bool = False,
) -> MasterItem:
    """Add an entry at the tail of a list without touching existing rows."""
    existing = [row.sort_order for row in db.get_sort_order_rows(resource)]
    return db.add_item(resource, name, get_next_sort_order(existing, step), is_done=is_done)


def reorder_item(
    db: MasterDatabase,
    resource: "str | MasterResource",
    dragged_id: str,
    over_id: str,
    position: DropPosition,
    step: int = DEFAULT_STEP,
) -> list[SortOrderRecord]:
    """
    Drop an entry before or after another one and persist the new order.

    Only rows whose sort order changed are written; the written patch is
    returned. Stale ids leave the list untouched.
    """
    items = db.list_items(resource)
    reordered = move_item_by_drop(items, dragged_id, over_id, position)
    if [item.id for item in reordered] == [item.id for item in items]:
        return []
    patches = build_sort_order_patches(
        [item.to_sort_order_record() for item in items],
        [item.id for item in reordered],
        step,
    )
    if patches:
        db.apply_sort_order_patches(resource, patches)
    logger.debug("Moved %s %s %s: %d rows changed", dragged_id, position, over_id, len(patches))
    return patches


def normalize_order(
    db: MasterDatabase, resource: "str | MasterResource", step: int = DEFAULT_STEP
) -> list[SortOrderRecord]:
    """Respace a list to step, 2*step, ... keeping its current order."""
    rows = db.get_sort_order_rows(resource)
    patches = build_sort_order_patches(rows, [row.id for row in rows], step)
    if patches:
        db.apply_sort_order_patches(resource, patches)
    return patches
