"""SQLite database for master lists and their sort orders."""

import logging
import sqlite3
import uuid
from collections.abc import Iterable
from pathlib import Path

from schedboard.config import DEFAULT_DB_PATH
from schedboard.errors import DuplicateItemError, UnsupportedResourceError
from schedboard.models import MasterItem, MasterResource, SortOrderRecord

logger = logging.getLogger(__name__)

# Seed values for a fresh workspace
DEFAULT_MASTERS: dict[MasterResource, list[tuple[str, bool]]] = {
    MasterResource.CHANNELS: [
        ("メインチャンネル", False),
        ("ショート", False),
        ("切り抜き", False),
    ],
    MasterResource.TASK_TYPES: [
        ("企画", False),
        ("脚本", False),
        ("イラスト案", False),
        ("サムネ監", False),
        ("イラスト", False),
        ("編集", False),
        ("サムネ", False),
        ("イラスト監", False),
        ("その他", False),
        ("休暇", False),
    ],
    MasterResource.TASK_STATUSES: [
        ("未着手", False),
        ("進行中", False),
        ("レビュー中", False),
        ("修正中", False),
        ("完了", True),
        ("納品済", True),
        ("保留", False),
    ],
}


def parse_resource(value: "str | MasterResource") -> MasterResource:
    """Resolve a master list name, rejecting unknown ones."""
    try:
        return MasterResource(value)
    except ValueError as e:
        msg = f"Unsupported resource: {value}"
        raise UnsupportedResourceError(msg) from e


class MasterDatabase:
    """Database for storing and reordering master list entries."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS master_items (
                    id TEXT PRIMARY KEY,
                    resource TEXT NOT NULL,
                    name TEXT NOT NULL,
                    sort_order INTEGER NOT NULL DEFAULT 0,
                    is_active INTEGER NOT NULL DEFAULT 1,
                    is_done INTEGER NOT NULL DEFAULT 0,
                    UNIQUE (resource, name)
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS master_items_resource_sort_idx
                ON master_items (resource, sort_order)
            """)
            conn.commit()

    @staticmethod
    def _row_to_item(row: tuple) -> MasterItem:
        return MasterItem(
            id=row[0],
            resource=MasterResource(row[1]),
            name=row[2],
            sort_order=row[3],
            is_active=bool(row[4]),
            is_done=bool(row[5]),
        )

    def add_item(
        self,
        resource: "str | MasterResource",
        name: str,
        sort_order: int,
        is_active: bool = True,
        is_done: bool = False,
    ) -> MasterItem:
        """Insert a new entry with the given sort order."""
        item = MasterItem(
            id=str(uuid.uuid4()),
            resource=parse_resource(resource),
            name=name,
            sort_order=sort_order,
            is_active=is_active,
            is_done=is_done,
        )
        with sqlite3.connect(self.db_path) as conn:
            try:
                conn.execute(
                    """
                    INSERT INTO master_items
                    (id, resource, name, sort_order, is_active, is_done)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.id,
                        item.resource.value,
                        item.name,
                        item.sort_order,
                        1 if item.is_active else 0,
                        1 if item.is_done else 0,
                    ),
                )
            except sqlite3.IntegrityError as e:
                msg = f"{item.resource.value} already has an entry named {name!r}"
                raise DuplicateItemError(msg) from e
            conn.commit()
        return item

    def get_item(self, item_id: str) -> MasterItem | None:
        """Get an entry by id."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, resource, name, sort_order, is_active, is_done "
                "FROM master_items WHERE id = ?",
                (item_id,),
            )
            row = cursor.fetchone()
            if not row:
                return None

            return self._row_to_item(row)

    def list_items(self, resource: "str | MasterResource") -> list[MasterItem]:
        """All entries of a list in display order."""
        target = parse_resource(resource)
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, resource, name, sort_order, is_active, is_done "
                "FROM master_items WHERE resource = ? ORDER BY sort_order, name",
                (target.value,),
            )
            return [self._row_to_item(row) for row in cursor]

    def get_sort_order_rows(self, resource: "str | MasterResource") -> list[SortOrderRecord]:
        """Persisted (id, sort_order) pairs in display order."""
        return [item.to_sort_order_record() for item in self.list_items(resource)]

    def apply_sort_order_patches(
        self, resource: "str | MasterResource", patches: Iterable[SortOrderRecord]
    ) -> int:
        """Write a batch of sort orders in one transaction, returning the row count."""
        target = parse_resource(resource)
        updated = 0
        with sqlite3.connect(self.db_path) as conn:
            for patch in patches:
                cursor = conn.execute(
                    "UPDATE master_items SET sort_order = ? WHERE id = ? AND resource = ?",
                    (patch.sort_order, patch.id, target.value),
                )
                updated += cursor.rowcount
            conn.commit()
        logger.debug("Applied %d sort order patches to %s", updated, target.value)
        return updated

    def delete_item(self, item_id: str) -> None:
        """Delete an entry."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM master_items WHERE id = ?", (item_id,))
            conn.commit()

    def seed_defaults(self, step: int = 10) -> int:
        """Fill empty lists with the default entries, returning how many were added."""
        added = 0
        for resource, entries in DEFAULT_MASTERS.items():
            if self.list_items(resource):
                continue
            for index, (name, is_done) in enumerate(entries):
                self.add_item(resource, name, sort_order=(index + 1) * step, is_done=is_done)
                added += 1
        logger.info("Seeded %d default master entries", added)
        return added

    def clear_all(self) -> None:
        """Clear all entries (for testing)."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM master_items")
            conn.commit()
