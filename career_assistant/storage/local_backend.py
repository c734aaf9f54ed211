"""
Local backend - the same table operations over JSON files.

Each table is one JSON file holding a list of rows. Used when working
offline and in tests.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import json
import threading
import uuid

from .base import Backend, TABLES


class LocalBackend(Backend):
    """JSON file table storage."""

    def __init__(self, data_dir: str = "./career_data"):
        """
        Initialize the local backend.

        Args:
            data_dir: Directory holding one JSON file per table
        """
        super().__init__()
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "local"

    def _path(self, table: str) -> Path:
        return self.data_dir / f"{table}.json"

    def _load(self, table: str) -> list[dict]:
        path = self._path(table)
        if not path.exists():
            return []
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _save(self, table: str, rows: list[dict]) -> None:
        with open(self._path(table), 'w', encoding='utf-8') as f:
            json.dump(rows, f, indent=2, default=str)

    @staticmethod
    def _matches(row: dict, filters: Optional[dict]) -> bool:
        return all(row.get(column) == value for column, value in (filters or {}).items())

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict]:
        with self._lock:
            rows = [r for r in self._load(table) if self._matches(r, filters)]

        if order:
            rows.sort(key=lambda r: str(r.get(order) or ""), reverse=desc)
        if limit is not None:
            rows = rows[:limit]
        return rows

    def insert(self, table: str, row: dict) -> dict:
        stored = dict(row)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", self._now())

        with self._lock:
            rows = self._load(table)
            rows.append(stored)
            self._save(table, rows)

        self.logger.debug(f"Inserted into {table}: {stored['id']}")
        return stored

    def upsert(self, table: str, row: dict, on_conflict: str = "id") -> dict:
        key = row.get(on_conflict)

        with self._lock:
            rows = self._load(table)
            for existing in rows:
                if key is not None and existing.get(on_conflict) == key:
                    existing.update(row)
                    self._save(table, rows)
                    return dict(existing)

            stored = dict(row)
            stored.setdefault("id", str(uuid.uuid4()))
            stored.setdefault("created_at", self._now())
            rows.append(stored)
            self._save(table, rows)

        return stored

    def update(self, table: str, values: dict, filters: dict) -> list[dict]:
        updated = []
        with self._lock:
            rows = self._load(table)
            for row in rows:
                if self._matches(row, filters):
                    row.update(values)
                    updated.append(dict(row))
            if updated:
                self._save(table, rows)
        return updated

    def delete(self, table: str, filters: dict) -> int:
        with self._lock:
            rows = self._load(table)
            kept = [r for r in rows if not self._matches(r, filters)]
            removed = len(rows) - len(kept)
            if removed:
                self._save(table, kept)
        return removed

    def table_exists(self, table: str) -> bool:
        # Tables are created on first write
        return table in TABLES or self._path(table).exists()
