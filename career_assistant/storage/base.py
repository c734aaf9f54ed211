"""
Base class for persistence backends.

A backend exposes the handful of table operations the repositories need.
Filters are equality matches on column values.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging


TABLES = ("profiles", "job_alerts", "portfolios")


class Backend(ABC):
    """Abstract table storage."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name."""
        pass

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Optional[dict] = None,
        order: Optional[str] = None,
        desc: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict]:
        """
        Fetch rows.

        Args:
            table: Table name
            filters: Column -> value equality filters
            order: Column to order by
            desc: Order descending
            limit: Maximum number of rows

        Returns:
            Matching rows
        """
        pass

    @abstractmethod
    def insert(self, table: str, row: dict) -> dict:
        """Insert a row and return it as stored."""
        pass

    @abstractmethod
    def upsert(self, table: str, row: dict, on_conflict: str = "id") -> dict:
        """Insert a row, or merge it into the row with the same ``on_conflict`` value."""
        pass

    @abstractmethod
    def update(self, table: str, values: dict, filters: dict) -> list[dict]:
        """Update matching rows and return them."""
        pass

    @abstractmethod
    def delete(self, table: str, filters: dict) -> int:
        """Delete matching rows and return how many were removed."""
        pass

    @abstractmethod
    def table_exists(self, table: str) -> bool:
        """Whether the table has been created."""
        pass

    def select_one(self, table: str, filters: dict) -> Optional[dict]:
        """First matching row, or None."""
        rows = self.select(table, filters=filters, limit=1)
        return rows[0] if rows else None


def check_schema(backend: Backend) -> list[str]:
    """
    Check that the tables the app uses exist.

    Returns:
        Names of missing tables (empty when the schema is complete)
    """
    missing = [table for table in TABLES if not backend.table_exists(table)]
    if missing:
        backend.logger.warning(f"Missing tables on {backend.name}: {', '.join(missing)}")
    return missing
