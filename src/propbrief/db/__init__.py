"""Database layer for Property Brief: SQLAlchemy 2.0 async."""

from __future__ import annotations

from propbrief.db.base import Base
from propbrief.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
