"""Database layer for AidPanel."""

from aidpanel.db.repository import PanelRepository
from aidpanel.db.schema import create_schema

__all__ = ["PanelRepository", "create_schema"]
