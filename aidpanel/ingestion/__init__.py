"""Ingestion adapters for loading source collections into the store."""

from aidpanel.ingestion.base import BaseAdapter, Snapshot
from aidpanel.ingestion.snapshot import SnapshotAdapter

__all__ = ["BaseAdapter", "Snapshot", "SnapshotAdapter"]
