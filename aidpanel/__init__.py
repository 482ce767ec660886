"""AidPanel: cross-entity aggregation for the association operations panel."""

__version__ = "0.1.0"
