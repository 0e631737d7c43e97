"""localesync: keep translated sibling files in sync with their base-language sources."""

__version__ = "0.1.0"
