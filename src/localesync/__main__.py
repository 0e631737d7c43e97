"""Allow running as python -m localesync."""

from localesync.cli import app

app()
