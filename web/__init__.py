"""Web UI for repo-intake."""

__version__ = "1.0.0"
