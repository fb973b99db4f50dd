"""Command-line interface for repo-intake."""
