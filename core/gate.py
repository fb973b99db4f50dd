"""Submission gate for the add-repository action."""

from __future__ import annotations

from .domain import Valid, ValidationSnapshot


def can_submit(snapshot: ValidationSnapshot) -> bool:
    """Return True when the snapshot's path is non-empty and classified ``Valid``."""
    return bool(snapshot.path) and isinstance(snapshot.classification, Valid)
