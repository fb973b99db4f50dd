"""Core ports for repository inspection, trust and registration."""

from __future__ import annotations

from typing import Protocol

from .domain import Classification, RepositoryHandle


class TrustStoreError(Exception):
    """Raised when a path could not be marked as trusted."""


class RepositoryClassifierPort(Protocol):
    """Port for inspecting a canonical path.

    Implementations must not raise for classification itself: any I/O or
    permission failure maps to ``Missing``.
    """

    async def classify(self, path: str) -> Classification:
        ...


class TrustStorePort(Protocol):
    """Port for persisting that a directory owned by another user is trusted.

    ``trust_path`` must be idempotent and raises ``TrustStoreError`` on failure.
    """

    async def trust_path(self, path: str) -> None:
        ...


class RepositoryRegistrarPort(Protocol):
    """Port for registering repositories with the hosting application."""

    async def add_repositories(self, paths: list[str]) -> list[RepositoryHandle]:
        ...
