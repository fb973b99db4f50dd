"""Add-repository workflow facade exposed to presentation layers."""

from __future__ import annotations

import asyncio
import logging

from core.domain import Missing, RepositoryHandle, ValidationSnapshot
from core.gate import can_submit
from core.paths import normalize_path
from core.ports import RepositoryClassifierPort, RepositoryRegistrarPort, TrustStorePort

from .config import resolve_classify_timeout
from .git_repository import GitRepositoryClassifier, GitTrustStore
from .trust_resolver import TrustResolver
from .user_config import UserConfigRegistrar
from .validation_controller import ValidationController

logger = logging.getLogger(__name__)


class SubmissionNotAllowedError(Exception):
    """Raised when submitting while the current path is not a valid repository."""

    def __init__(self, snapshot: ValidationSnapshot):
        kind = getattr(snapshot.classification, "kind", repr(snapshot.classification))
        super().__init__(f"Cannot add {snapshot.path!r}: classification is {kind}.")
        self.snapshot = snapshot


class AddRepositoryFacade:
    """One add-existing-repository dialog: validation, trust and submission.

    An optional ``path`` pre-fills the dialog; call ``open()`` from the event
    loop to validate it.
    """

    def __init__(
        self,
        *,
        classifier: RepositoryClassifierPort,
        trust_store: TrustStorePort,
        registrar: RepositoryRegistrarPort,
        path: str = "",
        classify_timeout: float | None = None,
    ):
        self.controller = ValidationController(classifier, classify_timeout=classify_timeout)
        self.trust_resolver = TrustResolver(self.controller, trust_store)
        self.registrar = registrar
        self.initial_path = path

    @classmethod
    def from_environment(cls, path: str = "") -> "AddRepositoryFacade":
        """Wire the git-backed adapters and the user-config registrar."""
        return cls(
            classifier=GitRepositoryClassifier(),
            trust_store=GitTrustStore(),
            registrar=UserConfigRegistrar(),
            path=path,
            classify_timeout=resolve_classify_timeout(),
        )

    def open(self) -> asyncio.Task | None:
        if self.initial_path:
            return self.controller.set_path(self.initial_path)
        return None

    def set_path(self, raw: str) -> asyncio.Task | None:
        return self.controller.set_path(raw)

    def on_path_changed(self, raw: str) -> asyncio.Task | None:
        """Text-box edit handler; unchanged text does not re-validate."""
        if raw == self.controller.current_path:
            return None
        return self.controller.set_path(raw)

    def choose_path(self, selected: str | None) -> asyncio.Task | None:
        """Folder-picker result handler; a cancelled picker yields None."""
        if selected is None:
            return None
        return self.controller.set_path(selected)

    def get_snapshot(self) -> ValidationSnapshot:
        return self.controller.get_snapshot()

    def can_submit(self) -> bool:
        return can_submit(self.controller.get_snapshot())

    async def request_trust(self) -> bool:
        return await self.trust_resolver.trust()

    def create_repository_target(self) -> str | None:
        """Normalized path for a "create a repository here" offer, when missing."""
        snapshot = self.controller.get_snapshot()
        if not snapshot.path or not isinstance(snapshot.classification, Missing):
            return None
        return normalize_path(snapshot.path)

    async def submit(self) -> RepositoryHandle | None:
        """Register the current path; only reachable while the gate is open."""
        snapshot = self.controller.get_snapshot()
        if not can_submit(snapshot):
            raise SubmissionNotAllowedError(snapshot)

        resolved = normalize_path(snapshot.path)
        # A registrar failure propagates and leaves the dialog usable for a retry.
        repositories = await self.registrar.add_repositories([resolved])
        self.dismiss()
        if not repositories:
            logger.warning("Registrar added nothing for %s", resolved)
            return None
        logger.info("Added repository %s", repositories[0].path)
        return repositories[0]

    def dismiss(self) -> None:
        self.controller.close()
