"""
Server-side dialog manager for the Web UI.

Holds the single add-repository dialog of this local tool and bridges the
web layer to the platform facade.
"""

import asyncio
import logging
from typing import Callable, Optional

from core.domain import RepositoryHandle, ValidationSnapshot
from intake_platform.facade import AddRepositoryFacade

logger = logging.getLogger(__name__)


class NoActiveDialogError(Exception):
    """Raised when an operation needs an open add-repository dialog."""


class WebAddRepositoryManager:
    """Manages one add-repository dialog for the web UI."""

    def __init__(self, facade_factory: Optional[Callable[[str], AddRepositoryFacade]] = None):
        self.facade_factory = facade_factory or AddRepositoryFacade.from_environment
        self.facade: Optional[AddRepositoryFacade] = None

    @property
    def is_active(self) -> bool:
        return self.facade is not None

    def _require(self) -> AddRepositoryFacade:
        if self.facade is None:
            raise NoActiveDialogError("No add-repository dialog is open.")
        return self.facade

    @staticmethod
    async def _settle(task: Optional[asyncio.Task], wait: bool) -> None:
        """Wait for a classification request without inheriting its cancellation.

        Dismissing or re-opening the dialog cancels outstanding requests; a
        waiting request then returns the snapshot as it stands.
        """
        if not wait or task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled():
            task.result()

    async def open(self, path: str = "", *, wait: bool = False) -> ValidationSnapshot:
        """Open a fresh dialog, replacing any existing one."""
        if self.facade is not None:
            self.facade.dismiss()
        self.facade = self.facade_factory(path)
        await self._settle(self.facade.open(), wait)
        return self.facade.get_snapshot()

    def snapshot(self) -> ValidationSnapshot:
        return self._require().get_snapshot()

    async def set_path(self, path: str, *, wait: bool = False) -> ValidationSnapshot:
        facade = self._require()
        await self._settle(facade.on_path_changed(path), wait)
        return facade.get_snapshot()

    async def choose_path(self, path: Optional[str], *, wait: bool = False) -> ValidationSnapshot:
        facade = self._require()
        await self._settle(facade.choose_path(path), wait)
        return facade.get_snapshot()

    async def trust(self, *, wait: bool = False) -> tuple[bool, ValidationSnapshot]:
        facade = self._require()
        trusted = await facade.request_trust()
        if trusted:
            await self._settle(facade.trust_resolver.revalidation, wait)
        return trusted, facade.get_snapshot()

    async def submit(self) -> Optional[RepositoryHandle]:
        """Submit the dialog; the dialog closes only when submission is allowed."""
        facade = self._require()
        handle = await facade.submit()
        self.facade = None
        return handle

    def dismiss(self) -> bool:
        if self.facade is None:
            return False
        self.facade.dismiss()
        self.facade = None
        return True
