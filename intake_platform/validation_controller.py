"""Sequencing of asynchronous repository-path validation.

The controller owns the path being edited and the classification derived from
it. Every edit issues a new classification request; replies may arrive in any
order, so a reply is applied only while its requested path is still the live
path. Superseded requests are left to finish and their replies are dropped.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain import PENDING, Classification, Missing, Pending, ValidationSnapshot
from core.paths import normalize_path
from core.ports import RepositoryClassifierPort

logger = logging.getLogger(__name__)


class ValidationController:
    """Single-mutator state holder for one add-repository workflow."""

    def __init__(
        self,
        classifier: RepositoryClassifierPort,
        *,
        classify_timeout: float | None = None,
    ):
        self._classifier = classifier
        self._classify_timeout = classify_timeout
        self._current_path = ""
        self._last_requested_path: str | None = None
        self._classification: Classification | Pending | None = None
        self._warning: Classification | None = None
        self._is_trusting = False
        self._sequence = 0
        self._applied_sequence = 0
        self._inflight: set[asyncio.Task] = set()
        self._closed = False

    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def last_requested_path(self) -> str | None:
        return self._last_requested_path

    @property
    def classification(self) -> Classification | Pending | None:
        return self._classification

    @property
    def is_trusting(self) -> bool:
        return self._is_trusting

    @is_trusting.setter
    def is_trusting(self, value: bool) -> None:
        self._is_trusting = value

    @property
    def inflight_count(self) -> int:
        return len(self._inflight)

    def get_snapshot(self) -> ValidationSnapshot:
        """Return the current state. Pure and synchronous."""
        return ValidationSnapshot(
            path=self._current_path,
            classification=self._classification,
            is_trusting=self._is_trusting,
            warning=self._warning,
        )

    def set_path(self, path: str) -> asyncio.Task | None:
        """Replace the live path and issue a classification request for it.

        Must be called from a running event loop. Returns the request task for
        callers that want to await settlement, or None for an empty path.
        After ``close()`` the path is left unchanged and None is returned.
        """
        if self._closed:
            logger.warning("Ignoring path %r: validation is closed.", path)
            return None
        self._current_path = path
        if not path:
            self._classification = None
            self._warning = None
            return None

        self._classification = PENDING
        return self._issue(path)

    def revalidate(self) -> asyncio.Task | None:
        """Re-issue validation for whatever path is live right now."""
        return self.set_path(self._current_path)

    def close(self) -> None:
        """Cancel outstanding requests; later replies are ignored."""
        self._closed = True
        for task in list(self._inflight):
            task.cancel()

    def _issue(self, path: str) -> asyncio.Task:
        self._sequence += 1
        self._last_requested_path = path
        task = asyncio.get_running_loop().create_task(
            self._classify_and_apply(path, self._sequence)
        )
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _classify_and_apply(self, path: str, sequence: int) -> bool:
        result = await self._classify(normalize_path(path))
        return self.apply_result(path, result, sequence=sequence)

    async def _classify(self, canonical_path: str) -> Classification:
        if self._classify_timeout is None:
            return await self._classifier.classify(canonical_path)
        try:
            return await asyncio.wait_for(
                self._classifier.classify(canonical_path),
                timeout=self._classify_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Classification of %s timed out after %.1fs; treating as missing.",
                canonical_path,
                self._classify_timeout,
            )
            return Missing()

    def apply_result(
        self,
        requested_path: str,
        result: Classification,
        *,
        sequence: int | None = None,
    ) -> bool:
        """Apply a classifier reply unless it is stale. Returns True if applied.

        A reply is stale when ``requested_path`` is no longer the live path, or
        when a newer request has already been applied.
        """
        if self._closed:
            return False
        if requested_path != self._current_path:
            logger.debug(
                "Discarding stale classification for %r (live path is %r).",
                requested_path,
                self._current_path,
            )
            return False
        if sequence is not None:
            if sequence < self._applied_sequence:
                logger.debug(
                    "Discarding superseded classification #%d for %r.",
                    sequence,
                    requested_path,
                )
                return False
            self._applied_sequence = sequence

        self._classification = result
        self._warning = result
        return True
