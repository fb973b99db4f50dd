"""Remediation for repositories owned by another user."""

from __future__ import annotations

import asyncio
import logging

from core.domain import Unsafe
from core.ports import TrustStoreError, TrustStorePort

from .validation_controller import ValidationController

logger = logging.getLogger(__name__)


class TrustResolver:
    """Marks the flagged directory as trusted, then re-validates the live path."""

    def __init__(self, controller: ValidationController, trust_store: TrustStorePort):
        self.controller = controller
        self.trust_store = trust_store
        self.revalidation: asyncio.Task | None = None

    @property
    def can_trust(self) -> bool:
        return isinstance(self.controller.classification, Unsafe) and not self.controller.is_trusting

    async def trust(self) -> bool:
        """Trust the unsafe owner path and issue re-validation.

        Returns True once the re-validation request has been issued, False when
        trust was not applicable or the trust store failed. The issued request
        is kept on ``self.revalidation``.
        """
        classification = self.controller.classification
        if not isinstance(classification, Unsafe):
            logger.warning("Trust requested while classification is %r; ignoring.", classification)
            return False
        if self.controller.is_trusting:
            logger.info("Trust already in progress for %s.", classification.owner_path)
            return False

        owner_path = classification.owner_path
        self.controller.is_trusting = True
        try:
            try:
                await self.trust_store.trust_path(owner_path)
            except (TrustStoreError, OSError) as e:
                logger.warning("Could not mark %s as trusted: %s", owner_path, e)
                return False
            except Exception:
                logger.exception("Trust store failed unexpectedly for %s", owner_path)
                return False

            logger.info("Marked %s as a trusted directory.", owner_path)
            # The path may have been edited while the trust store was busy.
            self.revalidation = self.controller.revalidate()
            return True
        finally:
            self.controller.is_trusting = False
