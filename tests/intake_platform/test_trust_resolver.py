"""Tests for trusting repositories owned by another user."""

import asyncio

import pytest

from core.domain import PENDING, Missing, Unsafe, Valid
from intake_platform.trust_resolver import TrustResolver
from intake_platform.validation_controller import ValidationController


async def _unsafe_controller(classifier, path="/repo", owner_path="/repo"):
    controller = ValidationController(classifier)
    task = controller.set_path(path)
    await classifier.reply(path, Unsafe(owner_path=owner_path))
    await task
    return controller


class TestTrust:

    @pytest.mark.asyncio
    async def test_trusts_owner_path_and_revalidates(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier, "/home/alice/repo", "/home/alice/repo")
        resolver = TrustResolver(controller, trust_store)
        calls_before = len(scripted_classifier.calls)

        assert await resolver.trust() is True

        assert trust_store.calls == ["/home/alice/repo"]
        assert controller.is_trusting is False
        assert controller.get_snapshot().classification is PENDING

        await scripted_classifier.reply("/home/alice/repo", Valid())
        assert await resolver.revalidation is True
        assert scripted_classifier.calls[calls_before:] == ["/home/alice/repo"]
        assert controller.get_snapshot().classification == Valid()

    @pytest.mark.asyncio
    async def test_trusts_owner_path_not_entered_path(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier, "/srv/repo/sub", "/srv/repo")
        resolver = TrustResolver(controller, trust_store)

        assert await resolver.trust() is True
        assert trust_store.calls == ["/srv/repo"]
        assert controller.last_requested_path == "/srv/repo/sub"
        controller.close()

    @pytest.mark.asyncio
    async def test_revalidates_live_path_after_edit_during_trust(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier, "/repo", "/repo")
        resolver = TrustResolver(controller, trust_store)
        gate = trust_store.hold()

        trusting = asyncio.ensure_future(resolver.trust())
        await asyncio.sleep(0)
        assert controller.is_trusting is True
        assert controller.get_snapshot().is_trusting is True

        edit = controller.set_path("/other")
        await asyncio.sleep(0)
        calls_before = len(scripted_classifier.calls)
        gate.set()
        assert await trusting is True

        assert trust_store.calls == ["/repo"]
        assert controller.last_requested_path == "/other"
        await scripted_classifier.reply("/other", Missing())
        await scripted_classifier.reply("/other", Valid())
        assert await edit is True
        assert await resolver.revalidation is True
        assert scripted_classifier.calls[calls_before:] == ["/other"]
        assert controller.get_snapshot().classification == Valid()

    @pytest.mark.asyncio
    async def test_is_trusting_reset_once_revalidation_issued(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, trust_store)

        await resolver.trust()
        assert controller.is_trusting is False
        assert not resolver.revalidation.done()
        controller.close()


class TestTrustFailure:

    @pytest.mark.asyncio
    async def test_failure_keeps_unsafe_and_resets_flag(self, scripted_classifier, failing_trust_store):
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, failing_trust_store)
        calls_before = len(scripted_classifier.calls)

        assert await resolver.trust() is False

        assert failing_trust_store.calls == ["/repo"]
        assert controller.is_trusting is False
        assert controller.get_snapshot().classification == Unsafe(owner_path="/repo")
        assert len(scripted_classifier.calls) == calls_before
        assert resolver.revalidation is None

    @pytest.mark.asyncio
    async def test_os_error_is_recovered(self, scripted_classifier, trust_store):
        trust_store.error = PermissionError("read-only config")
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, trust_store)

        assert await resolver.trust() is False
        assert controller.get_snapshot().classification == Unsafe(owner_path="/repo")

    @pytest.mark.asyncio
    async def test_unexpected_error_is_recovered(self, scripted_classifier, trust_store):
        trust_store.error = RuntimeError("keyring backend crashed")
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, trust_store)

        assert await resolver.trust() is False
        assert controller.is_trusting is False
        assert controller.get_snapshot().classification == Unsafe(owner_path="/repo")
        assert resolver.revalidation is None

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, trust_store)
        trust_store.hold()

        trusting = asyncio.ensure_future(resolver.trust())
        await asyncio.sleep(0)
        trusting.cancel()
        with pytest.raises(asyncio.CancelledError):
            await trusting
        assert controller.is_trusting is False

    @pytest.mark.asyncio
    async def test_retry_after_failure(self, scripted_classifier, failing_trust_store):
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, failing_trust_store)

        assert await resolver.trust() is False
        failing_trust_store.error = None
        assert await resolver.trust() is True
        assert failing_trust_store.calls == ["/repo", "/repo"]
        controller.close()


class TestPreconditions:

    @pytest.mark.asyncio
    async def test_noop_unless_unsafe(self, scripted_classifier, trust_store):
        controller = ValidationController(scripted_classifier)
        task = controller.set_path("/repo")
        await scripted_classifier.reply("/repo", Missing())
        await task
        resolver = TrustResolver(controller, trust_store)

        assert resolver.can_trust is False
        assert await resolver.trust() is False
        assert trust_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_while_pending(self, scripted_classifier, trust_store):
        controller = ValidationController(scripted_classifier)
        controller.set_path("/repo")
        resolver = TrustResolver(controller, trust_store)

        assert await resolver.trust() is False
        assert trust_store.calls == []
        controller.close()

    @pytest.mark.asyncio
    async def test_second_trust_while_in_flight_is_ignored(self, scripted_classifier, trust_store):
        controller = await _unsafe_controller(scripted_classifier)
        resolver = TrustResolver(controller, trust_store)
        gate = trust_store.hold()

        first = asyncio.ensure_future(resolver.trust())
        await asyncio.sleep(0)
        assert resolver.can_trust is False
        assert await resolver.trust() is False

        gate.set()
        assert await first is True
        assert trust_store.calls == ["/repo"]
        controller.close()
