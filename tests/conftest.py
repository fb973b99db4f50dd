"""
Shared fixtures for repo-intake tests.
"""

import asyncio

import pytest

from core.domain import Missing, RepositoryHandle
from core.ports import TrustStoreError
from intake_platform.facade import AddRepositoryFacade


class ScriptedClassifier:
    """Classifier whose replies are released explicitly by the test.

    Every ``classify`` call parks on a future; ``reply`` resolves the oldest
    outstanding request for a path, so tests control delivery order.
    """

    def __init__(self):
        self.calls: list[str] = []
        self.outstanding: list[tuple[str, asyncio.Future]] = []

    async def classify(self, path):
        self.calls.append(path)
        future = asyncio.get_running_loop().create_future()
        self.outstanding.append((path, future))
        return await future

    async def reply(self, path, result, *, newest=False):
        """Resolve a parked request for ``path``, waiting for it to be issued."""
        for _ in range(50):
            matches = [entry for entry in self.outstanding if entry[0] == path]
            if matches:
                entry = matches[-1] if newest else matches[0]
                self.outstanding.remove(entry)
                entry[1].set_result(result)
                return
            await asyncio.sleep(0)
        raise AssertionError(f"No outstanding classification for {path!r}")


class StaticClassifier:
    """Classifier answering immediately from a path -> classification map."""

    def __init__(self, results=None, default=None):
        self.results = dict(results or {})
        self.default = default or Missing()
        self.calls: list[str] = []

    async def classify(self, path):
        self.calls.append(path)
        return self.results.get(path, self.default)


class RecordingTrustStore:
    """Trust store that records calls and can fail or be held open."""

    def __init__(self, *, error=None, on_trust=None):
        self.error = error
        self.on_trust = on_trust
        self.calls: list[str] = []
        self.gate: asyncio.Event | None = None

    def hold(self) -> asyncio.Event:
        self.gate = asyncio.Event()
        return self.gate

    async def trust_path(self, path):
        self.calls.append(path)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if self.on_trust is not None:
            self.on_trust(path)


class RecordingRegistrar:
    def __init__(self, *, add_nothing=False, error=None):
        self.add_nothing = add_nothing
        self.error = error
        self.calls: list[list[str]] = []

    async def add_repositories(self, paths):
        self.calls.append(list(paths))
        if self.error is not None:
            raise self.error
        if self.add_nothing:
            return []
        return [RepositoryHandle(path=p) for p in paths]


@pytest.fixture
def scripted_classifier():
    return ScriptedClassifier()


@pytest.fixture
def static_classifier():
    return StaticClassifier()


@pytest.fixture
def trust_store():
    return RecordingTrustStore()


@pytest.fixture
def failing_trust_store():
    return RecordingTrustStore(error=TrustStoreError("permission denied"))


@pytest.fixture
def registrar():
    return RecordingRegistrar()


@pytest.fixture
def make_facade(static_classifier, trust_store, registrar):
    """Build a facade over the static fakes.

    Usage:
        facade = make_facade()            # empty dialog
        facade = make_facade("/repo")     # pre-filled
    """
    def _make(path: str = "", **overrides):
        kwargs = {
            "classifier": static_classifier,
            "trust_store": trust_store,
            "registrar": registrar,
            "path": path,
        }
        kwargs.update(overrides)
        return AddRepositoryFacade(**kwargs)
    return _make


@pytest.fixture
def user_config_path(tmp_path, monkeypatch):
    """Point the user config at a temporary file."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("REPO_INTAKE_USER_CONFIG_PATH", str(path))
    return path
