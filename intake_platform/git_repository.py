"""Git-backed adapters for repository classification and directory trust."""

from __future__ import annotations

import asyncio
import logging
import os
import re
import subprocess
from pathlib import Path

from core.domain import Bare, Classification, Missing, Unsafe, Valid
from core.ports import TrustStoreError

from .config import DUBIOUS_OWNERSHIP_PATTERN, resolve_git_executable

logger = logging.getLogger(__name__)

_DUBIOUS_OWNERSHIP = re.compile(DUBIOUS_OWNERSHIP_PATTERN)

# Stable, untranslated messages so stderr can be parsed.
_GIT_ENV_OVERRIDES = {"LC_ALL": "C", "LANGUAGE": "C"}


def _run_git(git: str, args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [git, *args],
        capture_output=True,
        text=True,
        check=False,
        env={**os.environ, **_GIT_ENV_OVERRIDES},
    )


def parse_dubious_ownership(stderr: str) -> str | None:
    """Return the directory named in git's dubious-ownership error, if any."""
    match = _DUBIOUS_OWNERSHIP.search(stderr or "")
    return match.group(1) if match else None


class GitRepositoryClassifier:
    """Classifies a directory with ``git rev-parse``.

    Never raises: every failure to inspect the path is reported as ``Missing``.
    """

    def __init__(self, git: str | None = None):
        self.git = git or resolve_git_executable()

    async def classify(self, path: str) -> Classification:
        try:
            if not Path(path).is_dir():
                return Missing()
        except OSError as e:
            logger.debug("Could not stat %s: %s", path, e)
            return Missing()

        try:
            proc = await asyncio.to_thread(
                _run_git, self.git, ["-C", path, "rev-parse", "--is-bare-repository"]
            )
        except OSError as e:
            logger.warning("Could not run %s to inspect %s: %s", self.git, path, e)
            return Missing()

        if proc.returncode == 0:
            return Bare() if proc.stdout.strip() == "true" else Valid()

        owner_path = parse_dubious_ownership(proc.stderr)
        if owner_path:
            return Unsafe(owner_path=owner_path)
        return Missing()


class GitTrustStore:
    """Adds ``safe.directory`` exceptions to the global git config."""

    def __init__(self, git: str | None = None):
        self.git = git or resolve_git_executable()

    async def _git(self, args: list[str]) -> subprocess.CompletedProcess:
        try:
            return await asyncio.to_thread(_run_git, self.git, args)
        except OSError as e:
            raise TrustStoreError(f"Could not run {self.git}: {e}") from e

    async def trusted_paths(self) -> list[str]:
        proc = await self._git(["config", "--global", "--get-all", "safe.directory"])
        # Exit status 1 means the key is not set at all.
        if proc.returncode == 1:
            return []
        if proc.returncode != 0:
            raise TrustStoreError(proc.stderr.strip() or "git config --get-all safe.directory failed")
        return [line.strip() for line in proc.stdout.splitlines() if line.strip()]

    async def trust_path(self, path: str) -> None:
        if path in await self.trusted_paths():
            logger.debug("%s is already a safe directory.", path)
            return

        proc = await self._git(["config", "--global", "--add", "safe.directory", path])
        if proc.returncode != 0:
            raise TrustStoreError(
                proc.stderr.strip() or f"git config --add safe.directory {path} failed"
            )
