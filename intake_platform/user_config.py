"""User-level configuration persistence for repo-intake clients."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from core.domain import RepositoryHandle

from .config import USER_CONFIG_PATH_ENV

logger = logging.getLogger(__name__)


@dataclass
class UserConfig:
    repositories: list[str] = field(default_factory=list)


def get_user_config_path() -> Path:
    """Return the user-level config file path.

    Uses a platform-appropriate location and supports an override via
    ``REPO_INTAKE_USER_CONFIG_PATH`` for tests.
    """
    override = os.environ.get(USER_CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override)

    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))
        return base / "repo-intake" / "config.json"

    return Path.home() / ".config" / "repo-intake" / "config.json"


def load_user_config() -> UserConfig:
    path = get_user_config_path()
    if not path.exists():
        return UserConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable user config %s: %s", path, e)
        return UserConfig()

    raw = data.get("repositories") if isinstance(data, dict) else None
    if not isinstance(raw, list):
        return UserConfig()
    repositories = [p.strip() for p in raw if isinstance(p, str) and p.strip()]
    return UserConfig(repositories=repositories)


def save_user_config(config: UserConfig) -> None:
    path = get_user_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"repositories": config.repositories}
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def get_repositories() -> list[RepositoryHandle]:
    return [RepositoryHandle(path=p) for p in load_user_config().repositories]


class UserConfigRegistrar:
    """Registers repositories by appending them to the user config."""

    async def add_repositories(self, paths: list[str]) -> list[RepositoryHandle]:
        config = load_user_config()
        added: list[RepositoryHandle] = []
        for path in paths:
            if path not in config.repositories:
                config.repositories.append(path)
                logger.info("Registered repository %s", path)
            added.append(RepositoryHandle(path=path))
        save_user_config(config)
        return added
