"""
Configuration constants for the repo-intake system.
"""

import os

# Environment variable names
GIT_EXECUTABLE_ENV = "REPO_INTAKE_GIT"
CLASSIFY_TIMEOUT_ENV = "REPO_INTAKE_CLASSIFY_TIMEOUT"
USER_CONFIG_PATH_ENV = "REPO_INTAKE_USER_CONFIG_PATH"

DEFAULT_GIT_EXECUTABLE = "git"

# Git prints this when a repository is owned by someone else and has not been
# listed under safe.directory (git >= 2.35.2).
DUBIOUS_OWNERSHIP_PATTERN = r"detected dubious ownership in repository at '(.+)'"


def resolve_git_executable() -> str:
    """Return the git executable, honouring ``REPO_INTAKE_GIT``."""
    return os.environ.get(GIT_EXECUTABLE_ENV, "").strip() or DEFAULT_GIT_EXECUTABLE


def _to_float_env(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def resolve_classify_timeout() -> float | None:
    """Return the classification timeout in seconds, or None for no timeout."""
    return _to_float_env(CLASSIFY_TIMEOUT_ENV)
