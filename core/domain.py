"""Core-native domain models for repository-path validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class Missing:
    """Nothing usable exists at the path."""

    kind: ClassVar[str] = "missing"


@dataclass(frozen=True, slots=True)
class Unsafe:
    """A repository owned by another user; ``owner_path`` is the flagged directory."""

    owner_path: str
    kind: ClassVar[str] = "unsafe"


@dataclass(frozen=True, slots=True)
class Bare:
    """A bare repository (no working tree)."""

    kind: ClassVar[str] = "bare"


@dataclass(frozen=True, slots=True)
class Valid:
    """A usable, non-bare repository."""

    kind: ClassVar[str] = "valid"


Classification = Union[Missing, Unsafe, Bare, Valid]

CLASSIFICATION_KINDS = ("missing", "unsafe", "bare", "valid")


class Pending:
    """Sentinel type for an outstanding classification request."""

    _instance: ClassVar["Pending | None"] = None

    def __new__(cls) -> "Pending":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PENDING"


PENDING = Pending()


def classification_from_kind(kind: str, owner_path: str | None = None) -> Classification:
    """Build a classification from its ``kind`` tag.

    Raises ValueError for unknown kinds or an unsafe kind without owner path.
    """
    if kind == "missing":
        return Missing()
    if kind == "bare":
        return Bare()
    if kind == "valid":
        return Valid()
    if kind == "unsafe":
        if not owner_path:
            raise ValueError("An 'unsafe' classification requires an owner path.")
        return Unsafe(owner_path=owner_path)
    valid = ", ".join(CLASSIFICATION_KINDS)
    raise ValueError(f"Unknown classification '{kind}'. Expected one of: {valid}")


@dataclass(frozen=True, slots=True)
class ValidationSnapshot:
    """Externally observable state of one add-repository workflow.

    ``classification`` is ``None`` when ``path`` is empty and has not been
    validated, ``PENDING`` while a request for ``path`` is outstanding, and a
    classification variant otherwise.

    ``warning`` holds the last definitive classification applied in this
    workflow. It survives while a newer request is pending so that a warning
    does not flicker on every keystroke, and is cleared with the path.
    """

    path: str = ""
    classification: Classification | Pending | None = None
    is_trusting: bool = False
    warning: Classification | None = None

    @property
    def is_pending(self) -> bool:
        return self.classification is PENDING

    @property
    def unsafe_owner_path(self) -> str | None:
        if isinstance(self.classification, Unsafe):
            return self.classification.owner_path
        return None

    @property
    def owner_path_differs(self) -> bool:
        """True when the unsafe directory is not the entered path itself.

        Git reports forward slashes on Windows, so backslashes in the entered
        path are converted before comparing.
        """
        owner_path = self.unsafe_owner_path
        if owner_path is None:
            return False
        return owner_path != self.path.replace("\\", "/")

    @property
    def show_warning(self) -> bool:
        if not self.path:
            return False
        return self.warning is not None and not isinstance(self.warning, Valid)


@dataclass(frozen=True, slots=True)
class RepositoryHandle:
    """A repository registered by the add-flow."""

    path: str
