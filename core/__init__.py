"""Stateless core for repository-path validation."""

__version__ = "1.0.0"

from .domain import (
    PENDING,
    Bare,
    Classification,
    Missing,
    Pending,
    RepositoryHandle,
    Unsafe,
    Valid,
    ValidationSnapshot,
    classification_from_kind,
)
from .gate import can_submit
from .paths import normalize_path
from .ports import (
    RepositoryClassifierPort,
    RepositoryRegistrarPort,
    TrustStoreError,
    TrustStorePort,
)

__all__ = [
    "__version__",
    "PENDING",
    "Bare",
    "Classification",
    "Missing",
    "Pending",
    "RepositoryHandle",
    "Unsafe",
    "Valid",
    "ValidationSnapshot",
    "classification_from_kind",
    "can_submit",
    "normalize_path",
    "RepositoryClassifierPort",
    "RepositoryRegistrarPort",
    "TrustStoreError",
    "TrustStorePort",
]
