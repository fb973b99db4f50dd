"""v1 contract schemas."""

__version__ = "1.0.0"

from .schemas import (
    ChoosePathRequest,
    ClassificationContract,
    OpenDialogRequest,
    RepositoryContract,
    RepositoryListResponse,
    SetPathRequest,
    SnapshotContract,
    SubmitResponse,
    TrustRequest,
    TrustResponse,
)

__all__ = [
    "ChoosePathRequest",
    "ClassificationContract",
    "OpenDialogRequest",
    "RepositoryContract",
    "RepositoryListResponse",
    "SetPathRequest",
    "SnapshotContract",
    "SubmitResponse",
    "TrustRequest",
    "TrustResponse",
]
