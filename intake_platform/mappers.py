"""Mapping helpers between core domain values and v1 contracts."""

from __future__ import annotations

from contracts.v1.schemas import ClassificationContract, RepositoryContract, SnapshotContract
from core.domain import (
    Classification,
    RepositoryHandle,
    Unsafe,
    ValidationSnapshot,
    classification_from_kind,
)
from core.gate import can_submit


def classification_to_contract(classification: Classification) -> ClassificationContract:
    """Convert a classification variant to its ``{kind, owner_path}`` contract."""
    owner_path = classification.owner_path if isinstance(classification, Unsafe) else None
    return ClassificationContract(kind=classification.kind, owner_path=owner_path)


def contract_to_classification(contract: ClassificationContract) -> Classification:
    return classification_from_kind(contract.kind, contract.owner_path)


def snapshot_to_contract(snapshot: ValidationSnapshot) -> SnapshotContract:
    """Flatten a snapshot and its derived flags for presentation clients."""
    classification = None
    if snapshot.classification is not None and not snapshot.is_pending:
        classification = classification_to_contract(snapshot.classification)
    return SnapshotContract(
        path=snapshot.path,
        classification=classification,
        pending=snapshot.is_pending,
        is_trusting=snapshot.is_trusting,
        can_submit=can_submit(snapshot),
        show_warning=snapshot.show_warning,
        warning_kind=snapshot.warning.kind if snapshot.warning is not None else None,
        owner_path_differs=snapshot.owner_path_differs,
    )


def repository_to_contract(handle: RepositoryHandle) -> RepositoryContract:
    return RepositoryContract(path=handle.path)
