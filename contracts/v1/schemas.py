"""Pydantic contracts for the v1 add-repository API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


ClassificationKind = Literal["missing", "unsafe", "bare", "valid"]


class ClassificationContract(_StrictModel):
    kind: ClassificationKind
    owner_path: str | None = None


class SnapshotContract(_StrictModel):
    path: str
    classification: ClassificationContract | None = None
    pending: bool = False
    is_trusting: bool = False
    can_submit: bool = False
    show_warning: bool = False
    warning_kind: ClassificationKind | None = None
    owner_path_differs: bool = False


class OpenDialogRequest(_StrictModel):
    path: str = ""


class SetPathRequest(_StrictModel):
    path: str
    wait: bool = False


class ChoosePathRequest(_StrictModel):
    path: str | None = None
    wait: bool = False


class TrustRequest(_StrictModel):
    wait: bool = False


class TrustResponse(_StrictModel):
    trusted: bool
    snapshot: SnapshotContract


class RepositoryContract(_StrictModel):
    path: str = Field(min_length=1)


class SubmitResponse(_StrictModel):
    repository: RepositoryContract | None = None


class RepositoryListResponse(_StrictModel):
    repositories: list[RepositoryContract] = Field(default_factory=list)
