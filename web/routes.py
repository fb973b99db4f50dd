"""
REST API routes for the repo-intake Web UI.
"""

import logging

from fastapi import APIRouter, HTTPException

from contracts.v1.schemas import (
    ChoosePathRequest,
    OpenDialogRequest,
    RepositoryListResponse,
    SetPathRequest,
    SnapshotContract,
    SubmitResponse,
    TrustRequest,
    TrustResponse,
)
from core.domain import Unsafe
from intake_platform.facade import SubmissionNotAllowedError
from intake_platform.mappers import repository_to_contract, snapshot_to_contract
from intake_platform.user_config import get_repositories
from .session_manager import NoActiveDialogError, WebAddRepositoryManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# Single shared dialog manager (single-user local tool)
dialog_mgr = WebAddRepositoryManager()


def _no_dialog(exc: NoActiveDialogError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


# --- Add-repository dialog ---

@router.post("/add-repository", response_model=SnapshotContract)
async def open_dialog(req: OpenDialogRequest | None = None):
    """Open the add-repository dialog, optionally pre-filled with a path."""
    path = req.path if req else ""
    snapshot = await dialog_mgr.open(path)
    return snapshot_to_contract(snapshot)


@router.get("/add-repository", response_model=SnapshotContract)
async def get_dialog():
    """Return the current validation snapshot."""
    try:
        return snapshot_to_contract(dialog_mgr.snapshot())
    except NoActiveDialogError as e:
        raise _no_dialog(e) from e


@router.post("/add-repository/path", response_model=SnapshotContract)
async def set_path(req: SetPathRequest):
    """Update the entered path; ``wait`` returns only once it is classified."""
    try:
        snapshot = await dialog_mgr.set_path(req.path, wait=req.wait)
    except NoActiveDialogError as e:
        raise _no_dialog(e) from e
    return snapshot_to_contract(snapshot)


@router.post("/add-repository/choose", response_model=SnapshotContract)
async def choose_path(req: ChoosePathRequest):
    """Apply a folder-picker result (``null`` when the picker was cancelled)."""
    try:
        snapshot = await dialog_mgr.choose_path(req.path, wait=req.wait)
    except NoActiveDialogError as e:
        raise _no_dialog(e) from e
    return snapshot_to_contract(snapshot)


@router.post("/add-repository/trust", response_model=TrustResponse)
async def trust_directory(req: TrustRequest | None = None):
    """Add a safe-directory exception for an unsafe repository and re-validate."""
    try:
        snapshot = dialog_mgr.snapshot()
    except NoActiveDialogError as e:
        raise _no_dialog(e) from e

    if not isinstance(snapshot.classification, Unsafe):
        raise HTTPException(
            status_code=409,
            detail={
                "code": "not_unsafe",
                "message": "Only repositories owned by another user can be trusted.",
                "snapshot": snapshot_to_contract(snapshot).model_dump(),
            },
        )

    trusted, snapshot = await dialog_mgr.trust(wait=req.wait if req else False)
    return TrustResponse(trusted=trusted, snapshot=snapshot_to_contract(snapshot))


@router.post("/add-repository/submit", response_model=SubmitResponse)
async def submit_dialog():
    """Add the validated repository and close the dialog."""
    try:
        handle = await dialog_mgr.submit()
    except NoActiveDialogError as e:
        raise _no_dialog(e) from e
    except SubmissionNotAllowedError as e:
        raise HTTPException(
            status_code=409,
            detail={
                "code": "submission_not_allowed",
                "message": str(e),
                "snapshot": snapshot_to_contract(e.snapshot).model_dump(),
            },
        ) from e
    except OSError as e:
        logger.warning("Could not register repository: %s", e)
        raise HTTPException(
            status_code=500,
            detail={
                "code": "registration_failed",
                "message": f"Could not save the repository list: {e}",
            },
        ) from e

    return SubmitResponse(repository=repository_to_contract(handle) if handle else None)


@router.delete("/add-repository")
async def dismiss_dialog():
    """Dismiss the dialog, discarding any in-flight validation."""
    return {"dismissed": dialog_mgr.dismiss()}


# --- Registered repositories ---

@router.get("/repositories", response_model=RepositoryListResponse)
async def list_repositories():
    """Return repositories registered through the add-flow."""
    handles = get_repositories()
    logger.info("GET /api/repositories: %d registered", len(handles))
    return RepositoryListResponse(repositories=[repository_to_contract(h) for h in handles])
