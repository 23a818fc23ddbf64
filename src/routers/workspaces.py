"""
Workspaces router - handles workspace management.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.auth.dependencies import read_authorized_payload
from src.dependencies import get_workspace_service, read_payload
from src.services import WorkspaceService

router = APIRouter(prefix="/workspace", tags=["Workspaces"])


@router.post("/create", status_code=201)
async def create_workspace(
    payload: Dict[str, Any] = Depends(read_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    """
    Create a workspace.

    Body: ``admin_id``, ``name``. Only admins may create workspaces and
    names are unique.
    """
    return await service.create(payload)


@router.get("/oneById")
async def get_workspace_by_id(
    payload: Dict[str, Any] = Depends(read_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    return await service.find_one_by_id(payload)


@router.get("/oneByName")
async def get_workspace_by_name(
    payload: Dict[str, Any] = Depends(read_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    return await service.find_one_by_name(payload)


@router.get("/all")
async def list_workspaces(
    payload: Dict[str, Any] = Depends(read_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    return await service.find_all(payload)


@router.get("/allByAdmin")
async def list_workspaces_by_admin(
    payload: Dict[str, Any] = Depends(read_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    return await service.find_all_by_admin(payload)


# =============================================================================
# Protected mutations
# =============================================================================

@router.put("/update")
async def update_workspace(
    payload: Dict[str, Any] = Depends(read_authorized_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    """Update a workspace. Requires a bearer token."""
    return await service.update(payload)


@router.delete("/delete")
async def delete_workspace(
    payload: Dict[str, Any] = Depends(read_authorized_payload),
    service: WorkspaceService = Depends(get_workspace_service),
):
    """Delete a workspace. Requires a bearer token."""
    return await service.delete(payload)
