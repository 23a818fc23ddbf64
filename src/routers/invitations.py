"""
Invitations router - handles guest invitations to workspaces and tests.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.dependencies import get_invitation_service, read_payload
from src.services import InvitationService

router = APIRouter(prefix="/invitation", tags=["Invitations"])


@router.post("/create", status_code=201)
async def create_invitation(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    """
    Invite a guest.

    Body: ``requester_id``, ``item_id``, ``admin_id``, ``guest_id``, ``type``.
    The invitation starts out ``pending``.
    """
    return await service.create(payload)


@router.get("/oneById")
async def get_invitation_by_id(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.find_one_by_id(payload)


@router.get("/all")
async def list_invitations(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.find_all(payload)


@router.get("/allByGuest")
async def list_invitations_by_guest(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.find_all_by_guest(payload)


@router.get("/allByItem")
async def list_invitations_by_item(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.find_all_by_item(payload)


@router.get("/allByAdmin")
async def list_invitations_by_admin(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.find_all_by_admin(payload)


@router.put("/update")
async def update_invitation(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    """Update an invitation, e.g. set ``status`` to accept it."""
    return await service.update(payload)


@router.delete("/delete")
async def delete_invitation(
    payload: Dict[str, Any] = Depends(read_payload),
    service: InvitationService = Depends(get_invitation_service),
):
    return await service.delete(payload)
