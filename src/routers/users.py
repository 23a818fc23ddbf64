"""
Users router - handles sign-up, login and user management.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.dependencies import get_user_service, read_payload
from src.services import UserService

router = APIRouter(prefix="/user", tags=["Users"])


# =============================================================================
# Sign-up & Login
# =============================================================================

@router.post("/create", status_code=201)
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    """
    Sign up a new user.

    Body: ``email``, ``password``, ``role``. The email must belong to the
    organisation. Returns the user and a token for them.
    """
    return await service.create(payload)


@router.post("/authenticate", status_code=201)
async def authenticate_user(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    """Log in with ``email`` and ``password``."""
    return await service.authenticate(payload)


# =============================================================================
# Lookups
# =============================================================================

@router.get("/oneByEmail")
async def get_user_by_email(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    return await service.find_one_by_email(payload)


@router.get("/oneById")
async def get_user_by_id(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    return await service.find_one_by_id(payload)


@router.get("/all")
async def list_users(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    return await service.find_all(payload)


# =============================================================================
# Mutations
# =============================================================================

@router.put("/update")
async def update_user(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    """Update ``email``, ``password`` or ``role`` of ``user_id``."""
    return await service.update(payload)


@router.delete("/delete")
async def delete_user(
    payload: Dict[str, Any] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
):
    return await service.delete(payload)
