"""
Tests router - handles tests within workspaces.

Creating, updating and deleting tests requires a bearer token.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.auth.dependencies import read_authorized_payload
from src.dependencies import get_tests_service, read_payload
from src.services import TestsService

router = APIRouter(prefix="/test", tags=["Tests"])


@router.post("/create", status_code=201)
async def create_test(
    payload: Dict[str, Any] = Depends(read_authorized_payload),
    service: TestsService = Depends(get_tests_service),
):
    """Body: ``requester_id``, ``admin_id``, ``workspace_id``, ``subjects``."""
    return await service.create(payload)


@router.get("/oneById")
async def get_test_by_id(
    payload: Dict[str, Any] = Depends(read_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.find_one_by_id(payload)


@router.get("/all")
async def list_tests(
    payload: Dict[str, Any] = Depends(read_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.find_all(payload)


@router.get("/allByAdmin")
async def list_tests_by_admin(
    payload: Dict[str, Any] = Depends(read_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.find_all_by_admin(payload)


@router.get("/allByWorkspace")
async def list_tests_by_workspace(
    payload: Dict[str, Any] = Depends(read_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.find_all_by_workspace(payload)


@router.put("/update")
async def update_test(
    payload: Dict[str, Any] = Depends(read_authorized_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.update(payload)


@router.delete("/delete")
async def delete_test(
    payload: Dict[str, Any] = Depends(read_authorized_payload),
    service: TestsService = Depends(get_tests_service),
):
    return await service.delete(payload)
