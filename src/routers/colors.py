"""
Colors router - handles guest display colors per workspace.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.dependencies import get_color_service, read_payload
from src.services import ColorService

router = APIRouter(prefix="/color", tags=["Colors"])


@router.post("/create", status_code=201)
async def create_color(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    """Body: ``requester_id``, ``workspace_id``, ``guest_id``, ``hex``."""
    return await service.create(payload)


@router.get("/oneById")
async def get_color_by_id(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.find_one_by_id(payload)


@router.get("/oneByHex")
async def get_color_by_hex(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.find_one_by_hex(payload)


@router.get("/all")
async def list_colors(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.find_all(payload)


@router.get("/allByWorkspace")
async def list_colors_by_workspace(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.find_all_by_workspace(payload)


@router.put("/update")
async def update_color(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.update(payload)


@router.delete("/delete")
async def delete_color(
    payload: Dict[str, Any] = Depends(read_payload),
    service: ColorService = Depends(get_color_service),
):
    return await service.delete(payload)
