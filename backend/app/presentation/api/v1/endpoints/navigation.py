"""Navigation menu endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    NavigationItemCreate,
    NavigationItemResponse,
    NavigationItemUpdate,
    NavigationReorderRequest,
    NavigationReorderResponse,
)
from app.application.services import NavigationService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_navigation_service, require_admin

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get("", response_model=list[NavigationItemResponse])
async def list_navigation_items(
    visible_only: bool = False,
    service: NavigationService = Depends(get_navigation_service),
) -> list[NavigationItemResponse]:
    """Menu entries ordered by position."""
    items = await service.get_navigation_items(visible_only=visible_only)
    return [NavigationItemResponse.model_validate(i, from_attributes=True) for i in items]


@router.post(
    "",
    response_model=NavigationItemResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_navigation_item(
    data: NavigationItemCreate,
    service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemResponse:
    item = await service.create_navigation_item(data)
    return NavigationItemResponse.model_validate(item, from_attributes=True)


@router.post(
    "/reorder",
    response_model=NavigationReorderResponse,
    dependencies=[Depends(require_admin)],
)
async def reorder_navigation_items(
    data: NavigationReorderRequest,
    service: NavigationService = Depends(get_navigation_service),
) -> NavigationReorderResponse:
    """Apply new positions one by one; unknown ids are skipped."""
    updated = await service.reorder_navigation_items(data.items)
    return NavigationReorderResponse(updated=updated)


@router.put(
    "/{item_id}",
    response_model=NavigationItemResponse,
    dependencies=[Depends(require_admin)],
)
async def update_navigation_item(
    item_id: str,
    data: NavigationItemUpdate,
    service: NavigationService = Depends(get_navigation_service),
) -> NavigationItemResponse:
    try:
        item = await service.update_navigation_item(item_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return NavigationItemResponse.model_validate(item, from_attributes=True)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_navigation_item(
    item_id: str,
    service: NavigationService = Depends(get_navigation_service),
) -> None:
    await service.delete_navigation_item(item_id)
