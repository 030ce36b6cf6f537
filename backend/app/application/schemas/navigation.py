"""Pydantic DTOs for the navigation menu editor."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.application.schemas._base import PartialUpdate


class NavigationItemCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=100, examples=["Blog"])
    href: str = Field(..., min_length=1, max_length=500, examples=["/blog"])
    position: int = 0
    is_visible: bool = True
    icon: str | None = Field(None, max_length=100)
    description: str | None = None


class NavigationItemUpdate(PartialUpdate):
    non_nullable = frozenset({"label", "href", "position", "is_visible"})

    label: str | None = Field(None, min_length=1, max_length=100)
    href: str | None = Field(None, min_length=1, max_length=500)
    position: int | None = None
    is_visible: bool | None = None
    icon: str | None = Field(None, max_length=100)
    description: str | None = None


class NavigationItemResponse(BaseModel):
    id: str
    label: str
    href: str
    position: int
    is_visible: bool
    icon: str | None
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class NavigationReorderItem(BaseModel):
    """One ``(id, position)`` pair of a reorder batch."""

    id: str
    position: int


class NavigationReorderRequest(BaseModel):
    items: list[NavigationReorderItem]


class NavigationReorderResponse(BaseModel):
    updated: int
