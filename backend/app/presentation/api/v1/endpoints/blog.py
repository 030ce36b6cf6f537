"""Blog endpoints — public reading plus admin/editor management."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    BlogCategoryCreate,
    BlogCategoryResponse,
    BlogCategoryUpdate,
    BlogPostCreate,
    BlogPostResponse,
    BlogPostUpdate,
)
from app.application.services import BlogService
from app.domain.entities import User
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_blog_service, require_admin, require_editor

router = APIRouter(tags=["Blog"])


# ── Public ──────────────────────────────────────────────────────────


@router.get("/blog/categories", response_model=list[BlogCategoryResponse])
async def list_blog_categories(
    service: BlogService = Depends(get_blog_service),
) -> list[BlogCategoryResponse]:
    categories = await service.get_blog_categories()
    return [BlogCategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.get("/blog/posts", response_model=list[BlogPostResponse])
async def list_blog_posts(
    category_id: str | None = None,
    service: BlogService = Depends(get_blog_service),
) -> list[BlogPostResponse]:
    """Published posts, most recent first."""
    posts = await service.get_blog_posts(category_id=category_id)
    return [BlogPostResponse.model_validate(p, from_attributes=True) for p in posts]


@router.get("/blog/posts/{key}", response_model=BlogPostResponse)
async def get_blog_post(
    key: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    try:
        post = await service.get_blog_post(key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


# ── Categories (admin) ──────────────────────────────────────────────


@router.post(
    "/admin/blog/categories",
    response_model=BlogCategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_blog_category(
    data: BlogCategoryCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    try:
        category = await service.create_blog_category(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogCategoryResponse.model_validate(category, from_attributes=True)


@router.put(
    "/admin/blog/categories/{category_id}",
    response_model=BlogCategoryResponse,
    dependencies=[Depends(require_admin)],
)
async def update_blog_category(
    category_id: str,
    data: BlogCategoryUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogCategoryResponse:
    try:
        category = await service.update_blog_category(category_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogCategoryResponse.model_validate(category, from_attributes=True)


@router.delete(
    "/admin/blog/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_blog_category(
    category_id: str,
    service: BlogService = Depends(get_blog_service),
) -> None:
    await service.delete_blog_category(category_id)


# ── Posts (admin or editor) ─────────────────────────────────────────


@router.get(
    "/admin/blog/posts",
    response_model=list[BlogPostResponse],
    dependencies=[Depends(require_editor)],
)
async def list_all_blog_posts(
    category_id: str | None = None,
    service: BlogService = Depends(get_blog_service),
) -> list[BlogPostResponse]:
    """All posts including drafts."""
    posts = await service.get_blog_posts(category_id=category_id, include_unpublished=True)
    return [BlogPostResponse.model_validate(p, from_attributes=True) for p in posts]


@router.post("/admin/blog/posts", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    data: BlogPostCreate,
    author: User = Depends(require_editor),
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    try:
        post = await service.create_blog_post(data, author_id=author.id)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.put(
    "/admin/blog/posts/{post_id}",
    response_model=BlogPostResponse,
    dependencies=[Depends(require_editor)],
)
async def update_blog_post(
    post_id: str,
    data: BlogPostUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    try:
        post = await service.update_blog_post(post_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogPostResponse.model_validate(post, from_attributes=True)


@router.delete(
    "/admin/blog/posts/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_editor)],
)
async def delete_blog_post(
    post_id: str,
    service: BlogService = Depends(get_blog_service),
) -> None:
    await service.delete_blog_post(post_id)
