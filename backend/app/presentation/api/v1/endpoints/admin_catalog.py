"""Admin catalog endpoints — full CRUD including inactive records."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    DomainCreate,
    DomainResponse,
    DomainUpdate,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.application.services import CatalogService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_catalog_service, require_admin

router = APIRouter(prefix="/admin", tags=["Admin: Catalog"], dependencies=[Depends(require_admin)])


# ── Domains ─────────────────────────────────────────────────────────


@router.get("/domains", response_model=list[DomainResponse])
async def list_all_domains(
    service: CatalogService = Depends(get_catalog_service),
) -> list[DomainResponse]:
    domains = await service.get_domains(include_inactive=True)
    return [DomainResponse.model_validate(d, from_attributes=True) for d in domains]


@router.post("/domains", response_model=DomainResponse, status_code=status.HTTP_201_CREATED)
async def create_domain(
    data: DomainCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> DomainResponse:
    try:
        domain = await service.create_domain(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return DomainResponse.model_validate(domain, from_attributes=True)


@router.put("/domains/{domain_id}", response_model=DomainResponse)
async def update_domain(
    domain_id: str,
    data: DomainUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> DomainResponse:
    try:
        domain = await service.update_domain(domain_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return DomainResponse.model_validate(domain, from_attributes=True)


@router.delete("/domains/{domain_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_domain(
    domain_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    """Delete a domain. Its categories are left in place."""
    await service.delete_domain(domain_id)


# ── Categories ──────────────────────────────────────────────────────


@router.get("/categories", response_model=list[CategoryResponse])
async def list_all_categories(
    domain_id: str | None = None,
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    categories = await service.get_categories(domain_id=domain_id, include_inactive=True)
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    try:
        category = await service.create_category(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    try:
        category = await service.update_category(category_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    await service.delete_category(category_id)


# ── Products ────────────────────────────────────────────────────────


@router.get("/products", response_model=list[ProductResponse])
async def list_all_products(
    category_id: str | None = None,
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    products = await service.get_products(category_id=category_id, include_inactive=True)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    """Create a product; a missing or taken slug is generated from the name."""
    product = await service.create_product(data)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductResponse:
    try:
        product = await service.update_product(product_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    """Delete a product. Attachments are not removed."""
    await service.delete_product(product_id)
