"""Public catalog endpoints — domains, categories, products, stats."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    AttachmentResponse,
    CatalogStatsResponse,
    CategoryResponse,
    DomainResponse,
    ProductDetailResponse,
    ProductResponse,
)
from app.application.services import AttachmentService, CatalogService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_attachment_service, get_catalog_service

router = APIRouter(tags=["Catalog"])


def _products(products) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/stats", response_model=CatalogStatsResponse)
async def get_stats(
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogStatsResponse:
    """Counts of active domains, categories and products, plus total downloads."""
    stats = await service.get_stats()
    return CatalogStatsResponse.model_validate(stats, from_attributes=True)


# ── Domains ─────────────────────────────────────────────────────────


@router.get("/domains", response_model=list[DomainResponse])
async def list_domains(
    service: CatalogService = Depends(get_catalog_service),
) -> list[DomainResponse]:
    domains = await service.get_domains()
    return [DomainResponse.model_validate(d, from_attributes=True) for d in domains]


@router.get("/domains/{key}", response_model=DomainResponse)
async def get_domain(
    key: str,
    service: CatalogService = Depends(get_catalog_service),
) -> DomainResponse:
    """Retrieve a domain by ID or slug."""
    try:
        domain = await service.get_domain(key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DomainResponse.model_validate(domain, from_attributes=True)


@router.get("/domains/{domain_id}/categories", response_model=list[CategoryResponse])
async def list_domain_categories(
    domain_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    categories = await service.get_categories(domain_id=domain_id)
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


# ── Categories ──────────────────────────────────────────────────────


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    categories = await service.get_categories()
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.get("/categories/{key}", response_model=CategoryResponse)
async def get_category(
    key: str,
    service: CatalogService = Depends(get_catalog_service),
) -> CategoryResponse:
    """Retrieve a category by ID or slug."""
    try:
        category = await service.get_category(key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.get("/categories/{category_id}/products", response_model=list[ProductResponse])
async def list_category_products(
    category_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    return _products(await service.get_products(category_id=category_id))


# ── Products ────────────────────────────────────────────────────────


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    category_id: str | None = None,
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    """Active products, newest first."""
    return _products(await service.get_products(category_id=category_id))


@router.get("/products/featured", response_model=list[ProductResponse])
async def list_featured_products(
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    return _products(await service.get_featured_products())


@router.get("/products/search", response_model=list[ProductResponse])
async def search_products(
    q: str = Query("", description="Substring matched against name, description and tags"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[ProductResponse]:
    if not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Search query is required"
        )
    return _products(await service.search_products(q))


@router.get("/products/{key}", response_model=ProductDetailResponse)
async def get_product(
    key: str,
    service: CatalogService = Depends(get_catalog_service),
    attachments: AttachmentService = Depends(get_attachment_service),
) -> ProductDetailResponse:
    """Retrieve a product by ID or slug, together with its attachments."""
    try:
        product = await service.get_product(key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    files = await attachments.get_attachments(product.id)
    detail = ProductDetailResponse.model_validate(product, from_attributes=True)
    detail.attachments = [AttachmentResponse.model_validate(a, from_attributes=True) for a in files]
    return detail
