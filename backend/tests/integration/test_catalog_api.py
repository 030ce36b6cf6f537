"""Public catalog endpoints against the sample catalog."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_stats(client: AsyncClient):
    response = await client.get("/api/v1/stats")

    assert response.status_code == 200
    assert response.json() == {"domains": 3, "categories": 3, "products": 10, "downloads": 11680}


@pytest.mark.asyncio
async def test_domains_in_sort_order(client: AsyncClient):
    response = await client.get("/api/v1/domains")

    assert response.status_code == 200
    assert [d["slug"] for d in response.json()] == [
        "claude-code-agents", "mcp-servers", "ai-platforms",
    ]


@pytest.mark.asyncio
async def test_domain_by_slug_and_unknown(client: AsyncClient):
    found = await client.get("/api/v1/domains/mcp-servers")
    missing = await client.get("/api/v1/domains/nope")

    assert found.status_code == 200
    assert found.json()["id"] == "domain-2"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_categories_of_domain(client: AsyncClient):
    response = await client.get("/api/v1/domains/domain-2/categories")

    assert [c["slug"] for c in response.json()] == ["data-integration"]


@pytest.mark.asyncio
async def test_products_of_category(client: AsyncClient):
    response = await client.get("/api/v1/categories/cat-3/products")

    assert {p["id"] for p in response.json()} == {"prod-2", "prod-7", "prod-9"}


@pytest.mark.asyncio
async def test_product_detail_by_slug(client: AsyncClient):
    response = await client.get("/api/v1/products/claude-dev-assistant")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "prod-1"
    assert body["rating"] == 49
    assert body["rating_stars"] == 4.9
    assert body["attachments"] == []


@pytest.mark.asyncio
async def test_featured_products(client: AsyncClient):
    response = await client.get("/api/v1/products/featured")

    assert {p["id"] for p in response.json()} == {"prod-1", "prod-2", "prod-3", "prod-5"}


@pytest.mark.asyncio
async def test_search(client: AsyncClient):
    response = await client.get("/api/v1/products/search", params={"q": "Debug"})

    assert response.status_code == 200
    assert {p["id"] for p in response.json()} == {"prod-1", "prod-4"}


@pytest.mark.asyncio
async def test_search_requires_query(client: AsyncClient):
    for params in ({}, {"q": "   "}):
        response = await client.get("/api/v1/products/search", params=params)
        assert response.status_code == 400
        assert response.json()["detail"] == "Search query is required"
