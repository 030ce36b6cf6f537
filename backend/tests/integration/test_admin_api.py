"""Auth, roles, user administration, admin catalog CRUD and attachments."""

import pytest
from httpx import AsyncClient

from app.domain.entities import UserRole


# ── Auth ──


@pytest.mark.asyncio
async def test_login_sets_session_and_hides_hash(client: AsyncClient, login):
    body = await login(UserRole.ADMIN)
    assert body["username"] == "admin"
    assert "password_hash" not in body

    me = await client.get("/api/v1/auth/user")

    assert me.status_code == 200
    assert me.json()["role"] == "admin"


@pytest.mark.asyncio
async def test_login_with_wrong_password(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login", json={"username": "admin", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password"


@pytest.mark.asyncio
async def test_logout_ends_session(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    await client.post("/api/v1/auth/logout")

    assert (await client.get("/api/v1/auth/user")).status_code == 401


@pytest.mark.asyncio
async def test_admin_routes_require_login(client: AsyncClient):
    response = await client.post("/api/v1/admin/domains", json={"name": "X", "slug": "x"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_routes_reject_other_roles(client: AsyncClient, login):
    await login(UserRole.EDITOR)

    response = await client.get("/api/v1/users")

    assert response.status_code == 403


# ── Users ──


@pytest.mark.asyncio
async def test_user_lifecycle(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    created = await client.post(
        "/api/v1/users",
        json={"username": "writer", "email": "writer@example.com", "password": "writer-pass", "role": "editor"},
    )
    assert created.status_code == 201
    user_id = created.json()["id"]

    duplicate = await client.post(
        "/api/v1/users",
        json={"username": "writer", "email": "w2@example.com", "password": "writer-pass"},
    )
    assert duplicate.status_code == 409

    updated = await client.put(f"/api/v1/users/{user_id}", json={"first_name": "Wren"})
    assert updated.json()["first_name"] == "Wren"

    assert (await client.delete(f"/api/v1/users/{user_id}")).status_code == 204
    assert (await client.get(f"/api/v1/users/{user_id}")).status_code == 404


@pytest.mark.asyncio
async def test_admin_cannot_delete_self(client: AsyncClient, login):
    me = await login(UserRole.ADMIN)

    response = await client.delete(f"/api/v1/users/{me['id']}")

    assert response.status_code == 400


# ── Catalog administration ──


@pytest.mark.asyncio
async def test_domain_crud_and_conflicts(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    created = await client.post(
        "/api/v1/admin/domains", json={"name": "Agents", "slug": "agents", "is_active": False}
    )
    assert created.status_code == 201
    domain_id = created.json()["id"]

    conflict = await client.post("/api/v1/admin/domains", json={"name": "Dup", "slug": "agents"})
    assert conflict.status_code == 409

    # Inactive: hidden publicly, visible to admins
    public = await client.get("/api/v1/domains")
    admin = await client.get("/api/v1/admin/domains")
    assert "agents" not in {d["slug"] for d in public.json()}
    assert "agents" in {d["slug"] for d in admin.json()}

    updated = await client.put(f"/api/v1/admin/domains/{domain_id}", json={"is_active": True})
    assert updated.json()["is_active"] is True

    assert (await client.put("/api/v1/admin/domains/missing", json={"name": "x"})).status_code == 404
    assert (await client.delete(f"/api/v1/admin/domains/{domain_id}")).status_code == 204


@pytest.mark.asyncio
async def test_product_create_generates_unique_slug(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    response = await client.post(
        "/api/v1/admin/products",
        json={"category_id": "cat-1", "name": "AutoCode Pro", "tags": ["automation"]},
    )

    assert response.status_code == 201
    assert response.json()["slug"] == "autocode-pro-1"


@pytest.mark.asyncio
async def test_product_rating_is_validated(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    response = await client.post(
        "/api/v1/admin/products", json={"category_id": "cat-1", "name": "X", "rating": 51}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_download_count_feeds_stats(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    await client.put("/api/v1/admin/products/prod-1", json={"download_count": 1210})

    assert (await client.get("/api/v1/stats")).json()["downloads"] == 11690


# ── Attachments ──


@pytest.mark.asyncio
async def test_markdown_attachment_roundtrip(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    uploaded = await client.post(
        "/api/v1/admin/products/prod-1/attachments",
        files={"file": ("guide.md", b"# Guide\n\nSteps", "text/markdown")},
    )
    assert uploaded.status_code == 201
    attachment = uploaded.json()
    assert attachment["file_type"] == "md"
    assert attachment["content"] == "# Guide\n\nSteps"

    detail = await client.get("/api/v1/products/prod-1")
    assert [a["id"] for a in detail.json()["attachments"]] == [attachment["id"]]

    download = await client.get(f"/api/v1/attachments/{attachment['id']}/download")
    assert download.status_code == 200
    assert download.content == b"# Guide\n\nSteps"
    assert download.headers["content-disposition"].startswith("attachment")

    deleted = await client.delete(f"/api/v1/admin/attachments/{attachment['id']}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/attachments/{attachment['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_attachment_type_and_size_limits(client: AsyncClient, login):
    await login(UserRole.ADMIN)

    wrong_type = await client.post(
        "/api/v1/admin/products/prod-1/attachments",
        files={"file": ("photo.png", b"png", "image/png")},
    )
    too_large = await client.post(
        "/api/v1/admin/products/prod-1/attachments",
        files={"file": ("big.pdf", b"x" * (1024 * 1024 + 1), "application/pdf")},
    )

    assert wrong_type.status_code == 400
    assert too_large.status_code == 413
