"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.auth import router as auth_router
from app.presentation.api.v1.endpoints.users import router as users_router
from app.presentation.api.v1.endpoints.catalog import router as catalog_router
from app.presentation.api.v1.endpoints.admin_catalog import router as admin_catalog_router
from app.presentation.api.v1.endpoints.attachments import router as attachments_router
from app.presentation.api.v1.endpoints.blog import router as blog_router
from app.presentation.api.v1.endpoints.navigation import router as navigation_router
from app.presentation.api.v1.endpoints.chatbot import router as chatbot_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(catalog_router)
router.include_router(admin_catalog_router)
router.include_router(attachments_router)
router.include_router(blog_router)
router.include_router(navigation_router)
router.include_router(chatbot_router)
