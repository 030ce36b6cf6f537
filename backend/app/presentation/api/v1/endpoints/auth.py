"""Session sign-in endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.application.schemas import LoginRequest, UserResponse
from app.application.services import UserService
from app.domain.entities import User
from app.infrastructure.dependencies import SESSION_USER_KEY, get_current_user, get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=UserResponse)
async def login(
    data: LoginRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Verify credentials and bind the user to the session cookie."""
    user = await service.authenticate(data.username, data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password"
        )
    request.session[SESSION_USER_KEY] = user.id
    logger.info("User '%s' signed in", user.username)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/logout")
async def logout(request: Request) -> dict:
    request.session.clear()
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)
