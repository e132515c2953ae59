from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api import deps
from app.config import settings
from app.core import security
from app.core.rate_limit import limiter
from app.models.user import User
from app.services.user_service import UserService
from app.schemas.auth import (
    AuthResponse, LoginRequest, ProfileResponse, ProfileUpdate, ProfileUpdated,
    RegisterRequest, UserPublic
)

router = APIRouter()


def _issue_token(user: User) -> str:
    return security.create_access_token(data={"sub": str(user.id)})


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    register_in: RegisterRequest,
    users: UserService = Depends(deps.get_user_service),
) -> Any:
    """
    Create an administrator account and sign it in.
    """
    user = await users.register(
        username=register_in.username,
        password=register_in.password,
        admin_name=register_in.admin_name,
    )
    return AuthResponse(
        message="User created successfully",
        token=_issue_token(user),
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    login_data: LoginRequest,
    users: UserService = Depends(deps.get_user_service),
) -> Any:
    """
    Exchange username and password for a bearer token.
    """
    user = await users.authenticate(login_data.username, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return AuthResponse(
        message="Login successful",
        token=_issue_token(user),
        user=UserPublic.model_validate(user),
    )


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(current_user: User = Depends(deps.get_current_user)) -> Any:
    return ProfileResponse(user=UserPublic.model_validate(current_user))


@router.put("/profile", response_model=ProfileUpdated)
async def update_profile(
    profile_in: ProfileUpdate,
    current_user: User = Depends(deps.get_current_user),
    users: UserService = Depends(deps.get_user_service),
) -> Any:
    """
    Update admin name, username or password. Changing the password requires
    currentPassword.
    """
    user = await users.update_profile(
        current_user.id,
        admin_name=profile_in.admin_name,
        username=profile_in.username,
        password=profile_in.password,
        current_password=profile_in.current_password,
    )
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return ProfileUpdated(user=UserPublic.model_validate(user))
