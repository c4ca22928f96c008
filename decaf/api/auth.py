"""Authentication API endpoints."""

from fastapi import APIRouter, Response, status

from decaf.api.dependencies import AppSettings, AuthedContext, PublicContext
from decaf.schemas.auth import (
    AuthResponse,
    AuthStatusResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from decaf.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, ctx: PublicContext, settings: AppSettings):
    """Register a new user with a password and an 8-digit PIN."""
    return AuthService(ctx, settings).register(user_data)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    ctx: PublicContext,
    settings: AppSettings,
):
    """Login with either a password or a PIN."""
    user, token = AuthService(ctx, settings).login(credentials)

    if settings.session_cookie_enabled:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=token,
            max_age=settings.jwt_expiration_minutes * 60,
            httponly=True,
            samesite="lax",
            secure=settings.is_production,
        )

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserResponse)
def get_me(ctx: AuthedContext):
    """Get current user information."""
    return ctx.user


@router.get("/status", response_model=AuthStatusResponse)
def get_status(ctx: PublicContext):
    """Report whether the caller is authenticated, without failing if not."""
    if ctx.user is None:
        return AuthStatusResponse(is_authenticated=False)
    return AuthStatusResponse(is_authenticated=True, user=UserResponse.model_validate(ctx.user))


@router.post("/logout")
def logout(response: Response, settings: AppSettings):
    """Logout (clears the session cookie; bearer clients discard their token)."""
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out successfully"}
