"""FastAPI dependencies for settings, authentication and request context."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from decaf.config import Settings
from decaf.context import RequestContext, RequestLogger
from decaf.database import get_db
from decaf.errors import AuthError
from decaf.models.user import User
from decaf.services.security import decode_access_token

security = HTTPBearer(auto_error=False)

request_logger = logging.getLogger("decaf.request")

INVALID_TOKEN = "Invalid authentication credentials"


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def _resolve_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
    db: Session,
    settings: Settings,
) -> User | None:
    """Find the user behind a bearer header or session cookie.

    Returns None when no token was sent; raises AuthError when a token was sent
    but does not resolve to an existing user.
    """
    token = credentials.credentials if credentials else None
    if token is None and settings.session_cookie_enabled:
        token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    payload = decode_access_token(settings, token)
    if payload is None or payload.get("sub") is None:
        raise AuthError(INVALID_TOKEN)

    user = db.get(User, str(payload["sub"]))
    if user is None:
        raise AuthError(INVALID_TOKEN)
    return user


def get_optional_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> User | None:
    """Get the authenticated user if there is one."""
    try:
        return _resolve_user(request, credentials, db, settings)
    except AuthError:
        return None


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> User:
    """Get the current authenticated user from a JWT bearer token or cookie."""
    user = _resolve_user(request, credentials, db, settings)
    if user is None:
        raise AuthError(INVALID_TOKEN)
    return user


def _build_context(request: Request, db: Session, user: User | None) -> RequestContext:
    logger = RequestLogger(
        request_logger, {"method": request.method, "path": request.url.path}
    )
    return RequestContext(db=db, user=user, logger=logger)


def get_public_context(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[User | None, Depends(get_optional_user)],
) -> RequestContext:
    """Request context for routes that do not require authentication."""
    return _build_context(request, db, user)


def get_request_context(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
) -> RequestContext:
    """Request context for routes that require authentication."""
    return _build_context(request, db, user)


PublicContext = Annotated[RequestContext, Depends(get_public_context)]
AuthedContext = Annotated[RequestContext, Depends(get_request_context)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
