"""Bearer token auth dependencies (get_current_principal, require_root)."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import InvalidTokenError, resolve_login
from app.schemas.auth import Principal
from app.services.users import get_user_by_login

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False, description="Static API token (root or user).")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Principal:
    """
    Dependency: resolve the bearer token to a principal {id, login, role}.

    Raises 401 if the header is missing, the token matches neither configured
    secret, or the matching account no longer exists.
    """
    if credentials is None or not credentials.credentials.strip():
        raise _unauthorized("Missing API token.")
    try:
        login = resolve_login(credentials.credentials.strip(), settings)
    except InvalidTokenError:
        logger.warning("Rejected request with invalid API token")
        raise _unauthorized("Invalid API token.")
    user = get_user_by_login(db, login)
    if user is None:
        logger.warning("API token resolved to missing account", extra={"login": login})
        raise _unauthorized("User not found.")
    return Principal(id=user.id, login=user.login, role=login)


def require_root(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    """Dependency: require the root principal. Raises 403 otherwise."""
    if not principal.is_root:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied.",
        )
    return principal
