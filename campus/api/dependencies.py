from __future__ import annotations

import logging
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from campus.models.principal import Principal
from campus.repos.store import EntityStore
from campus.services import token_service

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is a 401 (not HTTPBearer's 403)
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_caller(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> Principal:
    """Resolve the bearer token to the caller's identity.

    Used as a FastAPI dependency on every caller-scoped endpoint.  Whether
    the caller has a User record (and which role) is the guards' business,
    not this function's.
    """
    if credentials is None:
        raise _unauthenticated("Not authenticated")
    try:
        claims = token_service.decode_access_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        logger.warning("Expired token rejected")
        raise _unauthenticated("Token expired") from None
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token rejected: %s", e)
        raise _unauthenticated("Invalid token") from None

    principal = Principal(user_id=claims["sub"])
    logger.debug("Token validated for user=%s", principal.user_id)
    return principal


def get_store(request: Request) -> EntityStore:
    """The process-wide store, created once in campus.main."""
    return request.app.state.store


Caller = Annotated[Principal, Depends(require_caller)]
Store = Annotated[EntityStore, Depends(get_store)]
