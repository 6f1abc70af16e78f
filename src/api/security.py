"""
Role guard for the HTTP layer.

Callers authenticate with ``Authorization: Bearer <token>``. Tokens are issued elsewhere;
here they are only mapped to roles using the USER_TOKENS / ADMIN_TOKENS settings.
Any request lacking the required role (including anonymous ones) is rejected with 403
before a handler touches storage.
"""

import logging
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.config import Settings, get_settings
from src.core.shared_types import ROLE_GRANTS, Role

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_roles(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> frozenset[Role]:
    """Roles held by the caller. Empty for anonymous callers and unknown tokens."""
    if credentials is None:
        return frozenset()

    token = credentials.credentials
    if token in settings.admin_token_set():
        return ROLE_GRANTS[Role.ADMIN]
    if token in settings.user_token_set():
        return ROLE_GRANTS[Role.USER]
    return frozenset()


def require_role(role: Role) -> Callable[..., frozenset[Role]]:
    """Dependency factory: ``Depends(require_role(Role.ADMIN))`` lets only callers holding ``role`` through."""

    def _role_dependency(
        request: Request, roles: frozenset[Role] = Depends(get_current_roles)
    ) -> frozenset[Role]:
        if role not in roles:
            logger.warning(
                "Denied %s %s: requires %s, caller has %s",
                request.method,
                request.url.path,
                role,
                sorted(roles) or "no roles",
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Access is denied"
            )
        return roles

    return _role_dependency
