from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, status

from app.models.auth import UserInfo
from app.services.directory_session import DirectorySession, directory_session

logger = logging.getLogger(__name__)


def get_session() -> DirectorySession:
    return directory_session


async def get_current_user(session: DirectorySession = Depends(get_session)) -> UserInfo:  # noqa: B008
    if not session.user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session.user


def require_role(*roles: str):
    """Hide an action from roles that the directory screen does not offer it to.

    This is presentation gating for a self-asserted role, not a security check.
    """

    async def _check_role(user: UserInfo = Depends(get_current_user)) -> UserInfo:  # noqa: B008
        if user.role not in roles:
            logger.warning("Role %s tried an action reserved for %s", user.role, ", ".join(roles))
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {', '.join(roles)}",
            )
        return user

    return _check_role
