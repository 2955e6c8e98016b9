from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user, get_session
from app.models.auth import LoginRequest, RoleChangeRequest, UserInfo
from app.services.directory_session import DirectorySession

router = APIRouter(prefix="/session", tags=["session"])


@router.post("", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def login(
    request: LoginRequest,
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    return session.login(request.name.strip(), request.role)


@router.get("", response_model=UserInfo)
async def current_user(user: UserInfo = Depends(get_current_user)):  # noqa: B008
    return user


@router.put("/role", response_model=UserInfo)
async def change_role(
    request: RoleChangeRequest,
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    return session.change_role(request.role)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    user: UserInfo = Depends(get_current_user),  # noqa: B008
    session: DirectorySession = Depends(get_session),  # noqa: B008
):
    session.logout()
