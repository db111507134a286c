from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from core.config import settings
from models.user import UserIdentity
from services import auth_service

bearer_scheme = HTTPBearer(auto_error=False)


def get_optional_user(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserIdentity | None:
    """
    Поточний користувач або None.
    Bearer (Firebase ID Token) для API-клієнтів, сесійне cookie для браузера.
    Якщо нічого немає і увімкнено AUTH_DEV_BYPASS — локальний користувач для dev.
    """
    if creds and creds.credentials:
        return auth_service.verify_id_token(creds.credentials)

    cookie = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if cookie:
        return auth_service.verify_session_cookie(cookie)

    if settings.AUTH_DEV_BYPASS:
        return auth_service.LOCAL_DEV_USER
    return None


def get_current_user(user: UserIdentity | None = Depends(get_optional_user)) -> UserIdentity:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
