# API роутер для автентифікації

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.responses import RedirectResponse

from api.deps import bearer_scheme, get_current_user, get_optional_user
from core.config import settings
from models.user import SessionCreate, SignOutResponse, UserIdentity
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/session", response_model=UserIdentity)
def create_session(payload: SessionCreate, response: Response):
    """
    Вхід: фронтенд логіниться через Firebase Web SDK і передає сюди ID Token.
    У відповідь ставимо сесійне cookie, яким далі користується HTML-форма.
    """
    cookie, user = auth_service.create_session_cookie(payload.id_token)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=cookie,
        max_age=settings.SESSION_COOKIE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return user


@router.post("/logout", response_model=SignOutResponse)
def logout(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
):
    """
    Вихід: відкликаємо токени у Firebase і прибираємо cookie.
    Форма з навбару отримує редірект на головну, API-клієнт — JSON.
    """
    try:
        user = get_optional_user(request, creds)
    except HTTPException as e:
        # Прострочений токен не заважає прибрати cookie
        if e.status_code != status.HTTP_401_UNAUTHORIZED:
            raise
        logger.info(f"Logout with rejected credentials: {e.detail}")
        user = None

    if user is not None:
        auth_service.sign_out(user)

    if "text/html" in request.headers.get("accept", ""):
        response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    else:
        response = Response(
            content=SignOutResponse().model_dump_json(),
            media_type="application/json",
        )
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/me", response_model=UserIdentity)
def get_user_me(current_user: UserIdentity = Depends(get_current_user)):
    return current_user
