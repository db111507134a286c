# Сервісний шар для логіки автентифікації
import logging
from datetime import timedelta

from fastapi import HTTPException, status
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

import core.firebase as firebase
from core.config import settings
from models.user import UserIdentity

logger = logging.getLogger(__name__)

LOCAL_DEV_USER = UserIdentity(uid="local-dev", email="local-dev@localhost")


def _get_auth_client():
    client = firebase.ensure_initialized()
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Firebase not initialized",
        )
    return client


def verify_id_token(token: str) -> UserIdentity:
    """
    Перевіряє Firebase ID Token (Bearer) і повертає користувача.
    Прострочений або невірний токен -> 401, щоб фронт оновив сесію.
    """
    client = _get_auth_client()
    try:
        # Допуск по часу (макс 60 сек за Firebase SDK)
        claims = client.verify_id_token(token, clock_skew_seconds=60)
    except (auth.ExpiredIdTokenError, auth.RevokedIdTokenError, auth.InvalidIdTokenError) as e:
        logger.warning(f"Token validation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token invalid or expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (FirebaseError, ValueError) as e:
        logger.warning(f"Token validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return UserIdentity.from_claims(claims)


def verify_session_cookie(cookie: str) -> UserIdentity | None:
    """
    Перевіряє сесійне cookie браузера. Невалідне cookie означає
    "користувача немає", а не помилку.
    """
    client = _get_auth_client()
    try:
        claims = client.verify_session_cookie(cookie, check_revoked=True)
    except (auth.ExpiredSessionCookieError, auth.InvalidSessionCookieError) as e:
        logger.info(f"Session cookie rejected: {e}")
        return None
    except (FirebaseError, ValueError) as e:
        logger.warning(f"Session cookie validation error: {e}")
        return None
    return UserIdentity.from_claims(claims)


def create_session_cookie(id_token: str) -> tuple[str, UserIdentity]:
    """
    Обмінює ID Token з фронтенду на сесійне cookie Firebase.
    """
    user = verify_id_token(id_token)
    client = _get_auth_client()
    try:
        cookie = client.create_session_cookie(
            id_token, expires_in=timedelta(days=settings.SESSION_COOKIE_DAYS)
        )
    except FirebaseError as e:
        logger.warning(f"Failed to create session cookie for {user.uid}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not create session",
        )
    logger.info(f"Session created for {user.uid}")
    return cookie, user


def sign_out(user: UserIdentity) -> None:
    """
    Відкликає refresh-токени користувача, після цього його сесійні cookie
    не проходять check_revoked.
    """
    if user.uid == LOCAL_DEV_USER.uid:
        return
    client = _get_auth_client()
    try:
        client.revoke_refresh_tokens(user.uid)
    except FirebaseError as e:
        logger.warning(f"Failed to revoke tokens for {user.uid}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Sign out failed",
        )
    logger.info(f"Signed out {user.uid}")

