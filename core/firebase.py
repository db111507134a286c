# Ініціалізація Firebase Admin (тільки Authentication).
import logging

import firebase_admin
from firebase_admin import credentials, auth
from core.config import settings

logger = logging.getLogger(__name__)

auth_client = None
# Без ключа не повторюємо спробу на кожному запиті
_init_attempted = False


def initialize_firebase():
    global auth_client, _init_attempted
    _init_attempted = True
    if not firebase_admin._apps:
        if not settings.FIREBASE_SERVICE_ACCOUNT_KEY_PATH:
            logger.warning("FIREBASE_SERVICE_ACCOUNT_KEY_PATH is not set, auth is unavailable")
            return
        cred = credentials.Certificate(settings.FIREBASE_SERVICE_ACCOUNT_KEY_PATH)
        firebase_admin.initialize_app(cred)
        logger.info("Firebase Admin initialized")

    auth_client = auth


def ensure_initialized():
    if auth_client is None and not _init_attempted:
        initialize_firebase()
    return auth_client
