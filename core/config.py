# Файл конфігурації, завантажує змінні з .env
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    model_config = ConfigDict(extra="ignore", env_file=".env")

    # 1. Firebase Admin (перевірка токенів і сесійних cookie)
    FIREBASE_SERVICE_ACCOUNT_KEY_PATH: str | None = None

    # 2. Firebase Web (кнопка входу на сторінці "Acceso no autorizado")
    FIREBASE_WEB_API_KEY: str | None = None
    FIREBASE_AUTH_DOMAIN: str | None = None
    FIREBASE_PROJECT_ID: str | None = None

    # 3. CORS, кома-сепарейтед
    FRONTEND_ORIGIN: str = ""

    # 4. Сесія
    SESSION_COOKIE_NAME: str = "session"
    SESSION_COOKIE_DAYS: int = 5
    SESSION_COOKIE_SECURE: bool = True
    # Локальний користувач без токена, тільки для dev
    AUTH_DEV_BYPASS: bool = False

    # 5. Відображення
    CURRENCY_SYMBOL: str = "$"
    LOG_LEVEL: str = "INFO"

    @property
    def firebase_web_enabled(self) -> bool:
        return bool(self.FIREBASE_WEB_API_KEY and self.FIREBASE_AUTH_DOMAIN)


settings = Settings()
