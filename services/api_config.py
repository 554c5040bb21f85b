"""
===================================================================================
API_CONFIG - Конфигурация подключения к тестируемому API
===================================================================================

Неизменяемая запись с базовым URL, учётными данными администратора
и таймаутом HTTP запросов. Создаётся один раз (обычно фикстурой
api_config в conftest.py) и явно передаётся контроллерам.

ПРИОРИТЕТ ИСТОЧНИКОВ:
    1. Явные аргументы load_config() (параметры командной строки pytest)
    2. Переменные окружения API_BASE_URL, API_ADMIN_EMAIL,
       API_ADMIN_PASSWORD, API_REQUEST_TIMEOUT
    3. Константы из qa_constants.py

ИСПОЛЬЗОВАНИЕ:
    config = load_config(base_url="http://127.0.0.1:8080/api")
    config.url("/brands")  # "http://127.0.0.1:8080/api/brands"
===================================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional

from services.qa_constants import (
    DEFAULT_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_ADMIN_EMAIL,
    ENV_ADMIN_PASSWORD,
    ENV_BASE_URL,
    ENV_REQUEST_TIMEOUT,
)


@dataclass(frozen=True)
class ApiConfig:
    """
    Параметры подключения к API.

    АТРИБУТЫ:
        base_url: str - Базовый URL без завершающего слэша
        email: str | None - Email администратора для /admin/login
        password: str | None - Пароль администратора
        request_timeout: float - Таймаут HTTP запросов в секундах
    """

    base_url: str
    email: Optional[str] = None
    password: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def has_credentials(self) -> bool:
        return bool(self.email) and bool(self.password)

    def url(self, path: str) -> str:
        """Полный URL для относительного пути ресурса."""
        return f"{self.base_url}/{path.lstrip('/')}"


def _parse_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Request timeout must be a number, got {value!r}")
    if timeout <= 0:
        raise ValueError(f"Request timeout must be positive, got {value!r}")
    return timeout


def load_config(base_url: Optional[str] = None,
                email: Optional[str] = None,
                password: Optional[str] = None,
                request_timeout=None) -> ApiConfig:
    """
    Собирает ApiConfig из аргументов, окружения и констант по умолчанию.

    ПАРАМЕТРЫ:
        base_url: Базовый URL API (например, "http://127.0.0.1:8080/api")
        email: Email администратора
        password: Пароль администратора
        request_timeout: Таймаут в секундах (строка или число)

    ВОЗВРАЩАЕТ:
        ApiConfig: Неизменяемая конфигурация

    ИСКЛЮЧЕНИЯ:
        ValueError: При нечисловом или неположительном таймауте
    """
    base_url = base_url or os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    email = email or os.environ.get(ENV_ADMIN_EMAIL)
    password = password or os.environ.get(ENV_ADMIN_PASSWORD)

    if request_timeout is None:
        request_timeout = os.environ.get(ENV_REQUEST_TIMEOUT, DEFAULT_REQUEST_TIMEOUT)

    return ApiConfig(
        base_url=base_url.rstrip('/'),
        email=email,
        password=password,
        request_timeout=_parse_timeout(request_timeout),
    )
