"""
===================================================================================
HTTP_CLIENT - HTTP сессия для взаимодействия с тестируемым API
===================================================================================

Фабрика requests.Session с автоматическим формированием абсолютных URL,
таймаутом по умолчанию и журналированием каждого запроса.

ФУНКЦИОНАЛЬНОСТЬ:
- build_session(): сессия, привязанная к ApiConfig
- bearer(): заголовок Authorization для авторизованных запросов
- build_curl(): cURL команда для ручного воспроизведения запроса

ИСПОЛЬЗОВАНИЕ:
    session = build_session(config)
    response = session.get("/brands")
    response = session.post("/categories", json=body, headers=bearer(token))
===================================================================================
"""

import json
import logging
from urllib.parse import urljoin

import requests

logger = logging.getLogger(__name__)


def bearer(token: str) -> dict:
    """Заголовок Authorization: Bearer <token>."""
    return {"Authorization": f"Bearer {token}"}


def build_session(config) -> requests.Session:
    """
    Инициализирует HTTP клиент для взаимодействия с API.

    КОНФИГУРАЦИЯ:
    1. Создание сессии requests.Session (connection pooling по умолчанию)
    2. Заголовок Accept: application/json
       Content-Type не задаётся глобально: requests выставляет его сам
       для json= и для multipart files=
    3. Переопределение метода request() для автоматического формирования
       абсолютных URL и установки таймаута

    ПАРАМЕТРЫ:
        config: ApiConfig с базовым URL и таймаутом

    ВОЗВРАЩАЕТ:
        requests.Session: Сконфигурированный HTTP клиент
    """
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    session.base_url = config.base_url

    original_request = session.request

    def request(method, url, *args, **kwargs):
        """
        Переопределённый метод request.

        Пример:
            base_url = "https://host/api/test"
            url = "/brands"
            → full_url = "https://host/api/test/brands"
        Абсолютные URL передаются без изменений.
        """
        full_url = urljoin(f"{config.base_url}/", url.lstrip('/'))
        kwargs.setdefault("timeout", config.request_timeout)

        logger.info(f"-> {method.upper()} {full_url}")
        response = original_request(method, full_url, *args, **kwargs)
        logger.info(f"<- {response.status_code} {method.upper()} {full_url}")
        logger.debug(response.text)
        return response

    session.request = request
    return session


def build_curl(method: str, url: str, headers=None, json_data=None) -> str:
    """
    Формирует cURL команду из параметров HTTP запроса.

    ПРИМЕР ВЫВОДА:
        curl -X POST 'https://host/api/test/brands' \\
          -H 'Content-Type: application/json' \\
          -d '{"name": "Brand"}'

    ПАРАМЕТРЫ:
        method: HTTP метод (GET, POST, PUT, DELETE)
        url: Полный URL
        headers: HTTP заголовки
        json_data: JSON данные тела запроса (dict, list или готовая строка)
    """
    parts = [f"curl -X {method.upper()} '{url}'"]

    if headers:
        for k, v in headers.items():
            parts.append(f"  -H '{k}: {v}'")
    elif json_data is not None:
        parts.append("  -H 'Content-Type: application/json'")

    if json_data is not None:
        if isinstance(json_data, str):
            data_str = json_data
        else:
            data_str = json.dumps(json_data, ensure_ascii=False)
        parts.append(f"  -d '{data_str}'")

    return " \\\n".join(parts)
