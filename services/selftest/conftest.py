"""
Фикстуры офлайн самопроверки: сессия requests с подменённым транспортом.

FakeAdapter монтируется в requests.Session вместо HTTPAdapter, записывает
каждый PreparedRequest и отвечает заранее заданными ответами.
Сеть не используется.
"""

import json
from http import HTTPStatus

import pytest
import requests
from requests.adapters import BaseAdapter

from services.api_config import ApiConfig
from services.http_client import build_session

BASE_URL = "http://api.test/api/test"


class FakeAdapter(BaseAdapter):
    """
    АТРИБУТЫ:
        requests: list[PreparedRequest] - Отправленные запросы по порядку
        timeouts: list - Таймауты, с которыми вызывался send()
    """

    def __init__(self):
        super().__init__()
        self.requests = []
        self.timeouts = []
        self._queue = []

    def queue(self, status_code=200, json_body=None, error=None):
        """Добавляет ответ (или исключение транспорта) в очередь."""
        self._queue.append((status_code, {} if json_body is None else json_body, error))

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        status_code, json_body, error = self._queue.pop(0) if self._queue else (200, {}, None)
        if error is not None:
            raise error

        response = requests.Response()
        response.status_code = status_code
        response.reason = HTTPStatus(status_code).phrase
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def fake_adapter():
    return FakeAdapter()


@pytest.fixture
def api_config():
    return ApiConfig(base_url=BASE_URL, email="admin@example.com", password="secret", request_timeout=10)


@pytest.fixture
def api_client(api_config, fake_adapter):
    session = build_session(api_config)
    session.mount("http://", fake_adapter)
    session.mount("https://", fake_adapter)
    yield session
    session.close()
