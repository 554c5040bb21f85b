"""
===================================================================================
BASE - Базовый класс контроллеров ресурсов
===================================================================================

Контроллер переводит вызов метода ровно в один HTTP запрос к API
и возвращает requests.Response как есть: без повторов, без кэширования,
без разбора тела ответа. Ошибки валидации (422) и отсутствия ресурса (404)
возвращаются вызывающему коду статус-кодом и телом ответа;
сетевые ошибки requests пробрасываются без изменений.

АВТОРИЗАЦИЯ:
    Любой метод принимает token=... (Bearer заголовок) и headers=...
    (дополнительные заголовки), которые добавляются до отправки запроса.
===================================================================================
"""

from services.http_client import bearer, build_session


class BaseController:
    """
    Общая часть контроллеров: конфигурация, сессия и отправка запроса.

    АТРИБУТЫ:
        config: ApiConfig - Конфигурация подключения
        session: requests.Session - HTTP клиент (build_session по умолчанию)
        path: str - Путь коллекции ресурса (например, "/brands")
    """

    path = ""

    def __init__(self, config, session=None):
        self.config = config
        self.session = session if session is not None else build_session(config)

    def _item_path(self, item_id) -> str:
        return f"{self.path}/{item_id}"

    def _send(self, method: str, url: str, token=None, headers=None, **kwargs):
        """
        Отправляет один HTTP запрос через сессию.

        ПАРАМЕТРЫ:
            method: HTTP метод
            url: Относительный путь (например, "/brands/<id>")
            token: Bearer токен (необязательно)
            headers: Дополнительные заголовки (необязательно)
            **kwargs: Параметры requests (json, files, params, timeout)

        ВОЗВРАЩАЕТ:
            requests.Response: Ответ сервера без проверки статус-кода
        """
        request_headers = dict(headers or {})
        if token:
            request_headers.update(bearer(token))
        if request_headers:
            kwargs["headers"] = request_headers
        return self.session.request(method, url, **kwargs)


class CrudController(BaseController):
    """Коллекция ресурса с операциями list / get / create / update / delete."""

    def _list(self, **kwargs):
        return self._send("GET", self.path, **kwargs)

    def _get(self, item_id, **kwargs):
        return self._send("GET", self._item_path(item_id), **kwargs)

    def _create(self, data, **kwargs):
        return self._send("POST", self.path, json=data, **kwargs)

    def _update(self, item_id, data, **kwargs):
        return self._send("PUT", self._item_path(item_id), json=data, **kwargs)

    def _delete(self, item_id, **kwargs):
        return self._send("DELETE", self._item_path(item_id), **kwargs)
