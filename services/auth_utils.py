"""
===================================================================================
AUTH_UTILS - Модуль аутентификации администратора
===================================================================================

Предоставляет функциональность для выполнения аутентификации администратора
через REST API (/admin/login) и получения токена для авторизованных запросов.

ЗАВИСИМОСТИ:
    - api_config.ApiConfig: Базовый URL и учётные данные
    - controllers.AdminController: Обёртка над /admin/login

ИСПОЛЬЗОВАНИЕ:
    from services.auth_utils import login
    token = login(config)
    headers = {"Authorization": f"Bearer {token}"}
===================================================================================
"""

from typing import Optional

from services.controllers.admin import AdminController


def login(config, email: Optional[str] = None, password: Optional[str] = None, session=None) -> str:
    """
    Выполняет аутентификацию через /admin/login и возвращает токен.

    ПРОЦЕСС АУТЕНТИФИКАЦИИ:
    1. Учётные данные берутся из аргументов или из config
    2. POST запрос {"email", "password"} к /admin/login
    3. Валидация ответа сервера (raise_for_status)
    4. Извлечение токена из поля 'token'

    ПАРАМЕТРЫ:
        config: ApiConfig - Конфигурация подключения
        email: str - Email администратора (по умолчанию config.email)
        password: str - Пароль (по умолчанию config.password)
        session: requests.Session - Готовая сессия (необязательно)

    ВОЗВРАЩАЕТ:
        str: Bearer токен из поля response['token']

    ИСКЛЮЧЕНИЯ:
        ValueError: Если учётные данные не заданы
        requests.exceptions.HTTPError: При ошибке аутентификации (4xx, 5xx)
        requests.exceptions.RequestException: При сетевых ошибках
        KeyError: При отсутствии поля 'token' в ответе сервера
    """
    email = email or config.email
    password = password or config.password
    if not email or not password:
        raise ValueError("Admin credentials are not configured "
                         "(--admin-email/--admin-password or API_ADMIN_EMAIL/API_ADMIN_PASSWORD)")

    controller = AdminController(config, session=session)
    response = controller.post_admin_login({
        "email": email,
        "password": password,
    })
    response.raise_for_status()

    response_data = response.json()
    return response_data['token']
