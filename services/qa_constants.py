"""
===================================================================================
QA_CONSTANTS - Конфигурационные константы для тестовой инфраструктуры
===================================================================================

Централизованное хранилище конфигурационных параметров для:
- Адреса тестируемого REST API (brands, categories, upload, admin)
- Относительных путей ресурсов
- Имён multipart полей для загрузки файлов
- Префиксов для случайных имён тестовых данных

Значения по умолчанию переопределяются переменными окружения
и параметрами командной строки pytest (см. api_config.load_config).

ИСПОЛЬЗОВАНИЕ:
    from services.qa_constants import RESOURCES, DEFAULT_BASE_URL
    brands_path = RESOURCES["brands"]
===================================================================================
"""

import os

# ===================================================================================
# АДРЕС API
# ===================================================================================
DEFAULT_BASE_URL = "https://practice-react.sdetunicorns.com/api/test"

# Публичный сервис-заглушка для POC тестов (GET/POST/PUT/PATCH/DELETE)
POC_BASE_URL = "https://jsonplaceholder.typicode.com"

# Таймаут HTTP запросов в секундах (совпадает с глобальным таймаутом теста)
DEFAULT_REQUEST_TIMEOUT = 10

# Переменные окружения, из которых читается конфигурация
ENV_BASE_URL = "API_BASE_URL"
ENV_ADMIN_EMAIL = "API_ADMIN_EMAIL"
ENV_ADMIN_PASSWORD = "API_ADMIN_PASSWORD"
ENV_REQUEST_TIMEOUT = "API_REQUEST_TIMEOUT"

# ===================================================================================
# ПУТИ РЕСУРСОВ
# ===================================================================================
# Формат: {"resource": "/path"}
RESOURCES = {
    "brands": "/brands",
    "categories": "/categories",
    "admin_login": "/admin/login",
    "upload_single": "/upload/single",
    "upload_multiple": "/upload/multiple",
}

# Имена multipart полей для загрузки файлов
UPLOAD_FIELDS = {
    "single": "single",
    "multiple": "multiple",
}

# ===================================================================================
# ТЕСТОВЫЕ ДАННЫЕ
# ===================================================================================
BRAND_NAME_PREFIX = "API Automation Brand"
BRAND_DESCRIPTION = "Automation Brand Desc"
CATEGORY_NAME_PREFIX = "API Automation Category"

# Синтаксически корректный, но не назначенный идентификатор (24 hex символа)
UNASSIGNED_ID = "123456789012345678901234"

# Папка с файлами для загрузки (beach.jpg, coffee.jpg)
UPLOAD_DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
