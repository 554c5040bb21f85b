"""
Вспомогательные функции для создания тестовых данных (фикстур) через API.

Имена всегда содержат случайное число, чтобы параллельные и повторные
прогоны не конфликтовали друг с другом на общем сервере.
"""

import logging
import random

from services.qa_constants import BRAND_DESCRIPTION, BRAND_NAME_PREFIX, CATEGORY_NAME_PREFIX

logger = logging.getLogger(__name__)


def random_name(prefix: str, upper: int = 100000) -> str:
    """Имя вида "<prefix> <случайное число от 0 до upper-1>"."""
    return f"{prefix} {random.randrange(upper)}"


def create_brand(controller, prefix: str = BRAND_NAME_PREFIX, description: str = BRAND_DESCRIPTION) -> dict:
    """
    Создаёт бренд со случайным именем и возвращает запись из ответа сервера.

    ПАРАМЕТРЫ:
        controller: BrandsController
        prefix: Префикс имени
        description: Описание бренда

    ВОЗВРАЩАЕТ:
        dict: Тело ответа (при успехе содержит _id, name, createdAt)
    """
    data = {
        "name": random_name(prefix),
        "description": description,
    }
    response = controller.post_brands(data)
    assert response.status_code == 200, \
        f"Не удалось создать бренд: {response.status_code} {response.text}"
    record = response.json()
    logger.info(f"Created brand {record.get('_id')} ({data['name']})")
    return record


def create_category(controller, token: str, prefix: str = CATEGORY_NAME_PREFIX) -> str:
    """
    Создаёт категорию со случайным именем и возвращает её _id.

    ПАРАМЕТРЫ:
        controller: CategoriesController
        token: Bearer токен администратора
        prefix: Префикс имени

    ВОЗВРАЩАЕТ:
        str: Идентификатор созданной категории
    """
    body = {"name": random_name(prefix)}
    response = controller.post_categories(body, token=token)
    assert response.status_code == 200, \
        f"Не удалось создать категорию: {response.status_code} {response.text}"
    category_id = response.json()["_id"]
    logger.info(f"Created category {category_id} ({body['name']})")
    return category_id
