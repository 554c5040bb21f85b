"""
Контроллеры ресурсов API: один класс на ресурс, один метод на HTTP операцию.
"""

from services.controllers.admin import AdminController
from services.controllers.brands import BrandsController
from services.controllers.categories import CategoriesController
from services.controllers.upload import UploadController

__all__ = [
    "AdminController",
    "BrandsController",
    "CategoriesController",
    "UploadController",
]
