from services.controllers.base import CrudController
from services.qa_constants import RESOURCES


class CategoriesController(CrudController):
    """
    Обёртка над /categories.

    Операции записи (POST, PUT, DELETE) требуют Bearer токен:
        controller.post_categories(body, token=token)
    """

    path = RESOURCES["categories"]

    def get_categories(self, **kwargs):
        return self._list(**kwargs)

    def get_category_by_id(self, category_id, **kwargs):
        return self._get(category_id, **kwargs)

    def post_categories(self, data, **kwargs):
        return self._create(data, **kwargs)

    def put_categories(self, category_id, data, **kwargs):
        return self._update(category_id, data, **kwargs)

    def delete_category(self, category_id, **kwargs):
        return self._delete(category_id, **kwargs)
