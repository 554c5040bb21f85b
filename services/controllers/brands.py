from services.controllers.base import CrudController
from services.qa_constants import RESOURCES


class BrandsController(CrudController):
    """Обёртка над /brands."""

    path = RESOURCES["brands"]

    def get_brands(self, **kwargs):
        return self._list(**kwargs)

    def get_brand_by_id(self, brand_id, **kwargs):
        return self._get(brand_id, **kwargs)

    def post_brands(self, data, **kwargs):
        return self._create(data, **kwargs)

    def put_brands(self, brand_id, data, **kwargs):
        return self._update(brand_id, data, **kwargs)

    def delete_brand(self, brand_id, **kwargs):
        return self._delete(brand_id, **kwargs)
