from services.controllers.base import BaseController
from services.qa_constants import RESOURCES


class AdminController(BaseController):
    """Обёртка над /admin."""

    path = RESOURCES["admin_login"]

    def post_admin_login(self, data, **kwargs):
        """POST /admin/login с телом {"email": ..., "password": ...}."""
        return self._send("POST", self.path, json=data, **kwargs)
