import contextlib
import mimetypes
import os

from services.controllers.base import BaseController
from services.qa_constants import RESOURCES, UPLOAD_FIELDS


def _file_part(field, fh, filepath):
    """Часть multipart запроса: (поле, (имя файла, файл, MIME тип))."""
    filename = os.path.basename(filepath)
    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return field, (filename, fh, content_type)


class UploadController(BaseController):
    """
    Обёртка над /upload.

    Файлы открываются только на время запроса. Для нескольких файлов
    каждый прикрепляется под одним и тем же полем "multiple" в порядке
    передачи, и сервер возвращает результаты в том же порядке.
    """

    def post_upload_single_file(self, filepath, **kwargs):
        with open(filepath, "rb") as fh:
            files = [_file_part(UPLOAD_FIELDS["single"], fh, filepath)]
            return self._send("POST", RESOURCES["upload_single"], files=files, **kwargs)

    def post_upload_multiple_files(self, filepaths, **kwargs):
        with contextlib.ExitStack() as stack:
            files = [
                _file_part(UPLOAD_FIELDS["multiple"], stack.enter_context(open(path, "rb")), path)
                for path in filepaths
            ]
            return self._send("POST", RESOURCES["upload_multiple"], files=files, **kwargs)
