from __future__ import annotations

import logging
import os
import time
from typing import BinaryIO, Optional, Protocol

from werkzeug.utils import secure_filename

from ..core.enums import DocumentKind
from ..core.exceptions import PayloadTooLargeError, ValidationError

logger = logging.getLogger(__name__)


class UploadedFile(Protocol):
    """What we need from werkzeug's FileStorage."""

    filename: Optional[str]
    stream: BinaryIO


class DocumentStorage:
    """Stores employee documents as ``<kind>_<epoch-ms>_<name>`` under the upload folder."""

    def __init__(self, folder: str, *, max_file_size: int):
        self._folder = folder
        self._max_file_size = int(max_file_size)

    @property
    def folder(self) -> str:
        return self._folder

    def save(self, kind: DocumentKind, upload: UploadedFile) -> str:
        original = secure_filename(upload.filename or "") or "file"
        data = upload.stream.read(self._max_file_size + 1)
        if len(data) > self._max_file_size:
            raise PayloadTooLargeError(f"{kind.value} exceeds the {self._max_file_size // (1024 * 1024)} MB limit")
        if not data:
            raise ValidationError(f"{kind.value} file is empty", errors=[{"field": kind.value, "message": "File is empty"}])

        os.makedirs(self._folder, exist_ok=True)
        name = f"{kind.value}_{int(time.time() * 1000)}_{original}"
        with open(os.path.join(self._folder, name), "wb") as fh:
            fh.write(data)
        return name

    def delete(self, name: Optional[str]) -> None:
        if not name:
            return
        path = os.path.join(self._folder, secure_filename(name))
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning("Could not remove stored document %s", name, exc_info=True)
