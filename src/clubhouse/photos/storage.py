from __future__ import annotations

import logging
import os
import secrets
import time
from dataclasses import dataclass
from pathlib import Path

from werkzeug.datastructures import FileStorage

from ..core.exceptions import UpstreamIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    path: Path


class UploadStore:
    """Photo bytes on disk, keyed by a generated filename.

    The database row is the source of truth: callers write the file before
    the row and remove it only after the row is gone.
    """

    def __init__(self, root: str | os.PathLike):
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    @staticmethod
    def generate_filename(extension: str) -> str:
        unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return f"{unique_suffix}.{extension.lower().lstrip('.')}"

    def path_for(self, filename: str) -> Path:
        return self._root / Path(filename).name

    def save(self, upload: FileStorage, *, extension: str) -> StoredFile:
        filename = self.generate_filename(extension)
        path = self.path_for(filename)
        try:
            upload.stream.seek(0)
            upload.save(path)
        except OSError as e:
            raise UpstreamIOError(f"Could not store upload: {e}") from e
        return StoredFile(filename=filename, path=path)

    def remove(self, filename: str) -> bool:
        """Idempotent: a missing file is not an error."""
        path = self.path_for(filename)
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError:
            logger.exception("Could not remove stored file %s", filename)
            return False
