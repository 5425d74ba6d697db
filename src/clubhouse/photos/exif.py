from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image

from ..core.constants import EXIF_DATETIME_FORMAT

logger = logging.getLogger(__name__)

EXIF_IFD_POINTER = 0x8769
TAG_DATETIME_ORIGINAL = 36867
TAG_DATETIME = 306


def _parse_exif_datetime(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    try:
        return datetime.strptime(str(value).strip().rstrip("\x00"), EXIF_DATETIME_FORMAT)
    except ValueError:
        logger.info("Ignoring malformed EXIF timestamp %r", value)
        return None


def read_capture_date(path: str | Path) -> Optional[datetime]:
    """Best-effort capture timestamp: DateTimeOriginal, else DateTime.

    Unreadable or missing EXIF yields None; the upload proceeds without it.
    """
    try:
        with Image.open(path) as img:
            exif = img.getexif()
            original = exif.get_ifd(EXIF_IFD_POINTER).get(TAG_DATETIME_ORIGINAL)
            return _parse_exif_datetime(original) or _parse_exif_datetime(exif.get(TAG_DATETIME))
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        logger.info("Could not extract EXIF data from %s: %s", Path(path).name, e)
        return None
