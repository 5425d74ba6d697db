"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SESSION_USER_KEY = "user_id"

PASSWORD_MIN_LENGTH = 6

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
ALLOWED_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp"})
ALLOWED_IMAGE_SUBTYPES = frozenset({"jpeg", "jpg", "png", "gif", "webp"})

TIME_FORMAT = "%H:%M"
EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"
