import os
import tempfile
from datetime import timedelta

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///clubhouse.db")
SQLALCHEMY_TRACK_MODIFICATIONS = False

# "local" = password login + server-side session, "external" = signed identity assertion
IDENTITY_MODE = os.getenv("IDENTITY_MODE", "local")

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

SESSION_TYPE = "cachelib"
SESSION_BACKEND = "filesystem"
SESSION_FILE_DIR = os.getenv("SESSION_DIR", os.path.join(tempfile.gettempdir(), "clubhouse_sessions"))
SESSION_FILE_THRESHOLD = 500
SESSION_KEY_PREFIX = "clubhouse:"
SESSION_PERMANENT = True
PERMANENT_SESSION_LIFETIME = timedelta(days=7)
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
SESSION_COOKIE_SECURE = False

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_PUBLIC_KEY = os.getenv("JWT_PUBLIC_KEY")
JWT_DECODE_AUDIENCE = os.getenv("JWT_AUDIENCE")
JWT_DECODE_ISSUER = os.getenv("JWT_ISSUER")
JWT_TOKEN_LOCATION = ["headers"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

PORT = int(os.getenv("PORT", "5000"))

DEBUG = True

# Create tables on startup (idempotent: create_all skips existing tables)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
