import os
import tempfile
import urllib.parse
from datetime import timedelta

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_NAME = os.getenv("DB_NAME", "clubhouse")

# Password is quoted so characters such as '@' survive inside the URI
_encoded_password = urllib.parse.quote_plus(DB_PASSWORD)
SQLALCHEMY_DATABASE_URI = os.getenv(
    "DATABASE_URL",
    f"mysql+mysqlconnector://{DB_USER}:{_encoded_password}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
SQLALCHEMY_TRACK_MODIFICATIONS = False
SQLALCHEMY_ENGINE_OPTIONS = {
    "pool_pre_ping": True,
    "pool_recycle": int(os.getenv("DB_POOL_RECYCLE", "3600")),
}

IDENTITY_MODE = os.getenv("IDENTITY_MODE", "local")

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

SESSION_TYPE = "cachelib"
SESSION_BACKEND = "filesystem"
SESSION_FILE_DIR = os.getenv("SESSION_DIR", os.path.join(tempfile.gettempdir(), "clubhouse_sessions"))
SESSION_FILE_THRESHOLD = int(os.getenv("SESSION_FILE_THRESHOLD", "500"))
SESSION_KEY_PREFIX = "clubhouse:"
SESSION_PERMANENT = True
PERMANENT_SESSION_LIFETIME = timedelta(days=int(os.getenv("SESSION_LIFETIME_DAYS", "7")))
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
SESSION_COOKIE_SECURE = True

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "RS256")
JWT_PUBLIC_KEY = os.getenv("JWT_PUBLIC_KEY")
JWT_DECODE_AUDIENCE = os.getenv("JWT_AUDIENCE")
JWT_DECODE_ISSUER = os.getenv("JWT_ISSUER")
JWT_TOKEN_LOCATION = ["headers"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PORT = int(os.getenv("PORT", "5000"))

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
