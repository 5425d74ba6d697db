import os
import tempfile
from datetime import timedelta

SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
SQLALCHEMY_TRACK_MODIFICATIONS = False

IDENTITY_MODE = "local"

UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "clubhouse_test_uploads")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024

# Fast hashing keeps the suite quick; production uses the adaptive default
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

SESSION_TYPE = "cachelib"
SESSION_BACKEND = "memory"
SESSION_KEY_PREFIX = "clubhouse-test:"
SESSION_PERMANENT = True
PERMANENT_SESSION_LIFETIME = timedelta(days=7)

JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
JWT_ALGORITHM = "HS256"
JWT_TOKEN_LOCATION = ["headers"]

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
AUTO_SEED_DB = False
