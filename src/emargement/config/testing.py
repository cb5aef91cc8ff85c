import os

ENV = "testing"

SECRET_KEY = "test-secret"

JWT_SECRET = "test-jwt-secret"
JWT_ALGORITHM = "HS256"
JWT_EXPIRES_MINUTES = 60

# Cheap hashes keep the suite fast.
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

DB_CONFIG = {
    "host": os.getenv("TEST_DB_HOST", "localhost"),
    "port": int(os.getenv("TEST_DB_PORT", "3306")),
    "user": os.getenv("TEST_DB_USER", "root"),
    "password": os.getenv("TEST_DB_PASSWORD", ""),
    "database": os.getenv("TEST_DB_NAME", "emargement_test"),
    "pool_size": 2,
    "pool_timeout": 2.0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
EXPOSE_STORE_ERRORS = True

AUTO_INIT_DB = False
