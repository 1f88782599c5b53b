import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mytube_test"),
}

DEBUG = False
TESTING = True

ACCOUNT_STORE = "memory"

PASSWORD_HASHER = "bcrypt"
# Lowest cost bcrypt accepts, keeps the suite fast
BCRYPT_ROUNDS = 4

LOG_LEVEL = "WARNING"

SERVER_CONFIG_PATH = None

AUTO_INIT_DB = False
