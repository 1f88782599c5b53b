import os

from .loader import env_flag, env_int

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": env_int("DB_PORT", 3306),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mytube"),
}

DEBUG = True

# memory | mysql
ACCOUNT_STORE = os.getenv("ACCOUNT_STORE", "memory")

# bcrypt | werkzeug
PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "bcrypt")
BCRYPT_ROUNDS = env_int("BCRYPT_ROUNDS", 10)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Optional YAML file with a `server:` section (port, TLS, CORS)
SERVER_CONFIG_PATH = os.getenv("SERVER_CONFIG_PATH") or None

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
