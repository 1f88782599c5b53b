import os

from .loader import env_flag, env_int, env_required

SECRET_KEY = env_required("SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": env_int("DB_PORT", 3306),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mytube"),
}

DEBUG = False

ACCOUNT_STORE = os.getenv("ACCOUNT_STORE", "mysql")

PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "bcrypt")
BCRYPT_ROUNDS = env_int("BCRYPT_ROUNDS", 12)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SERVER_CONFIG_PATH = os.getenv("SERVER_CONFIG_PATH", "config/server.yaml")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
