import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", "instance/data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_records"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the mysql backend creates its table on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Populate an empty roster with synthetic students on startup
SEED_ON_START = bool(int(os.getenv("SEED_ON_START", "1")))
FAKE_DATA_COUNT = int(os.getenv("FAKE_DATA_COUNT", "20"))
