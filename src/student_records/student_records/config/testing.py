import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_DIR = os.getenv("STORAGE_DIR", "")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_records_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
SEED_ON_START = False
FAKE_DATA_COUNT = 5
