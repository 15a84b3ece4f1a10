import os
from dotenv import load_dotenv

load_dotenv()

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
DEBUG = ENVIRONMENT == "development"
PORT = int(os.getenv("PORT", 3000))

DB_CONFIG = {
    'host': os.getenv("DB_HOST", "localhost"),
    'port': int(os.getenv("DB_PORT") or 3306),
    'database': os.getenv("DB_NAME", "vanillasoft"),
    'user': os.getenv("DB_USER", "root"),
    'password': os.getenv("DB_PASS", ""),
    'charset': os.getenv("DB_CHARSET", "utf8mb4"),
    'ssl': os.getenv("DB_SSL", "false").strip().lower() == "true",
}

# Full SQLAlchemy URL; when set it takes precedence over DB_CONFIG
DATABASE_URL = os.getenv("DATABASE_URL", "")

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", 280))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "app.log")

# VanillaSoft sometimes nests the record under one of these keys
ENVELOPE_KEYS = ("contact",)
