# salesflow/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# =====================================================
# APPLICATION
# =====================================================
APP_ENV = os.getenv("APP_ENV", "development")
if APP_ENV not in {"development", "staging", "production"}:
    raise ValueError("APP_ENV must be development | staging | production")

IS_PRODUCTION = APP_ENV == "production"

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == "development" else "INFO").upper()
if LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
    raise ValueError("LOG_LEVEL must be DEBUG | INFO | WARNING | ERROR")

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
]

# =====================================================
# DATABASE
# =====================================================
DB_TYPE = os.getenv("DB_TYPE", "sqlite")
if DB_TYPE not in {"postgres", "sqlite"}:
    raise ValueError("DB_TYPE must be postgres | sqlite")

if DB_TYPE == "postgres":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required for Postgres")

elif DB_TYPE == "sqlite":
    if IS_PRODUCTION:
        raise ValueError("SQLite is NOT allowed in production")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./salesflow.db")

# ---- Pool tuning (safe defaults) ----
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 20))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))
DB_ECHO_POOL = os.getenv("DB_ECHO_POOL", "false").lower() == "true"

# ---- SSL ----
DB_SSL_VERIFY = os.getenv("DB_SSL_VERIFY", "true").lower() == "true"

# =====================================================
# PROCESS FLOW
# =====================================================
URGENT_TASK_LIMIT = int(os.getenv("URGENT_TASK_LIMIT", 5))
if URGENT_TASK_LIMIT < 1:
    raise ValueError("URGENT_TASK_LIMIT must be at least 1")

# Reject process-flow reads whose target quotation has an unmapped status
STRICT_QUOTATION_STATUS = (
    os.getenv("STRICT_QUOTATION_STATUS", "false").lower() == "true"
)

# =====================================================
# SCHEDULER
# =====================================================
SNAPSHOT_REFRESH_SECONDS = int(os.getenv("SNAPSHOT_REFRESH_SECONDS", 60))
if SNAPSHOT_REFRESH_SECONDS < 1:
    raise ValueError("SNAPSHOT_REFRESH_SECONDS must be at least 1")

ENABLE_SCHEDULER = os.getenv("ENABLE_SCHEDULER", "true").lower() == "true"
