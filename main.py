# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

from salesflow.routers import (
    process_flow_router,
    dashboard_router,
    workflow_router,
)

from salesflow.core.config import (
    APP_ENV,
    APP_VERSION,
    CORS_ORIGINS,
    ENABLE_SCHEDULER,
    IS_PRODUCTION,
)
from salesflow.core.db import init_models
from salesflow.core.scheduler import scheduler
from salesflow.core.exceptions import AppException
from salesflow.core.logging import setup_logging
from salesflow.middleware.request_logging import request_logging_middleware
from salesflow.core.error_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    database_error_handler,
    unhandled_exception_handler,
)

APP_NAME = "Sales Process Flow API"

# ------------------------------------------------------------------------------
# LOGGING
# ------------------------------------------------------------------------------
setup_logging()
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# LIFESPAN
# ------------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application (%s)", APP_ENV)

    if APP_ENV == "development":
        await init_models()
        logger.info("Database models initialized (development)")

    # Without the scheduler the snapshot is loaded on first request only
    if ENABLE_SCHEDULER:
        scheduler.start()
        logger.info("Snapshot refresh scheduler started")
    else:
        logger.info("Snapshot refresh scheduler disabled")

    yield

    logger.info("Shutting down application")
    if scheduler.running:
        scheduler.shutdown()

# ------------------------------------------------------------------------------
# APP INIT
# ------------------------------------------------------------------------------
app = FastAPI(
    title=APP_NAME,
    description="Read-side process-flow engine for the sales console",
    version=APP_VERSION,
    docs_url="/docs" if not IS_PRODUCTION else None,
    redoc_url=None,
    lifespan=lifespan,
)

# ------------------------------------------------------------------------------
# EXCEPTION HANDLERS
# ------------------------------------------------------------------------------
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# ------------------------------------------------------------------------------
# MIDDLEWARE
# ------------------------------------------------------------------------------
app.middleware("http")(request_logging_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------------------
# HEALTH CHECK
# ------------------------------------------------------------------------------
@app.get("/", tags=["Health"])
async def health_check():
    return {
        "status": "ok",
        "service": "sales-process-flow-api",
        "environment": APP_ENV,
        "version": APP_VERSION,
    }

# ------------------------------------------------------------------------------
# ROUTERS
# ------------------------------------------------------------------------------
app.include_router(process_flow_router)
app.include_router(dashboard_router)
app.include_router(workflow_router)
