"""
Work Ledger API - Main Application Entry Point
Daily work-day entries with weekly, monthly and per-day reports
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging

from app.config import settings
from app.database import create_tables
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.middleware import RequestLoggingMiddleware, RequestTrackingMiddleware, SecurityHeadersMiddleware
from app.routers import entries, health, reports, users

setup_logging(log_level=settings.log_level)
logger = logging.getLogger("work_ledger.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} v{settings.version}...")
    create_tables()
    logger.info("Database tables created/verified")
    yield
    logger.info("Shutting down")


def include_routers(app: FastAPI) -> None:
    app.include_router(users.router)
    app.include_router(entries.router)
    app.include_router(reports.router)
    app.include_router(health.router)


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    description="Work-day ledger: record gross, expenses and net per day and query aggregated reports.",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Added last runs first: request id must exist before logging reads it
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware, slow_request_threshold=settings.slow_request_threshold)
app.add_middleware(RequestTrackingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
)

include_routers(app)


@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "description": "Daily work ledger with reports"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port, reload=settings.debug)
