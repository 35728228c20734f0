# build_report_service/main.py
"""
FastAPI application for build report stripping data.

Configuration:
- LOG_LEVEL: root log level (default: INFO)
- DATABASE_URL: see core.database_session
"""

import logging
import os

from fastapi import FastAPI

from build_report_service.api.v1.stripping_report import router as stripping_router
from build_report_service.core.database_session import get_engine
from build_report_service.core.models_v2 import Base


def create_app(create_tables: bool = False) -> FastAPI:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if create_tables:
        # Development only; deployments run the alembic migrations
        Base.metadata.create_all(bind=get_engine())

    app = FastAPI(title="Build Report Service")
    app.include_router(stripping_router)
    return app
