from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.services.directory_session import directory_session
from app.services.employee_store import employee_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    await employee_store.initialize(settings)
    await directory_session.initialize(settings)
    yield
    await directory_session.close()
    await employee_store.close()
    logger.info("Staff directory shut down; in-memory records discarded")


app = FastAPI(
    title="Staff Directory API",
    description="Employee directory with search, filters and CSV import/export",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staff Directory API"}
