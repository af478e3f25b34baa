from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idcard.api.v1.router import api_router
from idcard.core.config import settings
from idcard.services.sheets_service import sheets_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await sheets_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize SheetsService — continuing with demo data")
    yield
    await sheets_service.close()


app = FastAPI(
    title="Employee ID Card API",
    description="Employee login and digital ID card lookup",
    version=settings.APP_VERSION,
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
    return {"message": "Employee ID Card API"}
