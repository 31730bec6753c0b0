"""Length Converter — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lengthconv.config import settings
from lengthconv.logging import setup_logging
from lengthconv.api.routes_convert import router as convert_router
from lengthconv.models.schemas import HealthResponse

__version__ = "0.1.0"

setup_logging()

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Convert lengths between named units.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(convert_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "version": __version__}
