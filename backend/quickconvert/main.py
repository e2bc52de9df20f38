"""Quick Convert — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI

from quickconvert.api.routes_convert import router as convert_router
from quickconvert.core.catalog.units import CATALOG

VERSION = "0.1.0"

app = FastAPI(
    title="Quick Convert",
    version=VERSION,
    description="Resolve free-text unit conversion queries into launcher result items.",
)

app.include_router(convert_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION, "units": len(CATALOG)}
