"""Convert endpoint — the launcher result feed over HTTP."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quickconvert.config import Settings, get_settings
from quickconvert.core.format.formatter import MeasureFormatter
from quickconvert.core.service import run_query
from quickconvert.models.schemas import ConvertRequest, ScriptFilterFeed

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ScriptFilterFeed, response_model_exclude_none=True)
async def convert_query(req: ConvertRequest, settings: Settings = Depends(get_settings)):
    """Resolve a free-text query. Invalid input still returns its guidance item, with 422."""
    outcome = run_query(req.query, MeasureFormatter(settings.decimal_places))
    if not outcome.ok:
        return JSONResponse(
            status_code=422,
            content=outcome.feed.model_dump(exclude_none=True),
        )
    return outcome.feed
