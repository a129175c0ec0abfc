from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException

from scenebay.api.deps import get_session
from scenebay.scouting.models import SearchParams
from scenebay.session.search_session import SearchInProgressError, SearchSession

router = APIRouter()
logger = structlog.get_logger()


@router.get("/form")
async def get_form_defaults() -> dict[str, Any]:
    """Initial values for the search form."""
    return SearchParams().model_dump(mode="json")


@router.post("")
async def submit_search(
    params: SearchParams,
    session: SearchSession = Depends(get_session),
) -> dict[str, Any]:
    """
    Run a search and return the resulting view state.

    A failed model call is not an HTTP error: the state carries the error
    message for the results panel.
    """
    logger.info("Search submitted", location=params.location, radius=params.radius, unit=params.unit)
    try:
        await session.submit(params)
    except SearchInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session.snapshot()
