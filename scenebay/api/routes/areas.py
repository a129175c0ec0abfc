from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from scenebay.api.deps import get_session
from scenebay.presentation.panels import build_details_panel
from scenebay.session.search_session import AreaNotFoundError, SearchSession

router = APIRouter()


@router.get("")
async def list_areas(session: SearchSession = Depends(get_session)) -> list[dict[str, Any]]:
    """Raw areas from the last search."""
    return [area.model_dump(mode="json") for area in session.areas]


@router.post("/{area_id}/select")
async def select_area(
    area_id: str,
    session: SearchSession = Depends(get_session),
) -> dict[str, Any]:
    """Select an area (list row, marker or circle click) and open its details."""
    try:
        session.select(area_id)
    except AreaNotFoundError:
        raise HTTPException(status_code=404, detail="Area not found")
    return session.snapshot()


@router.get("/{area_id}/details")
async def get_area_details(
    area_id: str,
    catering: bool = True,
    session: SearchSession = Depends(get_session),
) -> dict[str, Any]:
    try:
        area = session.get_area(area_id)
    except AreaNotFoundError:
        raise HTTPException(status_code=404, detail="Area not found")
    return build_details_panel(area, catering_shown=catering).model_dump(mode="json")
