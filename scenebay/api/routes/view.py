from typing import Any

from fastapi import APIRouter, Depends

from scenebay.api.deps import get_session
from scenebay.session.search_session import SearchSession

router = APIRouter()


@router.get("/state")
async def get_state(session: SearchSession = Depends(get_session)) -> dict[str, Any]:
    """Full view state: panels, map layers, status and theme."""
    return session.snapshot()


@router.post("/view/back")
async def back_to_search(session: SearchSession = Depends(get_session)) -> dict[str, Any]:
    session.back_to_search()
    return session.snapshot()


@router.post("/view/catering/toggle")
async def toggle_catering(session: SearchSession = Depends(get_session)) -> dict[str, Any]:
    session.toggle_catering()
    return session.snapshot()


@router.get("/theme")
async def get_theme(session: SearchSession = Depends(get_session)) -> dict[str, str]:
    return {"theme": session.theme}


@router.post("/theme/toggle")
async def toggle_theme(session: SearchSession = Depends(get_session)) -> dict[str, str]:
    return {"theme": session.toggle_theme()}
