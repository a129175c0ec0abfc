import asyncio
import json

import structlog
from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from scenebay.api.deps import get_session
from scenebay.session.search_session import SearchSession

router = APIRouter()
logger = structlog.get_logger()

KEEPALIVE_SECONDS = 30.0


async def state_events(session: SearchSession, keepalive: float = KEEPALIVE_SECONDS):
    """Current snapshot first, then one snapshot per state change."""
    queue = session.subscribe()
    logger.info("Client connected to SSE")

    try:
        yield {"event": "state", "data": json.dumps(session.snapshot())}
        while True:
            try:
                event_type = await asyncio.wait_for(queue.get(), timeout=keepalive)
                yield {"event": event_type, "data": json.dumps(session.snapshot())}
            except asyncio.TimeoutError:
                yield {"event": "keepalive", "data": "{}"}
    finally:
        logger.info("Client disconnected from SSE")
        session.unsubscribe(queue)


@router.get("")
async def stream_events(session: SearchSession = Depends(get_session)):
    """SSE stream of view-state snapshots, one per state change."""
    return EventSourceResponse(state_events(session))
