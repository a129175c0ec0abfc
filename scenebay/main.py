from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scenebay import __version__
from scenebay.api.routes import areas, events, search, view
from scenebay.config import get_settings
from scenebay.session.search_session import AppConfig, SearchSession

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting SceneBay...")
    settings = get_settings()
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not configured - searches will fail")
    app.state.session = SearchSession(AppConfig.from_settings(settings))
    yield
    # Shutdown
    logger.info("Shutting down SceneBay...")


app = FastAPI(
    title="SceneBay",
    description="AI-assisted area scouting for film production",
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(search.router, prefix="/api/search", tags=["search"])
app.include_router(areas.router, prefix="/api/areas", tags=["areas"])
app.include_router(view.router, prefix="/api", tags=["view"])
app.include_router(events.router, prefix="/api/events", tags=["events"])


@app.get("/")
async def root():
    return {"message": "SceneBay API", "version": __version__}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("scenebay.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)
