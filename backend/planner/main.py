"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.planner.api.routes.arrivals import router as arrivals_router
from backend.planner.api.routes.health import router as health_router
from backend.planner.api.routes.metrics import router as metrics_router
from backend.planner.api.routes.places import router as places_router
from backend.planner.api.routes.plan import router as plan_router
from backend.planner.api.routes.planning import router as planning_router
from backend.planner.config import get_settings
from backend.planner.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Travel App API Server starting on port {settings.port} (mock data: {settings.use_mock_data})")
    yield


app = FastAPI(title="Travel App API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().ui_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(planning_router)
app.include_router(arrivals_router)
app.include_router(places_router)
app.include_router(plan_router)


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and hide their details from clients."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Travel App API", "version": "0.1.0"}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("backend.planner.main:app", host="0.0.0.0", port=get_settings().port)
