"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..domain.exceptions import InvalidConfigError, SessionInitError
from ..infrastructure.snapshot_renderer import SnapshotRenderer
from .config import settings
from .controller import create_controller

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One renderer and one controller: a single active session per process
renderer = SnapshotRenderer()
controller = create_controller(settings, renderer)
settings_provider = controller.settings_provider


class BreathingSettingsUpdate(BaseModel):
    """Partial settings update; values are clamped into their ranges."""

    duration_min: Optional[int] = None
    inhale_sec: Optional[int] = None
    hold_sec: Optional[int] = None
    exhale_sec: Optional[int] = None


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return controller.get_health_status()


@app.get("/settings")
async def get_settings():
    """Get the current breathing settings."""
    return controller.get_breathing_settings().model_dump()


@app.put("/settings")
async def update_settings(update: BreathingSettingsUpdate):
    """Update breathing settings; applies to the next session.

    Args:
        update: Settings to change, omitted fields are kept.

    Returns:
        The clamped breathing settings.
    """
    updated = settings_provider.update(**update.model_dump())
    logger.info(f"Breathing settings updated to {updated.model_dump()}")
    return updated.model_dump()


@app.post("/session/start")
async def start_session():
    """Start a breathing session with the current settings."""
    try:
        state = controller.start_session()
    except InvalidConfigError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SessionInitError as e:
        logger.error(f"Session could not start: {e}")
        raise HTTPException(status_code=503, detail=str(e))
    return {"session": state, "display": controller.get_display()}


@app.post("/session/pause")
async def toggle_pause():
    """Pause the running session, or resume it when paused."""
    return {"session": controller.toggle_pause(), "display": controller.get_display()}


@app.post("/session/quit")
async def quit_session():
    """Abort the active session."""
    return {"session": controller.quit_session(), "display": controller.get_display()}


@app.get("/session")
async def get_session():
    """Get the session state and the current display."""
    return {"session": controller.get_session_state(), "display": controller.get_display()}
