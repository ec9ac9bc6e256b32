"""
termreel — FastAPI host.

GET  /health                                   Liveness + registered compositions
GET  /compositions                             List composition descriptors
GET  /compositions/{id}                        One descriptor
GET  /compositions/{id}/frames/{frame}         RenderTree as JSON
GET  /compositions/{id}/frames/{frame}/text    Plain-text preview of a frame
POST /render                                   Render an ad-hoc scene literal at a frame

The host plays the role of the frame clock: it only asks for frames inside
[0, duration_in_frames). The engine itself never clamps.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from config.settings import settings
from renderer.composition import Composition, get_composition, list_compositions
from renderer.render_engine import SceneRenderer
from scenes import ConfigurationError

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("termreel.api")

__version__ = "1.0.0"

# ── App ──────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="termreel",
    description="Frame-by-frame playback of scripted terminal sessions.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request / Response models ─────────────────────────────────────────────────

class RenderRequest(BaseModel):
    scene:  dict = Field(..., description="Scene script literal (name, phases[])")
    frame:  int  = Field(..., description="Frame to evaluate")
    offset: int  = Field(0,   description="Frames added to every phase start")
    fade_duration_frames: Optional[int] = Field(None, description="Override the fade-in length")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _composition_or_404(composition_id: str) -> Composition:
    try:
        return get_composition(composition_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Composition '{composition_id}' not found.")


def _frame_in_range(comp: Composition, frame: int) -> int:
    if not comp.contains(frame):
        raise HTTPException(
            status_code=400,
            detail=f"Frame {frame} outside [0, {comp.duration_in_frames}) for '{comp.id}'.",
        )
    return frame


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status":       "ok",
        "compositions": [c.id for c in list_compositions()],
        "version":      __version__,
    }


@app.get("/compositions")
async def compositions():
    comps = list_compositions()
    return {"compositions": [c.to_dict() for c in comps], "total": len(comps)}


@app.get("/compositions/{composition_id}")
async def composition(composition_id: str):
    return _composition_or_404(composition_id).to_dict()


@app.get("/compositions/{composition_id}/frames/{frame}")
async def render_frame(composition_id: str, frame: int):
    comp = _composition_or_404(composition_id)
    return comp.render(_frame_in_range(comp, frame)).to_dict()


@app.get("/compositions/{composition_id}/frames/{frame}/text", response_class=PlainTextResponse)
async def render_frame_text(composition_id: str, frame: int):
    comp = _composition_or_404(composition_id)
    return comp.render(_frame_in_range(comp, frame)).to_text()


@app.post("/render")
async def render_scene_literal(request: RenderRequest):
    """Validate a scene literal and render one frame of it."""
    fade = request.fade_duration_frames
    if fade is None:
        fade = settings.fade_duration_frames
    try:
        renderer = SceneRenderer(request.scene, fade_duration_frames=fade, offset=request.offset)
    except ConfigurationError as exc:
        log.info("Rejected scene: %s", exc)
        raise HTTPException(status_code=422, detail=exc.errors)
    return renderer.render(request.frame).to_dict()


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level="info",
    )
