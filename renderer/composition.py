"""
Composition descriptors — what an export pipeline needs to drive a scene.

A composition pairs a SceneRenderer with its timing and canvas size. The
host iterates frames in [0, duration_in_frames) and calls ``render``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config.settings import settings
from renderer.render_engine import RenderTree, SceneRenderer
from scenes import build_scene

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Composition:
    id:                 str
    component:          SceneRenderer
    duration_in_frames: int
    fps:                int
    width:              int
    height:             int

    def __post_init__(self) -> None:
        last = self.component.scene.last_reveal_frame
        if last >= self.duration_in_frames:
            log.warning(
                "Composition '%s': scene reveals content at frame %d, past its %d-frame duration",
                self.id, last, self.duration_in_frames,
            )

    @property
    def duration_seconds(self) -> float:
        return self.duration_in_frames / self.fps

    def contains(self, frame: int) -> bool:
        return 0 <= frame < self.duration_in_frames

    def render(self, frame: int) -> RenderTree:
        return self.component.render(frame)

    def to_dict(self) -> dict:
        return {
            "id":                 self.id,
            "scene":              self.component.scene.name,
            "duration_in_frames": self.duration_in_frames,
            "fps":                self.fps,
            "width":              self.width,
            "height":             self.height,
        }


def _sqlex_demo() -> Composition:
    return Composition(
        id="SqlexDemo",
        component=SceneRenderer(build_scene("sqlex_demo"), settings.fade_duration_frames),
        duration_in_frames=settings.composition_duration_frames,
        fps=settings.composition_fps,
        width=settings.composition_width,
        height=settings.composition_height,
    )


_REGISTRY = {
    "SqlexDemo": _sqlex_demo,
}

_cache: dict[str, Composition] = {}


def get_composition(composition_id: str) -> Composition:
    """Return the registered composition, building it on first use."""
    if composition_id not in _REGISTRY:
        raise KeyError(f"Unknown composition '{composition_id}'. Available: {sorted(_REGISTRY)}")
    if composition_id not in _cache:
        _cache[composition_id] = _REGISTRY[composition_id]()
    return _cache[composition_id]


def list_compositions() -> list[Composition]:
    return [get_composition(cid) for cid in sorted(_REGISTRY)]
