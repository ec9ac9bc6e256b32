"""
Render Engine — evaluates a scene at a frame.

SceneRenderer is the single entry point a host drives: it validates the
scene once at construction, then ``render(frame)`` is a pure function of
the frame number. Nothing carries over between calls, so frames can be
evaluated in any order and in parallel.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable

from renderer.line_reveal import FADE_DURATION_FRAMES
from renderer.sequencer import RenderableLine, render_scene
from scenes.loader import SceneSource, load_scene
from scenes.models import Scene

log = logging.getLogger(__name__)

CURSOR_GLYPH = "█"


@dataclass(frozen=True)
class RenderTree:
    frame: int
    lines: tuple[RenderableLine, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        return {"frame": self.frame, "lines": [line.to_dict() for line in self.lines]}

    def to_text(self) -> str:
        """Plain-text preview: one row per line, cursor drawn as a block."""
        rows = []
        for line in self.lines:
            row = line.text
            if line.cursor is not None and line.cursor.visible:
                row += CURSOR_GLYPH
            rows.append(row)
        return "\n".join(rows)


class SceneRenderer:
    """
    Frame → RenderTree for one validated scene.

    Raises ConfigurationError at construction if the scene is invalid;
    ``render`` itself never raises.
    """

    def __init__(
        self,
        scene: SceneSource,
        fade_duration_frames: int = FADE_DURATION_FRAMES,
        offset: int = 0,
    ):
        self.scene: Scene = load_scene(scene, offset=offset)
        self.fade_duration_frames = fade_duration_frames

    def __repr__(self) -> str:
        return f"SceneRenderer({self.scene.name!r}, phases={len(self.scene.phases)})"

    def render(self, frame: int) -> RenderTree:
        if frame < 0:
            log.debug("Frame %d is before the timeline start; rendering nothing", frame)
            return RenderTree(frame=frame)
        lines = render_scene(self.scene, frame, self.fade_duration_frames)
        return RenderTree(frame=frame, lines=tuple(lines))

    __call__ = render

    def render_range(self, start: int, end: int) -> list[RenderTree]:
        """Render frames ``start`` .. ``end - 1`` in order."""
        return [self.render(frame) for frame in range(start, end)]


async def render_all_parallel(
    renderer: SceneRenderer,
    frames: Iterable[int],
    max_workers: int = 4,
) -> list[RenderTree]:
    """
    Render many frames concurrently (bounded by max_workers).

    Returns:
        RenderTrees in the same order as ``frames``.
    """
    semaphore = asyncio.Semaphore(max_workers)

    async def _render_one(frame: int) -> RenderTree:
        async with semaphore:
            return await asyncio.to_thread(renderer.render, frame)

    frames = list(frames)
    log.info("Rendering %d frames of '%s' (max_workers=%d)", len(frames), renderer.scene.name, max_workers)
    return list(await asyncio.gather(*[_render_one(f) for f in frames]))
