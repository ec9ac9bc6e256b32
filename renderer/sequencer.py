"""
Phase sequencer — every line visible in a scene at one frame.

Each phase is evaluated on its own from the current frame:

  separator    shown from command_start_frame          (optional)
  command      typed from command_start_frame + typing_delay
  output       line i revealed at output_start_frame + delay_i

Phases are emitted in scene order and lines in authored order; phases
that overlap in time are concatenated, never interleaved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from renderer.line_reveal import FADE_DURATION_FRAMES, compute_line_visibility
from renderer.palette import resolve_color
from renderer.segments import RenderedSegment, render_segments
from renderer.typing_animator import compute_typing_state
from scenes.models import Phase, Scene

COMMAND_COLOR = "white"


@dataclass(frozen=True)
class CursorState:
    visible:   bool
    color:     str
    is_typing: bool

    def to_dict(self) -> dict:
        return {
            "visible":   self.visible,
            "color":     self.color,
            "hex":       resolve_color(self.color),
            "is_typing": self.is_typing,
        }


@dataclass(frozen=True)
class RenderableLine:
    kind:        str                  # "separator" | "command" | "output"
    phase_index: int
    line_index:  int                  # -1 for separator/command lines
    segments:    tuple[RenderedSegment, ...]
    opacity:     float = 1.0
    cursor:      Optional[CursorState] = None

    @property
    def text(self) -> str:
        return "".join(seg.text for seg in self.segments)

    def to_dict(self) -> dict:
        return {
            "kind":        self.kind,
            "phase_index": self.phase_index,
            "line_index":  self.line_index,
            "segments":    [seg.to_dict() for seg in self.segments],
            "opacity":     self.opacity,
            "cursor":      self.cursor.to_dict() if self.cursor else None,
        }


def _command_line(phase: Phase, index: int, current_frame: int) -> RenderableLine | None:
    state = compute_typing_state(
        phase.command, phase.typing_start_frame, phase.typing_speed, current_frame,
    )
    if state is None:
        return None

    typed = RenderedSegment(
        text=phase.command[:state.visible_chars], color=COMMAND_COLOR, weight="normal",
    )
    return RenderableLine(
        kind="command",
        phase_index=index,
        line_index=-1,
        segments=(*render_segments(phase.prompt), typed),
        cursor=CursorState(
            visible=state.show_cursor, color=phase.cursor_color, is_typing=state.is_typing,
        ),
    )


def render_phase(
    phase: Phase,
    index: int,
    current_frame: int,
    fade_duration_frames: int = FADE_DURATION_FRAMES,
) -> list[RenderableLine]:
    """Lines contributed by one phase at ``current_frame``, in display order."""
    if current_frame < phase.command_start_frame:
        return []

    lines: list[RenderableLine] = []

    if phase.separator:
        vis = compute_line_visibility(phase.command_start_frame, current_frame, fade_duration_frames)
        lines.append(RenderableLine(
            kind="separator",
            phase_index=index,
            line_index=-1,
            segments=(RenderedSegment(text="", color=COMMAND_COLOR, weight="normal"),),
            opacity=vis.opacity,
        ))

    command = _command_line(phase, index, current_frame)
    if command is not None:
        lines.append(command)

    if current_frame < phase.output_start_frame:
        return lines

    for i, line in enumerate(phase.output_lines):
        vis = compute_line_visibility(
            phase.reveal_frame(line), current_frame, fade_duration_frames, line.fade_in,
        )
        if not vis.visible:
            continue
        lines.append(RenderableLine(
            kind="output",
            phase_index=index,
            line_index=i,
            segments=tuple(render_segments(line.segments)),
            opacity=vis.opacity,
        ))

    return lines


def render_scene(
    scene: Scene,
    current_frame: int,
    fade_duration_frames: int = FADE_DURATION_FRAMES,
) -> list[RenderableLine]:
    """All visible lines of ``scene`` at ``current_frame``."""
    lines: list[RenderableLine] = []
    for index, phase in enumerate(scene.phases):
        lines.extend(render_phase(phase, index, current_frame, fade_duration_frames))
    return lines
