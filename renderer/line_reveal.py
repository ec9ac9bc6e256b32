"""Line reveal controller — visibility and fade-in opacity of a scheduled line."""

from __future__ import annotations

from dataclasses import dataclass

FADE_DURATION_FRAMES = 5


@dataclass(frozen=True)
class LineVisibility:
    visible: bool
    opacity: float


HIDDEN = LineVisibility(visible=False, opacity=0.0)


def compute_line_visibility(
    reveal_frame: int,
    current_frame: int,
    fade_duration_frames: int = FADE_DURATION_FRAMES,
    fade_in: bool = True,
) -> LineVisibility:
    """
    Linear 0 → 1 ramp over ``fade_duration_frames`` starting at ``reveal_frame``.

    Before ``reveal_frame`` the line is hidden. Without fade-in (or with a
    non-positive fade duration) it appears at full opacity.
    """
    if current_frame < reveal_frame:
        return HIDDEN
    if not fade_in or fade_duration_frames <= 0:
        return LineVisibility(visible=True, opacity=1.0)

    opacity = (current_frame - reveal_frame) / fade_duration_frames
    return LineVisibility(visible=True, opacity=min(max(opacity, 0.0), 1.0))
