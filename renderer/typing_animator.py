"""
Typing animator — how much of a command is typed at a given frame.

  visible_chars = clamp(floor(elapsed * speed), 0, len(text))
  cursor        = solid while typing, then 15 frames on / 15 off
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from scenes.validator import ConfigurationError

CURSOR_BLINK_PERIOD = 30
CURSOR_VISIBLE_FRAMES = 15


@dataclass(frozen=True)
class TypingState:
    visible_chars: int
    is_typing:     bool
    show_cursor:   bool


def compute_typing_state(
    text: str,
    start_frame: int,
    speed: float,
    current_frame: int,
) -> TypingState | None:
    """
    Compute the typing state of ``text`` at ``current_frame``.

    Args:
        text:          Full command text.
        start_frame:   Frame at which typing begins.
        speed:         Characters typed per frame (> 0).
        current_frame: Frame being rendered.

    Returns:
        TypingState, or None before ``start_frame`` (nothing is drawn).

    Raises:
        ConfigurationError: if ``speed`` is not a positive finite number.
    """
    if not math.isfinite(speed) or speed <= 0:
        raise ConfigurationError(f"typing speed must be a positive finite number, got {speed!r}")
    if current_frame < start_frame:
        return None

    elapsed = current_frame - start_frame
    length = len(text)
    typed = elapsed * speed
    visible = length if typed >= length else max(0, math.floor(typed))
    is_typing = visible < length

    if is_typing:
        show_cursor = True
    else:
        # fmod keeps the dividend's sign: a float remainder just below zero
        # at the typing/idle boundary still counts as "cursor on".
        idle = elapsed - length / speed
        show_cursor = math.fmod(idle, CURSOR_BLINK_PERIOD) < CURSOR_VISIBLE_FRAMES

    return TypingState(visible_chars=visible, is_typing=is_typing, show_cursor=show_cursor)
