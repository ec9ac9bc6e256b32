"""Segment renderer — resolves a TextSegment's optional styling."""

from __future__ import annotations

from dataclasses import dataclass

from renderer.palette import DEFAULT_COLOR, resolve_color
from scenes.models import TextSegment


@dataclass(frozen=True)
class RenderedSegment:
    text:   str
    color:  str
    weight: str   # "normal" | "bold"

    def to_dict(self) -> dict:
        return {
            "text":   self.text,
            "color":  self.color,
            "hex":    resolve_color(self.color),
            "weight": self.weight,
        }


def render_segment(segment: TextSegment) -> RenderedSegment:
    return RenderedSegment(
        text=segment.text,
        color=segment.color or DEFAULT_COLOR,
        weight="bold" if segment.bold else "normal",
    )


def render_segments(segments: list[TextSegment]) -> list[RenderedSegment]:
    return [render_segment(seg) for seg in segments]
