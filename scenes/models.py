"""
Scene script data model — Scene → Phase → OutputLine → TextSegment.

Scripts are authored once (JSON or a Python literal) and never mutated:
every model is frozen with tuple sequences, and timing changes go
through ``shifted()`` which returns a copy.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.settings import settings

ColorName = Literal["green", "red", "yellow", "gray", "white", "cyan", "blue"]


class TextSegment(BaseModel):
    """One styled run of text. Unset color/bold are resolved by the segment renderer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text:  str = ""
    color: Optional[ColorName] = None
    bold:  Optional[bool] = None


def _default_prompt() -> tuple[TextSegment, ...]:
    return (TextSegment(text="$ ", color="green", bold=True),)


class OutputLine(BaseModel):
    """An output line revealed ``delay`` frames after its phase's output start."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    segments: tuple[TextSegment, ...] = Field(default_factory=lambda: (TextSegment(),))
    delay:    int = Field(default=0, description="Frames after output_start_frame")
    fade_in:  bool = True


class Phase(BaseModel):
    """One typed command followed by its revealed output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command:             str
    command_start_frame: int
    output_start_frame:  int
    typing_speed:        float = Field(
        default_factory=lambda: settings.default_typing_speed,
        allow_inf_nan=False,
        description="Characters per frame",
    )
    output_lines:        tuple[OutputLine, ...] = Field(default_factory=tuple)
    prompt:              tuple[TextSegment, ...] = Field(default_factory=_default_prompt)
    cursor_color:        ColorName = "green"
    separator:           bool = Field(default=False, description="Blank line at command_start_frame")
    typing_delay:        int = Field(default=0, description="Frames between command_start_frame and typing")

    @property
    def typing_start_frame(self) -> int:
        return self.command_start_frame + self.typing_delay

    def reveal_frame(self, line: OutputLine) -> int:
        return self.output_start_frame + line.delay

    def shifted(self, offset: int) -> Phase:
        """Return a copy with every absolute frame moved by ``offset``."""
        if not offset:
            return self
        return self.model_copy(update={
            "command_start_frame": self.command_start_frame + offset,
            "output_start_frame":  self.output_start_frame + offset,
        })


class Scene(BaseModel):
    """The ordered script of phases for one rendered sequence."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name:   str = "untitled"
    phases: tuple[Phase, ...] = Field(default_factory=tuple)

    def shifted(self, offset: int) -> Scene:
        if not offset:
            return self
        return self.model_copy(update={"phases": tuple(p.shifted(offset) for p in self.phases)})

    @property
    def last_reveal_frame(self) -> int:
        """Frame at which the last scheduled line of the scene appears."""
        frames = [0]
        for phase in self.phases:
            frames.append(phase.typing_start_frame)
            frames.extend(phase.reveal_frame(line) for line in phase.output_lines)
        return max(frames)
