"""
Scene script validation — deterministic, runs once at load time.

Validation layers:
  1. Errors   (validate_scene): the engine refuses to build a renderer
  2. Warnings (lint_scene):     renders fine but looks wrong on screen
"""

from __future__ import annotations

import math

from scenes.models import Phase, Scene


class ConfigurationError(ValueError):
    """Raised when a scene script cannot be turned into a renderer."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid scene configuration")


# ── Errors ────────────────────────────────────────────────────────────────────

def validate_phase(phase: Phase, index: int = 0) -> list[str]:
    """Validate a single phase. Returns a list of error strings (empty = OK)."""
    errors: list[str] = []
    pid = f"Phase {index}"

    if not math.isfinite(phase.typing_speed):
        errors.append(f"{pid}: typing_speed must be finite, got {phase.typing_speed!r}")
    elif phase.typing_speed <= 0:
        errors.append(f"{pid}: typing_speed must be > 0, got {phase.typing_speed!r}")

    if phase.output_start_frame < phase.command_start_frame:
        errors.append(
            f"{pid}: output_start_frame ({phase.output_start_frame}) is before "
            f"command_start_frame ({phase.command_start_frame})"
        )

    if phase.typing_delay < 0:
        errors.append(f"{pid}: typing_delay must be >= 0, got {phase.typing_delay}")

    for i, line in enumerate(phase.output_lines):
        if line.delay < 0:
            errors.append(f"{pid}, line {i}: delay must be >= 0, got {line.delay}")

    return errors


def validate_scene(scene: Scene) -> list[str]:
    """Validate a whole scene. Returns combined error list."""
    if not scene.phases:
        return [f"Scene '{scene.name}' has no phases"]

    errors: list[str] = []
    for i, phase in enumerate(scene.phases):
        errors.extend(validate_phase(phase, i))
    return errors


def ensure_valid(scene: Scene) -> Scene:
    """Return ``scene`` unchanged, or raise ConfigurationError listing every problem."""
    errors = validate_scene(scene)
    if errors:
        raise ConfigurationError(errors)
    return scene


# ── Warnings ──────────────────────────────────────────────────────────────────

def lint_scene(scene: Scene) -> list[str]:
    """Non-fatal problems: the scene renders, but reads wrong on screen."""
    warnings: list[str] = []
    for i, phase in enumerate(scene.phases):
        if not phase.command.strip():
            warnings.append(f"Phase {i}: empty command text")

        if phase.typing_start_frame > phase.output_start_frame:
            warnings.append(
                f"Phase {i}: command starts typing at frame {phase.typing_start_frame}, "
                f"after its output starts at frame {phase.output_start_frame}"
            )

        previous = None
        for j, line in enumerate(phase.output_lines):
            if previous is not None and line.delay < previous:
                warnings.append(
                    f"Phase {i}, line {j}: delay {line.delay} is earlier than the "
                    f"previous line's {previous}; lines will reveal out of order"
                )
            previous = line.delay
    return warnings
