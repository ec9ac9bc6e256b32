"""
Scene script loading — JSON file, JSON string, dict or Scene → validated Scene.

Malformed scripts (bad JSON, wrong types, unknown colors) surface as
ConfigurationError, the same as semantic problems caught by the validator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from scenes.models import Scene
from scenes.validator import ConfigurationError, ensure_valid, lint_scene

log = logging.getLogger(__name__)

SceneSource = Union[Scene, dict, str, Path]


def _format_validation_error(exc: ValidationError) -> list[str]:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        errors.append(f"{loc or 'scene'}: {err.get('msg', 'invalid value')}")
    return errors


def parse_scene(data: dict) -> Scene:
    """Build a Scene from a plain dict without semantic validation."""
    try:
        return Scene.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def _read_source(source: Union[dict, str, Path]) -> dict:
    if isinstance(source, dict):
        return source

    if isinstance(source, Path) or not str(source).lstrip().startswith("{"):
        path = Path(source)
        if not path.exists():
            raise ConfigurationError(f"Scene script not found: {path}")
        raw = path.read_text(encoding="utf-8")
    else:
        raw = str(source)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Scene script is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Scene script must be a JSON object")
    return data


def load_scene(source: SceneSource, offset: int = 0) -> Scene:
    """
    Load, shift and validate a scene script.

    Args:
        source: A Scene, a dict literal, a JSON string or a path to a JSON file.
        offset: Frames added to every phase's start frames.

    Returns:
        A validated, immutable Scene.

    Raises:
        ConfigurationError: malformed script or invalid timing.
    """
    scene = source if isinstance(source, Scene) else parse_scene(_read_source(source))
    scene = ensure_valid(scene.shifted(offset))

    for warning in lint_scene(scene):
        log.warning("Scene '%s': %s", scene.name, warning)

    log.debug("Loaded scene '%s' (%d phases, offset=%d)", scene.name, len(scene.phases), offset)
    return scene
