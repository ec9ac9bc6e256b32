"""
Scene script registry.

build_scene(name, offset) → a validated Scene loaded from the bundled
JSON scripts in scenes/scripts/, optionally shifted in time.

Any *.json file dropped into the scripts directory is picked up under
its file stem.
"""

from __future__ import annotations

from pathlib import Path

from config.settings import settings
from scenes.loader import load_scene, parse_scene
from scenes.models import OutputLine, Phase, Scene, TextSegment
from scenes.validator import ConfigurationError, lint_scene, validate_scene


def available_scenes(scenes_dir: Path | None = None) -> list[str]:
    """Names of the bundled scene scripts, sorted."""
    root = scenes_dir or settings.scenes_dir
    if not root.is_dir():
        return []
    return sorted(p.stem for p in root.glob("*.json"))


def scene_path(name: str, scenes_dir: Path | None = None) -> Path:
    root = scenes_dir or settings.scenes_dir
    path = root / f"{name}.json"
    if not path.is_file():
        raise KeyError(f"Unknown scene '{name}'. Available: {available_scenes(root)}")
    return path


def build_scene(name: str, offset: int = 0, scenes_dir: Path | None = None) -> Scene:
    """
    Return the bundled scene ``name`` with every phase moved by ``offset`` frames.

    Raises:
        KeyError: no script with that name.
        ConfigurationError: the script is invalid.
    """
    return load_scene(scene_path(name, scenes_dir), offset=offset)


__all__ = [
    "available_scenes",
    "build_scene",
    "scene_path",
    "load_scene",
    "parse_scene",
    "validate_scene",
    "lint_scene",
    "ConfigurationError",
    "Scene",
    "Phase",
    "OutputLine",
    "TextSegment",
]
