"""
termreel — Configuration & Settings.

Loads settings from environment variables / .env file with sensible defaults.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

# Project root directory (one level up from config/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from .env or environment variables."""

    # ── Composition ────────────────────────────────────────────────
    composition_fps: int = Field(default=30, description="Frames per second of the bundled composition")
    composition_width: int = Field(default=800, description="Composition width in pixels")
    composition_height: int = Field(default=500, description="Composition height in pixels")
    composition_duration_frames: int = Field(
        default=300,
        description="Length of the bundled composition in frames",
    )

    # ── Timeline ───────────────────────────────────────────────────
    fade_duration_frames: int = Field(
        default=5,
        description="Frames an output line takes to fade from 0 to full opacity",
    )
    default_typing_speed: float = Field(
        default=0.5,
        description="Characters typed per frame when a phase does not set its own speed",
    )

    # ── Scene scripts ──────────────────────────────────────────────
    scenes_dir: Path = Field(
        default=PROJECT_ROOT / "scenes" / "scripts",
        description="Directory holding the bundled scene script JSON files",
    )

    # ── Rendering / API ────────────────────────────────────────────
    max_render_workers: int = Field(
        default=4,
        description="Max frames evaluated concurrently by render_all_parallel",
    )
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, description="FastAPI port")
    log_level: str = Field(default="INFO", description="Root log level for the hosts")

    model_config = {
        "env_file": str(PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton instance
settings = Settings()
