"""
Root conftest — sys.path setup + shared scene fixtures.
"""

import sys
from pathlib import Path

import pytest

# ── Add project root to sys.path so `from renderer.x import ...` works ─────
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ── Scene dict helpers (plain functions, not fixtures) ──────────────────────

def make_phase(
    command: str = "sqlex check query.sql",
    command_start_frame: int = 0,
    output_start_frame: int = 40,
    typing_speed: float = 0.7,
    delays: tuple = (0, 3, 6),
    **extra,
) -> dict:
    """Phase dict with one plain output line per delay ("line 0", "line 1", …)."""
    phase = {
        "command": command,
        "command_start_frame": command_start_frame,
        "output_start_frame": output_start_frame,
        "typing_speed": typing_speed,
        "output_lines": [
            {"delay": d, "segments": [{"text": f"line {i}", "color": "gray"}]}
            for i, d in enumerate(delays)
        ],
    }
    phase.update(extra)
    return phase


def make_scene(*phases: dict, name: str = "test_scene") -> dict:
    return {"name": name, "phases": list(phases)}


# ── Shared fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def single_phase_scene() -> dict:
    return make_scene(make_phase())


@pytest.fixture
def two_phase_scene() -> dict:
    """Phase 1 starts at 0, phase 2 at 120 — the classic check → fix sequence."""
    return make_scene(
        make_phase("sqlex check query.sql", 0, 40, delays=(0, 3, 6)),
        make_phase("sqlex fix query.sql", 120, 160, delays=(0, 5)),
    )
