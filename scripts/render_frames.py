"""
render_frames.py — Evaluate a composition or scene script frame by frame.

Prints one JSON object per frame (JSON Lines) or a plain-text preview.
Useful for checking timing without an external renderer.

Usage:
    python scripts/render_frames.py SqlexDemo --frame 90 --format text
    python scripts/render_frames.py SqlexDemo --start 0 --end 300 > frames.jsonl
    python scripts/render_frames.py --scene my_scene.json --offset 30 --frame 45
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from pathlib import Path

# ── project root on path ──────────────────────────────────────────────────────
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
log = logging.getLogger("render_frames")

from config.settings import settings
from renderer.composition import get_composition
from renderer.render_engine import RenderTree, SceneRenderer, render_all_parallel
from scenes import ConfigurationError


def _emit(trees: list[RenderTree], fmt: str) -> None:
    for tree in trees:
        if fmt == "json":
            print(json.dumps(tree.to_dict(), ensure_ascii=False, sort_keys=True))
        else:
            print(f"── frame {tree.frame} " + "─" * 40)
            print(tree.to_text())


def main() -> None:
    parser = argparse.ArgumentParser(description="Render frames of a terminal playback scene.")
    parser.add_argument("composition", nargs="?", default="SqlexDemo", help="Composition id")
    parser.add_argument("--scene", type=Path, default=None, help="Scene script JSON (overrides composition)")
    parser.add_argument("--offset", type=int, default=0, help="Shift every phase by N frames")
    parser.add_argument("--frame", type=int, default=None, help="Render a single frame")
    parser.add_argument("--start", type=int, default=0, help="First frame of a range")
    parser.add_argument("--end", type=int, default=None, help="End of a range (exclusive)")
    parser.add_argument("--format", default="json", choices=["json", "text"])
    args = parser.parse_args()

    try:
        if args.scene is not None:
            renderer = SceneRenderer(args.scene, settings.fade_duration_frames, offset=args.offset)
            end = args.end if args.end is not None else settings.composition_duration_frames
        else:
            comp = get_composition(args.composition)
            renderer = comp.component
            if args.offset:
                renderer = SceneRenderer(renderer.scene, renderer.fade_duration_frames, offset=args.offset)
            end = args.end if args.end is not None else comp.duration_in_frames
    except (ConfigurationError, KeyError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.frame is not None:
        _emit([renderer.render(args.frame)], args.format)
        return

    t0 = time.monotonic()
    trees = asyncio.run(render_all_parallel(
        renderer, range(args.start, end), max_workers=settings.max_render_workers,
    ))
    _emit(trees, args.format)
    log.info("Rendered %d frames in %.2fs", len(trees), time.monotonic() - t0)


if __name__ == "__main__":
    main()
