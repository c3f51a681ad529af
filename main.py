from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any

from PIL import Image

from slider_ui import CoordinatePoint, DisplayableArea, SliderComponent, get_story, play_story, story_names
from slider_ui.raster import MatrixSliderRenderer, frame_to_rgba_array
from slider_ui.stories import DEFAULT_PROPS


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="slider")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stories", help="List the documented slider scenarios.")

    play = sub.add_parser("play", help="Replay one scenario and check each step's value text.")
    play.add_argument("story")
    play.add_argument("--json", action="store_true", help="Print the step results as JSON.")

    render = sub.add_parser("render", help="Paint a slider at a value to a PNG file.")
    render.add_argument("output", type=Path)
    render.add_argument("--props", type=Path, default=None, help="JSON file with slider props.")
    render.add_argument("--value", type=float, default=None, help="Override defaultValue.")
    render.add_argument("--orientation", choices=["horizontal", "vertical"], default=None)
    render.add_argument("--size", type=float, default=None, help="Track length in px.")
    render.add_argument("--margin", type=int, default=16)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "stories":
        for name in story_names():
            print(f"{name}: {get_story(name).description}")
        return 0

    if args.command == "play":
        try:
            story = get_story(args.story)
        except KeyError as exc:
            print(str(exc.args[0]), file=sys.stderr)
            return 2
        result = play_story(story)
        if args.json:
            payload = {
                "story": story.name,
                "passed": result.passed,
                "steps": [
                    {
                        "step": outcome.step.describe(),
                        "expected": outcome.step.expected,
                        "actual": outcome.actual,
                        "passed": outcome.passed,
                    }
                    for outcome in result.outcomes
                ],
            }
            print(json.dumps(payload, indent=2))
        else:
            for outcome in result.outcomes:
                mark = "ok" if outcome.passed else "FAIL"
                print(f"[{mark}] {outcome.step.describe()}: expected={outcome.step.expected} actual={outcome.actual}")
            print(f"{story.name}: {'passed' if result.passed else 'failed'} ({len(result.outcomes)} steps)")
        return 0 if result.passed else 1

    if args.command == "render":
        props = _load_props(args.props)
        if args.value is not None:
            props["defaultValue"] = args.value
        if args.orientation is not None:
            props["orientation"] = args.orientation
        if args.size is not None:
            props["size"] = args.size
        slider = SliderComponent.from_props(
            props,
            position=CoordinatePoint(float(args.margin), float(args.margin), "screen_tl"),
        )
        width, height = _canvas_size(slider, args.margin)
        renderer = MatrixSliderRenderer()
        renderer.begin_frame(DisplayableArea(content_width_px=width, content_height_px=height), (255, 255, 255, 255))
        slider.render(renderer)
        frame = renderer.end_frame()
        Image.fromarray(frame_to_rgba_array(frame)).save(args.output)
        print(f"rendered {slider.label} value={slider.value_text} to {args.output} ({width}x{height})")
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def _load_props(path: Path | None) -> dict[str, Any]:
    if path is None:
        return dict(DEFAULT_PROPS)
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("props file must contain a JSON object")
    return raw


def _canvas_size(slider: SliderComponent, margin: int) -> tuple[int, int]:
    bounds = slider.interaction_bounds()
    width = int(round(bounds.x + bounds.width)) + margin
    height = int(round(bounds.y + bounds.height)) + margin
    return (max(1, width), max(1, height))


if __name__ == "__main__":
    raise SystemExit(main())
