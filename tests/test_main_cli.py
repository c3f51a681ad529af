from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from PIL import Image

import main


def _run(*argv: str) -> tuple[int, str]:
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        code = main.main(list(argv))
    return code, out.getvalue()


class MainCliTests(unittest.TestCase):
    def test_lists_stories(self) -> None:
        code, out = _run("stories")
        self.assertEqual(code, 0)
        self.assertIn("MaxValueVariant", out)

    def test_play_story_json(self) -> None:
        code, out = _run("play", "MaxValueVariant", "--json")
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertTrue(payload["passed"])
        self.assertEqual(payload["steps"][4], {"step": "key PageUp", "expected": "115", "actual": "115", "passed": True})

    def test_play_unknown_story(self) -> None:
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            code, _ = _run("play", "Nope")
        self.assertEqual(code, 2)

    def test_render_writes_png(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            props_path = Path(tmp) / "props.json"
            props_path.write_text(json.dumps({"label": "demo", "min": 0, "max": 10, "step": 2}), encoding="utf-8")
            out_path = Path(tmp) / "slider.png"
            code, out = _run("render", str(out_path), "--props", str(props_path), "--value", "7", "--size", "120")
            self.assertEqual(code, 0)
            self.assertIn("value=8", out)
            with Image.open(out_path) as image:
                self.assertEqual(image.mode, "RGBA")
                self.assertEqual(image.size, (162, 52))


if __name__ == "__main__":
    unittest.main()
