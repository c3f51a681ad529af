import unittest

from slider_ui.interaction import parse_hdi_pointer_event, parse_hdi_press_event


class SliderInteractionParsingTests(unittest.TestCase):
    def test_parse_press_event(self) -> None:
        press = parse_hdi_press_event("press", {"phase": "down", "key": "ArrowUp", "active_keys": ["ArrowUp"]})
        assert press is not None
        self.assertEqual((press.phase, press.key, press.active_keys), ("down", "ArrowUp", ("ArrowUp",)))

    def test_parse_press_event_rejects_non_press_and_unknown_phase(self) -> None:
        self.assertIsNone(parse_hdi_press_event("key_down", {"phase": "down"}))
        self.assertIsNone(parse_hdi_press_event("press", {"phase": "unknown"}))
        self.assertIsNone(parse_hdi_press_event("press", None))

    def test_parse_pointer_click_and_move(self) -> None:
        down = parse_hdi_pointer_event("click", {"phase": "down", "x": 4, "y": "5.5", "button": 0})
        assert down is not None
        self.assertEqual((down.phase, down.x, down.y), ("down", 4.0, 5.5))
        move = parse_hdi_pointer_event("pointer_move", {"x": 1.0, "y": 2.0})
        assert move is not None
        self.assertEqual(move.phase, "move")
        up = parse_hdi_pointer_event("click", {"phase": "up"})
        assert up is not None
        self.assertEqual((up.phase, up.x, up.y), ("up", None, None))
        cancel = parse_hdi_pointer_event("pointer_cancel", None)
        assert cancel is not None
        self.assertEqual(cancel.phase, "cancel")

    def test_parse_pointer_drops_malformed_events(self) -> None:
        self.assertIsNone(parse_hdi_pointer_event("click", {"phase": "down", "x": 4}))
        self.assertIsNone(parse_hdi_pointer_event("pointer_move", {"x": "left", "y": 1}))
        self.assertIsNone(parse_hdi_pointer_event("pointer_move", {"x": float("inf"), "y": 1}))
        self.assertIsNone(parse_hdi_pointer_event("click", {"phase": "hover", "x": 1, "y": 1}))
        self.assertIsNone(parse_hdi_pointer_event("scroll", {"x": 1, "y": 1}))
        self.assertIsNone(parse_hdi_pointer_event("pointer_move", "1,2"))


if __name__ == "__main__":
    unittest.main()
