from __future__ import annotations

import unittest

from slider_core import ConfigError, SliderConfig, TrackGeometry, configure


def _engine(initial: float | None = 50, **kwargs):
    emitted: list[float] = []
    params = {"min_value": 0, "max_value": 100}
    params.update(kwargs)
    engine = configure(SliderConfig(**params), initial_value=initial, listener=emitted.append)
    return engine, emitted


class KeyboardScenarioTests(unittest.TestCase):
    def test_default_range_keyboard_sequence(self) -> None:
        engine, _ = _engine()
        expected = [
            ("ArrowRight", 51),
            ("ArrowUp", 52),
            ("ArrowLeft", 51),
            ("ArrowDown", 50),
            ("PageUp", 60),
            ("PageDown", 50),
            ("Home", 0),
            ("End", 100),
        ]
        for key, value in expected:
            self.assertEqual(engine.on_key_down(key), value, key)
            engine.on_key_up(key)
            self.assertEqual(engine.current_value(), value)

    def test_offset_range_keyboard_sequence(self) -> None:
        engine, _ = _engine(initial=100, min_value=50, max_value=200)
        self.assertEqual(engine.on_key_down("PageUp"), 115)
        self.assertEqual(engine.on_key_down("Home"), 50)
        self.assertEqual(engine.on_key_down("End"), 200)

    def test_step_ten_keyboard_sequence(self) -> None:
        engine, _ = _engine(step=10)
        self.assertEqual(engine.on_key_down("ArrowRight"), 60)
        self.assertEqual(engine.on_key_down("ArrowUp"), 70)
        self.assertEqual(engine.on_key_down("ArrowLeft"), 60)
        self.assertEqual(engine.on_key_down("ArrowDown"), 50)

    def test_home_and_end_regardless_of_current_value(self) -> None:
        for start in (0, 13, 50, 99, 100):
            engine, _ = _engine(initial=start)
            self.assertEqual(engine.on_key_down("Home"), 0)
            engine, _ = _engine(initial=start)
            self.assertEqual(engine.on_key_down("End"), 100)

    def test_each_recognized_key_down_emits_once_and_key_up_never(self) -> None:
        engine, emitted = _engine()
        engine.on_key_down("ArrowRight")
        engine.on_key_up("ArrowRight")
        self.assertEqual(emitted, [51])
        engine.on_key_down("End")
        engine.on_key_down("End")
        engine.on_key_up("End")
        self.assertEqual(emitted, [51, 100, 100])

    def test_unrecognized_key_leaves_value_and_emits_nothing(self) -> None:
        engine, emitted = _engine()
        self.assertIsNone(engine.on_key_down("x"))
        self.assertEqual(engine.current_value(), 50)
        self.assertEqual(emitted, [])


class DragStateMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geometry = TrackGeometry(start=100, end=300)

    def test_down_move_up_cycle(self) -> None:
        engine, emitted = _engine()
        self.assertEqual(engine.state, "idle")
        self.assertEqual(engine.on_pointer_down(150, self.geometry), 25)
        self.assertTrue(engine.dragging)
        self.assertEqual(engine.on_pointer_move(250), 75)
        engine.on_pointer_up()
        self.assertEqual(engine.state, "idle")
        self.assertEqual(engine.current_value(), 75)
        self.assertEqual(emitted, [25, 75])
        self.assertFalse(engine.snapshot().dragging)

    def test_drag_to_track_edges_and_beyond(self) -> None:
        engine, _ = _engine()
        engine.on_pointer_down(200, self.geometry)
        self.assertEqual(engine.on_pointer_move(100), 0)
        self.assertEqual(engine.on_pointer_move(300), 100)
        self.assertIsNone(engine.on_pointer_move(5000))
        self.assertEqual(engine.current_value(), 100)
        self.assertEqual(engine.on_pointer_move(-5000), 0)

    def test_pointer_down_always_within_bounds(self) -> None:
        for coordinate in (-1e9, -1, 0, 99.9, 100, 217.3, 300, 301, 1e9):
            engine, _ = _engine()
            value = engine.on_pointer_down(coordinate, self.geometry)
            self.assertIsNotNone(value)
            self.assertGreaterEqual(value, 0)
            self.assertLessEqual(value, 100)

    def test_repeated_move_is_idempotent_and_does_not_reemit(self) -> None:
        engine, emitted = _engine()
        engine.on_pointer_down(100, self.geometry)
        first = engine.on_pointer_move(240)
        second = engine.on_pointer_move(240)
        self.assertEqual(first, 70)
        self.assertIsNone(second)
        self.assertEqual(engine.current_value(), 70)
        self.assertEqual(emitted, [0, 70])

    def test_moves_recompute_from_absolute_position(self) -> None:
        engine, _ = _engine()
        engine.on_pointer_down(100, self.geometry)
        for coordinate in (300, 120, 280, 160):
            engine.on_pointer_move(coordinate)
        self.assertEqual(engine.current_value(), 30)

    def test_moves_while_idle_are_ignored(self) -> None:
        engine, emitted = _engine()
        self.assertIsNone(engine.on_pointer_move(150))
        engine.on_pointer_down(150, self.geometry)
        engine.on_pointer_up()
        self.assertIsNone(engine.on_pointer_move(300))
        self.assertEqual(engine.current_value(), 25)
        self.assertEqual(emitted, [25])

    def test_malformed_pointer_events_are_ignored(self) -> None:
        engine, emitted = _engine()
        self.assertIsNone(engine.on_pointer_down({"y": 10}, self.geometry))
        self.assertEqual(engine.state, "idle")
        engine.on_pointer_down({"x": 200, "y": 0}, self.geometry)
        self.assertIsNone(engine.on_pointer_move({"x": None}))
        self.assertIsNone(engine.on_pointer_move(float("nan")))
        self.assertTrue(engine.dragging)
        self.assertEqual(engine.current_value(), 50)
        self.assertEqual(emitted, [50])

    def test_geometry_is_snapshotted_at_drag_start(self) -> None:
        engine, _ = _engine()
        engine.on_pointer_down(100, self.geometry)
        self.geometry = TrackGeometry(start=0, end=50)
        self.assertEqual(engine.on_pointer_move(200), 50)

    def test_geometry_provider_remeasures_per_move(self) -> None:
        engine, _ = _engine()
        tracks = [TrackGeometry(start=0, end=400)]
        engine.on_pointer_down(100, self.geometry, geometry_provider=lambda: tracks[-1])
        self.assertEqual(engine.on_pointer_move(200), 50)
        tracks.append(TrackGeometry(start=0, end=200))
        self.assertEqual(engine.on_pointer_move(150), 75)

    def test_cancel_ends_drag_without_change(self) -> None:
        engine, _ = _engine()
        engine.on_pointer_down(200, self.geometry)
        engine.on_pointer_cancel()
        self.assertFalse(engine.dragging)
        self.assertIsNone(engine.on_pointer_move(300))
        self.assertEqual(engine.current_value(), 50)

    def test_keyboard_does_not_change_drag_state(self) -> None:
        engine, _ = _engine()
        engine.on_pointer_down(200, self.geometry)
        self.assertEqual(engine.on_key_down("ArrowRight"), 51)
        self.assertTrue(engine.dragging)
        self.assertEqual(engine.on_pointer_move(260), 80)

    def test_off_grid_max_is_reached_only_at_track_end(self) -> None:
        engine, _ = _engine(initial=0, max_value=10, step=4)
        geometry = TrackGeometry(start=0, end=100)
        self.assertEqual(engine.on_pointer_down(95, geometry), 8)
        self.assertIsNone(engine.on_pointer_move(99))
        self.assertEqual(engine.on_pointer_move(100), 10)

    def test_vertical_drag(self) -> None:
        engine, _ = _engine(orientation="vertical")
        geometry = TrackGeometry.from_bounds(0, 0, 6, 200, "vertical")
        self.assertEqual(engine.on_pointer_down((3, 200), geometry), 0)
        self.assertEqual(engine.on_pointer_move((3, 0)), 100)


class ConfigureTests(unittest.TestCase):
    def test_invalid_config_produces_no_engine(self) -> None:
        with self.assertRaises(ConfigError):
            configure(SliderConfig(min_value=5, max_value=1))

    def test_initial_value_is_clamped_and_quantized(self) -> None:
        engine, _ = _engine(initial=1000)
        self.assertEqual(engine.current_value(), 100)
        engine, _ = _engine(initial=44, step=20)
        self.assertEqual(engine.current_value(), 40)
        engine, _ = _engine(initial=None, min_value=10)
        self.assertEqual(engine.current_value(), 10)

    def test_reconfigure_refits_value_and_ends_drag(self) -> None:
        engine, emitted = _engine(initial=80)
        engine.on_pointer_down(0, TrackGeometry(start=0, end=100))
        engine.reconfigure(SliderConfig(min_value=0, max_value=50, step=5))
        self.assertFalse(engine.dragging)
        self.assertEqual(engine.current_value(), 0)

        engine, emitted = _engine(initial=80)
        self.assertEqual(engine.reconfigure(SliderConfig(min_value=0, max_value=50, step=5)), 50)
        self.assertEqual(emitted, [50])
        self.assertEqual(engine.config.max_value, 50)


if __name__ == "__main__":
    unittest.main()
