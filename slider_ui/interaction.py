from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping


PressPhase = Literal[
    "down",
    "repeat",
    "hold_start",
    "hold_tick",
    "up",
    "hold_end",
    "single",
    "double",
    "cancel",
]
PointerPhase = Literal["down", "move", "up", "cancel"]

_PRESS_PHASES = {
    "down",
    "repeat",
    "hold_start",
    "hold_tick",
    "up",
    "hold_end",
    "single",
    "double",
    "cancel",
}


@dataclass(frozen=True)
class HDIPressEvent:
    """Standardized HDI keyboard press event consumed by the slider."""

    phase: PressPhase
    key: str
    active_keys: tuple[str, ...]


@dataclass(frozen=True)
class HDIPointerEvent:
    """Single-pointer event in the slider's coordinate frame.

    `x`/`y` are None only for `up`/`cancel`, which do not need a position.
    """

    phase: PointerPhase
    x: float | None
    y: float | None
    button: int = 0


def parse_hdi_press_event(event_type: str, payload: object) -> HDIPressEvent | None:
    """Parse normalized HDI `press` events; anything else yields None."""

    if event_type != "press" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PRESS_PHASES:
        return None
    key = str(payload.get("key", ""))
    raw_active_keys = payload.get("active_keys", ())
    if not isinstance(raw_active_keys, (list, tuple)):
        raw_active_keys = ()
    active_keys = tuple(str(k) for k in raw_active_keys)
    return HDIPressEvent(phase=phase, key=key, active_keys=active_keys)


def parse_hdi_pointer_event(event_type: str, payload: object) -> HDIPointerEvent | None:
    """Parse HDI `click`, `pointer_move` and `pointer_cancel` events.

    Malformed payloads (missing or non-numeric coordinates where a position is
    required) are dropped by returning None.
    """

    if event_type == "pointer_cancel":
        return HDIPointerEvent(phase="cancel", x=None, y=None)
    if not isinstance(payload, Mapping):
        return None
    if event_type == "pointer_move":
        phase: PointerPhase = "move"
    elif event_type == "click":
        raw_phase = payload.get("phase")
        if raw_phase == "down":
            phase = "down"
        elif raw_phase == "up":
            phase = "up"
        else:
            return None
    else:
        return None
    x = _coordinate(payload.get("x"))
    y = _coordinate(payload.get("y"))
    if phase in ("down", "move") and (x is None or y is None):
        return None
    button = payload.get("button", 0)
    if not isinstance(button, int) or isinstance(button, bool):
        button = 0
    return HDIPointerEvent(phase=phase, x=x, y=y, button=button)


def _coordinate(raw: object) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value
