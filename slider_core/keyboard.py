from __future__ import annotations

from typing import Literal

from .value_model import ValueModel


KeyAction = Literal["increase", "decrease", "page_increase", "page_decrease", "to_min", "to_max"]

INCREASE_KEYS = frozenset({"ArrowRight", "ArrowUp"})
DECREASE_KEYS = frozenset({"ArrowLeft", "ArrowDown"})

_KEY_ACTIONS: dict[str, KeyAction] = {
    "ArrowRight": "increase",
    "ArrowUp": "increase",
    "ArrowLeft": "decrease",
    "ArrowDown": "decrease",
    "PageUp": "page_increase",
    "PageDown": "page_decrease",
    "Home": "to_min",
    "End": "to_max",
}

# Key names as reported by HDI keyboard sources.
_KEY_ALIASES = {
    "right": "ArrowRight",
    "up": "ArrowUp",
    "left": "ArrowLeft",
    "down": "ArrowDown",
    "page_up": "PageUp",
    "pageup": "PageUp",
    "page_down": "PageDown",
    "pagedown": "PageDown",
    "home": "Home",
    "end": "End",
}


def normalize_key(key: str) -> str:
    if key in _KEY_ACTIONS:
        return key
    return _KEY_ALIASES.get(key.strip().lower(), key)


class KeyboardStepper:
    """Maps key identifiers to value transitions; arrows are axis-agnostic."""

    def __init__(self, model: ValueModel) -> None:
        self._model = model

    def action_for(self, key: str) -> KeyAction | None:
        return _KEY_ACTIONS.get(normalize_key(key))

    def handles(self, key: str) -> bool:
        return self.action_for(key) is not None

    def step(self, key: str, value: float) -> float | None:
        """Return the value after `key`, or None when the key is not a slider key."""

        action = self.action_for(key)
        if action is None:
            return None
        model = self._model
        if action == "increase":
            return model.apply(value, model.step)
        if action == "decrease":
            return model.apply(value, -model.step)
        if action == "page_increase":
            return model.apply(value, model.page_step)
        if action == "page_decrease":
            return model.apply(value, -model.page_step)
        if action == "to_min":
            return model.min_value
        return model.max_value
