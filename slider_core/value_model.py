from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import math
from typing import Any, Literal, Mapping


Orientation = Literal["horizontal", "vertical"]

_ORIENTATIONS = ("horizontal", "vertical")
_PROP_ALIASES = {
    "min": "min_value",
    "max": "max_value",
    "step": "step",
    "orientation": "orientation",
    "pageStep": "page_step",
    "page_step": "page_step",
}


class ConfigError(ValueError):
    """Raised when slider bounds/step cannot describe a usable value range."""


@dataclass(frozen=True)
class SliderConfig:
    """Immutable bounds, step and orientation for one slider session."""

    min_value: float
    max_value: float
    step: float = 1.0
    orientation: Orientation = "horizontal"
    page_step: float | None = None

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value", "step"):
            raw = getattr(self, name)
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ConfigError(f"`{name}` must be a number")
            if not math.isfinite(float(raw)):
                raise ConfigError(f"`{name}` must be finite")
        if self.min_value >= self.max_value:
            raise ConfigError(f"min ({self.min_value}) must be < max ({self.max_value})")
        if self.step <= 0:
            raise ConfigError(f"step must be > 0, got {self.step}")
        if self.orientation not in _ORIENTATIONS:
            raise ConfigError(f"orientation must be one of {_ORIENTATIONS}, got `{self.orientation}`")
        if self.page_step is not None:
            if isinstance(self.page_step, bool) or not isinstance(self.page_step, (int, float)):
                raise ConfigError("`page_step` must be a number")
            if not math.isfinite(float(self.page_step)) or self.page_step <= 0:
                raise ConfigError(f"page_step must be a finite number > 0, got {self.page_step}")

    @property
    def span(self) -> float:
        return self.max_value - self.min_value

    @property
    def resolved_page_step(self) -> float:
        """Explicit page step, or a tenth of the range but never less than one step."""

        if self.page_step is not None:
            return float(self.page_step)
        return max(float(self.step), self.span / 10.0)

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> SliderConfig:
        """Build a config from host widget properties (`min`, `max`, `step`, ...)."""

        kwargs: dict[str, Any] = {}
        for key, value in props.items():
            field_name = _PROP_ALIASES.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown slider property: {key}")
            kwargs[field_name] = value
        for required in ("min_value", "max_value"):
            if required not in kwargs:
                raise ConfigError(f"Slider property `{required.split('_')[0]}` is required")
        return cls(**kwargs)


class ValueModel:
    """Clamps and quantizes proposed values against a `SliderConfig`.

    The grid is anchored at `min`: allowed values are `min + k * step`, plus
    `max` itself when the range is not an exact multiple of `step`.
    """

    def __init__(self, config: SliderConfig) -> None:
        self._config = config
        self._lo = _exact(config.min_value)
        self._step = _exact(config.step)

    @property
    def config(self) -> SliderConfig:
        return self._config

    @property
    def min_value(self) -> float:
        return float(self._config.min_value)

    @property
    def max_value(self) -> float:
        return float(self._config.max_value)

    @property
    def step(self) -> float:
        return float(self._config.step)

    @property
    def page_step(self) -> float:
        return self._config.resolved_page_step

    def clamp(self, value: float) -> float:
        return max(self.min_value, min(float(value), self.max_value))

    def quantize(self, value: float) -> float:
        lo = self.min_value
        hi = self.max_value
        value = float(value)
        if value <= lo:
            return lo
        if value >= hi:
            return hi
        # Decimal keeps half-way ties exact for fractional steps (0.15 / 0.1).
        steps = ((_exact(value) - self._lo) / self._step).to_integral_value(rounding=ROUND_HALF_UP)
        snapped = float(self._lo + steps * self._step)
        if snapped >= hi:
            return hi
        if snapped <= lo:
            return lo
        return snapped

    def apply(self, current: float, delta: float) -> float:
        return self.quantize(self.clamp(float(current) + float(delta)))

    def ratio(self, value: float) -> float:
        """Fractional position of `value` along the range, in `[0, 1]`."""

        return (self.clamp(value) - self.min_value) / (self.max_value - self.min_value)

    def format_value(self, value: float) -> str:
        value = float(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)


def _exact(x: float) -> Decimal:
    return Decimal(repr(float(x)))
