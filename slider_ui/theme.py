from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_TOKENS = (
    "track_color",
    "filled_color",
    "thumb_color",
    "thumb_pressed_color",
    "thumb_disabled_color",
)


@dataclass(frozen=True)
class SliderThemeTokens:
    """Token set for the track, filled portion and thumb of a slider."""

    track_color: str = "#CBD5E1"
    filled_color: str = "#6366F1"
    thumb_color: str = "#4F46E5"
    thumb_pressed_color: str = "#312E81"
    thumb_disabled_color: str = "#9CA3AF"
    track_thickness_px: float = 6.0
    thumb_radius_px: float = 10.0


DEFAULT_SLIDER_TOKENS = SliderThemeTokens()


def validate_slider_theme_tokens(overrides: Mapping[str, Any] | None = None) -> SliderThemeTokens:
    """Validate and merge token overrides against the default slider theme."""

    raw: dict[str, Any] = asdict(DEFAULT_SLIDER_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in ("track_thickness_px", "thumb_radius_px"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
            raise ValueError(f"Token `{key}` must be a positive number")

    return SliderThemeTokens(
        track_color=str(raw["track_color"]),
        filled_color=str(raw["filled_color"]),
        thumb_color=str(raw["thumb_color"]),
        thumb_pressed_color=str(raw["thumb_pressed_color"]),
        thumb_disabled_color=str(raw["thumb_disabled_color"]),
        track_thickness_px=float(raw["track_thickness_px"]),
        thumb_radius_px=float(raw["thumb_radius_px"]),
    )
