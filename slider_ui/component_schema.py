from __future__ import annotations

from dataclasses import dataclass


DEFAULT_FRAME = "screen_tl"


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float
    frame: str | None = None


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float
    frame: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass(frozen=True)
class DisplayableArea:
    """Displayable content area the slider is painted into."""

    content_width_px: float
    content_height_px: float

    def __post_init__(self) -> None:
        if self.content_width_px <= 0 or self.content_height_px <= 0:
            raise ValueError("content dimensions must be > 0")
