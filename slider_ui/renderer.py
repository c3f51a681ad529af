from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol


ShapeKind = Literal["rect", "circle"]
SliderPart = Literal["track", "filled", "thumb"]


@dataclass(frozen=True)
class SliderPaintCommand:
    """Backend-agnostic paint instruction for one slider part.

    Rects use `x`/`y`/`width`/`height` (top-left origin). Circles use `x`/`y`
    as the centre and `radius`.
    """

    component_id: str
    part: SliderPart
    kind: ShapeKind
    x: float
    y: float
    color_hex: str
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0
    frame: str = "screen_tl"
    opacity: float = 1.0


@dataclass(frozen=True)
class SliderRenderBatch:
    commands: tuple[SliderPaintCommand, ...]


class SliderRenderer(Protocol):
    """Backend-agnostic renderer interface for slider paint calls."""

    def draw_slider_batch(self, batch: SliderRenderBatch) -> None:
        ...
