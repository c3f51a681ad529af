from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import torch

from .component_schema import DisplayableArea
from .renderer import SliderPaintCommand, SliderRenderBatch


@dataclass
class MatrixSliderRenderer:
    """Torch-first slider-to-matrix renderer producing RGBA255 `H x W x 4` frames."""

    _frame: torch.Tensor | None = None
    _grid_x: torch.Tensor | None = None
    _grid_y: torch.Tensor | None = None

    def begin_frame(self, display: DisplayableArea, clear_color: tuple[int, int, int, int]) -> None:
        width = int(round(display.content_width_px))
        height = int(round(display.content_height_px))
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be > 0")
        self._frame = torch.zeros((height, width, 4), dtype=torch.uint8)
        self._frame[:, :, 0] = clear_color[0]
        self._frame[:, :, 1] = clear_color[1]
        self._frame[:, :, 2] = clear_color[2]
        self._frame[:, :, 3] = clear_color[3]
        self._grid_x = torch.arange(width, dtype=torch.float32).unsqueeze(0).expand(height, width)
        self._grid_y = torch.arange(height, dtype=torch.float32).unsqueeze(1).expand(height, width)

    def draw_slider_batch(self, batch: SliderRenderBatch) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            raise RuntimeError("begin_frame must be called before draw_slider_batch")
        for command in batch.commands:
            color = _parse_rgba_u8(command.color_hex, command.opacity)
            if command.kind == "rect":
                self._blend_rect(command, color)
            else:
                self._blend_circle(command, color)

    def end_frame(self) -> torch.Tensor:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before end_frame")
        out = self._frame.clone()
        self._frame = None
        self._grid_x = None
        self._grid_y = None
        return out

    def _blend_rect(self, command: SliderPaintCommand, color: tuple[int, int, int, int]) -> None:
        x = int(round(command.x))
        y = int(round(command.y))
        w = max(0, int(round(command.width)))
        h = max(0, int(round(command.height)))
        if self._frame is None or w <= 0 or h <= 0:
            return
        x0 = max(0, x)
        y0 = max(0, y)
        x1 = min(self._frame.shape[1], x + w)
        y1 = min(self._frame.shape[0], y + h)
        if x1 <= x0 or y1 <= y0:
            return
        mask = torch.ones((y1 - y0, x1 - x0), dtype=torch.bool)
        self._blend_mask(mask, x=x0, y=y0, color=color)

    def _blend_circle(self, command: SliderPaintCommand, color: tuple[int, int, int, int]) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            return
        r = float(command.radius)
        if r <= 0:
            return
        cx = float(command.x)
        cy = float(command.y)
        x0 = int(max(0, int(cx - r - 1)))
        y0 = int(max(0, int(cy - r - 1)))
        x1 = int(min(self._frame.shape[1], int(cx + r + 2)))
        y1 = int(min(self._frame.shape[0], int(cy + r + 2)))
        if x1 <= x0 or y1 <= y0:
            return
        gx = self._grid_x[y0:y1, x0:x1]
        gy = self._grid_y[y0:y1, x0:x1]
        mask = (gx - cx) ** 2 + (gy - cy) ** 2 <= (r * r)
        self._blend_mask(mask, x=x0, y=y0, color=color)

    def _blend_mask(self, mask: torch.Tensor, *, x: int, y: int, color: tuple[int, int, int, int]) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        if h <= 0 or w <= 0:
            return
        alpha = color[3] / 255.0
        if alpha <= 0:
            return
        region = self._frame[y : y + h, x : x + w]
        dst = region[:, :, :3].to(torch.float32)
        src = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)
        blended = torch.clamp(src * alpha + dst * (1.0 - alpha), 0, 255).to(torch.uint8)
        sel = mask.unsqueeze(-1).expand(h, w, 3)
        region[:, :, :3] = torch.where(sel, blended, region[:, :, :3])
        region[:, :, 3] = torch.where(mask, torch.full_like(region[:, :, 3], 255), region[:, :, 3])


def frame_to_rgba_array(frame: torch.Tensor) -> np.ndarray:
    """Contiguous `uint8` numpy view of a rendered frame, ready for image encoders."""

    if frame.ndim != 3 or frame.shape[2] != 4:
        raise ValueError("frame must have shape (H, W, 4)")
    return np.ascontiguousarray(frame.to(torch.uint8).cpu().numpy())


def _parse_rgba_u8(hex_color: str, opacity: float) -> tuple[int, int, int, int]:
    value = hex_color.strip()
    if not value.startswith("#"):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    raw = value[1:]
    if len(raw) == 6:
        r = int(raw[0:2], 16)
        g = int(raw[2:4], 16)
        b = int(raw[4:6], 16)
        a = 255
    elif len(raw) == 8:
        r = int(raw[0:2], 16)
        g = int(raw[2:4], 16)
        b = int(raw[4:6], 16)
        a = int(raw[6:8], 16)
    else:
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    opacity = max(0.0, min(1.0, float(opacity)))
    return (r, g, b, int(round(a * opacity)))
