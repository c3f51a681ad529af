from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Mapping, Union

from .value_model import Orientation, ValueModel


PointerPosition = Union[float, int, tuple[float, float], Mapping[str, object]]


@dataclass(frozen=True)
class TrackGeometry:
    """Track extent along the primary axis.

    Horizontal: `start` is the left edge, `end` the right edge.
    Vertical: `start` is the bottom edge, `end` the top edge, so in screen
    top-left coordinates `end < start` and the value grows moving up.
    """

    start: float
    end: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise ValueError("TrackGeometry start/end must be finite")

    @property
    def length(self) -> float:
        return abs(self.end - self.start)

    @classmethod
    def from_bounds(
        cls,
        x: float,
        y: float,
        width: float,
        height: float,
        orientation: Orientation,
    ) -> TrackGeometry:
        """Derive the primary-axis extent from a screen top-left bounding box."""

        if orientation == "vertical":
            return cls(start=float(y) + float(height), end=float(y))
        return cls(start=float(x), end=float(x) + float(width))

    def coordinate_at(self, ratio: float) -> float:
        return self.start + (self.end - self.start) * ratio


@dataclass(frozen=True)
class AxisProjection:
    """Selects the pointer component that lies along the slider's primary axis."""

    orientation: Orientation

    @property
    def axis(self) -> str:
        return "y" if self.orientation == "vertical" else "x"

    def project(self, position: PointerPosition) -> float | None:
        """Return the axis coordinate, or None for a malformed position.

        Accepts a bare coordinate, an `(x, y)` pair, or a mapping with
        `x`/`y` (or `clientX`/`clientY`) entries.
        """

        raw: object
        if isinstance(position, bool):
            return None
        if isinstance(position, (int, float)):
            raw = position
        elif isinstance(position, tuple):
            if len(position) != 2:
                return None
            raw = position[1] if self.axis == "y" else position[0]
        elif isinstance(position, Mapping):
            client_key = "clientY" if self.axis == "y" else "clientX"
            raw = position.get(self.axis, position.get(client_key))
        else:
            return None
        if raw is None or isinstance(raw, bool):
            return None
        try:
            coordinate = float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if not math.isfinite(coordinate):
            return None
        return coordinate


HORIZONTAL = AxisProjection("horizontal")
VERTICAL = AxisProjection("vertical")


def projection_for(orientation: Orientation) -> AxisProjection:
    return VERTICAL if orientation == "vertical" else HORIZONTAL


def track_ratio(coordinate: float, geometry: TrackGeometry) -> float:
    extent = geometry.end - geometry.start
    if extent == 0:
        return 0.0
    return max(0.0, min(1.0, (coordinate - geometry.start) / extent))


class PointerGeometryMapper:
    """Maps a pointer position on a measured track to a quantized value."""

    def __init__(self, model: ValueModel, projection: AxisProjection | None = None) -> None:
        self._model = model
        self._projection = projection or projection_for(model.config.orientation)

    @property
    def projection(self) -> AxisProjection:
        return self._projection

    def value_at(self, position: PointerPosition, geometry: TrackGeometry) -> float | None:
        coordinate = self._projection.project(position)
        if coordinate is None:
            return None
        model = self._model
        ratio = track_ratio(coordinate, geometry)
        raw = model.min_value + ratio * (model.max_value - model.min_value)
        return model.quantize(raw)

    def coordinate_for(self, value: float, geometry: TrackGeometry) -> float:
        """Inverse mapping used to place the thumb on the track."""

        return geometry.coordinate_at(self._model.ratio(value))
