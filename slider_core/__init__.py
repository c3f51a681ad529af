"""Value-interaction engine for range-input (slider) widgets."""

from .controller import (
    DragState,
    GeometryProvider,
    InteractionController,
    SliderState,
    ValueListener,
    configure,
)
from .geometry import (
    HORIZONTAL,
    VERTICAL,
    AxisProjection,
    PointerGeometryMapper,
    PointerPosition,
    TrackGeometry,
    projection_for,
    track_ratio,
)
from .keyboard import DECREASE_KEYS, INCREASE_KEYS, KeyAction, KeyboardStepper, normalize_key
from .value_model import ConfigError, Orientation, SliderConfig, ValueModel

__all__ = [
    "AxisProjection",
    "ConfigError",
    "DECREASE_KEYS",
    "DragState",
    "GeometryProvider",
    "HORIZONTAL",
    "INCREASE_KEYS",
    "InteractionController",
    "KeyAction",
    "KeyboardStepper",
    "Orientation",
    "PointerGeometryMapper",
    "PointerPosition",
    "SliderConfig",
    "SliderState",
    "TrackGeometry",
    "VERTICAL",
    "ValueListener",
    "ValueModel",
    "configure",
    "normalize_key",
    "projection_for",
    "track_ratio",
]
