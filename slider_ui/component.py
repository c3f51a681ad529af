from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, Mapping

from slider_core import ConfigError, InteractionController, SliderConfig, TrackGeometry, ValueListener, configure

from .component_schema import DEFAULT_FRAME, BoundingBox, CoordinatePoint
from .interaction import HDIPointerEvent, HDIPressEvent, parse_hdi_pointer_event, parse_hdi_press_event
from .renderer import SliderPaintCommand, SliderRenderBatch, SliderRenderer
from .theme import DEFAULT_SLIDER_TOKENS, SliderThemeTokens, validate_slider_theme_tokens


LOGGER = logging.getLogger(__name__)

ThumbPainter = Callable[[SliderPaintCommand], tuple[SliderPaintCommand, ...]]

_CONFIG_PROPS = ("min", "max", "step", "orientation", "pageStep", "page_step")
_THEME_PROPS = {
    "trackColor": "track_color",
    "filledColor": "filled_color",
    "thumbColor": "thumb_color",
}


@dataclass(frozen=True)
class SliderSemantics:
    """Accessibility values a host attaches to the thumb element."""

    role: str
    element_id: str
    label: str
    value_min: float
    value_max: float
    value_now: float
    value_text: str
    orientation: str
    disabled: bool

    def aria_attributes(self) -> dict[str, str]:
        return {
            "id": self.element_id,
            "role": self.role,
            "aria-label": self.label,
            "aria-valuemin": _format_number(self.value_min),
            "aria-valuemax": _format_number(self.value_max),
            "aria-valuenow": _format_number(self.value_now),
            "aria-valuetext": self.value_text,
            "aria-orientation": self.orientation,
            "aria-disabled": "true" if self.disabled else "false",
            "tabindex": "-1" if self.disabled else "0",
        }


@dataclass
class SliderComponent:
    """Track, filled portion and thumb composed around one interaction engine.

    `position` is the top-left of the track; `size` is the track length along
    the primary axis. The thumb may overhang the track by its radius.
    """

    label: str
    config: SliderConfig
    default_value: float | None = None
    position: CoordinatePoint = field(default_factory=lambda: CoordinatePoint(0.0, 0.0, None))
    size: float = 200.0
    theme: SliderThemeTokens = DEFAULT_SLIDER_TOKENS
    disabled: bool = False
    focused: bool = False
    remeasure_on_move: bool = False
    on_change: ValueListener | None = None
    thumb_painter: ThumbPainter | None = None
    _controller: InteractionController = field(init=False, repr=False)
    _thumb_pressed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.label.strip():
            raise ValueError("SliderComponent label must be non-empty")
        if self.size <= 0:
            raise ValueError("SliderComponent size must be > 0")
        self._controller = configure(self.config, initial_value=self.default_value, listener=self.on_change)

    @classmethod
    def from_props(cls, props: Mapping[str, Any], **kwargs: Any) -> SliderComponent:
        """Build a component from widget properties (`label`, `min`, `defaultValue`, ...)."""

        config_props = {k: v for k, v in props.items() if k in _CONFIG_PROPS}
        theme_overrides = {_THEME_PROPS[k]: v for k, v in props.items() if k in _THEME_PROPS}
        known = set(_CONFIG_PROPS) | set(_THEME_PROPS) | {"label", "defaultValue", "size", "disabled"}
        unknown = sorted(set(props) - known)
        if unknown:
            raise ValueError(f"Unknown slider props: {', '.join(unknown)}")
        if "label" not in props:
            raise ValueError("Slider prop `label` is required")
        if "size" in props:
            kwargs.setdefault("size", float(props["size"]))
        if "disabled" in props:
            kwargs.setdefault("disabled", bool(props["disabled"]))
        if theme_overrides:
            kwargs.setdefault("theme", validate_slider_theme_tokens(theme_overrides))
        default_value = props.get("defaultValue")
        if default_value is not None and not _is_finite_number(default_value):
            raise ConfigError(f"Slider prop `defaultValue` must be a finite number, got {default_value!r}")
        return cls(
            label=str(props["label"]),
            config=SliderConfig.from_props(config_props),
            default_value=default_value,
            **kwargs,
        )

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def value(self) -> float:
        return self._controller.current_value()

    @property
    def value_text(self) -> str:
        return self._controller.model.format_value(self.value)

    @property
    def thumb_pressed(self) -> bool:
        return self._thumb_pressed

    @property
    def track_id(self) -> str:
        return f"{self.label}-slider-track"

    @property
    def thumb_id(self) -> str:
        return f"{self.label}-slider-thumb"

    def reconfigure(self, config: SliderConfig) -> float:
        self.config = config
        self._thumb_pressed = False
        return self._controller.reconfigure(config)

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled
        if disabled:
            self._controller.on_pointer_cancel()
            self._thumb_pressed = False

    def _frame(self) -> str:
        return self.position.frame or DEFAULT_FRAME

    def track_bounds(self) -> BoundingBox:
        thickness = self.theme.track_thickness_px
        radius = self.theme.thumb_radius_px
        offset = radius - thickness / 2.0
        if self.config.orientation == "vertical":
            return BoundingBox(
                x=self.position.x + offset,
                y=self.position.y,
                width=thickness,
                height=self.size,
                frame=self._frame(),
            )
        return BoundingBox(
            x=self.position.x,
            y=self.position.y + offset,
            width=self.size,
            height=thickness,
            frame=self._frame(),
        )

    def interaction_bounds(self) -> BoundingBox:
        radius = self.theme.thumb_radius_px
        if self.config.orientation == "vertical":
            return BoundingBox(
                x=self.position.x,
                y=self.position.y - radius,
                width=2 * radius,
                height=self.size + 2 * radius,
                frame=self._frame(),
            )
        return BoundingBox(
            x=self.position.x - radius,
            y=self.position.y,
            width=self.size + 2 * radius,
            height=2 * radius,
            frame=self._frame(),
        )

    def track_geometry(self) -> TrackGeometry:
        """Measure the track's primary-axis extent for a drag session."""

        bounds = self.track_bounds()
        return TrackGeometry.from_bounds(
            bounds.x,
            bounds.y,
            bounds.width,
            bounds.height,
            self.config.orientation,
        )

    def thumb_center(self) -> tuple[float, float]:
        geometry = self.track_geometry()
        along = geometry.coordinate_at(self._controller.model.ratio(self.value))
        radius = self.theme.thumb_radius_px
        if self.config.orientation == "vertical":
            return (self.position.x + radius, along)
        return (along, self.position.y + radius)

    def handle_hdi_event(self, event_type: str, payload: object) -> bool:
        """Route one HDI event to the engine; returns True when it was consumed."""

        press = parse_hdi_press_event(event_type, payload)
        if press is not None:
            return self.on_press(press)
        pointer = parse_hdi_pointer_event(event_type, payload)
        if pointer is not None:
            return self.on_pointer(pointer)
        LOGGER.debug("slider `%s` ignoring %s event: %r", self.label, event_type, payload)
        return False

    def on_press(self, press: HDIPressEvent) -> bool:
        if self.disabled or not self.focused:
            return False
        if press.phase in ("down", "repeat"):
            if self._controller.on_key_down(press.key) is None:
                return False
            self._thumb_pressed = True
            return True
        if press.phase in ("up", "cancel"):
            self._controller.on_key_up(press.key)
            was_pressed = self._thumb_pressed
            self._thumb_pressed = self._controller.dragging
            return was_pressed
        return False

    def on_pointer(self, pointer: HDIPointerEvent) -> bool:
        controller = self._controller
        if pointer.phase == "down":
            if self.disabled or pointer.x is None or pointer.y is None:
                return False
            if not self.interaction_bounds().contains(pointer.x, pointer.y):
                self.focused = False
                return False
            self.focused = True
            self._thumb_pressed = True
            provider = self.track_geometry if self.remeasure_on_move else None
            controller.on_pointer_down(
                {"x": pointer.x, "y": pointer.y},
                self.track_geometry(),
                geometry_provider=provider,
            )
            return True
        if pointer.phase == "move":
            if not controller.dragging:
                return False
            controller.on_pointer_move({"x": pointer.x, "y": pointer.y})
            return True
        was_dragging = controller.dragging
        if pointer.phase == "up":
            controller.on_pointer_up()
        else:
            controller.on_pointer_cancel()
        self._thumb_pressed = False
        return was_dragging

    def layout(self) -> SliderRenderBatch:
        track = self.track_bounds()
        ratio = self._controller.model.ratio(self.value)
        frame = self._frame()
        if self.config.orientation == "vertical":
            filled_h = track.height * ratio
            filled = SliderPaintCommand(
                component_id=self.track_id,
                part="filled",
                kind="rect",
                x=track.x,
                y=track.y + track.height - filled_h,
                width=track.width,
                height=filled_h,
                color_hex=self.theme.filled_color,
                frame=frame,
            )
        else:
            filled = SliderPaintCommand(
                component_id=self.track_id,
                part="filled",
                kind="rect",
                x=track.x,
                y=track.y,
                width=track.width * ratio,
                height=track.height,
                color_hex=self.theme.filled_color,
                frame=frame,
            )
        cx, cy = self.thumb_center()
        if self.disabled:
            thumb_color = self.theme.thumb_disabled_color
        elif self._thumb_pressed:
            thumb_color = self.theme.thumb_pressed_color
        else:
            thumb_color = self.theme.thumb_color
        base = SliderPaintCommand(
            component_id=self.track_id,
            part="track",
            kind="rect",
            x=track.x,
            y=track.y,
            width=track.width,
            height=track.height,
            color_hex=self.theme.track_color,
            frame=frame,
        )
        thumb = SliderPaintCommand(
            component_id=self.thumb_id,
            part="thumb",
            kind="circle",
            x=cx,
            y=cy,
            radius=self.theme.thumb_radius_px,
            color_hex=thumb_color,
            frame=frame,
        )
        # Painters replace the default thumb; they receive its resolved position and color.
        thumb_commands = (thumb,) if self.thumb_painter is None else tuple(self.thumb_painter(thumb))
        return SliderRenderBatch(commands=(base, filled) + thumb_commands)

    def render(self, renderer: SliderRenderer) -> SliderRenderBatch:
        batch = self.layout()
        renderer.draw_slider_batch(batch)
        return batch

    def semantics(self) -> SliderSemantics:
        return SliderSemantics(
            role="slider",
            element_id=self.thumb_id,
            label=self.label,
            value_min=float(self.config.min_value),
            value_max=float(self.config.max_value),
            value_now=self.value,
            value_text=self.value_text,
            orientation=self.config.orientation,
            disabled=self.disabled,
        )


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
