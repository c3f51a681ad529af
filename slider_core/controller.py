from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Literal

from .geometry import PointerGeometryMapper, PointerPosition, TrackGeometry
from .keyboard import KeyboardStepper
from .value_model import SliderConfig, ValueModel


LOGGER = logging.getLogger(__name__)

DragState = Literal["idle", "dragging"]
ValueListener = Callable[[float], None]
GeometryProvider = Callable[[], TrackGeometry]


@dataclass(frozen=True)
class SliderState:
    value: float
    dragging: bool


class InteractionController:
    """Drag/keyboard state machine owning the slider's single value.

    Hosts feed input events in and observe results through the listener; the
    controller keeps no reference to any rendering object.
    """

    def __init__(
        self,
        config: SliderConfig,
        initial_value: float | None = None,
        listener: ValueListener | None = None,
    ) -> None:
        self._listener = listener
        self._install(config)
        start = self._model.min_value if initial_value is None else initial_value
        self._value = self._model.quantize(start)
        self._state: DragState = "idle"
        self._geometry: TrackGeometry | None = None
        self._geometry_provider: GeometryProvider | None = None

    def _install(self, config: SliderConfig) -> None:
        self._config = config
        self._model = ValueModel(config)
        self._keyboard = KeyboardStepper(self._model)
        self._mapper = PointerGeometryMapper(self._model)

    @property
    def config(self) -> SliderConfig:
        return self._config

    @property
    def model(self) -> ValueModel:
        return self._model

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def dragging(self) -> bool:
        return self._state == "dragging"

    def snapshot(self) -> SliderState:
        return SliderState(value=self._value, dragging=self.dragging)

    def current_value(self) -> float:
        return self._value

    def reconfigure(self, config: SliderConfig) -> float:
        """Swap bounds/step; ends any drag and re-fits the value into the new range."""

        self._install(config)
        self._end_drag()
        LOGGER.info(
            "slider reconfigured: min=%s max=%s step=%s orientation=%s",
            config.min_value,
            config.max_value,
            config.step,
            config.orientation,
        )
        self._commit(self._model.quantize(self._value))
        return self._value

    def on_key_down(self, key: str) -> float | None:
        next_value = self._keyboard.step(key, self._value)
        if next_value is None:
            return None
        # Recognized keys always notify, even when pinned at a bound.
        self._commit(next_value, force=True)
        return self._value

    def on_key_up(self, key: str) -> None:
        _ = key

    def on_pointer_down(
        self,
        position: PointerPosition,
        geometry: TrackGeometry,
        *,
        geometry_provider: GeometryProvider | None = None,
    ) -> float | None:
        """Start a drag session and jump to the value under the pointer.

        `geometry` is snapshotted for the whole session unless a
        `geometry_provider` is given, in which case the track is re-measured
        on every move.
        """

        next_value = self._mapper.value_at(position, geometry)
        if next_value is None:
            LOGGER.debug("ignoring pointer-down without usable coordinate: %r", position)
            return None
        self._state = "dragging"
        self._geometry = geometry
        self._geometry_provider = geometry_provider
        LOGGER.debug("drag started on track %s", geometry)
        self._commit(next_value, force=True)
        return self._value

    def on_pointer_move(self, position: PointerPosition) -> float | None:
        if self._state != "dragging" or self._geometry is None:
            return None
        if self._geometry_provider is not None:
            self._geometry = self._geometry_provider()
        next_value = self._mapper.value_at(position, self._geometry)
        if next_value is None:
            LOGGER.debug("ignoring pointer-move without usable coordinate: %r", position)
            return None
        if not self._commit(next_value):
            return None
        return self._value

    def on_pointer_up(self) -> None:
        if self._state == "dragging":
            LOGGER.debug("drag ended at value %s", self._value)
        self._end_drag()

    def on_pointer_cancel(self) -> None:
        if self._state == "dragging":
            LOGGER.debug("drag cancelled by pointer-capture loss at value %s", self._value)
        self._end_drag()

    def _end_drag(self) -> None:
        self._state = "idle"
        self._geometry = None
        self._geometry_provider = None

    def _commit(self, value: float, *, force: bool = False) -> bool:
        changed = value != self._value
        self._value = value
        if (changed or force) and self._listener is not None:
            self._listener(value)
        return changed


def configure(
    config: SliderConfig,
    initial_value: float | None = None,
    listener: ValueListener | None = None,
) -> InteractionController:
    """Create an engine for `config`; raises ConfigError for invalid bounds."""

    return InteractionController(config, initial_value=initial_value, listener=listener)
