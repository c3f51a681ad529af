"""Documented slider scenarios, replayable against a `SliderComponent`.

Each story mirrors a documented widget variant: the props it mounts with and
a script of keyboard presses and drags, each followed by the value text the
thumb must show.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Any, Literal, Mapping

from .component import SliderComponent, ThumbPainter
from .renderer import SliderPaintCommand


LOGGER = logging.getLogger(__name__)

DEFAULT_LABEL = "cds_Slider"
DEFAULT_PROPS: Mapping[str, Any] = {
    "label": DEFAULT_LABEL,
    "min": 0,
    "max": 100,
    "defaultValue": 50,
}

StepKind = Literal["key", "drag"]
DragTarget = Literal["start", "end"]


@dataclass(frozen=True)
class StoryStep:
    kind: StepKind
    target: str
    expected: str

    def describe(self) -> str:
        if self.kind == "key":
            return f"key {self.target}"
        return f"drag to track {self.target}"


@dataclass(frozen=True)
class Story:
    name: str
    description: str
    props: Mapping[str, Any]
    steps: tuple[StoryStep, ...] = ()
    thumb_painter: ThumbPainter | None = None

    def mount(self) -> SliderComponent:
        component = SliderComponent.from_props(self.props, thumb_painter=self.thumb_painter)
        component.focused = True
        return component


@dataclass(frozen=True)
class StepOutcome:
    step: StoryStep
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.step.expected


@dataclass
class StoryResult:
    story: Story
    outcomes: list[StepOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)


def _keys(*pairs: tuple[str, str]) -> tuple[StoryStep, ...]:
    return tuple(StoryStep("key", key, expected) for key, expected in pairs)


def _drags(start_expected: str, end_expected: str) -> tuple[StoryStep, ...]:
    return (StoryStep("drag", "start", start_expected), StoryStep("drag", "end", end_expected))


def round_button_thumb(thumb: SliderPaintCommand) -> tuple[SliderPaintCommand, ...]:
    """Thumb drawn as a ringed button: the themed disc with a light inner dot."""

    ring = replace(thumb, radius=thumb.radius + 2.0, color_hex="#FFFFFF")
    dot = replace(thumb, radius=max(thumb.radius / 3.0, 1.0), color_hex="#FFFFFF")
    return (ring, thumb, dot)


_FULL_KEYBOARD = _keys(
    ("ArrowRight", "51"),
    ("ArrowUp", "52"),
    ("ArrowLeft", "51"),
    ("ArrowDown", "50"),
    ("PageUp", "60"),
    ("PageDown", "50"),
    ("Home", "0"),
    ("End", "100"),
)

STORIES: tuple[Story, ...] = (
    Story(
        "Default",
        "Keyboard stepping and edge drags on a 0-100 slider.",
        DEFAULT_PROPS,
        _FULL_KEYBOARD + _drags("0", "100"),
    ),
    Story("OnlySlider", "Slider mounted without custom sub-components.", DEFAULT_PROPS),
    Story(
        "StartFromZero",
        "defaultValue equal to min; decreasing keys stay at min.",
        {**DEFAULT_PROPS, "defaultValue": 0},
        _keys(("ArrowLeft", "0"), ("ArrowDown", "0"), ("PageDown", "0")),
    ),
    Story(
        "StartFromEnd",
        "defaultValue equal to max; increasing keys stay at max.",
        {**DEFAULT_PROPS, "defaultValue": 100},
        _keys(("ArrowRight", "100"), ("ArrowUp", "100"), ("PageUp", "100")),
    ),
    Story(
        "MinValueVariant",
        "Non-zero min; page step is a tenth of the range.",
        {**DEFAULT_PROPS, "min": 50, "defaultValue": 75},
        _keys(
            ("ArrowRight", "76"),
            ("ArrowUp", "77"),
            ("ArrowLeft", "76"),
            ("ArrowDown", "75"),
            ("PageUp", "80"),
            ("PageDown", "75"),
            ("Home", "50"),
            ("End", "100"),
        )
        + _drags("50", "100"),
    ),
    Story(
        "MaxValueVariant",
        "Max other than 100.",
        {"label": DEFAULT_LABEL, "min": 50, "max": 200, "defaultValue": 100},
        _keys(
            ("ArrowRight", "101"),
            ("ArrowUp", "102"),
            ("ArrowLeft", "101"),
            ("ArrowDown", "100"),
            ("PageUp", "115"),
            ("PageDown", "100"),
            ("Home", "50"),
            ("End", "200"),
        )
        + _drags("50", "200"),
    ),
    Story(
        "SizeVariant",
        "Track length of 500px.",
        {**DEFAULT_PROPS, "size": 500},
        _drags("0", "100"),
    ),
    Story(
        "WithStep10",
        "Each arrow press moves by 10.",
        {**DEFAULT_PROPS, "step": 10},
        _keys(("ArrowRight", "60"), ("ArrowUp", "70"), ("ArrowLeft", "60"), ("ArrowDown", "50")),
    ),
    Story(
        "WithStep20",
        "Each arrow press moves by 20; the initial 50 snaps onto the 20-grid at 60.",
        {**DEFAULT_PROPS, "step": 20},
        _keys(("ArrowRight", "80"), ("ArrowUp", "100"), ("ArrowLeft", "80"), ("ArrowDown", "60")),
    ),
    Story(
        "WithVerticalOrientation",
        "Vertical track; the value grows toward the top.",
        {**DEFAULT_PROPS, "orientation": "vertical"},
        _FULL_KEYBOARD + _drags("0", "100"),
    ),
    Story(
        "WithCustomColor",
        "Track, filled portion and thumb with explicit colors.",
        {**DEFAULT_PROPS, "trackColor": "#D8BFD8", "filledColor": "#6A5ACD", "thumbColor": "#6A5ACD"},
    ),
    Story(
        "WithCustomThumb",
        "Thumb painted by a custom painter; input behaves as the default slider.",
        DEFAULT_PROPS,
        _keys(("ArrowRight", "51"), ("ArrowLeft", "50")) + _drags("0", "100"),
        thumb_painter=round_button_thumb,
    ),
)


def story_names() -> list[str]:
    return [story.name for story in STORIES]


def get_story(name: str) -> Story:
    for story in STORIES:
        if story.name == name:
            return story
    raise KeyError(f"unknown story: {name}")


def play_story(story: Story, component: SliderComponent | None = None) -> StoryResult:
    """Replay `story` through HDI events and record the thumb text after each step."""

    slider = component or story.mount()
    result = StoryResult(story=story)
    for step in story.steps:
        if step.kind == "key":
            _press(slider, step.target)
        else:
            _drag(slider, step.target)
        outcome = StepOutcome(step=step, actual=slider.value_text)
        if not outcome.passed:
            LOGGER.warning(
                "story %s: %s expected %s, got %s",
                story.name,
                step.describe(),
                step.expected,
                outcome.actual,
            )
        result.outcomes.append(outcome)
    return result


def _press(slider: SliderComponent, key: str) -> None:
    slider.handle_hdi_event("press", {"phase": "down", "key": key, "active_keys": [key]})
    slider.handle_hdi_event("press", {"phase": "up", "key": key, "active_keys": []})


def _drag(slider: SliderComponent, target: str) -> None:
    if target not in ("start", "end"):
        raise ValueError(f"drag target must be `start` or `end`, got `{target}`")
    thumb_x, thumb_y = slider.thumb_center()
    geometry = slider.track_geometry()
    along = geometry.start if target == "start" else geometry.end
    if slider.config.orientation == "vertical":
        to_x, to_y = thumb_x, along
    else:
        to_x, to_y = along, thumb_y
    slider.handle_hdi_event("click", {"phase": "down", "x": thumb_x, "y": thumb_y, "button": 0})
    slider.handle_hdi_event("pointer_move", {"x": to_x, "y": to_y})
    slider.handle_hdi_event("click", {"phase": "up", "x": to_x, "y": to_y, "button": 0})
