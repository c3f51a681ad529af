"""Host-side slider component, input parsing and rendering contracts."""

from .component import SliderComponent, SliderSemantics, ThumbPainter
from .component_schema import BoundingBox, CoordinatePoint, DisplayableArea
from .interaction import (
    HDIPointerEvent,
    HDIPressEvent,
    PointerPhase,
    PressPhase,
    parse_hdi_pointer_event,
    parse_hdi_press_event,
)
from .renderer import SliderPaintCommand, SliderRenderBatch, SliderRenderer
from .stories import STORIES, Story, StoryResult, StoryStep, get_story, play_story, story_names
from .theme import DEFAULT_SLIDER_TOKENS, SliderThemeTokens, validate_slider_theme_tokens

__all__ = [
    "BoundingBox",
    "CoordinatePoint",
    "DEFAULT_SLIDER_TOKENS",
    "DisplayableArea",
    "HDIPointerEvent",
    "HDIPressEvent",
    "PointerPhase",
    "PressPhase",
    "STORIES",
    "SliderComponent",
    "SliderPaintCommand",
    "SliderRenderBatch",
    "SliderRenderer",
    "SliderSemantics",
    "SliderThemeTokens",
    "Story",
    "StoryResult",
    "StoryStep",
    "ThumbPainter",
    "get_story",
    "parse_hdi_pointer_event",
    "parse_hdi_press_event",
    "play_story",
    "story_names",
    "validate_slider_theme_tokens",
]
