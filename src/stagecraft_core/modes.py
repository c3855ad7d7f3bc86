"""Rendering mode presets and mode selection."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from .merge import freeze

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    """Mutually exclusive rendering strategies."""

    UNIVERSAL = "universal"  # server-rendered, hydrated on the client
    SPA = "spa"              # client-only
    STATIC = "static"        # pre-rendered at generate time


ModeSelector = Union[str, RenderMode, Callable[[], Any]]

# Alternate spellings accepted for a mode name.
MODE_ALIASES = {
    "single-page": RenderMode.SPA,
}

MODE_PRESETS: Mapping[RenderMode, Mapping[str, Any]] = MappingProxyType({
    RenderMode.UNIVERSAL: freeze({
        "build": {"ssr": True},
        "render": {"ssr": True},
    }),
    RenderMode.SPA: freeze({
        "build": {"ssr": False},
        "render": {"ssr": False},
    }),
    RenderMode.STATIC: freeze({
        "build": {"ssr": True},
        "render": {"ssr": "static"},
    }),
})

EMPTY_PRESET: Mapping[str, Any] = MappingProxyType({})


def select_mode(selector: ModeSelector) -> Any:
    """Evaluate a mode selector once; callables are invoked with no arguments."""
    if callable(selector):
        return selector()
    return selector


def lookup_mode(value: Any) -> Optional[RenderMode]:
    if isinstance(value, RenderMode):
        return value
    if not isinstance(value, str):
        return None
    if value in MODE_ALIASES:
        return MODE_ALIASES[value]
    try:
        return RenderMode(value)
    except ValueError:
        return None


def resolve_mode(value: Any) -> Tuple[Optional[RenderMode], Mapping[str, Any]]:
    """Return the mode named by an already-selected ``value`` and its preset.

    Unknown names and non-string selections fall back to the empty overlay
    instead of failing.
    """
    mode = lookup_mode(value)
    if mode is None:
        logger.debug("No mode preset for %r; applying empty overlay", value)
        return None, EMPTY_PRESET
    return mode, MODE_PRESETS[mode]
