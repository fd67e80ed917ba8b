"""Public package surface for areafocus.

Exports the per-area navigator, the cross-area coordinator, and the
supporting history, key-dispatch, and config helpers.
"""

from __future__ import annotations

from .area import AreaNavigator
from .coordinator import FocusCoordinator
from .errors import FocusConfigurationError, UnknownAreaError
from .history import DEFAULT_MAX_HISTORY, FocusHistory
from .keys import (
    DEFAULT_KEY_BINDINGS,
    KeyComboBinding,
    KeyComboRegistry,
    build_focus_key_registry,
    build_focus_key_registry_from_config,
)
from .types import (
    FOCUS_SOURCES,
    HORIZONTAL,
    ORIENTATIONS,
    SOURCE_KEYBOARD,
    SOURCE_POINTER,
    SOURCE_PROGRAMMATIC,
    VERTICAL,
    FocusAreaEntry,
    FocusKey,
    ProviderContext,
)

__all__ = [
    "AreaNavigator",
    "FocusCoordinator",
    "FocusHistory",
    "FocusAreaEntry",
    "FocusKey",
    "ProviderContext",
    "FocusConfigurationError",
    "UnknownAreaError",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_focus_key_registry",
    "build_focus_key_registry_from_config",
    "DEFAULT_KEY_BINDINGS",
    "DEFAULT_MAX_HISTORY",
    "HORIZONTAL",
    "VERTICAL",
    "ORIENTATIONS",
    "SOURCE_KEYBOARD",
    "SOURCE_POINTER",
    "SOURCE_PROGRAMMATIC",
    "FOCUS_SOURCES",
]
