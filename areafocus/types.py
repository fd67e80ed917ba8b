"""Shared focus datatypes: keys, orientations, sources, and history entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .area import AreaNavigator
    from .coordinator import FocusCoordinator

FocusKey = Union[str, int]

HORIZONTAL = "horizontal"
VERTICAL = "vertical"
ORIENTATIONS = (HORIZONTAL, VERTICAL)

SOURCE_KEYBOARD = "keyboard"
SOURCE_POINTER = "pointer"
SOURCE_PROGRAMMATIC = "programmatic"
FOCUS_SOURCES = (SOURCE_KEYBOARD, SOURCE_POINTER, SOURCE_PROGRAMMATIC)


@dataclass(frozen=True)
class ProviderContext:
    """Arguments handed to every area provider callback.

    ``meta`` is the coordinator's active entry metadata, or ``None`` when no
    area is active yet.
    """

    navigator: AreaNavigator
    parent: FocusCoordinator
    meta: Any = None


@dataclass(eq=False)
class FocusAreaEntry:
    """One record in the area-focus history stack.

    Entries compare by identity: re-focusing the active area mutates
    ``source`` and ``meta`` on the same object.
    """

    area: str
    navigator: AreaNavigator
    source: str = SOURCE_PROGRAMMATIC
    meta: Any = None
