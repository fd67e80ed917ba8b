"""Cross-area focus coordination with back/forward history.

The coordinator owns a fixed registry of named :class:`AreaNavigator`
instances and a :class:`FocusHistory` of area entries. Keyboard handlers
route to the navigator of whichever area is currently active.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .area import AreaNavigator
from .errors import FocusConfigurationError, UnknownAreaError
from .history import DEFAULT_MAX_HISTORY, FocusHistory
from .types import (
    FOCUS_SOURCES,
    HORIZONTAL,
    SOURCE_KEYBOARD,
    SOURCE_PROGRAMMATIC,
    VERTICAL,
    FocusAreaEntry,
    FocusKey,
)

if TYPE_CHECKING:
    from .config import FocusConfig

logger = logging.getLogger(__name__)


class FocusCoordinator:
    """Coordinate focus across named areas.

    ``areas`` is fixed at construction and every navigator's ``parent`` is
    pointed back at this coordinator. ``max_history`` caps the number of
    entries kept for :meth:`go` navigation.
    """

    def __init__(
        self,
        areas: Mapping[str, AreaNavigator],
        *,
        max_history: int = DEFAULT_MAX_HISTORY,
    ) -> None:
        self._areas: dict[str, AreaNavigator] = dict(areas)
        self._history = FocusHistory(max_history)

        for name, navigator in self._areas.items():
            if navigator.has_parent and navigator.parent is not self:
                raise FocusConfigurationError(f"area {name!r} is already registered in another coordinator")
        for navigator in self._areas.values():
            navigator.parent = self

    @classmethod
    def from_config(
        cls,
        areas: Mapping[str, AreaNavigator],
        config: FocusConfig | None = None,
    ) -> FocusCoordinator:
        """Build a coordinator whose history cap comes from user config."""
        if config is None:
            from .config import load_focus_config

            config = load_focus_config()
        return cls(areas, max_history=config.max_history)

    @property
    def areas(self) -> Mapping[str, AreaNavigator]:
        """Read-only view of the area registry."""
        return MappingProxyType(self._areas)

    @property
    def history(self) -> FocusHistory:
        return self._history

    @property
    def entry(self) -> FocusAreaEntry | None:
        """Active history entry, or ``None`` when nothing has been focused."""
        return self._history.current

    def get_entry_at(self, delta: int) -> FocusAreaEntry | None:
        """Return entry ``delta`` steps from the active one without moving."""
        return self._history.entry_at(delta)

    def get_previous_entry(self) -> FocusAreaEntry | None:
        return self.get_entry_at(-1)

    def get_next_entry(self) -> FocusAreaEntry | None:
        return self.get_entry_at(1)

    def _navigator(self, area: str) -> AreaNavigator:
        try:
            return self._areas[area]
        except KeyError:
            raise UnknownAreaError(area) from None

    def _check_source(self, source: str) -> None:
        if source not in FOCUS_SOURCES:
            raise ValueError(f"unknown focus source: {source!r}")

    def _enter(self, area: str, navigator: AreaNavigator, source: str, meta: Any) -> None:
        """Update the active entry in place when re-focusing it, else push a new one."""
        entry = self.entry
        if entry is not None and entry.area == area:
            entry.source = source
            if meta is not None:
                entry.meta = meta
            return
        self._history.push(FocusAreaEntry(area=area, navigator=navigator, source=source, meta=meta))

    def focus_area(self, area: str, source: str = SOURCE_PROGRAMMATIC, meta: Any = None) -> None:
        """Activate ``area`` and focus its initial key.

        Re-focusing the active area only updates ``source`` (and ``meta``
        when given) on the existing entry.

        The entry is recorded before the initial-key provider runs so the
        provider sees the new ``meta``; an exception raised by that provider
        leaves the history change in place.
        """
        navigator = self._navigator(area)
        self._check_source(source)
        self._enter(area, navigator, source, meta)
        navigator.key = navigator.get_initial_key_on_area_focus()

    def focus_area_key(
        self,
        area: str,
        key: FocusKey,
        source: str = SOURCE_PROGRAMMATIC,
        meta: Any = None,
    ) -> None:
        """Activate ``area`` with ``key`` focused, following the same entry rule."""
        navigator = self._navigator(area)
        self._check_source(source)
        navigator.key = key
        self._enter(area, navigator, source, meta)

    def go(self, delta: int) -> bool:
        """Move through history by ``delta``; out-of-range moves are ignored."""
        return self._history.go(delta)

    def go_back(self) -> bool:
        return self.go(-1)

    def go_forward(self) -> bool:
        return self.go(1)

    def _active_list_navigator(self, axis: str | None) -> AreaNavigator | None:
        """Return active navigator when it accepts a move along ``axis``.

        ``axis`` of ``None`` accepts any orientation (Home/End).
        """
        entry = self.entry
        if entry is None:
            return None
        navigator = entry.navigator
        if navigator.kind != "list":
            return None
        if axis is not None and navigator.orientation != axis:
            return None
        return navigator

    def _stamp_keyboard(self) -> bool:
        entry = self.entry
        if entry is not None:
            entry.source = SOURCE_KEYBOARD
        return True

    def focus_on_arrow_up(self) -> bool:
        """Move to the previous key in a vertical area."""
        navigator = self._active_list_navigator(VERTICAL)
        if navigator is None:
            return False
        navigator.focus_on_arrow(-1)
        return self._stamp_keyboard()

    def focus_on_arrow_down(self) -> bool:
        """Move to the next key in a vertical area."""
        navigator = self._active_list_navigator(VERTICAL)
        if navigator is None:
            return False
        navigator.focus_on_arrow(1)
        return self._stamp_keyboard()

    def focus_on_arrow_left(self) -> bool:
        """Move to the previous key in a horizontal area."""
        navigator = self._active_list_navigator(HORIZONTAL)
        if navigator is None:
            return False
        navigator.focus_on_arrow(-1)
        return self._stamp_keyboard()

    def focus_on_arrow_right(self) -> bool:
        """Move to the next key in a horizontal area."""
        navigator = self._active_list_navigator(HORIZONTAL)
        if navigator is None:
            return False
        navigator.focus_on_arrow(1)
        return self._stamp_keyboard()

    def focus_on_home(self) -> bool:
        navigator = self._active_list_navigator(None)
        if navigator is None:
            return False
        navigator.focus_on_home_end(-1)
        return self._stamp_keyboard()

    def focus_on_end(self) -> bool:
        navigator = self._active_list_navigator(None)
        if navigator is None:
            return False
        navigator.focus_on_home_end(1)
        return self._stamp_keyboard()

    def focus_on_page_up(self) -> bool:
        """Page toward the top of a vertical area."""
        navigator = self._active_list_navigator(VERTICAL)
        if navigator is None:
            return False
        navigator.focus_on_page(-1)
        return self._stamp_keyboard()

    def focus_on_page_down(self) -> bool:
        """Page toward the bottom of a vertical area."""
        navigator = self._active_list_navigator(VERTICAL)
        if navigator is None:
            return False
        navigator.focus_on_page(1)
        return self._stamp_keyboard()

    def clear(self) -> None:
        """Forget all history; navigator keys are left untouched."""
        self._history.clear()
        logger.debug("focus coordinator history cleared (%d areas kept)", len(self._areas))
