"""Per-area focus navigation over a caller-supplied list of keys.

Every provider is called on demand and never cached, so filtered or
virtualized lists work without an invalidation API.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from .errors import FocusConfigurationError
from .types import ORIENTATIONS, VERTICAL, FocusKey, ProviderContext

if TYPE_CHECKING:
    from .coordinator import FocusCoordinator

KeysProvider = Callable[[ProviderContext], Sequence[FocusKey]]
OrientationProvider = Callable[[ProviderContext], str]
InitialKeyProvider = Callable[[ProviderContext], "FocusKey | None"]
IndexProvider = Callable[[ProviderContext], int]


def _check_step(value: int, name: str) -> None:
    if value not in (-1, 1):
        raise ValueError(f"{name} must be -1 or 1, got {value!r}")


def boundary_index(delta: int, count: int) -> int:
    """Return first index when moving forward, last index when moving backward."""
    return 0 if delta == 1 else count - 1


def clamp_index(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count - 1]``."""
    return max(0, min(count - 1, index))


def wrap_index(index: int, count: int) -> int:
    """Wrap ``index`` around a list of ``count`` items."""
    return (index + count) % count


class AreaNavigator:
    """Focus state machine for one named area.

    Holds the focused key and computes arrow, page, and home/end targets.
    The owning :class:`FocusCoordinator` assigns :attr:`parent` when the
    navigator is registered; providers receive a :class:`ProviderContext`
    carrying the navigator, the coordinator, and the active entry ``meta``.
    """

    kind = "list"

    def __init__(
        self,
        keys: KeysProvider,
        *,
        orientation: OrientationProvider | None = None,
        initial_key: InitialKeyProvider | None = None,
        first_visible_index: IndexProvider | None = None,
        last_visible_index: IndexProvider | None = None,
        wrap_around: bool = False,
    ) -> None:
        self._keys = keys
        self._orientation = orientation
        self._initial_key = initial_key
        self._first_visible_index = first_visible_index
        self._last_visible_index = last_visible_index
        self.wrap_around = bool(wrap_around)
        self.key: FocusKey | None = None
        self._parent: FocusCoordinator | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, wrap_around={self.wrap_around})"

    @property
    def parent(self) -> FocusCoordinator:
        """Owning coordinator; raises when the navigator was never registered."""
        if self._parent is None:
            raise FocusConfigurationError(
                "AreaNavigator has no parent coordinator; register it in FocusCoordinator(areas=...)"
            )
        return self._parent

    @parent.setter
    def parent(self, coordinator: FocusCoordinator) -> None:
        self._parent = coordinator

    @property
    def has_parent(self) -> bool:
        return self._parent is not None

    def context(self) -> ProviderContext:
        """Build provider arguments from the current coordinator state."""
        parent = self.parent
        entry = parent.entry
        return ProviderContext(navigator=self, parent=parent, meta=entry.meta if entry is not None else None)

    @property
    def orientation(self) -> str:
        """Resolved orientation, ``"vertical"`` when no provider is configured."""
        context = self.context()
        if self._orientation is None:
            return VERTICAL
        value = self._orientation(context)
        if value not in ORIENTATIONS:
            raise FocusConfigurationError(f"orientation provider returned {value!r}")
        return value

    def get_initial_key_on_area_focus(self) -> FocusKey | None:
        """Key to focus when the area itself gains focus."""
        context = self.context()
        if self._initial_key is None:
            return None
        return self._initial_key(context)

    def get_keys(self) -> list[FocusKey]:
        """Return a fresh copy of the area's current keys in UI order."""
        return list(self._keys(self.context()))

    def get_key_index(self, key: FocusKey | None) -> int:
        """Return position of ``key`` in the current list, or ``-1``."""
        if key is None:
            return -1
        try:
            return self.get_keys().index(key)
        except ValueError:
            return -1

    def get_focused_key_index(self) -> int:
        return self.get_key_index(self.key)

    def visible_range(self, count: int) -> tuple[int, int]:
        """Resolve ``(first, last)`` visible indexes clamped into the list.

        Missing providers default to the whole list being visible.
        """
        context = self.context()
        last_index = max(0, count - 1)
        first = self._first_visible_index(context) if self._first_visible_index is not None else 0
        last = self._last_visible_index(context) if self._last_visible_index is not None else last_index
        first = clamp_index(first, count)
        last = max(first, clamp_index(last, count))
        return first, last

    def focus_on_arrow(self, delta: int) -> FocusKey | None:
        """Move one step; wrap or clamp at the ends depending on ``wrap_around``."""
        _check_step(delta, "delta")
        keys = self.get_keys()
        if not keys:
            return None

        current = self._index_in(keys)
        if current == -1:
            target = boundary_index(delta, len(keys))
        else:
            step = current + delta
            target = wrap_index(step, len(keys)) if self.wrap_around else clamp_index(step, len(keys))

        self.key = keys[target]
        return self.key

    def focus_on_page(self, delta: int) -> FocusKey | None:
        """Move by a visible page.

        The first press jumps to the visible edge in the requested direction;
        a press at (or beyond) that edge moves a whole page further. Page moves
        always clamp, even when ``wrap_around`` is enabled.
        """
        _check_step(delta, "delta")
        keys = self.get_keys()
        if not keys:
            return None

        last_index = len(keys) - 1
        current = self._index_in(keys)
        if current == -1:
            target = 0 if delta == -1 else last_index
        else:
            first_visible, last_visible = self.visible_range(len(keys))
            visible_count = max(1, last_visible - first_visible + 1)
            if delta == -1:
                if current > first_visible:
                    target = first_visible
                else:
                    target = max(0, first_visible - visible_count + 1)
            else:
                if current < last_visible:
                    target = last_visible
                else:
                    target = min(last_index, last_visible + visible_count - 1)

        self.key = keys[target]
        return self.key

    def focus_on_home_end(self, direction: int) -> FocusKey | None:
        """Jump to the first (``-1``) or last (``1``) key."""
        _check_step(direction, "direction")
        keys = self.get_keys()
        if not keys:
            return None
        self.key = keys[0] if direction == -1 else keys[-1]
        return self.key

    def clear(self) -> None:
        self.key = None

    def _index_in(self, keys: list[FocusKey]) -> int:
        if self.key is None:
            return -1
        try:
            return keys.index(self.key)
        except ValueError:
            return -1

