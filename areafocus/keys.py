"""Key-token dispatch onto coordinator focus operations.

Tokens use the terminal decoder vocabulary (``UP``, ``PAGE_DOWN``,
``ALT_LEFT``...). Reading raw input stays with the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import FocusConfig
    from .coordinator import FocusCoordinator

DEFAULT_KEY_BINDINGS: dict[str, tuple[str, ...]] = {
    "arrow_up": ("UP",),
    "arrow_down": ("DOWN",),
    "arrow_left": ("LEFT",),
    "arrow_right": ("RIGHT",),
    "home": ("HOME",),
    "end": ("END",),
    "page_up": ("PAGE_UP",),
    "page_down": ("PAGE_DOWN",),
    "back": ("ALT_LEFT",),
    "forward": ("ALT_RIGHT",),
}

_ACTION_METHODS = {
    "arrow_up": "focus_on_arrow_up",
    "arrow_down": "focus_on_arrow_down",
    "arrow_left": "focus_on_arrow_left",
    "arrow_right": "focus_on_arrow_right",
    "home": "focus_on_home",
    "end": "focus_on_end",
    "page_up": "focus_on_page_up",
    "page_down": "focus_on_page_down",
    "back": "go_back",
    "forward": "go_forward",
}


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match dispatch registries."""
        return key

    def __contains__(self, key: str) -> bool:
        """Return whether ``key`` has a bound handler after normalization."""
        return self._normalize(key) in self._handlers

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` means the key is unbound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()


def _normalize_token(key: str) -> str:
    """Match tokens case-insensitively and ignore surrounding whitespace."""
    return key.strip().upper()


def build_focus_key_registry(
    coordinator: FocusCoordinator,
    bindings: Mapping[str, str | Iterable[str]] | None = None,
) -> KeyComboRegistry:
    """Return a registry routing key tokens to ``coordinator`` focus operations.

    ``bindings`` maps action names (see :data:`DEFAULT_KEY_BINDINGS`) to key
    tokens and replaces the default tokens for the actions it names. A plain
    string value binds that single token.
    """
    resolved: dict[str, tuple[str, ...]] = dict(DEFAULT_KEY_BINDINGS)
    for action, combos in (bindings or {}).items():
        if action not in _ACTION_METHODS:
            raise ValueError(f"unknown focus key action: {action!r}")
        resolved[action] = (combos,) if isinstance(combos, str) else tuple(combos)

    registry = KeyComboRegistry(normalize=_normalize_token)
    registry.register_bindings(
        *(
            KeyComboBinding(combos, getattr(coordinator, _ACTION_METHODS[action]))
            for action, combos in resolved.items()
        )
    )
    return registry


def build_focus_key_registry_from_config(
    coordinator: FocusCoordinator,
    config: FocusConfig | None = None,
) -> KeyComboRegistry:
    """Return a focus key registry using the key-token overrides from user config."""
    if config is None:
        from .config import load_focus_config

        config = load_focus_config()
    return build_focus_key_registry(coordinator, config.key_bindings)
