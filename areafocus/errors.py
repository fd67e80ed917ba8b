"""Exception types raised for focus wiring and caller mistakes."""

from __future__ import annotations


class FocusConfigurationError(RuntimeError):
    """Navigator/coordinator wiring is broken (e.g. navigator never registered)."""


class UnknownAreaError(KeyError):
    """Requested area name is not part of the coordinator's registry."""

    def __init__(self, area: object) -> None:
        super().__init__(area)
        self.area = area

    def __str__(self) -> str:
        return f"unknown focus area: {self.area!r}"
