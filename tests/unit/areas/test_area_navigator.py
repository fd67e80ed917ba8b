"""Tests for per-area arrow, page, and home/end navigation.

Navigators are registered in a coordinator so providers can receive their
context; the coordinator's history is not exercised here.
"""

from __future__ import annotations

import unittest

from areafocus import AreaNavigator, FocusConfigurationError, FocusCoordinator, ProviderContext


def _navigator(keys, **kwargs) -> AreaNavigator:
    navigator = AreaNavigator(lambda _ctx: keys, **kwargs)
    FocusCoordinator({"area": navigator})
    return navigator


class ArrowNavigationTests(unittest.TestCase):
    def test_empty_list_is_noop(self) -> None:
        navigator = _navigator([])
        navigator.key = "ghost"

        self.assertIsNone(navigator.focus_on_arrow(1))
        self.assertEqual(navigator.key, "ghost")

    def test_unfocused_jumps_to_boundary_for_direction(self) -> None:
        navigator = _navigator(["a", "b", "c"])

        navigator.focus_on_arrow(1)
        self.assertEqual(navigator.key, "a")

        navigator.clear()
        navigator.focus_on_arrow(-1)
        self.assertEqual(navigator.key, "c")

    def test_key_missing_from_list_counts_as_unfocused(self) -> None:
        navigator = _navigator(["a", "b", "c"])
        navigator.key = "gone"

        navigator.focus_on_arrow(-1)

        self.assertEqual(navigator.key, "c")

    def test_clamps_without_wrap_for_every_start(self) -> None:
        keys = ["a", "b", "c", "d"]
        navigator = _navigator(keys)
        for start in range(len(keys)):
            for delta in (-1, 1):
                navigator.key = keys[start]
                navigator.focus_on_arrow(delta)
                expected = max(0, min(len(keys) - 1, start + delta))
                self.assertEqual(navigator.get_focused_key_index(), expected)

    def test_wraps_modulo_length_when_enabled(self) -> None:
        keys = ["a", "b", "c", "d"]
        navigator = _navigator(keys, wrap_around=True)
        for start in range(len(keys)):
            for delta in (-1, 1):
                navigator.key = keys[start]
                navigator.focus_on_arrow(delta)
                expected = (start + delta + len(keys)) % len(keys)
                self.assertEqual(navigator.get_focused_key_index(), expected)

    def test_integer_keys_are_supported(self) -> None:
        navigator = _navigator([10, 20, 30])
        navigator.key = 20

        self.assertEqual(navigator.focus_on_arrow(1), 30)

    def test_invalid_delta_raises(self) -> None:
        navigator = _navigator(["a"])

        with self.assertRaises(ValueError):
            navigator.focus_on_arrow(2)


class PageNavigationTests(unittest.TestCase):
    def _windowed(self, first: int, last: int, **kwargs) -> AreaNavigator:
        return _navigator(
            ["a", "b", "c", "d", "e"],
            first_visible_index=lambda _ctx: first,
            last_visible_index=lambda _ctx: last,
            **kwargs,
        )

    def test_page_up_jumps_to_first_visible_then_moves_a_page(self) -> None:
        navigator = self._windowed(1, 3)
        navigator.key = "c"

        navigator.focus_on_page(-1)
        self.assertEqual(navigator.key, "b")

        navigator.focus_on_page(-1)
        self.assertEqual(navigator.key, "a")

    def test_page_down_jumps_to_last_visible_then_moves_a_page(self) -> None:
        navigator = self._windowed(1, 3)
        navigator.key = "b"

        navigator.focus_on_page(1)
        self.assertEqual(navigator.key, "d")

        navigator.focus_on_page(1)
        self.assertEqual(navigator.key, "e")

    def test_page_moves_clamp_even_with_wrap(self) -> None:
        navigator = self._windowed(0, 1, wrap_around=True)
        navigator.key = "a"
        navigator.focus_on_page(-1)
        self.assertEqual(navigator.key, "a")

        navigator = self._windowed(3, 4, wrap_around=True)
        navigator.key = "e"
        navigator.focus_on_page(1)
        self.assertEqual(navigator.key, "e")

    def test_unfocused_page_jumps_to_far_boundary(self) -> None:
        navigator = self._windowed(1, 3)

        navigator.focus_on_page(1)
        self.assertEqual(navigator.key, "e")

        navigator.clear()
        navigator.focus_on_page(-1)
        self.assertEqual(navigator.key, "a")

    def test_default_window_is_whole_list(self) -> None:
        navigator = _navigator(["a", "b", "c", "d", "e"])
        navigator.key = "c"

        navigator.focus_on_page(1)
        self.assertEqual(navigator.key, "e")
        navigator.focus_on_page(-1)
        self.assertEqual(navigator.key, "a")

    def test_visible_range_is_clamped_into_list(self) -> None:
        navigator = self._windowed(-4, 99)

        self.assertEqual(navigator.visible_range(5), (0, 4))

    def test_empty_list_is_noop(self) -> None:
        navigator = _navigator([])

        self.assertIsNone(navigator.focus_on_page(1))
        self.assertIsNone(navigator.key)


class HomeEndNavigationTests(unittest.TestCase):
    def test_home_and_end_ignore_current_position(self) -> None:
        keys = ["a", "b", "c"]
        navigator = _navigator(keys)
        for start in keys:
            navigator.key = start
            navigator.focus_on_home_end(-1)
            self.assertEqual(navigator.key, "a")
            navigator.key = start
            navigator.focus_on_home_end(1)
            self.assertEqual(navigator.key, "c")

    def test_empty_list_is_noop(self) -> None:
        navigator = _navigator([])

        self.assertIsNone(navigator.focus_on_home_end(-1))


class ProviderTests(unittest.TestCase):
    def test_keys_are_requeried_on_every_call(self) -> None:
        keys = ["a", "b"]
        navigator = _navigator(keys)
        navigator.key = "b"

        keys.append("c")
        navigator.focus_on_arrow(1)

        self.assertEqual(navigator.key, "c")

    def test_orientation_defaults_to_vertical(self) -> None:
        self.assertEqual(_navigator(["a"]).orientation, "vertical")

    def test_invalid_orientation_is_a_configuration_error(self) -> None:
        navigator = _navigator(["a"], orientation=lambda _ctx: "diagonal")

        with self.assertRaises(FocusConfigurationError):
            _ = navigator.orientation

    def test_providers_receive_active_entry_meta(self) -> None:
        seen: list[ProviderContext] = []

        def orientation(ctx: ProviderContext) -> str:
            seen.append(ctx)
            return "horizontal" if ctx.meta == "toolbar" else "vertical"

        navigator = AreaNavigator(lambda _ctx: ["a"], orientation=orientation)
        coordinator = FocusCoordinator({"area": navigator})

        self.assertEqual(navigator.orientation, "vertical")
        coordinator.focus_area("area", meta="toolbar")
        self.assertEqual(navigator.orientation, "horizontal")
        self.assertIs(seen[-1].navigator, navigator)
        self.assertIs(seen[-1].parent, coordinator)

    def test_initial_key_defaults_to_none(self) -> None:
        self.assertIsNone(_navigator(["a"]).get_initial_key_on_area_focus())

    def test_key_index_lookups(self) -> None:
        navigator = _navigator(["a", "b"])

        self.assertEqual(navigator.get_key_index("b"), 1)
        self.assertEqual(navigator.get_key_index("zzz"), -1)
        self.assertEqual(navigator.get_key_index(None), -1)
        self.assertEqual(navigator.get_focused_key_index(), -1)


class UnregisteredNavigatorTests(unittest.TestCase):
    def test_provider_access_without_parent_raises(self) -> None:
        navigator = AreaNavigator(lambda _ctx: ["a"])

        with self.assertRaises(FocusConfigurationError):
            navigator.get_keys()
        with self.assertRaises(FocusConfigurationError):
            _ = navigator.orientation
        with self.assertRaises(FocusConfigurationError):
            navigator.focus_on_arrow(1)

    def test_plain_key_state_works_without_parent(self) -> None:
        navigator = AreaNavigator(lambda _ctx: ["a"])
        navigator.key = "a"
        navigator.clear()

        self.assertIsNone(navigator.key)


if __name__ == "__main__":
    unittest.main()
