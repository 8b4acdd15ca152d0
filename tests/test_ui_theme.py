"""Theme name resolution tests."""

from __future__ import annotations

import unittest

from lazybrowser.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeResolutionTests(unittest.TestCase):
    def test_configurable_names_are_listed(self) -> None:
        self.assertEqual(set(available_theme_names()), {"default", "ocean"})

    def test_known_names_resolve_case_insensitively(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(" Ocean "), OCEAN_THEME)
        self.assertIs(resolve_theme("plain"), PLAIN_THEME)

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name("solarized"), "default")
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertIs(resolve_theme("solarized"), DEFAULT_THEME)

    def test_no_color_forces_plain_palette(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
