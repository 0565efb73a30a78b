"""Tests for colour detection and palette overrides."""
import pytest

import theme
from theme import color_support, foreground, palette_hex


@pytest.mark.parametrize("environ, isatty, expected", [
    ({}, True, (True, False)),
    ({}, False, (False, False)),
    ({"FORCE_COLOR": "1"}, False, (True, False)),
    ({"COLORTERM": "truecolor"}, True, (True, True)),
    ({"COLORTERM": "24bit", "FORCE_COLOR": "yes"}, False, (True, True)),
    ({"NO_COLOR": "", "FORCE_COLOR": "1", "COLORTERM": "truecolor"}, True, (False, False)),
])
def test_color_support(environ, isatty, expected):
    assert color_support(environ, isatty) == expected


def test_foreground_escapes():
    assert foreground("#FF0000", truecolor=True) == "\033[38;2;255;0;0m"
    assert foreground("FF0000", truecolor=False) == "\033[38;5;196m"
    assert foreground("#000000", truecolor=False) == "\033[38;5;16m"


def test_palette_override_and_fallback(monkeypatch):
    monkeypatch.setenv("CYBERGUARDIAN_ACCENT", "123abc")
    assert palette_hex("ACCENT", "#48B3AF") == "#123abc"
    monkeypatch.setenv("CYBERGUARDIAN_ACCENT", "teal")
    assert palette_hex("ACCENT", "#48B3AF") == "#48B3AF"


def test_public_names_are_the_palette_and_helpers():
    assert all(not name.startswith('_') for name in theme.__all__)
    assert all(hasattr(theme, name) for name in theme.__all__)
