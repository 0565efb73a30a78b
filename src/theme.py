"""Color & style helpers for the terminal presenter.

Decisions:
- Truecolor when COLORTERM advertises it, else the xterm 256-color cube.
- Off when stdout is not a TTY unless FORCE_COLOR=1; NO_COLOR always wins.
- Palette overrides come from CYBERGUARDIAN_* settings (env or .env).
"""
from __future__ import annotations
import os, sys
from typing import Mapping, Tuple
from config import get_setting

_TRUTHY = {"1", "true", "yes", "on"}


def color_support(environ: Mapping[str, str], isatty: bool) -> Tuple[bool, bool]:
    """(colors enabled, truecolor) for the given environment."""
    if environ.get("NO_COLOR") is not None:
        return False, False
    enabled = isatty or environ.get("FORCE_COLOR", "").lower() in _TRUTHY
    colorterm = environ.get("COLORTERM", "").lower()
    return enabled, enabled and ("truecolor" in colorterm or "24bit" in colorterm)


_ENABLED, _TRUECOLOR = color_support(os.environ, sys.stdout.isatty())


def valid_hex(value: str) -> bool:
    digits = value.lstrip('#')
    return len(digits) == 6 and all(c in '0123456789abcdefABCDEF' for c in digits)


def foreground(hex_code: str, truecolor: bool) -> str:
    """Foreground escape for ``#rrggbb``, approximated to 256 colors if needed."""
    digits = hex_code.lstrip('#')
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    if truecolor:
        return f"\033[38;2;{r};{g};{b}m"
    r6, g6, b6 = (int(round(x / 255 * 5)) for x in (r, g, b))
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"


def palette_hex(name: str, default: str) -> str:
    """Configured ``CYBERGUARDIAN_<name>`` colour, or default when unset or malformed."""
    value = get_setting(name)
    if value and valid_hex(value):
        return '#' + value.lstrip('#')
    return default


def _style(code: str) -> str:
    return f"\033[{code}m" if _ENABLED else ''


def _fg(name: str, default: str) -> str:
    return foreground(palette_hex(name, default), _TRUECOLOR) if _ENABLED else ''


RESET = _style('0')
BOLD = _style('1')
DIM = _style('2')

PRIMARY = _fg('PRIMARY', '#C061CB')   # banner
ACCENT = _fg('ACCENT', '#48B3AF')     # welcome box, help
ERROR = _fg('ERROR', '#E5484D')
SUCCESS = _fg('SUCCESS', '#A7E399')

BANNER_COLOR = PRIMARY + BOLD
DIVIDER_COLOR = DIM
PROMPT_COLOR = BOLD


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLED or not styles:
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'color_support', 'foreground', 'palette_hex',
    'RESET', 'BOLD', 'DIM', 'PRIMARY', 'ACCENT', 'ERROR', 'SUCCESS',
    'BANNER_COLOR', 'DIVIDER_COLOR', 'PROMPT_COLOR',
]
