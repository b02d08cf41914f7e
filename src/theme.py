"""Color & style helpers for the rendered task list.

Decisions:
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Disabled automatically when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables colors completely.
- Palette overrides via TODO_PRIMARY / TODO_PENDING / TODO_DONE (hex), from
  the environment or the project .env file.
"""
from __future__ import annotations
import os, sys
from typing import Dict

from config import ENV_FILE, read_env_file

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#F6FF99'
HEX_DONE_DEFAULT = '#A7E399'


def _resolve_hex(name: str, default: str, file_values: Dict[str, str]) -> str:
    # priority: real env var > .env entry > default; invalid hex falls back
    for candidate in (os.environ.get(name), file_values.get(name)):
        if candidate and _is_hex(candidate):
            return '#' + candidate.lstrip('#')
    return default


_FILE_VALUES = read_env_file(ENV_FILE)
HEX_PRIMARY = _resolve_hex('TODO_PRIMARY', HEX_PRIMARY_DEFAULT, _FILE_VALUES)
HEX_PENDING = _resolve_hex('TODO_PENDING', HEX_PENDING_DEFAULT, _FILE_VALUES)
HEX_DONE = _resolve_hex('TODO_DONE', HEX_DONE_DEFAULT, _FILE_VALUES)

PRIMARY = _from_hex(HEX_PRIMARY)
STATUS_COLOR = {
    'Not Completed': _from_hex(HEX_PENDING),
    'Completed': _from_hex(HEX_DONE),
}
HEADER_COLOR = PRIMARY
INDEX_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET


__all__ = ['color', 'BOLD', 'STATUS_COLOR', 'HEADER_COLOR', 'INDEX_COLOR', 'EMPTY_COLOR']
