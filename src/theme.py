"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = frozenset({'TASKS_PRIMARY', 'TASKS_DONE', 'TASKS_PENDING'})

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def is_hex_color(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def parse_env_file(text: str) -> dict[str, str]:
    """Pick palette overrides out of .env text; unknown keys and bad hex are skipped."""
    overrides: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip()
        if k in PALETTE_KEYS and is_hex_color(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides

def resolve_hex(key: str, env_overrides: dict[str, str], default: str) -> str:
    """Priority: real env var > .env override > default."""
    value = os.environ.get(key)
    if value and is_hex_color(value):
        return '#' + value.lstrip('#')
    return env_overrides.get(key, default)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_DONE_DEFAULT = '#34C759'
HEX_PENDING_DEFAULT = '#8E8E93'

def load_env_overrides(path: Path) -> dict[str, str]:
    """Palette overrides from a .env file; missing or unreadable files give none."""
    if not path.exists():
        return {}
    try:
        return parse_env_file(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return {}

_ENV_OVERRIDES = load_env_overrides(Path(__file__).resolve().parent.parent / '.env')

HEX_PRIMARY = resolve_hex('TASKS_PRIMARY', _ENV_OVERRIDES, HEX_PRIMARY_DEFAULT)
HEX_DONE = resolve_hex('TASKS_DONE', _ENV_OVERRIDES, HEX_DONE_DEFAULT)
HEX_PENDING = resolve_hex('TASKS_PENDING', _ENV_OVERRIDES, HEX_PENDING_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
C_DONE = _from_hex(HEX_DONE)
C_PENDING = _from_hex(HEX_PENDING)

# keyed by Task.is_completed
INDICATOR_COLOR = {
    True: C_DONE,
    False: C_PENDING,
}

HEADER_COLOR = PRIMARY
NUMBER_COLOR = PRIMARY + BOLD
MUTED_COLOR = DIM + C_PENDING

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','INDICATOR_COLOR','HEADER_COLOR','NUMBER_COLOR','MUTED_COLOR',
    'HEX_PRIMARY','HEX_DONE','HEX_PENDING','parse_env_file','load_env_overrides','resolve_hex','is_hex_color',
    '_ENABLE','_USE_TRUECOLOR','_FORCE'
]
