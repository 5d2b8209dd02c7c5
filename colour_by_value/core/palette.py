"""Fixed palettes and the discrete palette mapper.

Backgrounds are 32 pastel Tailwind shades (100 and 200 of sixteen hues),
foregrounds the 800 shade of the same sixteen hues. The order of both
tables is part of the output format: previously styled sheets only keep
their colours if the tables are reproduced exactly.

    background = BACKGROUND_PALETTE[digest(value)[0] & 0x1F]
    foreground = FOREGROUND_PALETTE[digest(background)[0] & 0x0F]

The foreground re-hashes the background hex string rather than the value.
"""

import math
import re

from colour_by_value.core.hashing import HashStrategy, digest, md5

HUES = (
    'red',
    'orange',
    'amber',
    'yellow',
    'lime',
    'green',
    'emerald',
    'teal',
    'cyan',
    'sky',
    'blue',
    'indigo',
    'violet',
    'purple',
    'fuchsia',
    'pink',
)

# fmt: off
BACKGROUND_PALETTE: tuple[str, ...] = (
    '#FEE2E2', '#FFEDD5', '#FEF3C7', '#FEF9C3', '#ECFCCB', '#DCFCE7', '#D1FAE5', '#CCFBF1',  # 100
    '#CFFAFE', '#E0F2FE', '#DBEAFE', '#E0E7FF', '#EDE9FE', '#F3E8FF', '#FAE8FF', '#FCE7F3',  # 100
    '#FECACA', '#FED7AA', '#FDE68A', '#FEF08A', '#D9F99D', '#BBF7D0', '#A7F3D0', '#99F6E4',  # 200
    '#A5F3FC', '#BAE6FD', '#BFDBFE', '#C7D2FE', '#DDD6FE', '#E9D5FF', '#F5D0FE', '#FBCFE8',  # 200
)

FOREGROUND_PALETTE: tuple[str, ...] = (
    '#991B1B', '#9A3412', '#92400E', '#854D0E', '#3F6212', '#166534', '#065F46', '#115E59',  # 800
    '#155E75', '#075985', '#1E40AF', '#3730A3', '#5B21B6', '#6B21A8', '#86198F', '#9D174D',  # 800
)
# fmt: on

BACKGROUND_MASK = 0x1F
FOREGROUND_MASK = 0x0F

EMPTY_BACKGROUND = '#FFFFFF'

TAILWIND: dict[str, str] = {'white': '#ffffff', 'black': '#000000'}
for _i, _hue in enumerate(HUES):
    TAILWIND[f'{_hue}100'] = BACKGROUND_PALETTE[_i].lower()
    TAILWIND[f'{_hue}200'] = BACKGROUND_PALETTE[_i + len(HUES)].lower()
    TAILWIND[f'{_hue}800'] = FOREGROUND_PALETTE[_i].lower()

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def background_index(value_digest: bytes) -> int:
    return value_digest[0] & BACKGROUND_MASK


def background_for(value_digest: bytes) -> str:
    """Pick the pastel background for a value digest."""
    return BACKGROUND_PALETTE[background_index(value_digest)]


def foreground_index(background: str, hasher: HashStrategy = md5) -> int:
    return digest(background, hasher)[0] & FOREGROUND_MASK


def foreground_for(background: str, hasher: HashStrategy = md5) -> str:
    """Pick the dark text colour by re-hashing the background hex string."""
    return FOREGROUND_PALETTE[foreground_index(background, hasher)]


def hex_to_rgb(hex_colour: str) -> tuple[int, int, int]:
    """Parse #rgb / #rrggbb (with or without #). Invalid input returns black."""
    m = _HEX_RE.match(hex_colour.strip())
    if not m:
        return (0, 0, 0)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_hex(colour: str) -> str:
    """Normalise a hex colour or palette name ('red200') to #RRGGBB.

    Raises ValueError for anything else.
    """
    text = colour.strip()
    named = TAILWIND.get(text.lower())
    if named:
        return named.upper()
    if not _HEX_RE.match(text):
        raise ValueError(f'Invalid colour: {colour!r} (expected #rgb, #rrggbb or a palette name like red200)')
    return rgb_to_hex(*hex_to_rgb(text))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02X}{g:02X}{b:02X}'


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean RGB distance. Plain ints, so no uint8 wraparound."""
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


def nearest_colour(rgb: tuple[int, int, int], threshold: float = 30) -> tuple[str | None, float]:
    """Nearest named palette colour, or (None, distance) beyond threshold."""
    best_name = None
    best_dist = float('inf')
    for name, hex_val in TAILWIND.items():
        d = rgb_distance(rgb, hex_to_rgb(hex_val))
        if d < best_dist:
            best_name, best_dist = name, d
    if best_dist > threshold:
        return None, best_dist
    return best_name, best_dist


def colour_name(hex_colour: str | None) -> str | None:
    """Exact palette name for a hex colour, or None."""
    if hex_colour is None:
        return None
    wanted = hex_colour.lower()
    for name, hex_val in TAILWIND.items():
        if hex_val == wanted:
            return name
    return None
