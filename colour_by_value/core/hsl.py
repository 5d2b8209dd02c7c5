"""Continuous colour generator for the "random high-contrast" mode.

With h = rolling_hash(value):

    background  hue h % 360          sat 70 + h % 30   light 45 + h % 20
    foreground  hue (h + 180) % 360  sat 80 + h % 20   light 15 or 85

The foreground hue is the complement of the background hue, and its
lightness is either very dark (h even) or very light (h odd) against the
mid-lightness background. Empty values are not handled here; callers
bypass them before asking for a colour.
"""

import colorsys
from dataclasses import dataclass
from typing import Any

from colour_by_value.core.hashing import rolling_hash
from colour_by_value.core.palette import rgb_to_hex

BACKGROUND = 'background'
FOREGROUND = 'foreground'
ROLES = (BACKGROUND, FOREGROUND)

BG_SATURATION_BASE = 70
BG_SATURATION_SPAN = 30
BG_LIGHTNESS_BASE = 45
BG_LIGHTNESS_SPAN = 20
FG_SATURATION_BASE = 80
FG_SATURATION_SPAN = 20
FG_LIGHTNESS_DARK = 15
FG_LIGHTNESS_LIGHT = 85


@dataclass(frozen=True)
class Hsl:
    """Hue in degrees (0-359), saturation and lightness in percent."""

    hue: int
    saturation: int
    lightness: int

    def to_rgb(self) -> tuple[int, int, int]:
        r, g, b = colorsys.hls_to_rgb(self.hue / 360, self.lightness / 100, self.saturation / 100)
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_hex(self) -> str:
        return rgb_to_hex(*self.to_rgb())

    def css(self) -> str:
        return f'hsl({self.hue}, {self.saturation}%, {self.lightness}%)'


def _background(h: int) -> Hsl:
    return Hsl(
        hue=h % 360,
        saturation=BG_SATURATION_BASE + h % BG_SATURATION_SPAN,
        lightness=BG_LIGHTNESS_BASE + h % BG_LIGHTNESS_SPAN,
    )


def _foreground(h: int) -> Hsl:
    return Hsl(
        hue=(h + 180) % 360,
        saturation=FG_SATURATION_BASE + h % FG_SATURATION_SPAN,
        lightness=FG_LIGHTNESS_DARK if h % 2 == 0 else FG_LIGHTNESS_LIGHT,
    )


def colour_for(value: Any, role: str) -> Hsl:
    """HSL colour for a non-empty value in the given role."""
    if role not in ROLES:
        raise ValueError(f'Unknown colour role: {role!r}. Expected one of {ROLES}')
    h = rolling_hash(value)
    return _background(h) if role == BACKGROUND else _foreground(h)


def colour_pair(value: Any) -> tuple[Hsl, Hsl]:
    """(background, foreground) from a single hash computation."""
    h = rolling_hash(value)
    return _background(h), _foreground(h)
