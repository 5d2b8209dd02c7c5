"""Style bundles: the complete, immutable style for one cell.

Three derivations are exposed to the modes and the CLI:

  derive_discrete_style(value)   palette colours, no emphasis
  derive_random_style(value)     complementary HSL colours, optional bold
  derive_formatted_style(value)  palette colours plus bold/italic/underline

Every bundle is fully computed before the host writes anything, so fill
and font for a cell are always applied together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from colour_by_value.core.emphasis import DEFAULT_CUTOFFS, Cutoffs, format_for
from colour_by_value.core.hashing import HashStrategy, digest, is_empty, md5
from colour_by_value.core.hsl import Hsl, colour_pair
from colour_by_value.core.palette import EMPTY_BACKGROUND, background_for, foreground_for

DISCRETE = 'discrete'
RANDOM = 'random'
FORMATTED = 'formatted'


def _hex(colour: str | Hsl | None) -> str | None:
    if isinstance(colour, Hsl):
        return colour.to_hex()
    return colour


@dataclass(frozen=True)
class StyleBundle:
    background: str | Hsl
    foreground: str | Hsl | None = None  # None keeps the default text colour
    bold: bool = False
    italic: bool = False
    underline: bool = False
    mode: str | None = None

    @property
    def background_hex(self) -> str:
        return _hex(self.background) or EMPTY_BACKGROUND

    @property
    def foreground_hex(self) -> str | None:
        return _hex(self.foreground)

    @property
    def is_unstyled(self) -> bool:
        return self == EMPTY_STYLE

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'background': self.background_hex,
            'foreground': self.foreground_hex,
            'bold': self.bold,
            'italic': self.italic,
            'underline': self.underline,
        }
        if isinstance(self.background, Hsl):
            data['background_hsl'] = self.background.css()
        if isinstance(self.foreground, Hsl):
            data['foreground_hsl'] = self.foreground.css()
        return data


EMPTY_STYLE = StyleBundle(background=EMPTY_BACKGROUND)


def derive_discrete_style(value: Any, hasher: HashStrategy = md5) -> StyleBundle:
    if is_empty(value):
        return EMPTY_STYLE
    background = background_for(digest(value, hasher))
    return StyleBundle(
        background=background,
        foreground=foreground_for(background, hasher),
        mode=DISCRETE,
    )


def derive_random_style(value: Any, bold: bool = False) -> StyleBundle:
    if is_empty(value):
        return EMPTY_STYLE
    background, foreground = colour_pair(value)
    return StyleBundle(background=background, foreground=foreground, bold=bold, mode=RANDOM)


def derive_formatted_style(
    value: Any,
    hasher: HashStrategy = md5,
    cutoffs: Cutoffs = DEFAULT_CUTOFFS,
) -> StyleBundle:
    if is_empty(value):
        return EMPTY_STYLE
    background = background_for(digest(value, hasher))
    emphasis = format_for(value, hasher, cutoffs)
    return StyleBundle(
        background=background,
        foreground=foreground_for(background, hasher),
        bold=emphasis.bold,
        italic=emphasis.italic,
        underline=emphasis.underline,
        mode=FORMATTED,
    )


def derive_style(value: Any, mode: str, hasher: HashStrategy = md5, bold: bool = False) -> StyleBundle:
    """Dispatch to one of the three derivations by mode name."""
    if mode == DISCRETE:
        return derive_discrete_style(value, hasher)
    if mode == RANDOM:
        return derive_random_style(value, bold=bold)
    if mode == FORMATTED:
        return derive_formatted_style(value, hasher)
    raise KeyError(f'Unknown style mode: {mode}. Available: {DISCRETE}, {RANDOM}, {FORMATTED}')
