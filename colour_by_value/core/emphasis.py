"""Formatting decision maker: bold / italic / underline from digest bytes.

Each decision reads its own byte of the value digest and is true when the
byte (0-255) falls below a cutoff. Distinct offsets keep the three
decisions uncorrelated.
"""

from dataclasses import dataclass
from typing import Any

from colour_by_value.core.hashing import HashStrategy, digest, is_empty, md5

BOLD_OFFSET = 1
ITALIC_OFFSET = 2
UNDERLINE_OFFSET = 3

BOLD_CUTOFF = 102  # ~40%
ITALIC_CUTOFF = 77  # ~30%
UNDERLINE_CUTOFF = 64  # 25%

BYTE_RANGE = 256


@dataclass(frozen=True)
class Cutoffs:
    bold: int = BOLD_CUTOFF
    italic: int = ITALIC_CUTOFF
    underline: int = UNDERLINE_CUTOFF

    def probabilities(self) -> dict[str, float]:
        return {
            'bold': self.bold / BYTE_RANGE,
            'italic': self.italic / BYTE_RANGE,
            'underline': self.underline / BYTE_RANGE,
        }


DEFAULT_CUTOFFS = Cutoffs()


@dataclass(frozen=True)
class Emphasis:
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {'bold': self.bold, 'italic': self.italic, 'underline': self.underline}


NO_EMPHASIS = Emphasis()


def format_for(value: Any, hasher: HashStrategy = md5, cutoffs: Cutoffs = DEFAULT_CUTOFFS) -> Emphasis:
    """Derive the emphasis triple for a value. Empty values get none."""
    if is_empty(value):
        return NO_EMPHASIS
    d = digest(value, hasher)
    return Emphasis(
        bold=d[BOLD_OFFSET] < cutoffs.bold,
        italic=d[ITALIC_OFFSET] < cutoffs.italic,
        underline=d[UNDERLINE_OFFSET] < cutoffs.underline,
    )
