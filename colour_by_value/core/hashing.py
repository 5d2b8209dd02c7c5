"""Hash provider: canonical string form, byte digests and the rolling hash.

Two strategies share one canonicalisation step:

  digest(value)        16+ bytes from a pluggable hash function, sliced by
                       the palette mapper and the emphasis rules
  rolling_hash(value)  h = h*31 + code_unit, wrapped to signed 32-bit,
                       absolute value; drives the continuous HSL colours

Empty values (None and '') are never hashed. Every consumer checks
is_empty() first and falls back to the fixed "no styling" result.
"""

import datetime
import decimal
import hashlib
import math
import re
import struct
from collections.abc import Callable
from typing import Any

from colour_by_value.core.types import InvalidInputKind

HashStrategy = Callable[[bytes], bytes]

MIN_DIGEST_SIZE = 16

# integral floats print without a fraction below this magnitude
_PLAIN_INTEGER_LIMIT = 1e21
_EXPONENT = re.compile(r'e([+-])0*(\d+)')


def md5(data: bytes) -> bytes:
    return hashlib.md5(data, usedforsecurity=False).digest()


def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data, usedforsecurity=False).digest()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def blake2b(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=MIN_DIGEST_SIZE).digest()


# md5 first: it reproduces the colours of previously styled sheets
HASH_STRATEGIES: dict[str, HashStrategy] = {
    'md5': md5,
    'sha1': sha1,
    'sha256': sha256,
    'blake2b': blake2b,
}

DEFAULT_STRATEGY = 'md5'


def get_strategy(name: str | None) -> HashStrategy:
    """Look up a hash strategy by name. None selects the default."""
    if name is None:
        name = DEFAULT_STRATEGY
    key = name.lower()
    if key not in HASH_STRATEGIES:
        raise KeyError(f'Unknown hash strategy: {name}. Available: {", ".join(HASH_STRATEGIES)}')
    return HASH_STRATEGIES[key]


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == '')


def _format_float(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return _EXPONENT.sub(r'e\1\2', repr(value))


def canonical_form(value: Any) -> str | None:
    """Return the string a value is hashed as, or None for empty values.

    Raises InvalidInputKind for values with no sensible string form.
    """
    if is_empty(value):
        return None
    if isinstance(value, str):
        return value
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, decimal.Decimal):
        return str(value)
    if isinstance(value, (datetime.date, datetime.datetime, datetime.time)):
        return value.isoformat()
    raise InvalidInputKind(value)


def _require_text(value: Any) -> str:
    text = canonical_form(value)
    if text is None:
        raise ValueError('Empty values have no digest; check is_empty() first')
    return text


def digest(value: Any, hasher: HashStrategy = md5) -> bytes:
    """Hash the UTF-8 canonical form of value with the given strategy."""
    out = hasher(_require_text(value).encode('utf-8'))
    if len(out) < MIN_DIGEST_SIZE:
        raise ValueError(f'Hash strategy returned {len(out)} bytes, need at least {MIN_DIGEST_SIZE}')
    return out


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def rolling_hash(value: Any) -> int:
    """Polynomial hash over UTF-16 code units, as abs(signed 32-bit)."""
    data = _require_text(value).encode('utf-16-le')
    h = 0
    for (unit,) in struct.iter_unpack('<H', data):
        h = _to_int32(h * 31 + unit)
    return abs(h)
