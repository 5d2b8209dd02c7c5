"""Environment and .env settings for colour-by-value.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings are read from COLOUR_BY_VALUE_<NAME> variables:
  COLOUR_BY_VALUE_HASH   default hash strategy (md5, sha1, sha256, blake2b)
  COLOUR_BY_VALUE_SHEET  default sheet name
"""

import os
from pathlib import Path

ENV_PREFIX = 'COLOUR_BY_VALUE_'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts quotes, `export` and # comments."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if value[:1] in ('"', "'") and value.endswith(value[0]) and len(value) > 1:
            value = value[1:-1]
        elif ' #' in value:
            value = value.split(' #', 1)[0].rstrip()
        result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def setting(name: str, default: str | None = None) -> str | None:
    """Value of COLOUR_BY_VALUE_<NAME>, or default when unset or blank."""
    value = os.environ.get(ENV_PREFIX + name.upper(), '').strip()
    return value or default
