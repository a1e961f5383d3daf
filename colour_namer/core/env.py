"""Configuration for colour-namer: .env loading and setting lookup.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings:
  COLOUR_NAMER_DICTIONARY    path to a .json or .csv colour-name dictionary
  COLOUR_NAMER_SWATCH_SIZE   chip size in pixels for the swatch command

Command-line flags override both.
"""

import os
from pathlib import Path

DICTIONARY_VAR = 'COLOUR_NAMER_DICTIONARY'
SWATCH_SIZE_VAR = 'COLOUR_NAMER_SWATCH_SIZE'
DEFAULT_SWATCH_SIZE = 120


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Accepts `export KEY=value` and quoted values."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def dictionary_path(cli_value: str | None = None) -> str | None:
    """Dictionary file from --dictionary, else the environment, else None (bundled default)."""
    return cli_value or os.environ.get(DICTIONARY_VAR) or None


def swatch_size(cli_value: int | None = None) -> int:
    """Swatch chip size from --chip-size, else the environment, else the default.

    An explicit non-positive --chip-size is an input error; a bad environment
    value falls back to the default.
    """
    if cli_value is not None:
        if cli_value <= 0:
            raise ValueError(f'--chip-size must be a positive integer, got {cli_value}')
        return cli_value
    raw = os.environ.get(SWATCH_SIZE_VAR, '')
    try:
        size = int(raw)
    except ValueError:
        return DEFAULT_SWATCH_SIZE
    return size if size > 0 else DEFAULT_SWATCH_SIZE
