"""Settings for rgba-kit, read from the environment and .env files.

Lookup order (first wins):
  1. OS environment variables — a .env file never overrides them.
  2. The .env file given with --env-file (if any).
  3. The nearest .env walking up from cwd, stopping at a .git boundary.

Recognised variables:
  RGBA_KIT_BACKGROUND   default background for fill/swatch (colour string)
  RGBA_KIT_MIN_RATIO    default --min-ratio for contrast (float)
  RGBA_KIT_JSON         1/true/yes to print JSON by default
"""

import os
from dataclasses import dataclass
from pathlib import Path

from rgba_kit.core.color import WHITE, Color
from rgba_kit.core.errors import ColorFormatError
from rgba_kit.core.parse import from_string

PREFIX = 'RGBA_KIT_'
_TRUTHY = {'1', 'true', 'yes', 'on'}


class SettingsError(ValueError):
    """An RGBA_KIT_* variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    background: Color = WHITE
    min_ratio: float | None = None
    json: bool = False


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above `start`, not crossing a .git root."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped; comments skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys that are not already set.

    Returns the file that was read, or None.
    """
    path: Path | None
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings_from_environ(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from RGBA_KIT_* variables."""
    env = os.environ if environ is None else environ

    background = WHITE
    raw_bg = env.get(PREFIX + 'BACKGROUND')
    if raw_bg:
        try:
            background = from_string(raw_bg.strip())
        except ColorFormatError as e:
            raise SettingsError(f'{PREFIX}BACKGROUND: {e}') from e

    min_ratio = None
    raw_ratio = env.get(PREFIX + 'MIN_RATIO')
    if raw_ratio:
        try:
            min_ratio = float(raw_ratio)
        except ValueError as e:
            raise SettingsError(f'{PREFIX}MIN_RATIO: not a number: {raw_ratio!r}') from e

    as_json = env.get(PREFIX + 'JSON', '').strip().lower() in _TRUTHY
    return Settings(background=background, min_ratio=min_ratio, json=as_json)


def load_settings(env_file: str | None = None) -> tuple[Settings, Path | None]:
    """Load .env (if any) then read settings. Returns (settings, loaded .env path)."""
    path = load_env(env_file)
    return settings_from_environ(), path
