"""Configuration for colour-tool, read from environment variables.

Variables:
  COLOUR_TOOL_PALETTE_PATH  directories searched for *.palette files,
                            separated by os.pathsep (default ~/.colour-tool)
  COLOUR_TOOL_FORMAT        default output format (default text)

Sources, first wins:
  1. The OS environment. Never overwritten.
  2. The file given with --env-file.
  3. A .env found by walking up from cwd. The walk stops at the directory
     holding .git, so a .env outside the repository is never read.
"""

import os
from dataclasses import dataclass
from pathlib import Path

PALETTE_PATH_VAR = 'COLOUR_TOOL_PALETTE_PATH'
FORMAT_VAR = 'COLOUR_TOOL_FORMAT'

DEFAULT_PALETTE_DIR = Path('~/.colour-tool')
DEFAULT_FORMAT = 'text'


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a directory in a clone, a file in a worktree
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file. Comments, blanks and `export ` prefixes are allowed."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key, value = key.strip(), value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        if key:
            values[key] = value
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env settings into os.environ where not already set.

    Returns the file used, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in read_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


@dataclass(frozen=True)
class Settings:
    palette_dirs: list[Path]
    output_format: str


def settings() -> Settings:
    """Current settings from os.environ (call load_env first to include .env files)."""
    raw = os.environ.get(PALETTE_PATH_VAR, '')
    dirs = [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]
    return Settings(
        palette_dirs=dirs or [DEFAULT_PALETTE_DIR.expanduser()],
        output_format=os.environ.get(FORMAT_VAR, '').strip() or DEFAULT_FORMAT,
    )
