"""Configuration for contrast-tool: .env loading and CONTRAST_* settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git.

Settings (command-line flags override all of these):
  CONTRAST_AUDIT_FILE               default audit file for `audit`/`swatches`
  CONTRAST_CRITICAL_MARKER          marker for critical failures (e.g. coral)
  CONTRAST_CRITICAL_CONTEXT         light | dark | any
  CONTRAST_WORKERS                  thread pool size for large audits
  CONTRAST_SUGGEST_STEP             channel step for `suggest` (default 10)
  CONTRAST_SUGGEST_MAX_ITERATIONS   iteration cap for `suggest` (default 20)
"""

import os
from pathlib import Path

PREFIX = 'CONTRAST_'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above `start`, not crossing a repo root."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and junk lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

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
    """Read CONTRAST_<name>. Empty values count as unset."""
    value = os.environ.get(f'{PREFIX}{name}', '').strip()
    return value or default


def int_setting(name: str, default: int) -> int:
    raw = setting(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{PREFIX}{name} must be an integer, got {raw!r}') from None
