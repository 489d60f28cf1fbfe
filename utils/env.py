"""
Environment access for pricing overrides.

Values such as ``PRICING_EXCHANGE_RATE`` may live in a ``.env`` file next to
``pyproject.toml``; real environment variables always take precedence.
"""

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load_project_dotenv", "read_env_decimal"]

PROJECT_MARKER = "pyproject.toml"
DOTENV_NAME = ".env"


def _find_project_root(start: Path | None = None) -> Path:
    """Closest directory at or above start holding the project marker file."""
    here = Path(__file__).resolve().parent
    origin = start or here
    for directory in (origin, *origin.parents):
        if (directory / PROJECT_MARKER).is_file():
            return directory
    return here


def load_project_dotenv() -> bool:
    """Load the project ``.env`` without overriding set variables; True if one was read."""
    dotenv_path = _find_project_root() / DOTENV_NAME
    if not dotenv_path.is_file():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True


def read_env_decimal(name: str, default: Decimal) -> Decimal:
    """Read a decimal environment variable, falling back to ``default`` when unset or blank."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"Environment variable {name} is not a number: {raw!r}") from e
