"""CLI context: ship settings resolution and shared state."""

import os
from pathlib import Path
from typing import Dict, Optional

import click
from dotenv import dotenv_values
from pydantic import ValidationError

from .models import ShipConfig

URL_ENV = "SHIP_URL"
SHIP_ENV = "SHIP_NAME"
CODE_ENV = "SHIP_CODE"


class ContextError(Exception):
    """Missing or invalid ship settings."""

    pass


def _dotenv(env_file: Optional[Path] = None) -> Dict[str, Optional[str]]:
    """Read ``.env`` from the working directory (or ``env_file``) if present."""
    path = env_file or Path.cwd() / ".env"
    if not path.is_file():
        return {}
    return dotenv_values(path)


def _lookup(name: str, option: Optional[str], dotenv: Dict[str, Optional[str]]) -> Optional[str]:
    if option:
        return option
    return os.environ.get(name) or dotenv.get(name) or None


def resolve_ship_config(
    url: Optional[str] = None,
    ship: Optional[str] = None,
    code: Optional[str] = None,
    env_file: Optional[Path] = None,
) -> ShipConfig:
    """Resolve ship settings.

    Resolution order for each setting:
    1. CLI option (--url, --ship, --code)
    2. Environment variable (SHIP_URL, SHIP_NAME, SHIP_CODE)
    3. .env file in the current directory

    The .env file never overrides the real environment. Values are read
    fresh on every call.

    Raises:
        ContextError: If url or ship cannot be resolved
    """
    dotenv = _dotenv(env_file)

    resolved_url = _lookup(URL_ENV, url, dotenv)
    resolved_ship = _lookup(SHIP_ENV, ship, dotenv)
    resolved_code = _lookup(CODE_ENV, code, dotenv)

    if not resolved_url:
        raise ContextError(f"Missing ship URL (use --url or set {URL_ENV})")
    if not resolved_ship:
        raise ContextError(f"Missing ship name (use --ship or set {SHIP_ENV})")

    try:
        return ShipConfig(url=resolved_url, ship=resolved_ship, code=resolved_code)
    except ValidationError as e:
        raise ContextError(f"Invalid ship settings: {e}") from e


class ExposeContext:
    def __init__(self):
        self.url = None
        self.ship = None
        self.code = None
        self._config = None

    def ship_config(self) -> ShipConfig:
        """Resolve (once) the settings from the group options."""
        if self._config is None:
            self._config = resolve_ship_config(self.url, self.ship, self.code)
        return self._config


pass_context = click.make_pass_decorator(ExposeContext, ensure=True)
