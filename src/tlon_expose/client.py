"""Module-level transport used when operations get no explicit one."""

from __future__ import annotations

from typing import Any

from .models import ShipConfig
from .transport import Transport, UrbitClient

_CLIENT: Transport | None = None


class ClientNotConfiguredError(RuntimeError):
    """No transport configured; call configure_client() first."""

    pass


def reset() -> None:
    """Drop the configured client (primarily for tests)."""

    global _CLIENT
    if isinstance(_CLIENT, UrbitClient):
        _CLIENT.close()
    _CLIENT = None


def configure_client(config: ShipConfig | None = None, **fields: Any) -> UrbitClient:
    """Create an HTTP client for a ship and make it the default transport.

    Accepts either a ShipConfig or its fields as keywords:

        configure_client(url="https://zod.tlon.network", ship="zod", code="...")
    """

    if config is None:
        config = ShipConfig.model_validate(fields)
    elif fields:
        config = ShipConfig.model_validate({**config.model_dump(), **fields})

    client = UrbitClient(config)
    set_client(client)
    return client


def set_client(transport: Transport) -> Transport:
    """Install any transport as the default."""

    global _CLIENT
    if _CLIENT is not None and _CLIENT is not transport:
        reset()
    _CLIENT = transport
    return transport


def get_client() -> Transport:
    """Return the configured transport."""

    if _CLIENT is None:
        raise ClientNotConfiguredError(
            "Client not configured; call configure_client() first"
        )
    return _CLIENT


def is_configured() -> bool:
    return _CLIENT is not None


__all__ = [
    "ClientNotConfiguredError",
    "configure_client",
    "get_client",
    "is_configured",
    "reset",
    "set_client",
]
