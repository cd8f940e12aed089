"""Transport contract used by the exposure operations."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

NOT_FOUND_STATUS = 404


@runtime_checkable
class Transport(Protocol):
    """Something that can poke and scry Gall agents on a ship.

    Implementations raise on failure. Not-found scries must be recognizable
    by :func:`is_not_found`, either through a ``status_code`` attribute or an
    error message mentioning ``404`` / ``not found``.
    """

    def poke(self, app: str, mark: str, json: Any) -> None:
        """Send a poke. Returns nothing; failures raise."""
        ...

    def scry(self, app: str, path: str) -> Any:
        """Read ``path`` from ``app`` and return the decoded JSON."""
        ...


def is_not_found(err: BaseException) -> bool:
    """Return True when ``err`` reports a missing scry path."""
    status = getattr(err, "status_code", None)
    if status is not None:
        return status == NOT_FOUND_STATUS

    message = str(err).lower()
    return "404" in message or "not found" in message


__all__ = ["NOT_FOUND_STATUS", "Transport", "is_not_found"]
