"""Pydantic model for ship connection settings."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ShipConfig(BaseModel):
    """Connection info for a ship's HTTP interface.

    ``url`` is stored without a trailing slash so public URLs can be built by
    plain concatenation. ``ship`` is stored without its ``~``.
    """

    url: str
    ship: str
    code: str | None = None  # +code access code, enables login
    timeout: float = 30.0

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("Ship URL cannot be empty")
        return value

    @field_validator("ship")
    @classmethod
    def _strip_sig(cls, value: str) -> str:
        value = value.strip().lstrip("~")
        if not value:
            raise ValueError("Ship name cannot be empty")
        return value

    @property
    def user_id(self) -> str:
        return f"~{self.ship}"


__all__ = ["ShipConfig"]
