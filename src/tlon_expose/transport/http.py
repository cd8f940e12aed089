"""HTTP transport for a ship's Eyre interface.

Endpoints used:
  POST /~/login                      - authenticate with the +code
  GET  /~/scry/{app}{path}.json      - scry
  PUT  /~/channel/{channel_id}       - poke through a channel

Pokes are acknowledged by Eyre when the channel accepts them. Agent-level
nacks arrive on the channel's event stream, which this client does not
subscribe to.
"""

import logging
import secrets
import time
from typing import Any, Dict, Optional

import requests

from ..models import ShipConfig

logger = logging.getLogger(__name__)


class UrbitHttpError(Exception):
    """Non-2xx response from the ship."""

    def __init__(self, status_code: int, reason: str, url: str):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"HTTP {status_code}: {reason} ({url})")


class UrbitClient:
    """Minimal poke/scry client backed by a ``requests.Session``.

    Usage:
        with UrbitClient(ShipConfig(url="http://localhost:8080", ship="zod", code="...")) as client:
            client.scry("expose", "/show")
    """

    def __init__(
        self,
        config: ShipConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.session = session or requests.Session()
        self.channel_id = f"{int(time.time())}-{secrets.token_hex(3)}"
        self._next_id = 1
        self._logged_in = False

    @property
    def current_user_id(self) -> str:
        return self.config.user_id

    def login(self) -> None:
        """Authenticate with the configured code; the session keeps the cookie."""
        if not self.config.code:
            raise ValueError(f"No access code configured for {self.current_user_id}")

        url = f"{self.config.url}/~/login"
        logger.info("Logging in to %s as %s", self.config.url, self.current_user_id)
        response = self.session.post(
            url,
            data={"password": self.config.code},
            timeout=self.config.timeout,
        )
        self._raise_for_status(response, url)
        self._logged_in = True

    def scry(self, app: str, path: str) -> Any:
        self._ensure_login()
        url = f"{self.config.url}/~/scry/{app}{path}.json"
        logger.debug("scry %s%s", app, path)
        response = self.session.get(url, timeout=self.config.timeout)
        self._raise_for_status(response, url)
        return response.json()

    def poke(self, app: str, mark: str, json: Any) -> None:
        self._ensure_login()
        url = f"{self.config.url}/~/channel/{self.channel_id}"
        action = self._poke_action(app, mark, json)
        logger.debug("poke %s mark=%s id=%s", app, mark, action["id"])
        response = self.session.put(
            url, json=[action], timeout=self.config.timeout
        )
        self._raise_for_status(response, url)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "UrbitClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _poke_action(self, app: str, mark: str, json: Any) -> Dict[str, Any]:
        action_id = self._next_id
        self._next_id += 1
        return {
            "id": action_id,
            "action": "poke",
            "ship": self.config.ship,
            "app": app,
            "mark": mark,
            "json": json,
        }

    def _ensure_login(self) -> None:
        if self.config.code and not self._logged_in:
            self.login()

    @staticmethod
    def _raise_for_status(response: requests.Response, url: str) -> None:
        if not response.ok:
            raise UrbitHttpError(response.status_code, response.reason, url)


__all__ = ["UrbitClient", "UrbitHttpError"]
