"""Poke payloads accepted by the expose agent."""

from __future__ import annotations

from typing import Any, ClassVar, Dict

from pydantic import BaseModel, Field, StrictBool

CANONICAL_PATTERN = r"^/1/"


class Action(BaseModel):
    """Base for poke payloads; ``mark`` is sent alongside the JSON body."""

    mark: ClassVar[str] = "json"

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump()


class ShowAction(Action):
    """Expose a post publicly."""

    show: str = Field(pattern=CANONICAL_PATTERN)


class HideAction(Action):
    """Stop exposing a post."""

    hide: str = Field(pattern=CANONICAL_PATTERN)


class EagerAction(Action):
    """Toggle pre-fetching of pinned posts from other ships."""

    # The agent reads this poke under the noun mark
    mark: ClassVar[str] = "noun"

    eager: StrictBool


__all__ = ["Action", "EagerAction", "HideAction", "ShowAction"]
