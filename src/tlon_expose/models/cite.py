"""Cite models as returned by the expose agent.

A cite references content either as a plain path string or as an object
with exactly one of ``chan``, ``group`` or ``desk`` set:

    {"chan": {"nest": ["diary", ["zod", "blog"]], "wer": ["note", "170"]}}
    {"group": ["zod", "tlon"]}
    {"desk": {"flag": ["zod", "groups"], "wer": ["apps"]}}
"""

from __future__ import annotations

from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict


class ChanReference(BaseModel):
    """Reference to a post inside a channel."""

    nest: Tuple[str, Tuple[str, str]]  # [kind, [ship, name]]
    wer: list[str | int] | str  # [type, id, ...]

    @property
    def kind(self) -> str:
        return self.nest[0]

    @property
    def ship(self) -> str:
        return self.nest[1][0]

    @property
    def name(self) -> str:
        return self.nest[1][1]


class DeskReference(BaseModel):
    """Reference into an application desk."""

    flag: Tuple[str, str]  # [ship, desk]
    wer: list[str | int] | str


class Cite(BaseModel):
    """Structured cite. Unknown keys are kept for the JSON fallback."""

    model_config = ConfigDict(extra="allow")

    chan: ChanReference | None = None
    group: Tuple[str, str] | None = None  # [ship, name]
    desk: DeskReference | None = None


# A cite as it arrives in a scry reply, before formatting
RawCite = Union[str, Dict[str, Any]]

CiteLike = Union[str, Cite, Dict[str, Any]]

__all__ = ["ChanReference", "Cite", "CiteLike", "DeskReference", "RawCite"]
