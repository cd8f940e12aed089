"""Cite path types for the addressing system."""

from dataclasses import dataclass
from enum import Enum

VERSION_PREFIX = "/1"
"""Version segment of canonical cite paths."""


class CitePathError(ValueError):
    """Malformed cite path."""

    pass


class UnknownChannelKindError(CitePathError):
    """Channel kind outside of chat, diary and heap."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"Unknown channel kind: {kind}. Expected chat, diary, or heap."
        )


class ChannelKind(str, Enum):
    """Kind of channel a post lives in."""

    CHAT = "chat"
    DIARY = "diary"
    HEAP = "heap"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "ChannelKind | str") -> "ChannelKind":
        """Validate an untyped kind coming from user input or JSON.

        Raises:
            UnknownChannelKindError: If value is not a known kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownChannelKindError(str(value)) from None


def content_type_for(kind: ChannelKind | str) -> str:
    """Return the content type label used in paths for a channel kind.

    Examples:
        >>> content_type_for("chat")
        'msg'
        >>> content_type_for(ChannelKind.HEAP)
        'curio'
    """
    match ChannelKind.parse(kind):
        case ChannelKind.CHAT:
            return "msg"
        case ChannelKind.DIARY:
            return "note"
        case ChannelKind.HEAP:
            return "curio"


@dataclass(frozen=True)
class CitePath:
    """A single post addressed by channel and id.

    The simplified form ``chat/~zod/general/170.141`` parses into
    ``CitePath(kind=CHAT, host="~zod", channel="general", post_id="170.141")``.
    """

    kind: ChannelKind
    """Channel kind; determines the content type label."""

    host: str
    """Hosting ship, usually with its ``~`` prefix (``~zod``)."""

    channel: str
    """Channel name on the host."""

    post_id: str
    """Post id. May contain further ``/`` separated components."""

    @property
    def content_type(self) -> str:
        return content_type_for(self.kind)

    @property
    def canonical(self) -> str:
        """Versioned path understood by the expose agent."""
        return (
            f"{VERSION_PREFIX}/chan/{self.kind.value}/{self.host}/"
            f"{self.channel}/{self.content_type}/{self.post_id}"
        )

    @property
    def url_path(self) -> str:
        """Path below the public ``/expose`` route."""
        return self.canonical[len(VERSION_PREFIX) :]

    def __str__(self) -> str:
        return f"{self.kind.value}/{self.host}/{self.channel}/{self.post_id}"
