"""tlon-expose: manage public exposure of posts via the %expose agent."""

from .addressing import (
    ChannelKind,
    CitePath,
    CitePathError,
    UnknownChannelKindError,
    cite_path_to_url_path,
    content_type_for,
    expand_cite_path,
    exposed_post_url,
    format_cite,
    parse_cite_path,
)
from .api import (
    check_post_exposed,
    expose_post,
    hide_exposed_post,
    list_exposed_content,
    set_expose_eager_mode,
)
from .client import ClientNotConfiguredError, configure_client, get_client, set_client
from .models import ShipConfig

__all__ = [
    "__version__",
    "ChannelKind",
    "CitePath",
    "CitePathError",
    "ClientNotConfiguredError",
    "ShipConfig",
    "UnknownChannelKindError",
    "check_post_exposed",
    "cite_path_to_url_path",
    "configure_client",
    "content_type_for",
    "expand_cite_path",
    "expose_post",
    "exposed_post_url",
    "format_cite",
    "get_client",
    "hide_exposed_post",
    "list_exposed_content",
    "parse_cite_path",
    "set_client",
    "set_expose_eager_mode",
]

__version__ = "0.1.0"
