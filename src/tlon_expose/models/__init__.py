"""Pydantic models for expose agent payloads and ship settings."""

from .actions import Action, EagerAction, HideAction, ShowAction
from .cite import ChanReference, Cite, CiteLike, DeskReference, RawCite
from .config import ShipConfig
from .responses import SHOW_REPLY, ShowReply, exposed_cites, is_exposed

__all__ = [
    "Action",
    "ChanReference",
    "Cite",
    "CiteLike",
    "DeskReference",
    "EagerAction",
    "HideAction",
    "RawCite",
    "SHOW_REPLY",
    "ShipConfig",
    "ShowAction",
    "ShowReply",
    "exposed_cites",
    "is_exposed",
]
