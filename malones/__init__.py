"""Malone's pub gimmicks - EuroMillions quick pick and the yes/no doorway chat."""

from .chat import reply
from .dialogue import create_session
from .lottery import draw_ticket

__all__ = ["create_session", "draw_ticket", "reply"]
