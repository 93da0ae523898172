"""Exceptions raised while reading game records."""

from __future__ import annotations

from chesstree.core.enums import Color


class PgnParseError(ValueError):
    """A game record cannot be turned into a tree."""


class MoveParseError(PgnParseError):
    """A move token cannot be interpreted for the side to move.

    Fatal for the game being parsed; callers reading an archive skip to the
    next game.
    """

    def __init__(self, token: str, side_to_move: Color, reason: str = "") -> None:
        self.token = token
        self.side_to_move = side_to_move
        self.reason = reason
        message = f"Cannot parse move {token!r} for {side_to_move}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
