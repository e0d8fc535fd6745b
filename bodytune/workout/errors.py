"""Errors raised by the squad workout domain."""

from __future__ import annotations


class SquadError(Exception):
    """Base class for squad workout errors."""


class InvalidParticipantCount(SquadError, ValueError):
    """Raised when a session is started with too few or too many athletes."""


class InvalidState(SquadError, RuntimeError):
    """Raised when an operation is not allowed in the current state."""


class InvalidInput(SquadError, ValueError):
    """Raised when user-supplied values are invalid."""
