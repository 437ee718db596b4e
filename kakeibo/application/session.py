"""Explicit session context handed to use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserSession:
    """Identity of the user on whose behalf a use case runs.

    Every repository call is scoped to ``user_id``; use cases never read
    the current user from global state.
    """

    user_id: str


__all__ = ["UserSession"]
