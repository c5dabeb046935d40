"""Authentication state of a grocery session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Unauthenticated:
    """No login has succeeded yet."""


@dataclass(frozen=True)
class Authenticated:
    """A login succeeded and the server issued a session key."""

    session_key: str


SessionState = Unauthenticated | Authenticated
