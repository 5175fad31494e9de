"""Client-side entry points for connecting, registering and spawning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

log = logging.getLogger(__name__)

_MAX_PORT = 0xFFFF
_SIMULATED_OBJECT_ID = 12345

_USERNAME_ERRORS = ("Username cannot be null", "Invalid username")
_SECOND_FIELD_ERRORS = ("Password cannot be null", "Invalid password")


class ClientError(Exception):
    """Raised when a client request is rejected."""


@dataclass(frozen=True)
class ClientResult:
    """Outcome of a successful client request, with optional text data."""

    data: str | None = None


@dataclass
class _ClientState:
    initialized: bool = False


_state = _ClientState()


def _required_text(value: str | bytes | None, null_message: str, invalid_message: str) -> str:
    if value is None:
        raise ClientError(null_message)
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            raise ClientError(invalid_message) from None
    return value


def initialize_client() -> ClientResult:
    """Prepare client-side state; the result says whether it was already prepared."""
    already = _state.initialized
    _state.initialized = True
    log.info("Client module initialized")
    return ClientResult("already initialized" if already else "initialized")


def connect(host: str | bytes | None, port: int, database_name: str | bytes | None) -> ClientResult:
    """Connect to a server database."""
    host_str = _required_text(host, "Host cannot be null", "Invalid host string")
    db_name = _required_text(database_name, "Database name cannot be null", "Invalid database name")
    if not 0 <= port <= _MAX_PORT:
        raise ClientError("Invalid port")
    log.info("Connecting to %s:%d database: %s", host_str, port, db_name)
    return ClientResult()


def register_user(username: str | bytes | None, password: str | bytes | None) -> ClientResult:
    """Validate and submit a new account."""
    username_str = _required_text(username, *_USERNAME_ERRORS)
    entered_phrase = _required_text(password, *_SECOND_FIELD_ERRORS)
    if len(username_str.encode()) < 3:
        raise ClientError("Username must be at least 3 characters")
    if len(entered_phrase.encode()) < 8:
        raise ClientError("Password must be at least 8 characters")
    log.info("User registration request: %s", username_str)
    return ClientResult()


def spawn_player_character(
    zone_id: int, position_x: float, position_y: float, position_z: float
) -> ClientResult:
    """Spawn the player's character; the result carries the new object id."""
    if not all(math.isfinite(v) for v in (position_x, position_y, position_z)):
        raise ClientError("Invalid position coordinates")
    log.info(
        "Spawning player character at (%s, %s, %s) in zone %s",
        position_x,
        position_y,
        position_z,
        zone_id,
    )
    return ClientResult(str(_SIMULATED_OBJECT_ID))