"""Engine-facing entry points that validate requests before they reach the server."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from mmo_realm.database import Identity

log = logging.getLogger(__name__)

IDENTITY_SIZE = 32
MAX_CHAT_LENGTH = 500
_MAX_PORT = 0xFFFF


class BridgeError(Exception):
    """Raised when a bridge request is rejected."""


@dataclass(frozen=True)
class BridgeResult:
    """Outcome of a successful bridge request, with optional payload bytes."""

    data: bytes = b""

    @property
    def data_size(self) -> int:
        """Number of payload bytes carried by the result."""
        return len(self.data)


def _text(value: str | bytes | None, error_message: str) -> str:
    """Decode an incoming string; a missing value reads as empty."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            raise BridgeError(error_message) from None
    return value


def identity_bytes(identity: Identity) -> bytes:
    """Fixed-size representation of an identity, zero-padded to 32 bytes."""
    encoded = str(identity).encode()[:IDENTITY_SIZE]
    return encoded.ljust(IDENTITY_SIZE, b"\0")


def connect(host: str | bytes | None, port: int, database_name: str | bytes | None) -> BridgeResult:
    """Open a connection to the given host, port and database."""
    host_str = _text(host, "Invalid host string")
    db_name = _text(database_name, "Invalid database name")
    if not 0 <= port <= _MAX_PORT:
        raise BridgeError("Invalid port")
    log.info("Connecting to %s:%d database: %s", host_str, port, db_name)
    return BridgeResult()


def register_user(
    username: str | bytes | None,
    password: str | bytes | None,
    email: str | bytes | None = None,
) -> BridgeResult:
    """Validate and submit a registration request."""
    username_str = _text(username, "Invalid username")
    phrase = _text(password, "Invalid password")
    if email is not None:
        _text(email, "Invalid email")
    if len(username_str.encode()) < 3:
        raise BridgeError("Username too short")
    if len(phrase.encode()) < 8:
        raise BridgeError("Password too short")
    log.info("User registration request: %s", username_str)
    return BridgeResult()


def login_user(username: str | bytes | None, password: str | bytes | None) -> BridgeResult:
    """Validate and submit a login request."""
    username_str = _text(username, "Invalid username")
    phrase = _text(password, "Invalid password")
    if not username_str or not phrase:
        raise BridgeError("Username and password required")
    log.info("User login request: %s", username_str)
    return BridgeResult()


def join_game(starting_zone: str | bytes | None) -> BridgeResult:
    """Request to join the game in a starting zone."""
    zone = _text(starting_zone, "Invalid zone name")
    log.info("Player joining game in zone: %s", zone)
    return BridgeResult()


def update_position(x: float, y: float, z: float, yaw: float) -> BridgeResult:
    """Submit a position update; every coordinate must be finite."""
    if not all(math.isfinite(v) for v in (x, y, z, yaw)):
        raise BridgeError("Invalid position values")
    log.debug("Position update: (%s, %s, %s) yaw: %s", x, y, z, yaw)
    return BridgeResult()


def send_chat(message: str | bytes | None, channel: str | bytes | None) -> BridgeResult:
    """Validate and submit a chat message."""
    message_str = _text(message, "Invalid message")
    channel_str = _text(channel, "Invalid channel")
    if not message_str.strip():
        raise BridgeError("Message cannot be empty")
    if len(message_str.encode()) > MAX_CHAT_LENGTH:
        raise BridgeError("Message too long")
    log.info("Chat message to %s: %s", channel_str, message_str)
    return BridgeResult()