"""World state tables and the lifecycle reducers that maintain them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from mmo_realm.shared import INACTIVITY_TIMEOUT_SECONDS

log = logging.getLogger(__name__)


class ReducerError(Exception):
    """Raised when a reducer rejects a request."""


@dataclass(frozen=True)
class Identity:
    """A permanent 256-bit identity of a connected client."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 32:
            raise ValueError("Identity must be exactly 32 bytes")

    def __str__(self) -> str:
        return self.value.hex()


@dataclass
class User:
    """A persistent user account."""

    identity: Identity
    username: str
    password_hash: str
    password_salt: str
    created_at: datetime
    last_login: datetime
    email: str | None = None
    is_active: bool = True


@dataclass
class Player:
    """A player's presence in the game world."""

    identity: Identity
    username: str
    last_seen: datetime
    current_zone: str
    position_x: float = 0.0
    position_y: float = 0.0
    position_z: float = 0.0
    rotation_yaw: float = 0.0
    level: int = 1
    experience: int = 0
    health: float = 100.0
    max_health: float = 100.0
    is_online: bool = True


@dataclass
class ChatMessage:
    """A stored chat message."""

    message_id: int
    sender_identity: Identity
    sender_username: str
    message: str
    channel: str
    timestamp: datetime


@dataclass
class GameSession:
    """An active login session."""

    identity: Identity
    login_time: datetime
    last_activity: datetime
    client_version: str
    ip_address: str
    connection_id: int | None = None


@dataclass
class Database:
    """All tables, each keyed by its primary key."""

    users: dict[Identity, User] = field(default_factory=dict)
    players: dict[Identity, Player] = field(default_factory=dict)
    chat_messages: dict[int, ChatMessage] = field(default_factory=dict)
    sessions: dict[Identity, GameSession] = field(default_factory=dict)

    def find_user_by_username(self, username: str) -> User | None:
        """The user with exactly this username, if any."""
        return next((u for u in self.users.values() if u.username == username), None)

    def online_players(self) -> list[Player]:
        """All players currently online."""
        return [p for p in self.players.values() if p.is_online]

    def players_in_zone(self, zone: str) -> list[Player]:
        """All online players in the given zone."""
        return [p for p in self.players.values() if p.is_online and p.current_zone == zone]


@dataclass
class ReducerContext:
    """The caller, the time and the database a reducer runs against."""

    db: Database
    sender: Identity
    timestamp: datetime
    connection_id: int | None = None


def _mark_offline(ctx: ReducerContext, identity: Identity) -> None:
    player = ctx.db.players.get(identity)
    if player is not None:
        player.is_online = False
        player.last_seen = ctx.timestamp


def init(ctx: ReducerContext) -> dict[str, int]:
    """Called once when the server module starts; return the row count of each table."""
    log.info("MMO Server initializing...")
    counts = {
        "users": len(ctx.db.users),
        "players": len(ctx.db.players),
        "chat_messages": len(ctx.db.chat_messages),
        "sessions": len(ctx.db.sessions),
    }
    for table, rows in counts.items():
        log.debug("Table %s holds %d rows", table, rows)
    log.info("MMO Server initialized successfully")
    return counts


def on_connect(ctx: ReducerContext) -> None:
    """Called when a client connects."""
    log.info("Client connected: %s", ctx.sender)


def on_disconnect(ctx: ReducerContext) -> None:
    """Mark the sender's player offline and drop their session."""
    log.info("Client disconnected: %s", ctx.sender)
    _mark_offline(ctx, ctx.sender)
    ctx.db.sessions.pop(ctx.sender, None)


def cleanup_inactive_sessions(ctx: ReducerContext) -> int:
    """Remove sessions idle past the timeout; return how many were removed."""
    cutoff = ctx.timestamp - timedelta(seconds=INACTIVITY_TIMEOUT_SECONDS)
    stale = [s for s in ctx.db.sessions.values() if s.last_activity < cutoff]
    for session in stale:
        _mark_offline(ctx, session.identity)
        del ctx.db.sessions[session.identity]
    if stale:
        log.info("Cleaned up %d inactive sessions", len(stale))
    return len(stale)