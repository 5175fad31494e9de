"""Account registration, login and logout."""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime

from mmo_realm.database import (
    GameSession,
    Identity,
    ReducerContext,
    ReducerError,
    User,
)

log = logging.getLogger(__name__)

_SERVER_SALT = b"mmo_server_secret_salt"
_SALT_KEY = b"salt_generation_key"
_VALID_USERNAME_CHARS = "_"


def hash_password(password: str, salt: str) -> str:
    """SHA-256 hex digest of password, salt and the server-side salt."""
    hasher = hashlib.sha256()
    hasher.update(password.encode())
    hasher.update(salt.encode())
    hasher.update(_SERVER_SALT)
    return hasher.hexdigest()


def verify_password(password: str, stored_hash: str, salt: str) -> bool:
    """Whether the password hashes to the stored hash with this salt."""
    return hash_password(password, salt) == stored_hash


def generate_salt(identity: Identity, timestamp: datetime) -> str:
    """A 16-character hex salt derived from identity and time."""
    hasher = hashlib.sha256()
    hasher.update(str(identity).encode())
    hasher.update(timestamp.isoformat().encode())
    hasher.update(_SALT_KEY)
    return hasher.hexdigest()[:16]


def register_user(
    ctx: ReducerContext,
    username: str,
    password: str,
    email: str | None = None,
) -> None:
    """Create an account for the sender."""
    if not username.strip():
        raise ReducerError("Username cannot be empty")
    if not 3 <= len(username.encode()) <= 20:
        raise ReducerError("Username must be between 3 and 20 characters")
    if not all(c.isalnum() or c in _VALID_USERNAME_CHARS for c in username):
        raise ReducerError("Username can only contain letters, numbers, and underscores")
    if len(password.encode()) < 8:
        raise ReducerError("Password must be at least 8 characters long")
    if ctx.db.find_user_by_username(username) is not None:
        raise ReducerError("Username is already taken")
    if email is not None and ("@" not in email or "." not in email):
        raise ReducerError("Invalid email format")
    if ctx.sender in ctx.db.users:
        raise ReducerError("Identity is already registered")

    salt = generate_salt(ctx.sender, ctx.timestamp)
    ctx.db.users[ctx.sender] = User(
        identity=ctx.sender,
        username=username,
        password_hash=hash_password(password, salt),
        password_salt=salt,
        created_at=ctx.timestamp,
        last_login=ctx.timestamp,
        email=email,
        is_active=True,
    )
    log.info("New user registered: %s", username)


def login_user(
    ctx: ReducerContext,
    username: str,
    password: str,
    client_version: str,
) -> None:
    """Authenticate a user and open or refresh the sender's session."""
    user = ctx.db.find_user_by_username(username)
    if user is None:
        raise ReducerError("Invalid username or password")
    if not user.is_active:
        raise ReducerError("Account is suspended")
    if not verify_password(password, user.password_hash, user.password_salt):
        log.warning("Failed login attempt for user: %s", username)
        raise ReducerError("Invalid username or password")

    user.last_login = ctx.timestamp
    client_ip = "unknown"

    session = ctx.db.sessions.get(ctx.sender)
    if session is not None:
        session.connection_id = ctx.connection_id
        session.last_activity = ctx.timestamp
        session.client_version = client_version
        session.ip_address = client_ip
    else:
        ctx.db.sessions[ctx.sender] = GameSession(
            identity=ctx.sender,
            login_time=ctx.timestamp,
            last_activity=ctx.timestamp,
            client_version=client_version,
            ip_address=client_ip,
            connection_id=ctx.connection_id,
        )
    log.info("User logged in: %s", username)


def logout_user(ctx: ReducerContext) -> None:
    """End the sender's session and mark their player offline."""
    ctx.db.sessions.pop(ctx.sender, None)
    player = ctx.db.players.get(ctx.sender)
    if player is not None:
        player.is_online = False
        player.last_seen = ctx.timestamp
    log.info("User logged out: %s", ctx.sender)