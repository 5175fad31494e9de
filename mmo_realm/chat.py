"""Chat messages and channel history."""

from __future__ import annotations

import hashlib

from mmo_realm.database import ChatMessage, ReducerContext, ReducerError

MAX_MESSAGE_LENGTH = 500
MAX_RECENT_MESSAGES = 50
VALID_CHANNELS = frozenset({"global", "zone", "guild", "party"})


def _message_id(ctx: ReducerContext, message: str, channel: str) -> int:
    hasher = hashlib.sha256()
    for part in (str(ctx.sender), ctx.timestamp.isoformat(), message, channel):
        hasher.update(part.encode())
        hasher.update(b"\0")
    return int.from_bytes(hasher.digest()[:8], "big")


def send_chat_message(ctx: ReducerContext, message: str, channel: str) -> ChatMessage:
    """Store a message from the sender's online player and return it."""
    player = ctx.db.players.get(ctx.sender)
    if player is None:
        raise ReducerError("Must be in game to send messages")
    if not player.is_online:
        raise ReducerError("Must be online to send messages")

    text = message.strip()
    if not text:
        raise ReducerError("Message cannot be empty")
    if len(text.encode()) > MAX_MESSAGE_LENGTH:
        raise ReducerError("Message too long (max 500 characters)")
    if channel not in VALID_CHANNELS:
        raise ReducerError("Invalid chat channel")

    message_id = _message_id(ctx, text, channel)
    if message_id in ctx.db.chat_messages:
        raise ReducerError("Duplicate message")

    chat = ChatMessage(
        message_id=message_id,
        sender_identity=ctx.sender,
        sender_username=player.username,
        message=text,
        channel=channel,
        timestamp=ctx.timestamp,
    )
    ctx.db.chat_messages[message_id] = chat

    session = ctx.db.sessions.get(ctx.sender)
    if session is not None:
        session.last_activity = ctx.timestamp
    return chat


def get_recent_messages(ctx: ReducerContext, channel: str, limit: int) -> list[ChatMessage]:
    """Newest messages of a channel first, at most fifty."""
    if ctx.sender not in ctx.db.players:
        raise ReducerError("Player not found")
    limit = max(0, min(limit, MAX_RECENT_MESSAGES))
    messages = sorted(
        (m for m in ctx.db.chat_messages.values() if m.channel == channel),
        key=lambda m: m.timestamp,
        reverse=True,
    )
    return messages[:limit]