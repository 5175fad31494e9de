"""Joining, moving in and leaving the game world."""

from __future__ import annotations

import logging
import math

from mmo_realm.database import Player, ReducerContext, ReducerError

log = logging.getLogger(__name__)

MAX_DISTANCE_PER_UPDATE = 50.0


def _touch_session(ctx: ReducerContext) -> None:
    session = ctx.db.sessions.get(ctx.sender)
    if session is not None:
        session.last_activity = ctx.timestamp


def _require_player(ctx: ReducerContext) -> Player:
    player = ctx.db.players.get(ctx.sender)
    if player is None:
        raise ReducerError("Player not found")
    return player


def join_game(ctx: ReducerContext, starting_zone: str) -> Player:
    """Bring the sender's player online in a zone, creating it on first join."""
    session = ctx.db.sessions.get(ctx.sender)
    if session is None:
        raise ReducerError("Must be logged in to join game")
    user = ctx.db.users.get(ctx.sender)
    if user is None:
        raise ReducerError("User not found")

    session.last_activity = ctx.timestamp

    player = ctx.db.players.get(ctx.sender)
    if player is not None:
        player.is_online = True
        player.last_seen = ctx.timestamp
        player.current_zone = starting_zone
        log.info("Player returned to game: %s", user.username)
    else:
        player = Player(
            identity=ctx.sender,
            username=user.username,
            last_seen=ctx.timestamp,
            current_zone=starting_zone,
        )
        ctx.db.players[ctx.sender] = player
        log.info("New player joined game: %s", user.username)
    return player


def update_player_position(
    ctx: ReducerContext, x: float, y: float, z: float, yaw: float
) -> Player:
    """Move the sender's player, rejecting jumps longer than the allowed step."""
    player = _require_player(ctx)

    distance = math.sqrt(
        (player.position_x - x) ** 2
        + (player.position_y - y) ** 2
        + (player.position_z - z) ** 2
    )
    if distance > MAX_DISTANCE_PER_UPDATE:
        raise ReducerError("Invalid movement detected")

    player.position_x = x
    player.position_y = y
    player.position_z = z
    player.rotation_yaw = yaw
    player.last_seen = ctx.timestamp

    _touch_session(ctx)
    return player


def get_players_in_zone(ctx: ReducerContext, zone: str) -> list[Player]:
    """Online players in a zone; the sender must have a player."""
    _require_player(ctx)
    return ctx.db.players_in_zone(zone)


def leave_game(ctx: ReducerContext) -> None:
    """Mark the sender's player offline while keeping the session."""
    player = ctx.db.players.get(ctx.sender)
    if player is not None:
        player.is_online = False
        player.last_seen = ctx.timestamp