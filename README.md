# mmo_realm

Server-side state and rules for a small online role-playing world. Everything
is held in memory, in plain Python, with no third-party dependencies.

The package is organised around *reducers*: functions that take a
`ReducerContext` (the caller's `Identity`, the current `timestamp`, an
optional `connection_id`, and the `Database`) and change the database. When a
request breaks a rule, a reducer raises `ReducerError` with a message that can
be shown to the player.

## Modules

| Module | Contents |
| --- | --- |
| `mmo_realm.shared` | `ObjectId` (with `player`, `npc`, `item` and `is_valid`), `PropertyValue` (with `simple` and `for_owner`), the enums `PropertyType`, `ReplicationMode`, `RelevancyType`, `RelevancyInfo`, and limit constants such as `INACTIVITY_TIMEOUT_SECONDS` and `MAX_MESSAGE_SIZE_BYTES`. |
| `mmo_realm.rpc` | `RpcCall` (with `client_to_server`, `with_arg`, `targeting`), `RpcArgument`, `RpcType`. |
| `mmo_realm.database` | `Identity` (exactly 32 bytes, shown as hex), the rows `User`, `Player`, `ChatMessage`, `GameSession`, the `Database` with `find_user_by_username`, `online_players`, `players_in_zone`, `ReducerContext`, `ReducerError`, and the lifecycle reducers `init`, `on_connect`, `on_disconnect`, `cleanup_inactive_sessions`. |
| `mmo_realm.auth` | `register_user`, `login_user`, `logout_user`, and the helpers `hash_password`, `verify_password`, `generate_salt`. |
| `mmo_realm.player` | `join_game`, `update_player_position`, `get_players_in_zone`, `leave_game`. |
| `mmo_realm.chat` | `send_chat_message`, `get_recent_messages`. |
| `mmo_realm.bridge` | Request validation for an engine front end: `connect`, `register_user`, `login_user`, `join_game`, `update_position`, `send_chat`, returning `BridgeResult` or raising `BridgeError`; `identity_bytes` gives a 32-byte, zero-padded form of an `Identity`. |
| `mmo_realm.client` | A lighter client facade: `initialize_client`, `connect`, `register_user`, `spawn_player_character`, returning `ClientResult` or raising `ClientError`. |

## Rules the reducers enforce

- **Registration** (`auth.register_user`): the username must not be blank,
  must be 3 to 20 bytes long, and may hold only letters, digits and
  underscores; it must not already be taken, and the caller's identity must
  not already have an account. The password must be at least 8 bytes. An
  e-mail address, when given, must contain `@` and `.`. The password is
  stored only as a salted SHA-256 hash.
- **Login** (`auth.login_user`): unknown usernames and wrong passwords both
  give `"Invalid username or password"`; inactive accounts give
  `"Account is suspended"`. A successful login records the login time and
  opens a `GameSession` for the caller, or refreshes the existing one.
- **Logout** (`auth.logout_user`) drops the session and marks the player
  offline.
- **Joining** (`player.join_game`) needs a session and an account. The first
  join creates a `Player` at the origin with level 1 and 100 health; later
  joins bring the same player back online in the given zone. The player is
  returned.
- **Movement** (`player.update_player_position`) is rejected with
  `"Invalid movement detected"` when one update moves more than 50 units.
- **Chat** (`chat.send_chat_message`) needs an online player, a message that
  is non-empty and at most 500 bytes after trimming, and one of the channels
  `global`, `zone`, `guild` or `party`. The stored `ChatMessage` is returned.
  `chat.get_recent_messages` returns a channel's messages newest first, at
  most 50.
- **Sessions** idle for more than 5 minutes are removed by
  `database.cleanup_inactive_sessions`, which marks their players offline and
  returns how many sessions it removed. `database.on_disconnect` does the
  same for the caller.

## Example

```python
from datetime import datetime, timezone

from mmo_realm import auth, chat, player
from mmo_realm.database import Database, Identity, ReducerContext

db = Database()
ctx = ReducerContext(
    db=db,
    sender=Identity(bytes(range(32))),
    timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
)

password = "password"
auth.register_user(ctx, "hero_1", password, "hero@example.com")
auth.login_user(ctx, "hero_1", password, "1.0")

hero = player.join_game(ctx, "starter_town")
player.update_player_position(ctx, 10.0, 0.0, 5.0, 90.0)

message = chat.send_chat_message(ctx, "  hello  ", "global")
assert message.message == "hello"
assert [p.username for p in db.players_in_zone("starter_town")] == ["hero_1"]
```

Describing a remote call:

```python
from mmo_realm.rpc import RpcCall
from mmo_realm.shared import ObjectId

call = (
    RpcCall.client_to_server("move_player")
    .with_arg("x", "10.0")
    .targeting(ObjectId.player(42))
)
```

Validating requests on the client side:

```python
from mmo_realm import bridge

bridge.connect("localhost", 3000, "realm")
bridge.send_chat("hello everyone", "global")

try:
    bridge.update_position(float("nan"), 0.0, 0.0, 0.0)
except bridge.BridgeError as err:
    print(err)  # Invalid position values
```

`bridge` and `client` accept text as `str` or UTF-8 `bytes`. In `bridge`, a
missing (`None`) string reads as empty; in `client`, it is an error.

## What it does not do

- There is no networking. `bridge.connect` and `client.connect` check their
  arguments and log the request; they do not open a connection, and the other
  `bridge` and `client` functions validate and log without reaching the
  reducers.
- `client.spawn_player_character` always returns the object id `"12345"`;
  there is no table of world objects, zones or object properties.
- The `Database` lives in memory only; nothing is saved to disk.
- No server process or command line is provided: the reducers are called
  directly from Python.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.