import math

import pytest

from mmo_realm import bridge
from mmo_realm.bridge import BridgeError, BridgeResult
from mmo_realm.database import Identity


def test_identity_bytes_is_fixed_size_prefix():
    identity = Identity(bytes(range(32)))
    result = bridge.identity_bytes(identity)
    assert len(result) == bridge.IDENTITY_SIZE
    assert str(identity).encode().startswith(result)


def test_identity_bytes_distinguishes_identities():
    first = bridge.identity_bytes(Identity(b"\x01" * 32))
    second = bridge.identity_bytes(Identity(b"\x02" * 32))
    assert first != second
    assert len(first) == len(second) == 32


def test_connect_succeeds_without_data():
    result = bridge.connect("localhost", 3000, "realm")
    assert result == BridgeResult()
    assert result.data_size == 0


def test_connect_treats_missing_host_as_empty():
    assert bridge.connect(None, 3000, None).data == b""


def test_connect_rejects_invalid_host_bytes():
    with pytest.raises(BridgeError, match="Invalid host string"):
        bridge.connect(b"\xff", 3000, "realm")


def test_connect_rejects_invalid_database_bytes():
    with pytest.raises(BridgeError, match="Invalid database name"):
        bridge.connect("localhost", 3000, b"\xfe\xff")


def test_connect_rejects_out_of_range_port():
    with pytest.raises(BridgeError, match="Invalid port"):
        bridge.connect("localhost", 70000, "realm")


def test_register_user_accepts_valid_input():
    password = "password"
    result = bridge.register_user("alice", password, "alice@example.com")
    assert result.data_size == 0


def test_register_user_rejects_short_username():
    password = "password"
    with pytest.raises(BridgeError, match="Username too short"):
        bridge.register_user("al", password)


def test_register_user_rejects_short_password():
    short_password = "secret"
    with pytest.raises(BridgeError, match="Password too short"):
        bridge.register_user("alice", short_password)


def test_register_user_rejects_invalid_email_bytes():
    password = "password"
    with pytest.raises(BridgeError, match="Invalid email"):
        bridge.register_user("alice", password, b"\xff")


def test_register_user_accepts_bytes_input():
    password = b"password"
    assert bridge.register_user(b"alice", password).data == b""


def test_login_user_requires_both_fields():
    with pytest.raises(BridgeError, match="Username and password required"):
        bridge.login_user("alice", "")
    with pytest.raises(BridgeError, match="Username and password required"):
        bridge.login_user(None, "token")


def test_login_user_succeeds():
    password = "password"
    assert bridge.login_user("alice", password) == BridgeResult()


def test_join_game_rejects_invalid_zone():
    with pytest.raises(BridgeError, match="Invalid zone name"):
        bridge.join_game(b"\xff")


def test_join_game_succeeds():
    assert bridge.join_game("starter_zone").data_size == 0


@pytest.mark.parametrize(
    "coords",
    [
        (math.nan, 0.0, 0.0, 0.0),
        (0.0, math.inf, 0.0, 0.0),
        (0.0, 0.0, -math.inf, 0.0),
        (0.0, 0.0, 0.0, math.nan),
    ],
)
def test_update_position_rejects_non_finite(coords):
    with pytest.raises(BridgeError, match="Invalid position values"):
        bridge.update_position(*coords)


def test_update_position_accepts_finite():
    assert bridge.update_position(1.0, 2.0, 3.0, 90.0) == BridgeResult()


def test_send_chat_rejects_blank_message():
    with pytest.raises(BridgeError, match="Message cannot be empty"):
        bridge.send_chat("   ", "global")


def test_send_chat_length_limit():
    assert bridge.send_chat("a" * 500, "global").data_size == 0
    with pytest.raises(BridgeError, match="Message too long"):
        bridge.send_chat("a" * 501, "global")


def test_send_chat_rejects_invalid_channel_bytes():
    with pytest.raises(BridgeError, match="Invalid channel"):
        bridge.send_chat("hello", b"\xff")


def test_result_data_size_matches_payload():
    result = BridgeResult(b"abc")
    assert result.data_size == len(b"abc")