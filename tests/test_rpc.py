from mmo_realm.rpc import RpcArgument, RpcCall, RpcType
from mmo_realm.shared import ObjectId


def test_client_to_server_defaults():
    call = RpcCall.client_to_server("move_player")
    assert call.function_name == "move_player"
    assert call.target_object is None
    assert call.arguments == []
    assert call.call_type is RpcType.CLIENT_TO_SERVER


def test_with_arg_appends_json_argument():
    call = RpcCall.client_to_server("move_player").with_arg("x", "1.5")
    assert call.arguments == [RpcArgument("x", "1.5", "json")]
    assert call.arguments[0].arg_type == "json"


def test_with_arg_preserves_order():
    call = (
        RpcCall.client_to_server("move_player")
        .with_arg("x", "1")
        .with_arg("y", "2")
        .with_arg("z", "3")
    )
    assert [a.name for a in call.arguments] == ["x", "y", "z"]
    assert [a.value_json for a in call.arguments] == ["1", "2", "3"]


def test_with_arg_returns_same_call():
    call = RpcCall.client_to_server("chat_message")
    assert call.with_arg("text", '"hi"') is call


def test_targeting_sets_target():
    target = ObjectId.player(42)
    call = RpcCall.client_to_server("move_player").targeting(target)
    assert call.target_object == target


def test_targeting_replaces_previous_target():
    call = (
        RpcCall.client_to_server("move_player")
        .targeting(ObjectId.player(1))
        .targeting(ObjectId.npc(2))
    )
    assert call.target_object == ObjectId.npc(2)


def test_arguments_not_shared_between_calls():
    first = RpcCall.client_to_server("a").with_arg("k", "1")
    second = RpcCall.client_to_server("b")
    assert len(first.arguments) == 1
    assert second.arguments == []


def test_rpc_type_values():
    assert RpcType("Multicast") is RpcType.MULTICAST
    assert RpcType("Unreliable") is RpcType.UNRELIABLE
    assert len(RpcType) == 5


def test_explicit_call_type():
    call = RpcCall("broadcast", call_type=RpcType.MULTICAST)
    assert call.call_type is RpcType.MULTICAST
    assert call.target_object is None