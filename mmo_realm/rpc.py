"""Remote procedure calls between client and server."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from mmo_realm.shared import ObjectId


class RpcType(enum.Enum):
    """Direction and delivery guarantee of a call."""

    CLIENT_TO_SERVER = "ClientToServer"
    SERVER_TO_CLIENT = "ServerToClient"
    MULTICAST = "Multicast"
    RELIABLE = "Reliable"
    UNRELIABLE = "Unreliable"


@dataclass
class RpcArgument:
    """One named, JSON-encoded argument of a call."""

    name: str
    value_json: str
    arg_type: str = "json"


@dataclass
class RpcCall:
    """A function call with its target and arguments."""

    function_name: str
    target_object: ObjectId | None = None
    arguments: list[RpcArgument] = field(default_factory=list)
    call_type: RpcType = RpcType.CLIENT_TO_SERVER

    @classmethod
    def client_to_server(cls, function_name: str) -> RpcCall:
        """A call from a client to the server with no arguments yet."""
        return cls(function_name=function_name, call_type=RpcType.CLIENT_TO_SERVER)

    def with_arg(self, name: str, value_json: str) -> RpcCall:
        """Append a JSON argument and return the call for chaining."""
        self.arguments.append(RpcArgument(name, value_json, "json"))
        return self

    def targeting(self, object_id: ObjectId) -> RpcCall:
        """Set the target object and return the call for chaining."""
        self.target_object = object_id
        return self