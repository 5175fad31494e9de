"""Types shared between client and server: object ids, properties, relevancy."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# Performance limits to prevent system overload
MAX_OBJECTS_PER_ZONE = 10000
MAX_PROPERTIES_PER_OBJECT = 100
MAX_ZONES = 1000

# Network limits to prevent abuse
MAX_RPC_CALLS_PER_SECOND = 30
MAX_PROPERTY_UPDATES_PER_SECOND = 60
MAX_MESSAGE_SIZE_BYTES = 65536

# Timing constants
HEARTBEAT_INTERVAL_SECONDS = 30
INACTIVITY_TIMEOUT_SECONDS = 300
POSITION_UPDATE_INTERVAL_MS = 100

# Defaults
DEFAULT_ZONE_ID = 1
DEFAULT_MAX_DISTANCE = 1000.0


@dataclass(frozen=True)
class ObjectId:
    """Unique id of a world object together with its class name."""

    id: int
    class_name: str

    def is_valid(self) -> bool:
        """An id is valid when it is non-zero and has a class name."""
        return self.id != 0 and bool(self.class_name)

    @classmethod
    def player(cls, object_id: int) -> ObjectId:
        return cls(object_id, "PlayerCharacter")

    @classmethod
    def npc(cls, object_id: int) -> ObjectId:
        return cls(object_id, "NPC")

    @classmethod
    def item(cls, object_id: int) -> ObjectId:
        return cls(object_id, "Item")


class PropertyType(enum.Enum):
    """Kinds of data a property may hold."""

    BOOL = "Bool"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT = "Float"
    DOUBLE = "Double"
    STRING = "String"
    VECTOR3 = "Vector3"
    ROTATOR = "Rotator"
    TRANSFORM = "Transform"
    JSON = "Json"


class ReplicationMode(enum.Enum):
    """Who a property is replicated to."""

    NONE = "None"
    ALWAYS = "Always"
    OWNER_ONLY = "OwnerOnly"
    CONDITIONAL = "Conditional"


class RelevancyType(enum.Enum):
    """Which players an object is relevant to."""

    GLOBAL = "Global"
    ZONE = "Zone"
    DISTANCE = "Distance"
    OWNER = "Owner"
    PARTY = "Party"
    GUILD = "Guild"
    CUSTOM = "Custom"


@dataclass
class PropertyValue:
    """A named, JSON-encoded property of an object."""

    name: str
    property_type: PropertyType
    value_json: str
    replication_mode: ReplicationMode
    owner_only: bool = False

    @classmethod
    def simple(cls, name: str, value_json: str) -> PropertyValue:
        """A JSON property replicated to everyone."""
        return cls(
            name=name,
            property_type=PropertyType.JSON,
            value_json=value_json,
            replication_mode=ReplicationMode.ALWAYS,
            owner_only=False,
        )

    @classmethod
    def for_owner(cls, name: str, value_json: str) -> PropertyValue:
        """A JSON property visible only to the object's owner."""
        return cls(
            name=name,
            property_type=PropertyType.JSON,
            value_json=value_json,
            replication_mode=ReplicationMode.OWNER_ONLY,
            owner_only=True,
        )


@dataclass
class RelevancyInfo:
    """Rules deciding who should know about an object."""

    object_id: ObjectId
    relevancy_type: RelevancyType
    zone_id: int | None = None
    max_distance: float | None = None
    custom_rules: list[str] = field(default_factory=list)