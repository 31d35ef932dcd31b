"""Protobuf message types of the CloudVision workspace and inventory APIs."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cache

from google.protobuf import (
    descriptor_pb2,
    descriptor_pool,
    json_format,
    message_factory,
    timestamp_pb2,
    wrappers_pb2,
)
from google.protobuf.message import Message

_FDP = descriptor_pb2.FieldDescriptorProto
_MESSAGE = _FDP.TYPE_MESSAGE
_ENUM = _FDP.TYPE_ENUM
_STRING = _FDP.TYPE_STRING
_BOOL = _FDP.TYPE_BOOL

_WORKSPACE_NS = ".arista.workspace.v1."
_INVENTORY_NS = ".arista.inventory.v1."


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _field(name, number, field_type, type_name="", *, repeated=False):
    field = _FDP(
        name=name,
        number=number,
        type=field_type,
        label=_FDP.LABEL_REPEATED if repeated else _FDP.LABEL_OPTIONAL,
        json_name=_camel(name),
    )
    if type_name:
        field.type_name = type_name
    return field


def _string(name, number):
    return _field(name, number, _MESSAGE, ".google.protobuf.StringValue")


def _timestamp(name, number):
    return _field(name, number, _MESSAGE, ".google.protobuf.Timestamp")


def _message(name, fields, nested=()):
    return descriptor_pb2.DescriptorProto(
        name=name, field=list(fields), nested_type=list(nested)
    )


def _map_entry(name, key_type, value_type):
    entry = _message(name, [_field("key", 1, key_type), _field("value", 2, value_type)])
    entry.options.map_entry = True
    return entry


def _enum(name, values):
    return descriptor_pb2.EnumDescriptorProto(
        name=name,
        value=[
            descriptor_pb2.EnumValueDescriptorProto(name=value, number=number)
            for number, value in enumerate(values)
        ],
    )


def _file(name, package, enums, messages):
    return descriptor_pb2.FileDescriptorProto(
        name=name,
        package=package,
        syntax="proto3",
        dependency=[wrappers_pb2.DESCRIPTOR.name, timestamp_pb2.DESCRIPTOR.name],
        enum_type=enums,
        message_type=messages,
    )


def _workspace_file():
    ns = _WORKSPACE_NS
    return _file(
        "arista/workspace.v1/workspace.proto",
        "arista.workspace.v1",
        enums=[
            _enum(
                "WorkspaceState",
                [
                    "WORKSPACE_STATE_UNSPECIFIED",
                    "WORKSPACE_STATE_PENDING",
                    "WORKSPACE_STATE_SUBMITTED",
                    "WORKSPACE_STATE_ABANDONED",
                    "WORKSPACE_STATE_CONFLICTS",
                    "WORKSPACE_STATE_ROLLED_BACK",
                ],
            ),
            _enum(
                "Request",
                [
                    "REQUEST_UNSPECIFIED",
                    "REQUEST_START_BUILD",
                    "REQUEST_CANCEL_BUILD",
                    "REQUEST_SUBMIT",
                    "REQUEST_ABANDON",
                    "REQUEST_ROLLBACK",
                    "REQUEST_SUBMIT_FORCE",
                ],
            ),
        ],
        messages=[
            _message("WorkspaceKey", [_string("workspace_id", 1)]),
            _message("RequestParams", [_string("request_id", 1)]),
            _message(
                "Workspace",
                [
                    _field("key", 1, _MESSAGE, ns + "WorkspaceKey"),
                    _timestamp("created_at", 2),
                    _string("created_by", 3),
                    _timestamp("last_modified_at", 4),
                    _string("last_modified_by", 5),
                    _field("state", 6, _ENUM, ns + "WorkspaceState"),
                    _string("last_build_id", 7),
                    _string("display_name", 10),
                    _string("description", 11),
                ],
            ),
            _message(
                "WorkspaceConfig",
                [
                    _field("key", 1, _MESSAGE, ns + "WorkspaceKey"),
                    _string("display_name", 2),
                    _string("description", 3),
                    _field("request", 4, _ENUM, ns + "Request"),
                    _field("request_params", 5, _MESSAGE, ns + "RequestParams"),
                ],
            ),
            _message(
                "WorkspaceStreamRequest",
                [_field("partial_eq_filter", 1, _MESSAGE, ns + "Workspace", repeated=True)],
            ),
            _message(
                "WorkspaceStreamResponse",
                [_field("value", 1, _MESSAGE, ns + "Workspace"), _timestamp("time", 2)],
            ),
            _message(
                "WorkspaceConfigSetRequest",
                [_field("value", 1, _MESSAGE, ns + "WorkspaceConfig")],
            ),
            _message(
                "WorkspaceConfigSetResponse",
                [_field("value", 1, _MESSAGE, ns + "WorkspaceConfig"), _timestamp("time", 2)],
            ),
        ],
    )


def _inventory_file():
    ns = _INVENTORY_NS
    return _file(
        "arista/inventory.v1/inventory.proto",
        "arista.inventory.v1",
        enums=[
            _enum(
                "StreamingStatus",
                [
                    "STREAMING_STATUS_UNSPECIFIED",
                    "STREAMING_STATUS_INACTIVE",
                    "STREAMING_STATUS_ACTIVE",
                ],
            ),
        ],
        messages=[
            _message("DeviceKey", [_string("device_id", 1)]),
            _message(
                "ExtendedAttributes",
                [
                    _field(
                        "feature_enabled",
                        1,
                        _MESSAGE,
                        ns + "ExtendedAttributes.FeatureEnabledEntry",
                        repeated=True,
                    )
                ],
                nested=[_map_entry("FeatureEnabledEntry", _STRING, _BOOL)],
            ),
            _message(
                "Device",
                [
                    _field("key", 1, _MESSAGE, ns + "DeviceKey"),
                    _string("software_version", 2),
                    _string("model_name", 3),
                    _string("hardware_revision", 4),
                    _string("fqdn", 10),
                    _string("hostname", 11),
                    _string("domain_name", 12),
                    _string("system_mac_address", 13),
                    _timestamp("boot_time", 20),
                    _field("streaming_status", 30, _ENUM, ns + "StreamingStatus"),
                    _field("extended_attributes", 31, _MESSAGE, ns + "ExtendedAttributes"),
                ],
            ),
            _message(
                "DeviceStreamRequest",
                [_field("partial_eq_filter", 1, _MESSAGE, ns + "Device", repeated=True)],
            ),
            _message(
                "DeviceStreamResponse",
                [_field("value", 1, _MESSAGE, ns + "Device"), _timestamp("time", 2)],
            ),
        ],
    )


@cache
def _pool() -> descriptor_pool.DescriptorPool:
    pool = descriptor_pool.DescriptorPool()
    for module in (wrappers_pb2, timestamp_pb2):
        proto = descriptor_pb2.FileDescriptorProto()
        module.DESCRIPTOR.CopyToProto(proto)
        pool.AddSerializedFile(proto.SerializeToString())
    pool.AddSerializedFile(_workspace_file().SerializeToString())
    pool.AddSerializedFile(_inventory_file().SerializeToString())
    return pool


@cache
def message_class(name: str) -> type[Message]:
    """Return the message class for a fully qualified message name.

    Raises KeyError for a name that is not known.
    """
    return message_factory.GetMessageClass(_pool().FindMessageTypeByName(name))


def parse_json(name: str, data: str | bytes | Mapping) -> Message:
    """Build a message of the named type from its JSON form."""
    message = message_class(name)()
    if isinstance(data, Mapping):
        json_format.ParseDict(data, message)
    else:
        json_format.Parse(data, message)
    return message


def to_json(message: Message) -> str:
    """Render a message in its indented JSON form."""
    return json_format.MessageToJson(message)