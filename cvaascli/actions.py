"""Inventory and workspace operations against a CloudVision service."""

from __future__ import annotations

from dataclasses import dataclass

import grpc
from google.protobuf.message import Message

from cvaascli.client import Connection
from cvaascli.schema import message_class, parse_json, to_json

_INVENTORY = "arista.inventory.v1."
_WORKSPACE = "arista.workspace.v1."

DEVICE_GET_ALL = "/arista.inventory.v1.DeviceService/GetAll"
WORKSPACE_GET_ALL = "/arista.workspace.v1.WorkspaceService/GetAll"
WORKSPACE_CONFIG_SET = "/arista.workspace.v1.WorkspaceConfigService/Set"

WORKSPACE_STATES = {
    "UNSPECIFIED": 0,
    "UNRECOGNIZED": -1,
    "PENDING": 1,
    "SUBMITTED": 2,
    "ABANDONED": 3,
    "CONFLICTS": 4,
    "ROLLED_BACK": 5,
}
"""Workspace state names accepted as filters, with their enum numbers."""


@dataclass(frozen=True)
class DeviceInfo:
    """Essential facts about one device of the inventory."""

    device_id: str
    hostname: str
    model: str
    version: str
    system_mac: str
    streaming_status: str
    danz_enabled: bool
    mlag_enabled: bool


@dataclass(frozen=True)
class WorkspaceInfo:
    """One workspace as reported by the platform."""

    id: str
    display_name: str
    state: str


def _enum_name(message: Message, field: str) -> str:
    number = getattr(message, field)
    enum_type = message.DESCRIPTOR.fields_by_name[field].enum_type
    value = enum_type.values_by_number.get(number)
    return value.name if value is not None else str(number)


def build_inventory_filter(
    model: str | None, mlag_filter: bool, danz_filter: bool
) -> Message:
    """Build the device stream request for the given filters.

    Raises ValueError when both the MLAG and the DANZ filter are asked for.
    """
    if mlag_filter and danz_filter:
        raise ValueError(
            "❌ Impossible d'utiliser simultanément les filtres MLAG et DANZ "
            "(limitation API CVaaS)."
        )
    criteria: dict = {}
    if model:
        criteria["modelName"] = model
    if mlag_filter:
        criteria["extendedAttributes"] = {"featureEnabled": {"mlag": True}}
    elif danz_filter:
        criteria["extendedAttributes"] = {"featureEnabled": {"danz": True}}

    document = {"partialEqFilter": [criteria]} if criteria else {}
    return parse_json(_INVENTORY + "DeviceStreamRequest", document)


def build_workspace_filter(state_name: str | None) -> Message:
    """Build the workspace stream request for a state name.

    An empty name or "NONE" means no filter. Raises ValueError for an
    unknown state.
    """
    document: dict = {}
    if state_name and state_name.upper() != "NONE":
        try:
            state = WORKSPACE_STATES[state_name.upper()]
        except KeyError:
            raise ValueError(f"❌ État invalide : {state_name}") from None
        document = {"partialEqFilter": [{"state": state}]}
    return parse_json(_WORKSPACE + "WorkspaceStreamRequest", document)


def build_workspace_config(
    workspace_id: str, request_id: str, display_name: str
) -> Message:
    """Build the request that creates a workspace."""
    return parse_json(
        _WORKSPACE + "WorkspaceConfigSetRequest",
        {
            "value": {
                "displayName": display_name,
                "key": {"workspaceId": workspace_id},
                "requestParams": {"requestId": request_id},
            }
        },
    )


def _device_info(device: Message) -> DeviceInfo:
    features = device.extended_attributes.feature_enabled
    return DeviceInfo(
        device_id=device.key.device_id.value,
        hostname=device.hostname.value,
        model=device.model_name.value,
        version=device.software_version.value,
        system_mac=device.system_mac_address.value,
        streaming_status=_enum_name(device, "streaming_status"),
        danz_enabled=features.get("Danz", False),
        mlag_enabled=features.get("Mlag", False),
    )


def _workspace_info(workspace: Message) -> WorkspaceInfo:
    return WorkspaceInfo(
        id=workspace.key.workspace_id.value,
        display_name=workspace.display_name.value,
        state=_enum_name(workspace, "state"),
    )


def read_inventory(
    connection: Connection, model: str | None, mlag_filter: bool, danz_filter: bool
) -> list[DeviceInfo]:
    """Return the devices of the inventory that match the filters."""
    request = build_inventory_filter(model, mlag_filter, danz_filter)
    try:
        stream = connection.unary_stream(
            DEVICE_GET_ALL, request, message_class(_INVENTORY + "DeviceStreamResponse")
        )
    except grpc.RpcError as err:
        raise RuntimeError(f"❌ Erreur stream inventaire : {err}") from err
    try:
        return [_device_info(response.value) for response in stream]
    except grpc.RpcError as err:
        raise RuntimeError(f"❌ Erreur lecture stream : {err}") from err


def get_workspaces_by_state(
    connection: Connection, state_name: str | None
) -> list[WorkspaceInfo]:
    """Return the workspaces whose state matches state_name."""
    request = build_workspace_filter(state_name)
    try:
        stream = connection.unary_stream(
            WORKSPACE_GET_ALL,
            request,
            message_class(_WORKSPACE + "WorkspaceStreamResponse"),
        )
    except grpc.RpcError as err:
        raise RuntimeError(f"Erreur stream : {err}") from err
    try:
        return [_workspace_info(response.value) for response in stream]
    except grpc.RpcError as err:
        raise RuntimeError(f"Erreur lecture : {err}") from err


def create_workspace(
    connection: Connection, workspace_id: str, request_id: str, display_name: str
) -> Message:
    """Create a workspace, report it on standard output and return the reply."""
    request = build_workspace_config(workspace_id, request_id, display_name)
    try:
        response = connection.unary_unary(
            WORKSPACE_CONFIG_SET,
            request,
            message_class(_WORKSPACE + "WorkspaceConfigSetResponse"),
        )
    except grpc.RpcError as err:
        raise RuntimeError(f"❌ Erreur création workspace : {err}") from err
    print(f"✅ Workspace créé : {to_json(response)}")
    return response