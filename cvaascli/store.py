"""Local YAML record of the workspaces created from this tool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import yaml

DEFAULT_PATH = Path("data") / "workspace.yaml"


@dataclass(frozen=True)
class WorkspaceEntry:
    """One workspace created on the platform."""

    workspace_id: str
    request_id: str
    workspace_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            "workspaceID": self.workspace_id,
            "RequestID": self.request_id,
            "workspaceName": self.workspace_name,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> WorkspaceEntry:
        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(text("workspaceID"), text("RequestID"), text("workspaceName"))


def load_workspaces(path: str | PathLike = DEFAULT_PATH) -> list[WorkspaceEntry]:
    """Return the recorded workspaces; an unreadable or malformed file holds none."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        document = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return []
    if not isinstance(document, Mapping):
        return []
    items = document.get("workspace") or []
    if not isinstance(items, list):
        return []
    return [WorkspaceEntry.from_dict(item) for item in items if isinstance(item, Mapping)]


def append_workspace(
    path: str | PathLike, entry: WorkspaceEntry
) -> list[WorkspaceEntry]:
    """Add an entry to the record, creating its directory if needed, and
    return the full list written."""
    target = Path(path)
    entries = [*load_workspaces(target), entry]
    document = {"workspace": [item.to_dict() for item in entries]}
    text = yaml.safe_dump(
        document, sort_keys=False, allow_unicode=True, default_flow_style=False
    )
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    return entries