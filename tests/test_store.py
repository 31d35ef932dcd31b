import yaml

from cvaascli.store import WorkspaceEntry, append_workspace, load_workspaces


def test_missing_file_has_no_entries(tmp_path):
    assert load_workspaces(tmp_path / "absent.yaml") == []


def test_append_creates_directory_and_reads_back(tmp_path):
    path = tmp_path / "data" / "workspace.yaml"
    entry = WorkspaceEntry("ws-1", "ws-1", "lab")
    written = append_workspace(path, entry)
    assert written == [entry]
    assert load_workspaces(path) == [entry]


def test_append_preserves_order(tmp_path):
    path = tmp_path / "workspace.yaml"
    first = WorkspaceEntry("ws-1", "ws-1", "first")
    second = WorkspaceEntry("ws-2", "ws-2", "second")
    append_workspace(path, first)
    append_workspace(path, second)
    assert load_workspaces(path) == [first, second]


def test_document_uses_recorded_keys(tmp_path):
    path = tmp_path / "workspace.yaml"
    append_workspace(path, WorkspaceEntry("ws-1", "ws-1", "lab"))
    document = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert document == {
        "workspace": [
            {"workspaceID": "ws-1", "RequestID": "ws-1", "workspaceName": "lab"}
        ]
    }


def test_document_text(tmp_path):
    path = tmp_path / "workspace.yaml"
    append_workspace(path, WorkspaceEntry("ws-1", "ws-1", "lab"))
    assert path.read_text(encoding="utf-8") == (
        "workspace:\n- workspaceID: ws-1\n  RequestID: ws-1\n  workspaceName: lab\n"
    )


def test_malformed_file_is_ignored(tmp_path):
    path = tmp_path / "workspace.yaml"
    path.write_text("workspace: [unclosed\n", encoding="utf-8")
    assert load_workspaces(path) == []
    entry = WorkspaceEntry("ws-3", "ws-3", "fresh")
    assert append_workspace(path, entry) == [entry]
    assert load_workspaces(path) == [entry]


def test_missing_keys_become_empty(tmp_path):
    path = tmp_path / "workspace.yaml"
    path.write_text("workspace:\n- workspaceID: ws-4\n", encoding="utf-8")
    assert load_workspaces(path) == [WorkspaceEntry("ws-4", "", "")]


def test_entry_dict_round_trip():
    entry = WorkspaceEntry("ws-5", "req-5", "name")
    assert WorkspaceEntry.from_dict(entry.to_dict()) == entry