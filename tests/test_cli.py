import grpc
import pytest

from cvaascli.cli import build_parser, main
from cvaascli.schema import parse_json
from cvaascli.store import load_workspaces


class FakeChannel:
    def __init__(self):
        self.streams = {}
        self.replies = {}
        self.calls = []
        self.closed = False
        self.target = None

    def unary_stream(self, method, request_serializer, response_deserializer):
        def call(request, timeout=None, metadata=None):
            self.calls.append((method, request, metadata))
            return iter(
                response_deserializer(item.SerializeToString())
                for item in self.streams.get(method, [])
            )

        return call

    def unary_unary(self, method, request_serializer, response_deserializer):
        def call(request, timeout=None, metadata=None):
            self.calls.append((method, request, metadata))
            return response_deserializer(self.replies[method].SerializeToString())

        return call

    def close(self):
        self.closed = True


@pytest.fixture
def channel(monkeypatch):
    fake = FakeChannel()

    def secure_channel(target, credentials):
        fake.target = target
        return fake

    monkeypatch.setattr(grpc, "secure_channel", secure_channel)
    return fake


@pytest.fixture
def credentials(tmp_path):
    token_file = tmp_path / "token.txt"
    token_file.write_text("token\n", encoding="utf-8")
    url_file = tmp_path / "url.txt"
    url_file.write_text("  localhost:443  \n", encoding="utf-8")
    return ["--token", str(token_file), "--url", str(url_file)]


def test_parser_defaults():
    args = build_parser().parse_args(["get", "workspaces"])
    assert args.state == "NONE"
    assert args.token is None


def test_flags_accepted_after_subcommand():
    args = build_parser().parse_args(
        ["get", "devices", "--token", "t.txt", "--url", "u.txt", "--mlag"]
    )
    assert (args.token, args.url, args.mlag, args.danz) == ("t.txt", "u.txt", True, False)


def test_without_command_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "create" in out
    assert "process" not in out


def test_required_flags(capsys):
    assert main(["get", "devices"]) == 1
    assert 'required flag(s) "token", "url" not set' in capsys.readouterr().out


def test_conflicting_filters(credentials, capsys):
    assert main([*credentials, "get", "devices", "--mlag", "--danz"]) == 1
    assert "--mlag et --danz" in capsys.readouterr().out


def test_create_requires_name(credentials, capsys):
    assert main([*credentials, "create", "workspace"]) == 1
    assert "❌ Veuillez spécifier un nom avec --name" in capsys.readouterr().out


def test_missing_token_file(tmp_path, capsys):
    url_file = tmp_path / "url.txt"
    url_file.write_text("localhost:443\n", encoding="utf-8")
    argv = ["--token", str(tmp_path / "absent"), "--url", str(url_file)]
    assert main([*argv, "get", "workspaces"]) == 1
    assert "Erreur lecture token" in capsys.readouterr().err


def test_get_devices(credentials, channel, capsys):
    channel.streams["/arista.inventory.v1.DeviceService/GetAll"] = [
        parse_json(
            "arista.inventory.v1.DeviceStreamResponse",
            {
                "value": {
                    "key": {"deviceId": "SN-EXAMPLE-1"},
                    "hostname": "leaf1",
                    "modelName": "cEOSLab",
                }
            },
        )
    ]
    assert main([*credentials, "get", "devices", "--model", "cEOSLab"]) == 0
    assert "📟 leaf1 (SN-EXAMPLE-1) - cEOSLab" in capsys.readouterr().out
    _, request, metadata = channel.calls[0]
    assert request.partial_eq_filter[0].model_name.value == "cEOSLab"
    assert ("authorization", "Bearer token") in metadata
    assert channel.target == "localhost:443"
    assert channel.closed


def test_get_workspaces(credentials, channel, capsys):
    channel.streams["/arista.workspace.v1.WorkspaceService/GetAll"] = [
        parse_json(
            "arista.workspace.v1.WorkspaceStreamResponse",
            {
                "value": {
                    "key": {"workspaceId": "ws-1"},
                    "displayName": "demo",
                    "state": "WORKSPACE_STATE_SUBMITTED",
                }
            },
        )
    ]
    assert main([*credentials, "get", "workspaces", "--state", "submitted"]) == 0
    assert "🧪 demo (ws-1) - State: WORKSPACE_STATE_SUBMITTED" in capsys.readouterr().out


def test_get_workspaces_invalid_state(credentials, channel, capsys):
    assert main([*credentials, "get", "workspaces", "--state", "bogus"]) == 1
    assert "État invalide : bogus" in capsys.readouterr().err
    assert channel.calls == []


def test_create_workspace_records_entry(credentials, channel, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    channel.replies["/arista.workspace.v1.WorkspaceConfigService/Set"] = parse_json(
        "arista.workspace.v1.WorkspaceConfigSetResponse",
        {"value": {"displayName": "demo"}},
    )
    assert main([*credentials, "create", "workspace", "--name", "demo"]) == 0
    out = capsys.readouterr().out
    assert "✅ Workspace sauvegardé dans data/workspace.yaml" in out

    entries = load_workspaces(tmp_path / "data" / "workspace.yaml")
    assert len(entries) == 1
    entry = entries[0]
    assert entry.workspace_name == "demo"
    assert entry.workspace_id.startswith("ws-")
    assert entry.request_id == entry.workspace_id
    assert f"🆔 Workspace ID généré : {entry.workspace_id}" in out

    _, request, _ = channel.calls[0]
    assert request.value.key.workspace_id.value == entry.workspace_id


def test_run_process_requires_flags_and_succeeds(credentials):
    assert main(["run", "process"]) == 1
    assert main([*credentials, "run", "process"]) == 0