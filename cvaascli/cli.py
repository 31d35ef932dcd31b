"""Command-line interface of cvaas-cli."""

from __future__ import annotations

import argparse
import sys
import time

from cvaascli.actions import create_workspace, get_workspaces_by_state, read_inventory
from cvaascli.client import connect
from cvaascli.store import DEFAULT_PATH, WorkspaceEntry, append_workspace


def _create_workspace(args: argparse.Namespace) -> int:
    if not args.name:
        print("❌ Veuillez spécifier un nom avec --name")
        return 1

    workspace_id = f"ws-{int(time.time())}"
    request_id = workspace_id

    with connect(args.token, args.url) as connection:
        print(f"🆔 Workspace ID généré : {workspace_id}")
        create_workspace(connection, workspace_id, request_id, args.name)

    entry = WorkspaceEntry(workspace_id, request_id, args.name)
    try:
        append_workspace(DEFAULT_PATH, entry)
    except OSError as err:
        print(f"❌ Erreur écriture workspace.yaml : {err}")
        return 0
    print("✅ Workspace sauvegardé dans data/workspace.yaml")
    return 0


def _get_devices(args: argparse.Namespace) -> int:
    if args.mlag and args.danz:
        print("❌ Les filtres --mlag et --danz ne peuvent pas être utilisés en même temps.")
        return 1
    with connect(args.token, args.url) as connection:
        devices = read_inventory(connection, args.model, args.mlag, args.danz)
    for device in devices:
        print(f"📟 {device.hostname} ({device.device_id}) - {device.model}")
    return 0


def _get_workspaces(args: argparse.Namespace) -> int:
    with connect(args.token, args.url) as connection:
        workspaces = get_workspaces_by_state(connection, args.state)
    for workspace in workspaces:
        print(f"🧪 {workspace.display_name} ({workspace.id}) - State: {workspace.state}")
    return 0


def _run_process(args: argparse.Namespace) -> int:
    """Hidden command; the complete process currently performs no operation."""
    return 0


def _connection_flags() -> argparse.ArgumentParser:
    flags = argparse.ArgumentParser(add_help=False)
    flags.add_argument(
        "--token", default=argparse.SUPPRESS, help="Chemin vers le fichier token"
    )
    flags.add_argument(
        "--url", default=argparse.SUPPRESS, help="Chemin vers le fichier URL"
    )
    return flags


def _group(subparsers, name: str, flags, **kwargs) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, parents=[flags], **kwargs)
    parser.set_defaults(handler=None, help_parser=parser)
    return parser


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands."""
    flags = _connection_flags()
    parser = argparse.ArgumentParser(
        prog="cvaas-cli",
        description=(
            "Outil CLI permettant de créer des workspaces, tags et exécuter "
            "des opérations via cvaas-cli"
        ),
    )
    parser.add_argument("--token", default=None, help="Chemin vers le fichier token")
    parser.add_argument("--url", default=None, help="Chemin vers le fichier URL")
    parser.set_defaults(handler=None, help_parser=parser)
    commands = parser.add_subparsers(metavar="COMMANDE")

    create = _group(commands, "create", flags, help="Créer des ressources dans cvaas-cli")
    create_commands = create.add_subparsers(metavar="COMMANDE")
    workspace = _group(create_commands, "workspace", flags, help="Créer un workspace")
    workspace.add_argument(
        "--name", default="", help="Nom du workspace à créer (obligatoire)"
    )
    workspace.set_defaults(handler=_create_workspace)

    get = _group(commands, "get", flags, help="Récupérer des ressources depuis cvaas-cli")
    get_commands = get.add_subparsers(metavar="COMMANDE")
    devices = _group(
        get_commands, "devices", flags, help="Afficher l'inventaire des devices"
    )
    devices.add_argument("--model", default="", help="Filtrer par modèle (ex: cEOSLab)")
    devices.add_argument(
        "--mlag", action="store_true", help="Afficher uniquement les devices avec MLAG activé"
    )
    devices.add_argument(
        "--danz", action="store_true", help="Afficher uniquement les devices avec DANZ activé"
    )
    devices.set_defaults(handler=_get_devices)
    workspaces = _group(
        get_commands, "workspaces", flags, help="Afficher les workspaces filtrés par état"
    )
    workspaces.add_argument(
        "--state",
        default="NONE",
        help=(
            "Filtrer les workspaces par état (UNSPECIFIED, PENDING, SUBMITTED, "
            "ABANDONED, CONFLICTS, ROLLED_BACK)"
        ),
    )
    workspaces.set_defaults(handler=_get_workspaces)

    run = _group(commands, "run", flags)
    run_commands = run.add_subparsers(metavar="COMMANDE")
    process = _group(
        run_commands, "process", flags, help="Créer workspace, tag, et assigner aux cEOSLab"
    )
    process.set_defaults(handler=_run_process)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = build_parser().parse_args(argv)
    if args.handler is None:
        args.help_parser.print_help()
        return 0

    missing = [name for name in ("token", "url") if getattr(args, name) is None]
    if missing:
        names = ", ".join(f'"{name}"' for name in missing)
        print(f"Erreur: required flag(s) {names} not set")
        return 1

    try:
        return args.handler(args)
    except (RuntimeError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())