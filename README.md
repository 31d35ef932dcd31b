# cvaascli

A small command-line tool for CloudVision-as-a-Service (CVaaS). It talks to
the service over gRPC with TLS. You can use it to list the device inventory,
list workspaces by state, and create workspaces.

## Installation

```
pip install .
```

This installs the `cvaas-cli` command.

## Credentials

Every command needs two files:

- `--token FILE`: a file that holds the access token on its first line.
- `--url FILE`: a file that holds the gRPC address of the service on its
  first line, for example `cvaas.example.com:443`.

Surrounding whitespace on that line is removed. An empty file is an error.
You can give both options before or after the command name. If either one
is missing, the tool prints `Erreur: required flag(s) ... not set` and exits
with status 1.

The token is sent with each call as an `authorization: Bearer ...` header.
All calls made through one connection share a 30-second deadline.

## Usage

List the device inventory. Each device is printed as
`📟 <hostname> (<device id>) - <model>`:

```
cvaas-cli --token token.txt --url url.txt get devices
cvaas-cli --token token.txt --url url.txt get devices --model cEOSLab
cvaas-cli --token token.txt --url url.txt get devices --mlag
cvaas-cli --token token.txt --url url.txt get devices --danz
```

`--mlag` and `--danz` cannot be used together. If you give both, the command
exits with status 1.

List workspaces. Each workspace is printed as
`🧪 <display name> (<id>) - State: <state>`. You can filter them by state:
`UNSPECIFIED`, `PENDING`, `SUBMITTED`, `ABANDONED`, `CONFLICTS`,
`ROLLED_BACK` or `UNRECOGNIZED`. Case does not matter. The default, `NONE`,
lists every workspace. An unknown state is an error.

```
cvaas-cli --token token.txt --url url.txt get workspaces --state SUBMITTED
```

Create a workspace:

```
cvaas-cli --token token.txt --url url.txt create workspace --name my-change
```

`--name` is required. The command generates the workspace ID as
`ws-<unix time>` and uses the same value as the request ID. It prints the
service's reply as JSON. It then appends the workspace to
`data/workspace.yaml` in the current directory, and creates the file and its
directory if they do not exist. Each entry records `workspaceID`,
`RequestID` and `workspaceName`.

Errors from the service or from bad input are printed to standard error,
and the command exits with status 1.

## What it does not do

The tool does not create tags or assign them to devices. The `run process`
command is accepted but performs no operation. It is not listed in the help.
The tool cannot submit, abandon or otherwise change a workspace after it is
created.

## Library use

- `cvaascli.client.connect(token_path, url_path)` returns a `Connection`.
  You can use it as a context manager. It offers `unary_unary`,
  `unary_stream` and `close`.
- `cvaascli.actions` offers `read_inventory`, `get_workspaces_by_state` and
  `create_workspace`. The first two return lists of `DeviceInfo` and
  `WorkspaceInfo`. The request builders `build_inventory_filter`,
  `build_workspace_filter` and `build_workspace_config` can be used without a
  connection.
- `cvaascli.schema` has the protobuf message types that these calls use.
  `message_class(name)` looks up a type by its full name, for example
  `arista.workspace.v1.WorkspaceStreamRequest`. `parse_json(name, data)` and
  `to_json(message)` convert messages to and from JSON.
- `cvaascli.store` reads and appends the local workspace record through
  `load_workspaces` and `append_workspace`, using `WorkspaceEntry`.