[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvaascli"
version = "0.1.0"
description = "Command-line tool for CloudVision-as-a-Service: list devices and workspaces, create workspaces"
requires-python = ">=3.10"
keywords = ["cloudvision", "cvaas", "grpc", "network", "inventory", "workspace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "grpcio",
    "protobuf",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cvaas-cli = "cvaascli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cvaascli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
