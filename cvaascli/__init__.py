"""Command-line client for CloudVision-as-a-Service device inventory and workspaces."""

__version__ = "0.1.0"