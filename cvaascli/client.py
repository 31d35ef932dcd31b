"""Authenticated gRPC connection to a CloudVision service."""

from __future__ import annotations

import time
from collections.abc import Iterator
from os import PathLike

import grpc
from google.protobuf.message import Message

TIMEOUT = 30.0
"""Seconds allowed for all calls made through one connection."""


def read_line_from_file(filename: str | PathLike) -> str:
    """Return the first line of a file with surrounding whitespace removed.

    Raises ValueError when the file holds nothing at all.
    """
    with open(filename, encoding="utf-8") as handle:
        line = handle.readline()
    if not line:
        raise ValueError("fichier vide")
    return line.strip()


class Connection:
    """A gRPC channel carrying a bearer token and a shared deadline."""

    def __init__(self, channel: grpc.Channel, token: str, timeout: float = TIMEOUT):
        self.channel = channel
        self.metadata = (("authorization", f"Bearer {token}"),)
        self._deadline = time.monotonic() + timeout

    @property
    def remaining(self) -> float:
        """Seconds left before the connection's deadline, never negative."""
        return max(self._deadline - time.monotonic(), 0.0)

    def unary_stream(
        self, method: str, request: Message, response_class: type[Message]
    ) -> Iterator[Message]:
        """Call a server-streaming method and return the stream of responses."""
        call = self.channel.unary_stream(
            method,
            request_serializer=type(request).SerializeToString,
            response_deserializer=response_class.FromString,
        )
        return call(request, timeout=self.remaining, metadata=self.metadata)

    def unary_unary(
        self, method: str, request: Message, response_class: type[Message]
    ) -> Message:
        """Call a unary method and return its response."""
        call = self.channel.unary_unary(
            method,
            request_serializer=type(request).SerializeToString,
            response_deserializer=response_class.FromString,
        )
        return call(request, timeout=self.remaining, metadata=self.metadata)

    def close(self) -> None:
        """Close the underlying channel."""
        self.channel.close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def connect(token_path: str | PathLike, url_path: str | PathLike) -> Connection:
    """Open a TLS connection to the server named in url_path, authenticated
    with the token stored in token_path."""
    try:
        token = read_line_from_file(token_path)
    except (OSError, ValueError) as err:
        raise RuntimeError(f"Erreur lecture token : {err}") from err
    try:
        url = read_line_from_file(url_path)
    except (OSError, ValueError) as err:
        raise RuntimeError(f"Erreur lecture URL : {err}") from err

    try:
        channel = grpc.secure_channel(url, grpc.ssl_channel_credentials())
    except (grpc.RpcError, ValueError) as err:
        raise RuntimeError(f"❌ Erreur connexion gRPC : {err}") from err
    return Connection(channel, token)