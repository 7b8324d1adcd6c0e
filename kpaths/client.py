"""Interactive client that sends path queries to the server and prints answers."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
from typing import Sequence

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 55555
MESSAGE_SIZE = 1023

STATUS_ERROR = 0x00
STATUS_OK = 0x01


class ServerError(Exception):
    """The server answered a query with an error message."""


class ProtocolError(Exception):
    """The server's reply was missing, cut short or malformed."""


def create_client_socket(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> socket.socket:
    """Return a TCP socket connected to ``host:port``."""
    return socket.create_connection((host, port))


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data.extend(chunk)
    return bytes(data)


def receive_path(sock: socket.socket) -> list[int]:
    """Read one reply from the server and return the path it carries."""
    status = sock.recv(1)
    if not status:
        raise ProtocolError("Failed to receive response from the server")

    if status[0] == STATUS_ERROR:
        message = sock.recv(MESSAGE_SIZE)
        if not message:
            raise ProtocolError("Failed to receive error message.")
        raise ServerError(message.decode("utf-8", errors="replace"))
    if status[0] != STATUS_OK:
        raise ProtocolError("Unknown status code.")

    header = _recv_exact(sock, 4)
    if len(header) != 4:
        raise ProtocolError("Failed to receive path size.")
    (count,) = struct.unpack("!I", header)

    path = []
    for index in range(count):
        raw = _recv_exact(sock, 4)
        if len(raw) != 4:
            raise ProtocolError(f"Failed to receive node {index}")
        path.append(struct.unpack("!I", raw)[0])
    return path


def main(argv: Sequence[str] | None = None) -> int:
    """Read queries from standard input until ``exit`` and print each answer."""
    parser = argparse.ArgumentParser(description="Query a k-shortest-path server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        sock = create_client_socket(args.host, args.port)
    except OSError as exc:
        print(f"Error at client connect(): {exc}", file=sys.stderr)
        return 1

    with sock:
        while True:
            try:
                request = input("> ")
            except EOFError:
                break
            if request == "exit":
                break
            if not request:
                continue
            sock.sendall(request.encode("utf-8"))
            try:
                path = receive_path(sock)
            except ServerError as exc:
                print(f"Server error: {exc}")
            except ProtocolError as exc:
                print(exc, file=sys.stderr)
            else:
                print(" ".join(str(node) for node in path))
    return 0