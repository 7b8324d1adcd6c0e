"""TCP server answering k-shortest-path queries over graph files."""

from __future__ import annotations

import argparse
import logging
import re
import socket
import struct
from dataclasses import dataclass
from typing import Sequence

from kpaths.graph import Graph
from kpaths.threadpool import ThreadPool

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 55555
DEFAULT_WORKERS = 4
BUFFER_SIZE = 1024

STATUS_ERROR = 0x00
STATUS_OK = 0x01

PARSE_ERROR_MESSAGE = "Something went wrong. Please try again!"
EVALUATION_ERROR_MESSAGE = "Error while evaluating the path!"
NO_PATHS_MESSAGE = "No paths found!"
NO_PATHS_FIRST_MESSAGE = "No paths found! first"

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Request:
    """A query: graph file, source and sink vertices, and how many paths to search."""

    filename: str
    start: int
    end: int
    kth: int


def parse_request(text: str) -> Request:
    """Parse ``<file> <start> <end> <k>``; tokens after the fourth are ignored."""
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError("Expected '<file> <start> <end> <k>'")
    filename, *numbers = tokens[:4]
    if not all(_INTEGER.fullmatch(token) for token in numbers):
        raise ValueError("Start, end and k must be integers")
    start, end, kth = (int(token) for token in numbers)
    return Request(filename, start, end, kth)


def _error_response(message: str) -> bytes:
    return bytes([STATUS_ERROR]) + message.encode("utf-8")


def _path_response(path: Sequence[int]) -> bytes:
    return bytes([STATUS_OK]) + struct.pack(f"!I{len(path)}I", len(path), *path)


def handle_request(text: str) -> bytes:
    """Answer one textual query with the bytes to send back to the client.

    A reply is a status byte followed either by an error message (status 0)
    or by a big-endian 32-bit node count and that many 32-bit nodes (status 1).
    """
    try:
        request = parse_request(text)
    except ValueError:
        logger.error("Failed to parse input.")
        return _error_response(PARSE_ERROR_MESSAGE)

    logger.info(
        "Received: %s %d %d %d", request.filename, request.start, request.end, request.kth
    )
    try:
        graph = Graph.from_file(request.filename)
        paths = graph.yen_ksp(request.start, request.end, request.kth)
    except (OSError, ValueError, LookupError):
        return _error_response(EVALUATION_ERROR_MESSAGE)

    if not paths:
        return _error_response(NO_PATHS_FIRST_MESSAGE)
    result = paths[min(request.kth, len(paths) - 1)]
    if not result:
        return _error_response(NO_PATHS_MESSAGE)
    return _path_response(result)


def handle_client(conn: socket.socket) -> None:
    """Serve queries from one connection until the peer disconnects, then close it."""
    with conn:
        while True:
            try:
                data = conn.recv(BUFFER_SIZE - 1)
            except OSError:
                break
            if not data:
                break
            reply = handle_request(data.decode("utf-8", errors="replace"))
            try:
                conn.sendall(reply)
            except OSError:
                logger.error("Failed to send reply.")
                break
    logger.info("Client disconnected.")


def create_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> socket.socket:
    """Return a TCP socket bound to ``host:port`` and listening."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.bind((host, port))
        server.listen(1)
    except OSError:
        server.close()
        raise
    logger.info("Server is waiting for connection...")
    return server


def serve(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, workers: int = DEFAULT_WORKERS
) -> None:
    """Accept connections forever, handing each one to a worker of the pool."""
    pool = ThreadPool(workers)
    server = create_server(host, port)
    try:
        while True:
            conn, _ = server.accept()
            logger.info("Client connected.")
            pool.submit(handle_client, conn)
    finally:
        server.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the path server from the command line."""
    parser = argparse.ArgumentParser(description="Serve k-shortest-path queries.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        serve(args.host, args.port, args.workers)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        logger.error("Server failed: %s", exc)
        return 1
    return 0