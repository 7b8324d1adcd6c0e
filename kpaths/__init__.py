"""K shortest loopless paths in weighted directed graphs, with a TCP query server and client."""

__version__ = "1.0.0"
__all__ = ["graph", "threadpool", "server", "client"]