# kpaths

kpaths finds the shortest loopless paths between two vertices of a weighted
directed graph. It runs Yen's algorithm on top of Dijkstra. The package also
has a small TCP server that answers path queries against graph files, and an
interactive client for that server.

No third-party packages are needed. It runs on Python 3.10 or newer.

## Install

    pip install .

To install with the test tools as well:

    pip install .[test]

## Graph files

A graph file begins with the number of vertices. Edges follow. Each edge is
written as `(start end weight)`, and edges are separated by whitespace:

    5
    (0 1 3) (0 2 2) (1 3 4)
    (2 3 1) (3 4 2)

- Vertices are numbered from 0.
- Start, end and weight are non-negative integers.
- Two edges may not share the same start and end vertex.
- Loading fails with `IndexError` if an edge names a vertex out of range.
- Loading fails with `ValueError` for a duplicate edge or for text that does not fit the format.

## Library use

    from kpaths.graph import Graph

    graph = Graph.from_file("graph.txt")
    paths = graph.yen_ksp(0, 4, 3)       # up to 3 loopless paths, cheapest first
    for path in paths:
        print(path, graph.path_value(path))

    print(graph.dijkstra(0, 4))          # the single cheapest path, or [] if none

### Building a graph

- `Graph(vertex_count)` creates an empty graph. Add edges to it with `add_edge(start, end, value)`.
- `Graph.parse(text)` builds a graph from a string in the file format above.
- `Graph.from_file(path)` reads a graph from a file.

### Querying a graph

- `len(graph)` gives the number of vertices.
- `str(graph)` gives one line per vertex, listing its edges as `(start end value)`.
- `edge_value(start, end)` returns the weight of one edge. It raises `KeyError` if that edge does not exist.
- `path_value(path)` returns the summed weight of a path.
- `remove_edge(start, end)` removes an edge and returns the removed edges as `Edge` named tuples.

### Behaviour of the path searches

- `yen_ksp(start, end, k)` raises `ValueError` if `k` is less than 1.
- `yen_ksp` and `dijkstra` raise `IndexError` if a vertex is out of range.
- When `end` cannot be reached from `start`, the list that `yen_ksp` returns holds a single empty path.

### Thread pool

`kpaths.threadpool.ThreadPool(num_threads)` is a fixed-size pool of worker threads. If you give no count, it uses one thread per CPU.

- `submit(fn, *args, **kwargs)` returns a `concurrent.futures.Future`.
- `shutdown()` lets the workers finish every queued task and then joins them.
- Calling `submit` after shutdown raises `RuntimeError`.
- The pool also works as a context manager, and shuts down when the block ends.

## Server and client

Start the server. By default it listens on 127.0.0.1, port 55555, and handles
clients with 4 worker threads:

    kpaths-server [--host HOST] [--port PORT] [--workers N]

In a second terminal, start the client and type queries of the form
`<graph file> <start> <end> <k>`:

    kpaths-client [--host HOST] [--port PORT]
    > graph.txt 0 4 2
    0 1 3 4

### Which path the server sends back

The server loads the graph file named in each query and searches for up to
`k` paths. It then replies with path number `k`, counting the cheapest as 1.
If fewer than `k` paths exist, it replies with the last path it found.

### Errors

In these cases the server replies with an error message, and the client prints it after `Server error:`:

- The query has too few fields, or its numbers are not integers.
- The graph file cannot be read or parsed.
- A vertex is out of range.
- `k` is less than 1.
- No path exists.

### Quitting

Type `exit`, or end input, to quit the client. Stop the server with Ctrl-C.

### Wire format

The server answers each query with one status byte.

- On error, the status byte is `0x00`, followed by a UTF-8 error message.
- On success, the status byte is `0x01`, followed by a big-endian 32-bit node count and then that many big-endian 32-bit vertex numbers.

`kpaths.client.receive_path(sock)` reads one reply. It returns the path as a list of integers.

- It raises `ServerError` for an error reply.
- It raises `ProtocolError` for a reply that is missing, cut short or malformed.

## Limitations

- The server reads each query from a single receive of at most 1023 bytes.
- The server does no authentication or encryption.
- The server keeps no state between queries: it reloads the graph file for every query.