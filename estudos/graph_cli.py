"""Command that reads an undirected graph from standard input and prints it.

The input is the number of vertices ``n`` followed by pairs ``u v``. Each
pair adds an edge, and a pair holding a zero ends the list. Vertices are
numbered ``1..n`` and edges are numbered from 1 in the order read. An edge
that names a missing vertex is reported and skipped, but it still uses up
its number.

With ``--subgraph`` a list of vertex ids ending in ``0`` follows. The
subgraph induced by those ids is printed after the graph.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, TextIO

from .graph import Graph

VERTEX_SET_PROMPT = "Insira os ids dos vértices (digite 0 para parar):\n"


def _next_int(tokens: Iterator[str]) -> Optional[int]:
    """The next integer from ``tokens``, or None at the end of input."""
    token = next(tokens, None)
    return None if token is None else int(token)


def read_graph(tokens: Iterable[str]) -> Graph:
    """Read a vertex count and the ``u v`` pairs that follow it into a graph.

    Reading stops at a pair holding a zero or at the end of input. Edges
    naming a missing vertex are reported on standard error and skipped.
    Raises ValueError if the vertex count is missing or a token is not an
    integer.
    """
    stream = iter(tokens)
    count = _next_int(stream)
    if count is None:
        raise ValueError("missing vertex count")
    graph = Graph()
    for vertex_id in range(1, count + 1):
        graph.add_vertex(vertex_id)

    edge_id = 1
    while True:
        u = _next_int(stream)
        v = _next_int(stream)
        if u is None or v is None or not u or not v:
            break
        try:
            graph.add_edge(edge_id, u, v)
        except KeyError:
            missing = u if graph.vertex(u) is None else v
            print(f"Erro: Vertice {missing} não existe no grafo.", file=sys.stderr)
        edge_id += 1
    return graph


def read_vertex_set(graph: Graph, tokens: Iterable[str], out: Optional[TextIO] = None) -> list[int]:
    """Read vertex ids up to a ``0`` and keep those present in ``graph``.

    Ids not in the graph are reported on ``out``. The result is in stack
    order, with the last id read first.
    """
    if out is None:
        out = sys.stdout
    stream = iter(tokens)
    out.write(VERTEX_SET_PROMPT)
    chosen: list[int] = []
    while True:
        vertex_id = _next_int(stream)
        if vertex_id is None or vertex_id == 0:
            break
        if graph.vertex(vertex_id) is None:
            out.write(f"Vértice {vertex_id} inexistente no grafo.\n")
        else:
            chosen.insert(0, vertex_id)
    return chosen


def main(argv: Optional[list[str]] = None) -> int:
    """Read a graph from standard input and print it, optionally with a subgraph."""
    parser = argparse.ArgumentParser(prog="testa_grafos", description="Read and print a graph.")
    parser.add_argument("--weights", action="store_true", help="print edge weights")
    parser.add_argument(
        "--subgraph",
        action="store_true",
        help="then read vertex ids and print the induced subgraph",
    )
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        graph = read_graph(tokens)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(graph.format(args.weights))

    if args.subgraph:
        try:
            ids = read_vertex_set(graph, tokens, sys.stdout)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        subgraph = graph.induced_subgraph(ids)
        sys.stdout.write(subgraph.format(args.weights))
    return 0