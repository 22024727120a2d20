"""Metabolic network analysis.

A network file lists one reaction per line, for example::

    R1 M1 + M2 => M3 _E1 _E2

Tokens starting with ``R`` are reactions and tokens starting with ``M`` are
metabolites. Tokens starting with ``_`` are enzymes that catalyse the
reaction. A token starting with ``=`` separates substrates from products.
Any other token is ignored.

The analysis finds, for every metabolite, the reactions of least enzyme
cost that produce it from a set of initial substrates.
"""

from __future__ import annotations

import enum
import sys
from typing import Iterable, Optional

from .digraph import DiGraph, Vertex, VertexState

FAKE_REACTION = "RF"
FAKE_SUBSTRATE = "SF"
END_MARKER = "FIM"
UNREACHED = 2**31 - 1

_SUBSTRATE_WIDTH = 3


class Partition(enum.IntEnum):
    """The kind of vertex in a metabolic network."""

    REACTION = 1
    ENZYME = 2
    METABOLITE = 3


def _find_or_add(graph: DiGraph, label: str, partition: Partition, next_id: int) -> tuple[Vertex, int]:
    vertex = graph.find_label(label)
    if vertex is None:
        vertex = graph.add_vertex(next_id, label, partition)
        next_id += 1
    return vertex, next_id


def read_network(lines: Iterable[str]) -> DiGraph:
    """Build the network graph from the lines of a network file.

    Raises ValueError when a metabolite or enzyme appears before any
    reaction has been declared.
    """
    graph = DiGraph(1)
    vertex_id = 1
    edge_id = 1
    reaction: Optional[Vertex] = None

    for line in lines:
        products = False
        for token in line.rstrip("\r\n").split(" "):
            if not token:
                continue
            kind = token[0]
            if kind == "R":
                reaction = graph.add_vertex(vertex_id, token, Partition.REACTION)
                vertex_id += 1
            elif kind in ("M", "_"):
                if reaction is None:
                    raise ValueError(f"{token!r} appears before any reaction")
                if kind == "M":
                    metabolite, vertex_id = _find_or_add(graph, token, Partition.METABOLITE, vertex_id)
                    if products:
                        graph.add_edge(edge_id, reaction.id, metabolite.id)
                    else:
                        graph.add_edge(edge_id, metabolite.id, reaction.id)
                else:
                    enzyme, vertex_id = _find_or_add(graph, token, Partition.ENZYME, vertex_id)
                    graph.add_edge(edge_id, enzyme.id, reaction.id)
                edge_id += 1
            elif kind == "=":
                products = True
    return graph


def _scan_words(tokens: Iterable[str]):
    """Yield whitespace-separated words, at most three characters at a time."""
    for token in tokens:
        for word in token.split():
            for start in range(0, len(word), _SUBSTRATE_WIDTH):
                yield word[start:start + _SUBSTRATE_WIDTH]


def read_substrates(graph: DiGraph, tokens: Iterable[str]) -> list[Vertex]:
    """Look up the initial substrates named by ``tokens``.

    The marker ``FIM`` is skipped. The result is in stack order: the last
    substrate read comes first. Raises KeyError for an unknown label.
    """
    substrates: list[Vertex] = []
    for word in _scan_words(tokens):
        if word == END_MARKER:
            continue
        vertex = graph.find_label(word)
        if vertex is None:
            raise KeyError(f"substrate {word} does not exist in the network")
        substrates.insert(0, vertex)
    return substrates


def add_fake_reaction(graph: DiGraph, substrates: Iterable[Vertex]) -> tuple[Vertex, Vertex]:
    """Add a fake substrate ``SF`` feeding a fake reaction ``RF`` that yields every substrate.

    Returns the fake reaction and the fake substrate.
    """
    fake_reaction = graph.add_vertex(-1, FAKE_REACTION, Partition.REACTION)
    fake_substrate = graph.add_vertex(-2, FAKE_SUBSTRATE, Partition.METABOLITE)
    edge_id = -1
    graph.add_edge(edge_id, fake_substrate.id, fake_reaction.id)
    for substrate in substrates:
        edge_id -= 1
        graph.add_edge(edge_id, fake_reaction.id, substrate.id)
    return fake_reaction, fake_substrate


def initialize_costs(graph: DiGraph) -> list[Vertex]:
    """Reset costs and parents and return the initial search queue.

    Every vertex starts unreached except the fake substrate, whose cost is 0.
    Enzymes are left out of the queue.
    """
    queue: list[Vertex] = []
    for vertex in graph.vertices():
        vertex.cost = UNREACHED
        vertex.parent = None
        if vertex.label == FAKE_SUBSTRATE:
            vertex.cost = 0
        if vertex.partition != Partition.ENZYME:
            queue.insert(0, vertex)
    return queue


def enzyme_count(vertex: Vertex) -> int:
    """Number of enzymes that catalyse a reaction."""
    return sum(1 for edge in vertex.in_edges if edge.u.partition == Partition.ENZYME)


def process(graph: DiGraph, substrates: Iterable[Vertex]) -> None:
    """Run the cost search from ``substrates``.

    Afterwards each reachable metabolite has as parent the reaction that
    produces it at least cost.
    """
    add_fake_reaction(graph, substrates)
    queue = initialize_costs(graph)

    while queue:
        cheapest = min(range(len(queue)), key=lambda position: queue[position].cost)
        vertex = queue.pop(cheapest)
        current = 0
        if vertex.partition == Partition.REACTION:
            vertex.cost = enzyme_count(vertex)
            current += vertex.cost
        for edge in vertex.out_edges:
            target = edge.v
            if target.partition == Partition.METABOLITE:
                if current < target.cost:
                    target.cost = current
                    target.parent = vertex
            else:
                target.cost = current + enzyme_count(target)
                target.parent = vertex


def minimal_reactions(graph: DiGraph) -> list[tuple[str, list[str]]]:
    """For each produced metabolite, the labels of the reactions it needs.

    Must be called after :func:`process`. Metabolites are listed in vertex
    order; the fake reaction is never included.
    """
    result: list[tuple[str, list[str]]] = []
    for vertex in graph.vertices():
        if vertex.partition != Partition.METABOLITE or vertex.parent is None:
            continue
        for other in graph.vertices():
            if other.partition == Partition.REACTION:
                other.state = VertexState.OPEN
        pending = [vertex.parent]
        reactions: list[str] = []
        while pending:
            reaction = pending.pop(0)
            if reaction.state == VertexState.OPEN and reaction.label != FAKE_REACTION:
                reactions.append(reaction.label)
                reaction.state = VertexState.CLOSED
                for edge in reaction.in_edges:
                    source = edge.u
                    if source.partition == Partition.METABOLITE and source.parent is not None:
                        pending.insert(0, source.parent)
        result.append((vertex.label, reactions))
    return result


def format_minimal_reactions(graph: DiGraph) -> str:
    """Report of :func:`minimal_reactions`, one metabolite per line."""
    return "".join(
        f"{label}: " + "".join(f"{name} " for name in reactions) + "\n"
        for label, reactions in minimal_reactions(graph)
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Analyse a network file, reading the initial substrates from standard input."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 1:
        print("usage: analise <network file> < <substrates>", file=sys.stderr)
        return 1
    with open(argv[0], encoding="utf-8") as network_file:
        graph = read_network(network_file)
    sys.stdout.write(graph.format())
    substrates = read_substrates(graph, sys.stdin.read().split())
    process(graph, substrates)
    sys.stdout.write("\n")
    sys.stdout.write(format_minimal_reactions(graph))
    return 0