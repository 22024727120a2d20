"""Directed graph with labelled, partitioned vertices.

Vertices and edges are kept in stack order: the most recently added item
comes first when iterating, and lookups by key return the first match in
that order.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class VertexState(enum.IntEnum):
    """Marks used by search algorithms on a vertex."""

    OPEN = 1
    PROCESSED = 2
    CLOSED = 3


def _push(item, items: list) -> None:
    items.insert(0, item)


def _pop_by_id(items: list, item_id: int):
    """Remove and return the first item with the given id, or None."""
    for position, item in enumerate(items):
        if item.id == item_id:
            return items.pop(position)
    return None


@dataclass(eq=False)
class Vertex:
    """A vertex with a label, a partition and search bookkeeping."""

    id: int
    label: str
    partition: int
    cost: int = 0
    state: Optional[VertexState] = None
    parent: Optional["Vertex"] = None
    in_edges: list["Edge"] = field(default_factory=list)
    out_edges: list["Edge"] = field(default_factory=list)

    def in_degree(self) -> int:
        """Number of edges arriving at this vertex."""
        return len(self.in_edges)

    def out_degree(self) -> int:
        """Number of edges leaving this vertex."""
        return len(self.out_edges)

    def describe(self) -> str:
        """Full description with degrees and incident edges."""
        incoming = "".join(edge.describe() for edge in self.in_edges)
        outgoing = "".join(edge.describe() for edge in self.out_edges)
        return (
            f"(id:{self.id}, rotulo:{self.label}, grau_entrada:{self.in_degree()}, "
            f"fronteira_entrada:{{ {incoming}}}, grau_saida:{self.out_degree()}, "
            f"fronteira_saida:{{ {outgoing}}})"
        )


@dataclass(eq=False)
class Edge:
    """An edge directed from ``u`` to ``v``."""

    id: int
    u: Vertex
    v: Vertex

    def describe(self) -> str:
        """Short form: id and endpoint ids."""
        return f"(id:{self.id} {{{self.u.id},{self.v.id}}})"

    def structure(self) -> str:
        """Edge-list form ``u_id:u_label > v_id:v_label``."""
        return f"{self.u.id}:{self.u.label} > {self.v.id}:{self.v.label}"


@dataclass(eq=False)
class DiGraph:
    """A directed graph keeping vertices and edges in stack order."""

    id: int = 1
    _vertices: list[Vertex] = field(default_factory=list, repr=False)
    _edges: list[Edge] = field(default_factory=list, repr=False)

    def add_vertex(self, vertex_id: int, label: str, partition: int) -> Vertex:
        """Create a vertex and add it to the graph."""
        vertex = Vertex(vertex_id, label, partition)
        _push(vertex, self._vertices)
        return vertex

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and all its incident edges; absent ids are ignored."""
        vertex = self.vertex(vertex_id)
        if vertex is None:
            return
        while vertex.in_edges:
            self.remove_edge(vertex.in_edges[0].id)
        while vertex.out_edges:
            self.remove_edge(vertex.out_edges[0].id)
        _pop_by_id(self._vertices, vertex_id)

    def add_edge(self, edge_id: int, u_id: int, v_id: int) -> Edge:
        """Create an edge from ``u_id`` to ``v_id``.

        Raises KeyError if either vertex does not exist.
        """
        u = self.vertex(u_id)
        v = self.vertex(v_id)
        if u is None:
            raise KeyError(f"vertex {u_id} does not exist in the graph")
        if v is None:
            raise KeyError(f"vertex {v_id} does not exist in the graph")
        edge = Edge(edge_id, u, v)
        _push(edge, u.out_edges)
        _push(edge, v.in_edges)
        _push(edge, self._edges)
        return edge

    def remove_edge(self, edge_id: int) -> None:
        """Remove an edge by id; raises KeyError if it does not exist."""
        edge = _pop_by_id(self._edges, edge_id)
        if edge is None:
            raise KeyError(f"edge {edge_id} does not exist in the graph")
        _pop_by_id(edge.u.out_edges, edge.id)
        _pop_by_id(edge.v.in_edges, edge.id)

    def vertex(self, vertex_id: int) -> Optional[Vertex]:
        """The first vertex with this id, or None."""
        return next((v for v in self._vertices if v.id == vertex_id), None)

    def find_label(self, label: str) -> Optional[Vertex]:
        """The first vertex with this label, or None."""
        return next((v for v in self._vertices if v.label == label), None)

    def vertices(self) -> list[Vertex]:
        """Vertices, most recently added first."""
        return list(self._vertices)

    def edges(self) -> list[Edge]:
        """Edges, most recently added first."""
        return list(self._edges)

    def format(self) -> str:
        """The graph as an edge list, one edge per line."""
        return "".join(edge.structure() + "\n" for edge in self._edges)