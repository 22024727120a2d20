"""Undirected graph with integer ids and degree-based edge weights.

Vertices and edges are kept in stack order: the most recently added item
comes first when iterating, and lookups by id return the first match in
that order.

Each edge carries a weight equal to the sum of the degrees of its
endpoints. Adding an edge refreshes the weights of every edge incident to
its endpoints. Removing an edge leaves the remaining weights as they were.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


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
    """A vertex and the edges incident to it."""

    id: int
    edges: list["Edge"] = field(default_factory=list)

    def degree(self) -> int:
        """Number of edge ends at this vertex; a loop counts twice."""
        return len(self.edges)

    def describe(self, weights: bool = False) -> str:
        """The vertex as ``<id> - [degree]( edges ) | ``."""
        incident = "".join(edge.describe(weights) + " " for edge in self.edges)
        return f"<{self.id}> - [{self.degree()}]( {incident}) | "


@dataclass(eq=False)
class Edge:
    """An edge joining ``u`` and ``v``."""

    id: int
    u: Vertex
    v: Vertex
    weight: int = 0

    def describe(self, weights: bool = False) -> str:
        """The edge as ``<id>:{u,v}``, optionally followed by its weight."""
        text = f"<{self.id}>:{{{self.u.id},{self.v.id}}}"
        if weights:
            text += f" [peso={self.weight}]"
        return text

    def _refresh_weight(self) -> None:
        self.weight = self.u.degree() + self.v.degree()


@dataclass(eq=False)
class Graph:
    """An undirected graph keeping vertices and edges in stack order."""

    _vertices: list[Vertex] = field(default_factory=list, repr=False)
    _edges: list[Edge] = field(default_factory=list, repr=False)

    def add_vertex(self, vertex_id: int) -> Vertex:
        """Create a vertex and add it to the graph."""
        vertex = Vertex(vertex_id)
        _push(vertex, self._vertices)
        return vertex

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and its incident edges; absent ids are ignored."""
        vertex = self.vertex(vertex_id)
        if vertex is None:
            return
        while vertex.edges:
            self.remove_edge(vertex.edges[0].id)
        _pop_by_id(self._vertices, vertex_id)

    def add_edge(self, edge_id: int, u_id: int, v_id: int) -> Edge:
        """Create an edge joining ``u_id`` and ``v_id``.

        Raises KeyError if either vertex does not exist.
        """
        u = self.vertex(u_id)
        v = self.vertex(v_id)
        if u is None:
            raise KeyError(f"vertex {u_id} does not exist in the graph")
        if v is None:
            raise KeyError(f"vertex {v_id} does not exist in the graph")
        edge = Edge(edge_id, u, v, u.degree() + v.degree())
        _push(edge, self._edges)
        _push(edge, u.edges)
        _push(edge, v.edges)
        for incident in u.edges:
            incident._refresh_weight()
        for incident in v.edges:
            incident._refresh_weight()
        return edge

    def remove_edge(self, edge_id: int) -> None:
        """Remove an edge by id; raises KeyError if it does not exist."""
        edge = _pop_by_id(self._edges, edge_id)
        if edge is None:
            raise KeyError(f"edge {edge_id} does not exist in the graph")
        _pop_by_id(edge.u.edges, edge.id)
        _pop_by_id(edge.v.edges, edge.id)

    def vertex(self, vertex_id: int) -> Optional[Vertex]:
        """The first vertex with this id, or None."""
        return next((v for v in self._vertices if v.id == vertex_id), None)

    def vertices(self) -> list[Vertex]:
        """Vertices, most recently added first."""
        return list(self._vertices)

    def edges(self) -> list[Edge]:
        """Edges, most recently added first."""
        return list(self._edges)

    def induced_subgraph(self, vertex_ids: Iterable[int]) -> "Graph":
        """The subgraph on ``vertex_ids`` with every edge joining two of them.

        Vertices are added in the order given; edges keep their ids.
        """
        ids = list(vertex_ids)
        chosen = set(ids)
        subgraph = Graph()
        for vertex_id in ids:
            subgraph.add_vertex(vertex_id)
        for edge in self._edges:
            if edge.u.id in chosen and edge.v.id in chosen:
                subgraph.add_edge(edge.id, edge.u.id, edge.v.id)
        return subgraph

    def format(self, weights: bool = False) -> str:
        """A listing of the vertices with their edges, then of the edges."""
        vertex_text = "".join(v.describe(weights) + " " for v in self._vertices)
        edge_text = "".join(e.describe(weights) + " " for e in self._edges)
        return (
            "\nVertices: <id> - [grau]( <fronteira> )"
            "\nVertices: " + vertex_text
            + "\nArestas: <id>:{u,v}"
            "\nArestas: " + edge_text + "\n"
        )