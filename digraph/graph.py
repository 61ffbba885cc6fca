"""Directed graph stored as adjacency lists."""

from __future__ import annotations

import logging
import operator
import sys
from io import StringIO
from pathlib import Path
from typing import Iterator, List, TextIO, Tuple, Union

from digraph.errors import InvalidVertexCount, LoadFailure, OutOfRangeVertex
from digraph.scan import read_ints, read_tokens


class Adjacency:

    """Live view of the vertices adjacent to one vertex.

    Each call to iter() starts over, and reflects edges added since the view
    was created. Mutating the graph during iteration is unsupported.
    """

    def __init__(self, bag: List[int]):
        self._bag = bag

    def __repr__(self) -> str:
        return f"Adjacency({self._bag!r})"

    def __iter__(self) -> Iterator[int]:
        return iter(self._bag)

    def __len__(self) -> int:
        return len(self._bag)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._bag


class Digraph:

    """A directed graph on the vertices 0 to num_vertices - 1.

    Each vertex has a list of the heads of its outgoing edges, in insertion
    order. An edge u -> v appears only in the list for u. Self-loops and
    parallel edges are allowed and counted individually.

    The vertex count is fixed at construction. Edges can be added but never
    removed.

    Graphs are created empty with Digraph(n), or from a serialized edge list
    with Digraph.load, Digraph.loads, or Digraph.load_from. The format is the
    vertex count, then the edge count, then that many pairs of vertices, all
    separated by whitespace:

        3
        2
        0 1
        1 2
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise InvalidVertexCount(num_vertices)
        self._num_vertices = num_vertices
        self._num_edges = 0
        self._adjacency: List[List[int]] = [[] for _ in range(num_vertices)]

    def __repr__(self) -> str:
        return f"Digraph(V={self._num_vertices}, E={self._num_edges})"

    def __str__(self) -> str:
        return self.render()

    @property
    def num_vertices(self) -> int:
        """The number of vertices."""
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        """The number of edges added so far."""
        return self._num_edges

    @classmethod
    def load(cls, path: Union[str, Path], strict: bool = False) -> Digraph:
        """Load a graph from a file.

        Raises LoadFailure if the file cannot be read or is malformed.
        """
        source = str(path)
        try:
            with open(path) as f:
                return cls.load_from(source, f, strict)
        except (OSError, UnicodeDecodeError) as ex:
            raise LoadFailure(source, str(ex)) from ex

    @classmethod
    def loads(cls, source: str, content: str, strict: bool = False) -> Digraph:
        """Load a graph from a string, using source to identify it in errors."""
        return cls.load_from(source, StringIO(content), strict)

    @classmethod
    def load_from(cls, source: str, stream: TextIO, strict: bool = False) -> Digraph:
        """Load a graph from a text stream.

        The declared edge count only bounds how many pairs are read; the
        resulting num_edges counts the insertions. Input that ends early, has
        negative counts, or has out-of-range vertices raises LoadFailure.
        Tokens after the last pair, integers or not, are logged and ignored,
        unless strict is set, in which case they also raise LoadFailure.
        """
        raw = read_tokens(stream)
        tokens = read_ints(source, raw)

        def take(what: str) -> int:
            try:
                return next(tokens)
            except StopIteration:
                raise LoadFailure(source, f"unexpected end of input ({what})") from None

        num_vertices = take("vertex count")
        if num_vertices < 0:
            raise LoadFailure(source, f"negative vertex count {num_vertices}")
        declared = take("edge count")
        if declared < 0:
            raise LoadFailure(source, f"negative edge count {declared}")

        graph = cls(num_vertices)
        for i in range(1, declared + 1):
            u = take(f"edge {i} of {declared}")
            v = take(f"edge {i} of {declared}")
            try:
                graph.add_edge(u, v)
            except OutOfRangeVertex as ex:
                raise LoadFailure(source, f"edge {i}: {ex}") from ex

        trailing = sum(1 for _ in raw)
        if trailing:
            if strict:
                raise LoadFailure(source, f"{trailing} unexpected trailing tokens")
            logging.warning("%s: ignoring %d trailing tokens", source, trailing)
        logging.debug("loaded %s: %r", source, graph)
        return graph

    def _check(self, vertex: int) -> int:
        # operator.index rejects floats and strings with TypeError
        index = operator.index(vertex)
        if not 0 <= index < self._num_vertices:
            raise OutOfRangeVertex(index, self._num_vertices)
        return index

    def add_edge(self, u: int, v: int):
        """Add a directed edge u -> v.

        Raises OutOfRangeVertex, or TypeError for a non-integer id, without
        changing the graph.
        """
        u = self._check(u)
        v = self._check(v)
        self._adjacency[u].append(v)
        self._num_edges += 1

    def adjacent_to(self, vertex: int) -> Adjacency:
        """Return the heads of the edges leaving vertex."""
        return Adjacency(self._adjacency[self._check(vertex)])

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Iterate over all edges as (tail, head) pairs."""
        for tail, bag in enumerate(self._adjacency):
            for head in bag:
                yield tail, head

    def reverse(self) -> Digraph:
        """Return a new graph with the direction of every edge flipped."""
        reversed_graph = Digraph(self._num_vertices)
        for head in range(self._num_vertices):
            for tail in self.adjacent_to(head):
                reversed_graph.add_edge(tail, head)
        logging.debug("reversed %r", self)
        return reversed_graph

    def render(self) -> str:
        """Return a textual representation of the graph.

        The first line gives the vertex and edge counts. It is followed by one
        line per vertex listing its neighbors, each followed by a space:

            4 vertices, 3 edges
            0: 1 2
            1:
            2: 3
            3:
        """
        out = StringIO()
        self.dump(out)
        return out.getvalue()

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        out.write(f"{self._num_vertices} vertices, {self._num_edges} edges\n")
        for vertex, bag in enumerate(self._adjacency):
            neighbors = "".join(f"{w} " for w in bag)
            out.write(f"{vertex}: {neighbors}\n")
