"""Errors raised by digraph operations."""


class DigraphError(Exception):

    """Base class for all digraph errors."""


class InvalidVertexCount(DigraphError, ValueError):

    """A negative vertex count was given to the constructor."""

    def __init__(self, count: int):
        super().__init__(f"invalid vertex count: {count}")
        self.count = count


class OutOfRangeVertex(DigraphError, IndexError):

    """A vertex id outside [0, num_vertices) was passed to an operation."""

    def __init__(self, vertex: int, num_vertices: int):
        super().__init__(
            f"vertex {vertex} out of range for graph with {num_vertices} vertices"
        )
        self.vertex = vertex
        self.num_vertices = num_vertices


class LoadFailure(DigraphError):

    """A serialized edge list could not be opened, read, or parsed.

    The source is the identifier of the input (usually a file path) and reason
    describes what went wrong.
    """

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot load {source}: {reason}")
        self.source = source
        self.reason = reason
