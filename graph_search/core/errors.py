# graph_search/core/errors.py
# Exceptions raised while building or querying a graph. "No path" is not an error: searches return [].
from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by graph_search."""


class InvalidSize(GraphError, ValueError):
    """Graph built with a non-positive node count or an out-of-range start node."""


class NodeOutOfRange(GraphError, IndexError):
    def __init__(self, node, node_count: int):
        self.node = node
        self.node_count = node_count
        super().__init__(f"node {node!r} is outside [0, {node_count})")


class UnknownAlgorithm(GraphError, KeyError):
    def __init__(self, name, choices):
        self.name = name
        self.choices = tuple(choices)
        super().__init__(f"unknown search algorithm {name!r}; expected one of {', '.join(self.choices)}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
