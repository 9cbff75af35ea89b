from enum import Enum
from typing import Any, Optional, Union

from .attributes import EdgeAttributes
from .node import Node


class Direction(Enum):
    """Edge operator of an edge statement."""

    NONE = "--"
    FORWARD = "->"
    BACKWARD = "<-"
    BOTH = "<->"


def _node_id(node: Union[Node, str]) -> str:
    if isinstance(node, Node):
        return node.id
    if isinstance(node, str):
        return node
    raise TypeError(f'"{node!r}" is not a valid edge endpoint')


class Edge:
    """Edge represents an edge statement between two node ids."""

    def __init__(
        self,
        source: Union[Node, str],
        target: Union[Node, str],
        direction: Optional[Direction] = None,
        **attrs: Any,
    ):
        """Edge represents an edge statement.

        The endpoints are referenced by id only, they do not have to be
        part of the graph.

        :param source: Source node or node id.
        :param target: Target node or node id.
        :param direction: Edge operator. Default follows the graph: forward
            for a digraph, none otherwise.
        :param attrs: Edge attributes, by their Python names.
        """
        if direction is not None and not isinstance(direction, Direction):
            try:
                direction = Direction(direction)
            except ValueError:
                raise ValueError(f'"{direction}" is not a valid direction') from None
        self.source = _node_id(source)
        self.target = _node_id(target)
        self.direction = direction
        self.attributes = EdgeAttributes(**attrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.source, self.target, self.direction, self.attributes) == (
            other.source,
            other.target,
            other.direction,
            other.attributes,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        op = "?" if self.direction is None else self.direction.value
        return f"<Edge {self.source!r} {op} {self.target!r}>"


def connect(
    source: Union[Node, str], target: Union[Node, str], direction: Optional[Direction] = None, **attrs: Any
) -> Edge:
    """Connect source to target, directed the way the graph is unless told otherwise."""
    return Edge(source, target, direction, **attrs)


def forward(source: Union[Node, str], target: Union[Node, str], **attrs: Any) -> Edge:
    """source -> target"""
    return Edge(source, target, Direction.FORWARD, **attrs)


def backward(source: Union[Node, str], target: Union[Node, str], **attrs: Any) -> Edge:
    """source <- target"""
    return Edge(source, target, Direction.BACKWARD, **attrs)


def undirected(source: Union[Node, str], target: Union[Node, str], **attrs: Any) -> Edge:
    """source -- target"""
    return Edge(source, target, Direction.NONE, **attrs)


def bidirectional(source: Union[Node, str], target: Union[Node, str], **attrs: Any) -> Edge:
    """source <-> target"""
    return Edge(source, target, Direction.BOTH, **attrs)
