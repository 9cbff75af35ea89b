from typing import Any

from .attributes import NodeAttributes


class Node:
    """Node represents a node statement of a graph or subgraph."""

    def __init__(self, id: str, **attrs: Any):
        """Node represents a node statement.

        Node ids are not required to be unique, every node statement carries
        its own attributes and layout tools merge them by id.

        :param id: Node id.
        :param attrs: Node attributes, by their Python names.
        """
        if not isinstance(id, str):
            raise TypeError(f'"{id!r}" is not a valid node id')
        self.id = id
        self.attributes = NodeAttributes(**attrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id and self.attributes == other.attributes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Node {self.id!r}>"

    @property
    def is_empty(self) -> bool:
        """Whether the node declares nothing beyond its id."""
        return self.attributes.is_empty
