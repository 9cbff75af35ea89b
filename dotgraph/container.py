import copy
from typing import Any, Iterable, List, Optional, Tuple

from .attributes import Attributes
from .edge import Edge
from .node import Node


class Container:
    """Container holds the attribute, node and edge statements of a graph or subgraph.

    Members are copied when they are appended, so the container exclusively
    owns them: changing a node after appending it does not change the
    container.
    """

    _kind = "container"
    _attributes_class = Attributes

    def __init__(self, id: Optional[str] = None, *, nodes: Iterable[Node] = (), edges: Iterable[Edge] = (), **attrs: Any):
        if id is not None and not isinstance(id, str):
            raise TypeError(f'"{id!r}" is not a valid {self._kind} id')
        self.id = id
        self.attributes = self._attributes_class(**attrs)
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self.extend(nodes)
        self.extend(edges)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def append(self, member):
        """Append a copy of a node or an edge.

        :param member: Node or Edge to append.
        :return: The container itself, for chaining.
        """
        self._add(copy.deepcopy(member))
        return self

    def extend(self, members: Iterable):
        for member in members:
            self.append(member)
        return self

    def _add(self, member) -> None:
        if isinstance(member, Node):
            self._nodes.append(member)
        elif isinstance(member, Edge):
            self._edges.append(member)
        else:
            raise TypeError(f'"{member!r}" is not a valid {self._kind} member')

    @property
    def is_empty(self) -> bool:
        """Whether encoding the body would produce no statement at all."""
        return self.attributes.is_empty and not self._edges and all(n.is_empty for n in self._nodes)

    def copy(self):
        return copy.deepcopy(self)

    def _state(self) -> tuple:
        return self.id, self.attributes, self._nodes, self._edges

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]
