from typing import Any, Iterable, List, Optional, Tuple

from .attributes import GraphAttributes
from .container import Container
from .edge import Edge
from .node import Node
from .subgraph import Subgraph


class Graph(Container):
    """Graph represents a complete DOT graph.

    Statements are kept in insertion order. Encoding is the job of
    ``dotgraph.encoder``, rendering the job of ``dotgraph.render``.
    """

    _kind = "graph"
    _attributes_class = GraphAttributes

    def __init__(
        self,
        id: Optional[str] = None,
        *,
        directed: bool = False,
        strict: bool = False,
        subgraphs: Iterable[Subgraph] = (),
        nodes: Iterable[Node] = (),
        edges: Iterable[Edge] = (),
        **attrs: Any,
    ):
        """Graph represents a complete DOT graph.

        :param id: Graph id.
        :param directed: Encode as a digraph. Edges without a direction
            become forward edges.
        :param strict: Forbid multi-edges.
        :param subgraphs: Subgraphs to append.
        :param nodes: Nodes to append.
        :param edges: Edges to append.
        :param attrs: Graph attributes, by their Python names.
        """
        self.directed = directed
        self.strict = strict
        self._subgraphs: List[Subgraph] = []
        super().__init__(id, nodes=nodes, edges=edges, **attrs)
        self.extend(subgraphs)

    @property
    def subgraphs(self) -> Tuple[Subgraph, ...]:
        return tuple(self._subgraphs)

    def _add(self, member) -> None:
        if isinstance(member, Subgraph):
            self._subgraphs.append(member)
        else:
            super()._add(member)

    @property
    def is_empty(self) -> bool:
        return not self._subgraphs and super().is_empty

    def _state(self) -> tuple:
        return (self.directed, self.strict, self._subgraphs) + super()._state()

    def __repr__(self) -> str:
        kind = ("strict " if self.strict else "") + ("digraph" if self.directed else "graph")
        name = "" if self.id is None else f" {self.id!r}"
        return (
            f"<Graph {kind}{name}: {len(self._subgraphs)} subgraphs, "
            f"{len(self._nodes)} nodes, {len(self._edges)} edges>"
        )
