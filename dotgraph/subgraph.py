from typing import Any, Iterable, Optional, Union

from .attributes import SubgraphAttributes
from .container import Container
from .edge import Direction, Edge
from .node import Node


class Subgraph(Container):
    """Subgraph represents a subgraph statement.

    Subgraphs hold nodes and edges but no other subgraphs. A subgraph whose
    id starts with ``cluster`` is drawn as a boxed cluster by the layout
    tools; see ``cluster()``.
    """

    _kind = "subgraph"
    _attributes_class = SubgraphAttributes

    def __init__(self, id: Optional[str] = None, *, nodes: Iterable[Node] = (), edges: Iterable[Edge] = (), **attrs: Any):
        """Subgraph represents a subgraph statement.

        :param id: Subgraph id. Anonymous when omitted.
        :param nodes: Nodes to append.
        :param edges: Edges to append.
        :param attrs: Subgraph attributes, by their Python names.
        """
        super().__init__(id, nodes=nodes, edges=edges, **attrs)

    def _add(self, member) -> None:
        if isinstance(member, Subgraph):
            raise TypeError(f'"{member!r}" is not a valid subgraph member, subgraphs do not nest')
        super()._add(member)

    @property
    def is_cluster(self) -> bool:
        return self.id is not None and self.id.startswith("cluster")

    def __repr__(self) -> str:
        name = "" if self.id is None else f" {self.id!r}"
        return f"<Subgraph{name}: {len(self._nodes)} nodes, {len(self._edges)} edges>"


def cluster(name: Optional[str] = None, **kwargs: Any) -> Subgraph:
    """Create a cluster subgraph, with id ``cluster`` or ``cluster_<name>``.

    :param name: Cluster name.
    :param kwargs: Subgraph arguments: nodes, edges and attributes.
    """
    return Subgraph("cluster" if name is None else f"cluster_{name}", **kwargs)


def fan_out(
    source: Union[Node, str],
    targets: Iterable[Union[Node, str]],
    direction: Optional[Direction] = None,
    **attrs: Any,
) -> Subgraph:
    """Connect one source to many targets.

    :param source: Source node or node id.
    :param targets: Target nodes or node ids.
    :param direction: Edge operator for every edge.
    :param attrs: Edge attributes for every edge.
    :return: Anonymous subgraph with the source node and one edge per target.
    """
    node = source if isinstance(source, Node) else Node(source)
    return Subgraph(nodes=[node], edges=[Edge(node, target, direction, **attrs) for target in targets])
