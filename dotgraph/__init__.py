"""
dotgraph models graphs with typed Graphviz attributes and encodes them as DOT.

    >>> from dotgraph import Graph, Node, forward, encode
    >>> graph = Graph(directed=True)
    >>> graph = graph.append(Node("a", label="A")).append(forward("a", "b"))
    >>> print(encode(graph))
    digraph {
      a [label=A]
      a -> b
    }
"""
from .attributes import Attribute, Attributes, EdgeAttributes, GraphAttributes, NodeAttributes, SubgraphAttributes
from .edge import Direction, Edge, backward, bidirectional, connect, forward, undirected
from .encoder import Delimiter, DOTEncoder, encode
from .graph import Graph
from .node import Node
from .render import (
    Format,
    GraphvizRenderer,
    Renderer,
    RenderingError,
    RenderingFailedError,
    ToolNotFoundError,
    UnsupportedFormatError,
    render,
)
from .subgraph import Subgraph, cluster, fan_out
from .values import *  # noqa: F401,F403
from .values import __all__ as _values_all

__all__ = [
    "Attribute",
    "Attributes",
    "DOTEncoder",
    "Delimiter",
    "Direction",
    "Edge",
    "EdgeAttributes",
    "Format",
    "Graph",
    "GraphAttributes",
    "GraphvizRenderer",
    "Node",
    "NodeAttributes",
    "Renderer",
    "RenderingError",
    "RenderingFailedError",
    "Subgraph",
    "SubgraphAttributes",
    "ToolNotFoundError",
    "UnsupportedFormatError",
    "backward",
    "bidirectional",
    "cluster",
    "connect",
    "encode",
    "fan_out",
    "forward",
    "render",
    "undirected",
] + _values_all
