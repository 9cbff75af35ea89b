"""
DOT language encoding of graphs.

See https://graphviz.org/doc/info/lang.html for the grammar.
"""
from enum import Enum
from typing import Any, List, Optional, Union

from .attributes import Attributes
from .edge import Direction, Edge
from .graph import Graph
from .node import Node
from .subgraph import Subgraph
from .utils import escape, format_number, indent


class Delimiter(Enum):
    COMMA = ","
    SEMICOLON = ";"


def _represent(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    return value.representation()


class DOTEncoder:
    """DOTEncoder turns graphs into DOT language text.

    Encoding is deterministic: attribute assignments are sorted by name and
    statements keep their insertion order, attributes first, then
    subgraphs, nodes and edges.
    """

    _default_indentation = 2
    _default_omit_empty_nodes = True

    def __init__(
        self,
        indentation: Optional[int] = None,
        statement_delimiter: Union[Delimiter, str, None] = None,
        attribute_delimiter: Union[Delimiter, str, None] = None,
        omit_empty_nodes: Optional[bool] = None,
    ):
        """DOTEncoder turns graphs into DOT language text.

        :param indentation: Number of spaces per nesting level. Default is 2.
        :param statement_delimiter: Delimiter appended to every statement.
            Default is none, statements are separated by newlines only.
        :param attribute_delimiter: Delimiter between the assignments of an
            attribute list. Default is a single space.
        :param omit_empty_nodes: Leave out node statements that only carry
            an id. Default is True.
        """
        if indentation is None:
            indentation = self._default_indentation
        if indentation < 0:
            raise ValueError(f'"{indentation}" is not a valid indentation')
        self.indentation = indentation
        self.statement_delimiter = self._validate_delimiter(statement_delimiter)
        self.attribute_delimiter = self._validate_delimiter(attribute_delimiter)
        self.omit_empty_nodes = self._default_omit_empty_nodes if omit_empty_nodes is None else omit_empty_nodes

    @staticmethod
    def _validate_delimiter(delimiter: Union[Delimiter, str, None]) -> Optional[Delimiter]:
        if delimiter is None or isinstance(delimiter, Delimiter):
            return delimiter
        try:
            return Delimiter(delimiter)
        except ValueError:
            raise ValueError(f'"{delimiter}" is not a valid delimiter') from None

    def encode(self, graph: Graph) -> str:
        """Encode a graph as DOT text.

        A graph without statements is written on a single line, ``graph { }``.
        """
        header = []
        if graph.strict:
            header.append("strict")
        header.append("digraph" if graph.directed else "graph")
        if graph.id is not None:
            header.append(escape(graph.id))
        header.append("{")

        lines = [" ".join(header)]
        body = self._attribute_statements(graph.attributes)
        body += [self.encode_subgraph(subgraph, graph) for subgraph in graph.subgraphs]
        body += self._node_and_edge_statements(graph, graph)
        lines += [indent(statement, self.indentation) for statement in body]
        lines.append("}")

        return ("\n" if len(lines) > 2 else " ").join(lines)

    def encode_subgraph(self, subgraph: Subgraph, graph: Optional[Graph] = None) -> str:
        """Encode a subgraph statement.

        A subgraph with fewer than two statements is written in the compact
        anonymous form, ``{ }`` or ``{ <statement> }``, without its id.
        """
        body = self._attribute_statements(subgraph.attributes)
        body += self._node_and_edge_statements(subgraph, graph)
        if len(body) < 2:
            return " ".join(["{", *body, "}"])

        header = ["subgraph"]
        if subgraph.id is not None:
            header.append(escape(subgraph.id))
        header.append("{")

        # Subgraph bodies are indented twice, once more than the subgraph block.
        lines = [" ".join(header)]
        lines += [indent(statement, 2 * self.indentation) for statement in body]
        lines.append("}")
        return "\n".join(lines)

    def encode_node(self, node: Node, graph: Optional[Graph] = None) -> Optional[str]:
        """Encode a node statement, or return None for an omitted node."""
        attributes = self._attribute_list(node.attributes)
        if attributes is None and self.omit_empty_nodes:
            return None
        components = [escape(node.id)]
        if attributes is not None:
            components.append(attributes)
        return self._statement(" ".join(components))

    def encode_edge(self, edge: Edge, graph: Optional[Graph] = None) -> str:
        """Encode an edge statement.

        Edges without a direction get ``->`` in a digraph and ``--`` anywhere
        else.
        """
        direction = edge.direction
        if direction is None:
            directed = graph is not None and graph.directed
            direction = Direction.FORWARD if directed else Direction.NONE
        components = [escape(edge.source), direction.value, escape(edge.target)]
        attributes = self._attribute_list(edge.attributes)
        if attributes is not None:
            components.append(attributes)
        return self._statement(" ".join(components))

    def _node_and_edge_statements(self, container: Union[Graph, Subgraph], graph: Optional[Graph]) -> List[str]:
        statements = []
        for node in container.nodes:
            statement = self.encode_node(node, graph)
            if statement is not None:
                statements.append(statement)
        statements += [self.encode_edge(edge, graph) for edge in container.edges]
        return statements

    def _statement(self, text: str) -> str:
        if self.statement_delimiter is None:
            return text
        return text + self.statement_delimiter.value

    def _assignments(self, attributes: Attributes) -> List[str]:
        items = sorted(attributes.items(), key=lambda item: item[0])
        return [f"{escape(name)}={escape(_represent(value))}" for name, value in items]

    def _attribute_statements(self, attributes: Attributes) -> List[str]:
        return [self._statement(assignment) for assignment in self._assignments(attributes)]

    def _attribute_list(self, attributes: Attributes) -> Optional[str]:
        assignments = self._assignments(attributes)
        if not assignments:
            return None
        delimiter = " " if self.attribute_delimiter is None else self.attribute_delimiter.value
        return f"[{delimiter.join(assignments)}]"


_encoder = DOTEncoder()


def encode(graph: Graph) -> str:
    """Encode a graph as DOT text with the default encoder settings."""
    return _encoder.encode(graph)
