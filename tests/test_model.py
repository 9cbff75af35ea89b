import unittest

from dotgraph import (
    Direction,
    Edge,
    Graph,
    Node,
    Subgraph,
    backward,
    bidirectional,
    cluster,
    connect,
    fan_out,
    forward,
    undirected,
)
from dotgraph.values import Rank, Shape


class NodeTest(unittest.TestCase):
    def test_node(self):
        node = Node("a", label="A", shape="box")
        self.assertEqual(node.id, "a")
        self.assertEqual(node.attributes.label, "A")
        self.assertIs(node.attributes.shape, Shape.BOX)
        self.assertFalse(node.is_empty)
        self.assertTrue(Node("b").is_empty)

    def test_invalid_id(self):
        with self.assertRaises(TypeError):
            Node(1)

    def test_equality(self):
        self.assertEqual(Node("a", label="A"), Node("a", label="A"))
        self.assertNotEqual(Node("a", label="A"), Node("a", label="B"))
        self.assertNotEqual(Node("a"), Node("b"))


class EdgeTest(unittest.TestCase):
    def test_edge_between_ids(self):
        edge = Edge("a", "b", label="x")
        self.assertEqual((edge.source, edge.target), ("a", "b"))
        self.assertIsNone(edge.direction)
        self.assertEqual(edge.attributes.label, "x")

    def test_edge_between_nodes(self):
        edge = Edge(Node("a", label="A"), Node("b"))
        self.assertEqual((edge.source, edge.target), ("a", "b"))

    def test_direction_from_operator(self):
        self.assertIs(Edge("a", "b", "<->").direction, Direction.BOTH)
        with self.assertRaises(ValueError):
            Edge("a", "b", "=>")

    def test_invalid_endpoint(self):
        with self.assertRaises(TypeError):
            Edge("a", None)

    def test_named_constructors(self):
        self.assertIsNone(connect("a", "b").direction)
        self.assertIs(connect("a", "b", Direction.BACKWARD).direction, Direction.BACKWARD)
        self.assertIs(forward("a", "b").direction, Direction.FORWARD)
        self.assertIs(backward("a", "b").direction, Direction.BACKWARD)
        self.assertIs(undirected("a", "b").direction, Direction.NONE)
        self.assertIs(bidirectional("a", "b").direction, Direction.BOTH)
        self.assertEqual(forward("a", "b", weight=2).attributes.weight, 2)

    def test_fan_out(self):
        subgraph = fan_out(Node("a"), ["b", Node("c")], Direction.FORWARD, label="x")
        self.assertEqual(subgraph.nodes, (Node("a"),))
        self.assertEqual(
            subgraph.edges,
            (Edge("a", "b", Direction.FORWARD, label="x"), Edge("a", "c", Direction.FORWARD, label="x")),
        )
        self.assertIsNone(subgraph.id)


class SubgraphTest(unittest.TestCase):
    def test_subgraph(self):
        subgraph = Subgraph(nodes=[Node("a")], edges=[forward("a", "b")], rank="same")
        self.assertIsNone(subgraph.id)
        self.assertEqual(len(subgraph.nodes), 1)
        self.assertEqual(len(subgraph.edges), 1)
        self.assertIs(subgraph.attributes.rank, Rank.SAME)

    def test_subgraphs_do_not_nest(self):
        with self.assertRaises(TypeError):
            Subgraph().append(Subgraph())

    def test_clusters(self):
        self.assertEqual(cluster().id, "cluster")
        self.assertEqual(cluster("db").id, "cluster_db")
        self.assertTrue(cluster("db").is_cluster)
        self.assertFalse(Subgraph("db").is_cluster)
        self.assertFalse(Subgraph().is_cluster)
        self.assertEqual(cluster("db", label="DB").attributes.label, "DB")

    def test_is_empty(self):
        self.assertTrue(Subgraph().is_empty)
        self.assertTrue(Subgraph(nodes=[Node("a")]).is_empty)
        self.assertFalse(Subgraph(nodes=[Node("a", label="A")]).is_empty)
        self.assertFalse(Subgraph(edges=[Edge("a", "b")]).is_empty)
        self.assertFalse(Subgraph(label="x").is_empty)


class GraphTest(unittest.TestCase):
    def test_defaults(self):
        graph = Graph()
        self.assertIsNone(graph.id)
        self.assertFalse(graph.directed)
        self.assertFalse(graph.strict)
        self.assertEqual(graph.subgraphs, ())
        self.assertEqual(graph.nodes, ())
        self.assertEqual(graph.edges, ())
        self.assertTrue(graph.attributes.is_empty)

    def test_append_dispatches_and_chains(self):
        graph = Graph()
        result = graph.append(Node("a")).append(Edge("a", "b")).append(Subgraph())
        self.assertIs(result, graph)
        self.assertEqual(len(graph.nodes), 1)
        self.assertEqual(len(graph.edges), 1)
        self.assertEqual(len(graph.subgraphs), 1)

    def test_extend(self):
        graph = Graph().extend([Node("a"), Node("b"), forward("a", "b")])
        self.assertEqual([n.id for n in graph.nodes], ["a", "b"])
        self.assertEqual(len(graph.edges), 1)

    def test_constructor_members(self):
        graph = Graph(
            "G",
            directed=True,
            subgraphs=[Subgraph()],
            nodes=[Node("a")],
            edges=[Edge("a", "b")],
            label="G",
        )
        self.assertEqual(graph.id, "G")
        self.assertEqual(len(graph.subgraphs), 1)
        self.assertEqual(graph.attributes.label, "G")

    def test_invalid_members(self):
        graph = Graph()
        for member in ("a", 1, Graph(), None):
            with self.assertRaises(TypeError):
                graph.append(member)
        with self.assertRaises(TypeError):
            Graph(42)

    def test_members_are_copied(self):
        node = Node("a")
        graph = Graph().append(node)
        node.attributes.label = "changed"
        self.assertIsNone(graph.nodes[0].attributes.label)

    def test_duplicate_node_ids_are_kept(self):
        graph = Graph(nodes=[Node("a", label="one"), Node("a", label="two")])
        self.assertEqual([n.attributes.label for n in graph.nodes], ["one", "two"])

    def test_is_empty(self):
        self.assertTrue(Graph().is_empty)
        self.assertTrue(Graph(nodes=[Node("a")]).is_empty)
        self.assertFalse(Graph(nodes=[Node("a", label="A")]).is_empty)
        self.assertFalse(Graph(edges=[Edge("a", "b")]).is_empty)
        self.assertFalse(Graph(subgraphs=[Subgraph()]).is_empty)
        self.assertFalse(Graph(label="G").is_empty)

    def test_copy(self):
        graph = Graph(directed=True, nodes=[Node("a", label="A")])
        other = graph.copy()
        self.assertEqual(graph, other)
        other.nodes[0].attributes.label = "B"
        self.assertEqual(graph.nodes[0].attributes.label, "A")
        self.assertNotEqual(graph, other)

    def test_equality(self):
        self.assertEqual(Graph(nodes=[Node("a")]), Graph(nodes=[Node("a")]))
        self.assertNotEqual(Graph(directed=True), Graph())
        self.assertNotEqual(Graph(strict=True), Graph())
        self.assertNotEqual(Graph("a"), Graph("b"))

    def test_repr(self):
        graph = Graph("G", directed=True, strict=True, nodes=[Node("a")])
        self.assertEqual(repr(graph), "<Graph strict digraph 'G': 0 subgraphs, 1 nodes, 0 edges>")
