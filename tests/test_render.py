import shutil
import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest import mock

import graphviz

from dotgraph import DOTEncoder, Edge, Graph, Node
from dotgraph.render import (
    Format,
    GraphvizRenderer,
    LayoutAlgorithm,
    Renderer,
    RenderingError,
    RenderingFailedError,
    ToolNotFoundError,
    UnsupportedFormatError,
    render,
)


class RecordingRenderer(Renderer):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = []

    def render_dot(self, dot, format):
        self.calls.append((dot, format))
        return b"output"


class RendererTest(unittest.TestCase):
    def setUp(self):
        self.graph = Graph(directed=True, edges=[Edge("a", "b")])

    def test_abstract(self):
        with self.assertRaises(TypeError):
            Renderer()

    def test_defaults(self):
        renderer = RecordingRenderer()
        self.assertIs(renderer.layout, LayoutAlgorithm.DOT)
        self.assertIsInstance(renderer.encoder, DOTEncoder)

    def test_layout_from_string(self):
        self.assertIs(RecordingRenderer(layout="neato").layout, LayoutAlgorithm.NEATO)
        with self.assertRaises(ValueError):
            RecordingRenderer(layout="osmotic")

    def test_sync_and_async_encode_alike(self):
        renderer = RecordingRenderer(encoder=DOTEncoder(indentation=4))
        self.assertEqual(renderer.render(self.graph, Format.SVG), b"output")
        self.assertEqual(renderer.render_async(self.graph, Format.SVG).result(timeout=10), b"output")
        self.assertEqual(renderer.calls[0], renderer.calls[1])
        self.assertEqual(renderer.calls[0], ("digraph {\n    a -> b\n}", Format.SVG))

    def test_async_on_executor(self):
        renderer = RecordingRenderer()
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [renderer.render_async(self.graph, Format.PNG, executor) for _ in range(4)]
            self.assertEqual([f.result(timeout=10) for f in futures], [b"output"] * 4)

    def test_async_encodes_before_returning(self):
        renderer = RecordingRenderer()
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = renderer.render_async(self.graph, Format.SVG, executor)
            self.graph.append(Node("c", label="C"))
            future.result(timeout=10)
        self.assertEqual(renderer.calls[0][0], "digraph {\n  a -> b\n}")


class GraphvizRendererTest(unittest.TestCase):
    def setUp(self):
        self.graph = Graph(directed=True, edges=[Edge("a", "b")])
        self.dot = b"digraph {\n  a -> b\n}"

    def test_formats_are_known_to_graphviz(self):
        self.assertLessEqual({f.value for f in Format}, set(graphviz.FORMATS))

    def test_layouts_are_known_to_graphviz(self):
        self.assertLessEqual({layout.value for layout in LayoutAlgorithm}, set(graphviz.ENGINES))

    @mock.patch("graphviz.pipe", return_value=b"<svg/>")
    def test_render(self, pipe):
        result = GraphvizRenderer().render(self.graph, Format.SVG)
        self.assertEqual(result, b"<svg/>")
        pipe.assert_called_once_with("dot", "svg", self.dot, quiet=True)

    @mock.patch("graphviz.pipe", return_value=b"png")
    def test_render_options(self, pipe):
        renderer = GraphvizRenderer(LayoutAlgorithm.NEATO, quiet=False)
        renderer.render(self.graph, "png")
        pipe.assert_called_once_with("neato", "png", self.dot, quiet=False)

    @mock.patch("graphviz.pipe", return_value=b"")
    def test_render_dot_accepts_str_and_bytes(self, pipe):
        renderer = GraphvizRenderer()
        renderer.render_dot("graph { }", Format.PDF)
        renderer.render_dot(b"graph { }", Format.PDF)
        self.assertEqual([c.args[2] for c in pipe.call_args_list], [b"graph { }", b"graph { }"])

    @mock.patch("graphviz.pipe")
    def test_unknown_format(self, pipe):
        with self.assertRaises(UnsupportedFormatError):
            GraphvizRenderer().render(self.graph, "pnp")
        pipe.assert_not_called()

    @mock.patch("graphviz.pipe", side_effect=graphviz.ExecutableNotFound(["dot"]))
    def test_tool_not_found(self, pipe):
        with self.assertRaises(ToolNotFoundError) as cm:
            GraphvizRenderer().render(self.graph, Format.SVG)
        self.assertIsInstance(cm.exception, RenderingError)
        self.assertIn("dot", cm.exception.message)

    @mock.patch(
        "graphviz.pipe",
        side_effect=graphviz.CalledProcessError(1, ["dot"], output=b"", stderr=b"Error: syntax error in line 1"),
    )
    def test_rendering_failed(self, pipe):
        with self.assertRaises(RenderingFailedError) as cm:
            GraphvizRenderer().render(self.graph, Format.SVG)
        self.assertEqual(cm.exception.stderr, "Error: syntax error in line 1")
        self.assertIn("status 1", cm.exception.message)

    @mock.patch("graphviz.pipe", side_effect=ValueError("unknown format: 'svg'"))
    def test_unsupported_request(self, pipe):
        with self.assertRaises(UnsupportedFormatError):
            GraphvizRenderer().render(self.graph, Format.SVG)

    @mock.patch("graphviz.pipe", side_effect=graphviz.ExecutableNotFound(["dot"]))
    def test_async_failure(self, pipe):
        future = GraphvizRenderer().render_async(self.graph, Format.SVG)
        self.assertIsInstance(future.exception(timeout=10), ToolNotFoundError)

    @mock.patch("graphviz.pipe", return_value=b"<svg/>")
    def test_logging(self, pipe):
        with self.assertLogs("dotgraph.render", level="DEBUG") as cm:
            GraphvizRenderer().render(self.graph, Format.SVG)
        self.assertIn("rendering 20 bytes with dot into svg", cm.output[0])

    @mock.patch("graphviz.pipe", return_value=b"png")
    def test_render_function(self, pipe):
        self.assertEqual(render(self.graph, LayoutAlgorithm.CIRCO, Format.PNG), b"png")
        pipe.assert_called_once_with("circo", "png", self.dot, quiet=True)


class GraphvizEndToEndTest(unittest.TestCase):
    def setUp(self):
        if shutil.which("dot") is None:
            self.skipTest("Graphviz executables are not installed")

    def test_render_svg(self):
        graph = Graph(directed=True, nodes=[Node("a", label="A")], edges=[Edge("a", "b")])
        self.assertIn(b"<svg", render(graph))

    def test_render_plain_keeps_labels(self):
        graph = Graph(nodes=[Node("a", label="Hello")])
        self.assertIn(b"Hello", GraphvizRenderer().render(graph, Format.PLAIN))
