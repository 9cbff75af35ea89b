"""
Rendering of graphs into images and other output formats.

A ``Renderer`` takes DOT text, a layout algorithm and an output format and
returns the raw output bytes. ``GraphvizRenderer`` does this by piping the
text through the Graphviz executables with the ``graphviz`` package.
"""
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum
from typing import Optional, Union

import graphviz

from .encoder import DOTEncoder
from .graph import Graph
from .values import LayoutAlgorithm

log = logging.getLogger(__name__)

__all__ = [
    "Format",
    "GraphvizRenderer",
    "LayoutAlgorithm",
    "Renderer",
    "RenderingError",
    "RenderingFailedError",
    "ToolNotFoundError",
    "UnsupportedFormatError",
    "render",
]


# fmt: off
class Format(Enum):
    """Output formats, see https://graphviz.org/docs/outputs/."""

    BMP = "bmp"
    CANON = "canon"
    DOT = "dot"
    GV = "gv"
    XDOT = "xdot"
    XDOT_1_2 = "xdot1.2"
    XDOT_1_4 = "xdot1.4"
    CGIMAGE = "cgimage"
    CMAP = "cmap"
    EPS = "eps"
    EXR = "exr"
    FIG = "fig"
    GD = "gd"
    GD2 = "gd2"
    GIF = "gif"
    GTK = "gtk"
    ICO = "ico"
    IMAP = "imap"
    CMAPX = "cmapx"
    IMAP_NP = "imap_np"
    CMAPX_NP = "cmapx_np"
    ISMAP = "ismap"
    JP2 = "jp2"
    JPG = "jpg"
    JPEG = "jpeg"
    JPE = "jpe"
    JSON = "json"
    JSON0 = "json0"
    DOT_JSON = "dot_json"
    XDOT_JSON = "xdot_json"
    PCT = "pct"
    PICT = "pict"
    PDF = "pdf"
    PIC = "pic"
    PLAIN = "plain"
    PLAIN_EXT = "plain-ext"
    PNG = "png"
    POV = "pov"
    PS = "ps"
    PS2 = "ps2"
    PSD = "psd"
    SGI = "sgi"
    SVG = "svg"
    SVGZ = "svgz"
    TGA = "tga"
    TIF = "tif"
    TIFF = "tiff"
    TK = "tk"
    VML = "vml"
    VMLZ = "vmlz"
    VRML = "vrml"
    WBMP = "wbmp"
    WEBP = "webp"
    XLIB = "xlib"
    X11 = "x11"
# fmt: on


class RenderingError(Exception):
    """Base class of the rendering failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ToolNotFoundError(RenderingError):
    """The layout executable is not installed or not on the PATH."""


class UnsupportedFormatError(RenderingError):
    """The layout algorithm or the output format is not supported."""


class RenderingFailedError(RenderingError):
    """The layout executable ran and failed.

    :param stderr: Diagnostic output captured from the executable.
    """

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class Renderer(ABC):
    """Renderer is the base class of the rendering collaborators.

    Subclasses implement ``render_dot``; ``render`` and ``render_async``
    encode the graph with the same encoder and then hand the text over.
    """

    def __init__(self, layout: LayoutAlgorithm = LayoutAlgorithm.DOT, encoder: Optional[DOTEncoder] = None):
        """
        :param layout: Layout algorithm. Default is dot.
        :param encoder: Encoder turning graphs into DOT text.
        """
        self.layout = _validate(LayoutAlgorithm, layout, "layout algorithm")
        self.encoder = encoder or DOTEncoder()

    @abstractmethod
    def render_dot(self, dot: Union[str, bytes], format: Format) -> bytes:
        """Render DOT text into the given format.

        :raises RenderingError: When rendering fails.
        """

    def render(self, graph: Graph, format: Format) -> bytes:
        """Render a graph into the given format."""
        return self.render_dot(self.encoder.encode(graph), format)

    def render_async(self, graph: Graph, format: Format, executor: Optional[Executor] = None) -> Future:
        """Render a graph in the background.

        The graph is encoded before this returns, so later changes to the
        graph do not show up in the output.

        :param executor: Executor to run on. Default is a single-use thread.
        :return: A future with the output bytes, or the rendering error.
        """
        dot = self.encoder.encode(graph)
        if executor is not None:
            return executor.submit(self.render_dot, dot, format)
        pool = ThreadPoolExecutor(max_workers=1)
        try:
            return pool.submit(self.render_dot, dot, format)
        finally:
            pool.shutdown(wait=False)


class GraphvizRenderer(Renderer):
    """GraphvizRenderer renders with the Graphviz executables."""

    def __init__(
        self,
        layout: LayoutAlgorithm = LayoutAlgorithm.DOT,
        encoder: Optional[DOTEncoder] = None,
        quiet: bool = True,
    ):
        """
        :param layout: Layout algorithm. Default is dot.
        :param encoder: Encoder turning graphs into DOT text.
        :param quiet: Suppress the executable's stderr output.
        """
        super().__init__(layout, encoder)
        self.quiet = quiet

    def render_dot(self, dot: Union[str, bytes], format: Format) -> bytes:
        format = _validate(Format, format, "format", UnsupportedFormatError)
        data = dot.encode("utf-8") if isinstance(dot, str) else dot
        log.debug("rendering %d bytes with %s into %s", len(data), self.layout.value, format.value)
        try:
            return graphviz.pipe(self.layout.value, format.value, data, quiet=self.quiet)
        except graphviz.ExecutableNotFound as e:
            log.debug("layout executable not found: %s", e)
            raise ToolNotFoundError(str(e)) from e
        except graphviz.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace") if isinstance(e.stderr, bytes) else e.stderr or ""
            log.debug("%s exited with status %s: %s", self.layout.value, e.returncode, stderr)
            raise RenderingFailedError(f"{self.layout.value} exited with status {e.returncode}", stderr) from e
        except ValueError as e:
            log.debug("unsupported rendering request: %s", e)
            raise UnsupportedFormatError(str(e)) from e


def _validate(enum, value, thing: str, error=ValueError):
    if isinstance(value, enum):
        return value
    try:
        return enum(value)
    except ValueError:
        raise error(f'"{value}" is not a valid {thing}') from None


def render(graph: Graph, layout: LayoutAlgorithm = LayoutAlgorithm.DOT, format: Format = Format.SVG) -> bytes:
    """Render a graph with Graphviz.

    :param graph: Graph to render.
    :param layout: Layout algorithm. Default is dot.
    :param format: Output format. Default is svg.
    """
    return GraphvizRenderer(layout).render(graph, format)
