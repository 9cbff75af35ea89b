"""
Value types for typed DOT attributes.

Every value knows how to turn itself into the DOT attribute grammar through
``representation()``. Escaping is not done here, it is up to the encoder.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .utils import format_number

Number = Union[int, float]


class Keyword(Enum):
    """An attribute value that is exactly one DOT keyword."""

    def representation(self) -> str:
        return str(self.value)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class Color:
    """Color represents a DOT color value.

    Use one of the constructors instead of instantiating it directly:
    ``Color.named("red")``, ``Color.rgb(255, 0, 0)``, ``Color.rgba(...)``,
    ``Color.hsv(...)``, ``Color.custom(...)`` or ``Color.TRANSPARENT``.
    """

    # Number of components of every color kind.
    _kinds = {"named": 1, "rgb": 3, "rgba": 4, "hsv": 3, "transparent": 0, "custom": 1}

    kind: str
    components: Tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "components", tuple(self.components))
        if self.kind not in self._kinds:
            raise ValueError(f'"{self.kind}" is not a valid color kind')
        if len(self.components) != self._kinds[self.kind]:
            raise ValueError(f'"{self.components}" is not a valid {self.kind} color')
        if self.kind in ("rgb", "rgba"):
            self._validate_bytes(*self.components)
        elif self.kind == "hsv":
            for component in self.components:
                if not _is_number(component):
                    raise ValueError(f'"{component}" is not a valid color component')
        elif self.kind != "transparent" and not isinstance(self.components[0], str):
            raise ValueError(f'"{self.components[0]}" is not a valid color name')

    @classmethod
    def named(cls, name: str) -> "Color":
        return cls("named", (name,))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls("rgb", (red, green, blue))

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: int) -> "Color":
        return cls("rgba", (red, green, blue, alpha))

    @classmethod
    def hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        return cls("hsv", (hue, saturation, value))

    @classmethod
    def custom(cls, text: str) -> "Color":
        return cls("custom", (text,))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Build a color from a plain string such as ``"red"`` or ``"#2D3436"``."""
        if text == "transparent":
            return cls.TRANSPARENT
        if text.isalnum():
            return cls.named(text)
        return cls.custom(text)

    @staticmethod
    def _validate_bytes(*components: int) -> None:
        for component in components:
            if isinstance(component, bool) or not isinstance(component, int) or not 0 <= component <= 255:
                raise ValueError(f'"{component}" is not a valid color component')

    def representation(self) -> str:
        if self.kind == "transparent":
            return "transparent"
        if self.kind in ("named", "custom"):
            return self.components[0]
        if self.kind in ("rgb", "rgba"):
            return "#" + "".join(f"{c:02x}" for c in self.components)
        return " ".join(f"{c:.3f}" for c in self.components)


Color.TRANSPARENT = Color("transparent")


@dataclass(frozen=True)
class ColorList:
    """A list of colors, as used by striped and wedged fills."""

    colors: Tuple[Color, ...]

    def __init__(self, colors: Iterable[Union[Color, str]]):
        items = tuple(Color.parse(c) if isinstance(c, str) else c for c in colors)
        if not items:
            raise ValueError("a color list needs at least one color")
        object.__setattr__(self, "colors", items)

    def representation(self) -> str:
        return ":".join(c.representation() for c in self.colors)


@dataclass(frozen=True)
class Point:
    """A point ``x,y`` or ``x,y,z``, suffixed with ``!`` when it is fixed."""

    x: float
    y: float
    z: Optional[float] = None
    fixed: bool = False

    def representation(self) -> str:
        coords = [self.x, self.y] if self.z is None else [self.x, self.y, self.z]
        text = ",".join(format_number(c) for c in coords)
        return text + "!" if self.fixed else text


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def representation(self) -> str:
        return f"{format_number(self.width)},{format_number(self.height)}"


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its origin and size, rendered as ``llx,lly,urx,ury``."""

    origin: Point
    size: Size

    def representation(self) -> str:
        corners = (
            self.origin.x,
            self.origin.y,
            self.origin.x + self.size.width,
            self.origin.y + self.size.height,
        )
        return ",".join(format_number(c) for c in corners)


@dataclass(frozen=True)
class Spline:
    """Control points of a cubic B-spline, with optional end and start points.

    A spline with points p1 ... pn needs n = 1 (mod 3) points, at least four.
    """

    points: Tuple[Point, ...]
    start: Optional[Point] = None
    end: Optional[Point] = None

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        count = len(self.points)
        if count < 4 or count % 3 != 1:
            raise ValueError(f'"{count}" is not a valid number of spline control points')

    def representation(self) -> str:
        parts = []
        if self.end is not None:
            parts.append(f"e,{format_number(self.end.x)},{format_number(self.end.y)}")
        if self.start is not None:
            parts.append(f"s,{format_number(self.start.x)},{format_number(self.start.y)}")
        parts.extend(p.representation() for p in self.points)
        return " ".join(parts)


# A node position is a point, an edge position is a spline.
Position = Union[Point, Spline]


@dataclass(frozen=True)
class AspectRatio:
    """Desired drawing aspect ratio: a number or one of the ratio keywords."""

    value: Union[float, str]

    _keywords = ("fill", "compress", "expand", "auto")

    def __post_init__(self):
        if isinstance(self.value, str):
            if self.value not in self._keywords:
                raise ValueError(f'"{self.value}" is not a valid aspect ratio')
        elif not _is_number(self.value):
            raise ValueError(f'"{self.value}" is not a valid aspect ratio')

    @classmethod
    def numeric(cls, value: Number) -> "AspectRatio":
        return cls(float(value))

    def representation(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return format_number(self.value)


AspectRatio.FILL = AspectRatio("fill")
AspectRatio.COMPRESS = AspectRatio("compress")
AspectRatio.EXPAND = AspectRatio("expand")
AspectRatio.AUTO = AspectRatio("auto")


@dataclass(frozen=True)
class Orientation:
    """Drawing rotation in degrees."""

    degrees: float

    def __post_init__(self):
        if not _is_number(self.degrees):
            raise ValueError(f'"{self.degrees}" is not a valid orientation')

    @classmethod
    def custom(cls, degrees: Number) -> "Orientation":
        return cls(degrees)

    def representation(self) -> str:
        return format_number(self.degrees)


Orientation.PORTRAIT = Orientation(0)
Orientation.LANDSCAPE = Orientation(90)


@dataclass(frozen=True)
class Viewport:
    """Clipping window on the final drawing.

    :param width: Window width, in points.
    :param height: Window height, in points.
    :param zoom: Zoom factor applied to the drawing.
    :param center: Either a point or the id of the node to center on.
    """

    width: float
    height: float
    zoom: float = 1.0
    center: Union[Point, str, None] = None

    def representation(self) -> str:
        parts = [format_number(self.width), format_number(self.height), format_number(self.zoom)]
        if isinstance(self.center, Point):
            parts += [format_number(self.center.x), format_number(self.center.y)]
        elif self.center is not None:
            parts.append(self.center)
        return ",".join(parts)


@dataclass(frozen=True)
class StartStrategy:
    """Initial node placement for neato and fdp (the ``start`` attribute)."""

    kind: str
    seed: Optional[int] = None

    def __post_init__(self):
        if self.kind not in ("regular", "self", "random"):
            raise ValueError(f'"{self.kind}" is not a valid start strategy')
        if self.seed is None:
            return
        if self.kind != "random" or isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValueError(f'"{self.seed}" is not a valid {self.kind} seed')

    @classmethod
    def random(cls, seed: Optional[int] = None) -> "StartStrategy":
        return cls("random", seed)

    def representation(self) -> str:
        if self.kind == "random" and self.seed is not None:
            return f"random{self.seed}"
        return self.kind


StartStrategy.REGULAR = StartStrategy("regular")
StartStrategy.SELF = StartStrategy("self")


@dataclass(frozen=True)
class CompoundStyle:
    """Several styles applied together, e.g. ``filled,bold``."""

    styles: Tuple

    def representation(self) -> str:
        return ",".join(s.representation() for s in self.styles)


class _Style(Keyword):
    @classmethod
    def compound(cls, *styles: Union["_Style", str]) -> CompoundStyle:
        return CompoundStyle(tuple(s if isinstance(s, cls) else cls(s) for s in styles))


# fmt: off

class RankDirection(Keyword):
    TOP_TO_BOTTOM = "TB"
    LEFT_TO_RIGHT = "LR"
    BOTTOM_TO_TOP = "BT"
    RIGHT_TO_LEFT = "RL"


class PageDirection(Keyword):
    BOTTOM_TO_TOP_LEFT_TO_RIGHT = "BL"
    BOTTOM_TO_TOP_RIGHT_TO_LEFT = "BR"
    TOP_TO_BOTTOM_LEFT_TO_RIGHT = "TL"
    TOP_TO_BOTTOM_RIGHT_TO_LEFT = "TR"
    RIGHT_TO_LEFT_BOTTOM_TO_TOP = "RB"
    RIGHT_TO_LEFT_TOP_TO_BOTTOM = "RT"
    LEFT_TO_RIGHT_BOTTOM_TO_TOP = "LB"
    LEFT_TO_RIGHT_TOP_TO_BOTTOM = "LT"


class ClusterMode(Keyword):
    NONE = "none"
    LOCAL = "local"
    GLOBAL = "global"


class PackingMode(Keyword):
    NODE = "node"
    CLUSTER = "clust"
    GRAPH = "graph"


class Splines(Keyword):
    NONE = "none"
    LINE = "line"
    POLYLINE = "polyline"
    CURVED = "curved"
    ORTHOGONAL = "ortho"
    SPLINE = "spline"


class Mode(Keyword):
    MAJOR = "major"
    KK = "KK"
    HIER = "hier"
    IPSEP = "ipsep"
    SPRING = "spring"
    MAXENT = "maxent"


class QuadtreeScheme(Keyword):
    NONE = "none"
    NORMAL = "normal"
    FAST = "fast"


class Smoothing(Keyword):
    NONE = "none"
    AVERAGE_DIST = "avg_dist"
    GRAPH_DIST = "graph_dist"
    POWER_DIST = "power_dist"
    RNG = "rng"
    SPRING = "spring"
    TRIANGLE = "triangle"


class LabelScheme(Keyword):
    DEFAULT = 0
    ONE = 1
    TWO = 2
    THREE = 3


class OutputOrder(Keyword):
    BREADTH_FIRST = "breadthfirst"
    NODES_FIRST = "nodesfirst"
    EDGES_FIRST = "edgesfirst"


class FontNamingConvention(Keyword):
    SVG = "svg"
    POSTSCRIPT = "ps"
    FONTCONFIG = "gd"


class Ordering(Keyword):
    IN = "in"
    OUT = "out"


class Location(Keyword):
    """Where debugging guide boxes are printed (the ``showboxes`` attribute)."""
    BEGINNING = 1
    END = 2


class Rank(Keyword):
    SAME = "same"
    MIN = "min"
    MAX = "max"
    SINK = "sink"
    SOURCE = "source"


class Shape(Keyword):
    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLECIRCLE = "doublecircle"
    DOUBLEOCTAGON = "doubleoctagon"
    TRIPLEOCTAGON = "tripleoctagon"
    INVTRIANGLE = "invtriangle"
    INVTRAPEZIUM = "invtrapezium"
    INVHOUSE = "invhouse"
    MDIAMOND = "Mdiamond"
    MSQUARE = "Msquare"
    MCIRCLE = "Mcircle"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"
    RECORD = "record"
    MRECORD = "Mrecord"


class ImagePosition(Keyword):
    TOP_LEFT = "tl"
    TOP_CENTER = "tc"
    TOP_RIGHT = "tr"
    MIDDLE_LEFT = "ml"
    MIDDLE_CENTER = "mc"
    MIDDLE_RIGHT = "mr"
    BOTTOM_LEFT = "bl"
    BOTTOM_CENTER = "bc"
    BOTTOM_RIGHT = "br"


class FixedSize(Keyword):
    FALSE = "false"
    TRUE = "true"
    SHAPE = "shape"


class NodeStyle(_Style):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"
    INVISIBLE = "invis"


class SubgraphStyle(_Style):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    FILLED = "filled"
    STRIPED = "striped"


class EdgeStyle(_Style):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    INVISIBLE = "invis"
    TAPERED = "tapered"


class ArrowShape(Keyword):
    NONE = "none"
    NORMAL = "normal"
    BOX = "box"
    CROW = "crow"
    CURVE = "curve"
    ICURVE = "icurve"
    DIAMOND = "diamond"
    DOT = "dot"
    INV = "inv"
    TEE = "tee"
    VEE = "vee"


class ArrowSide(Keyword):
    LEFT = "l"
    RIGHT = "r"


class Port(Keyword):
    """Compass point of a node where an edge is aimed."""
    AUTOMATIC = "_"
    CENTER = "c"
    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"

# fmt: on


@dataclass(frozen=True)
class Arrow:
    """An arrowhead or arrowtail, rendered as ``[o][l|r]<shape>``.

    :param shape: Arrow shape. Default is ``normal``.
    :param open: Draw the shape outlined instead of filled.
    :param side: Clip the shape to the left or right of the edge.
    """

    shape: ArrowShape = ArrowShape.NORMAL
    open: bool = False
    side: Optional[ArrowSide] = None

    def representation(self) -> str:
        prefix = "o" if self.open else ""
        if self.side is not None:
            prefix += self.side.representation()
        return prefix + self.shape.representation()


class LayoutAlgorithm(Keyword):
    """Graphviz layout engines, usable as the ``layout`` graph attribute and when rendering."""

    DOT = "dot"
    NEATO = "neato"
    TWOPI = "twopi"
    CIRCO = "circo"
    FDP = "fdp"
    SFDP = "sfdp"
    PATCHWORK = "patchwork"


__all__ = [
    "Arrow",
    "ArrowShape",
    "ArrowSide",
    "AspectRatio",
    "ClusterMode",
    "Color",
    "ColorList",
    "CompoundStyle",
    "EdgeStyle",
    "FixedSize",
    "FontNamingConvention",
    "ImagePosition",
    "Keyword",
    "LabelScheme",
    "LayoutAlgorithm",
    "Location",
    "Mode",
    "NodeStyle",
    "Ordering",
    "Orientation",
    "OutputOrder",
    "PackingMode",
    "PageDirection",
    "Point",
    "Port",
    "Position",
    "QuadtreeScheme",
    "Rank",
    "RankDirection",
    "Rectangle",
    "Shape",
    "Size",
    "Smoothing",
    "Spline",
    "Splines",
    "StartStrategy",
    "SubgraphStyle",
    "Viewport",
]
