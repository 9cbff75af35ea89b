"""
Typed attribute slots for graphs, subgraphs, nodes and edges.

Every attributes class declares its slots as ``Attribute`` descriptors, in the
order they are listed by ``items()``. A slot holds either a value of one of
its accepted types or nothing at all; only set slots are encoded.
"""
import math
import os
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from .values import (
    Arrow,
    ArrowShape,
    AspectRatio,
    ClusterMode,
    Color,
    ColorList,
    CompoundStyle,
    EdgeStyle,
    FixedSize,
    FontNamingConvention,
    ImagePosition,
    LabelScheme,
    LayoutAlgorithm,
    Location,
    Mode,
    NodeStyle,
    Ordering,
    Orientation,
    OutputOrder,
    PackingMode,
    PageDirection,
    Point,
    Port,
    QuadtreeScheme,
    Rank,
    RankDirection,
    Rectangle,
    Shape,
    Size,
    Smoothing,
    Spline,
    Splines,
    StartStrategy,
    SubgraphStyle,
    Viewport,
)


class Attribute:
    """Attribute is a single named, optional and typed DOT attribute slot.

    :param name: DOT attribute name, e.g. ``"fillcolor"``.
    :param types: Accepted value types. ``float`` also accepts ints.
    """

    def __init__(self, name: str, *types: type):
        self.name = name
        self.types = types
        self.attr: Optional[str] = None

    def __set_name__(self, owner: type, attr: str) -> None:
        self.attr = attr

    def __repr__(self) -> str:
        return f"<Attribute {self.attr}={self.name}>"

    def __get__(self, instance: Optional["Attributes"], owner: type) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.attr)

    def __set__(self, instance: "Attributes", value: Any) -> None:
        if value is None:
            instance._values.pop(self.attr, None)
        else:
            instance._values[self.attr] = self.coerce(value)

    def coerce(self, value: Any) -> Any:
        """Return value as one of the accepted types, or raise."""
        for typ in self.types:
            if self._accepts(typ, value):
                if typ is float and not math.isfinite(value):
                    raise ValueError(f'"{value}" is not a valid {self.name}')
                return value
        for typ in self.types:
            if isinstance(typ, type) and issubclass(typ, Enum) and isinstance(value, (str, int)):
                keyword = ("true" if value else "false") if isinstance(value, bool) else value
                try:
                    return typ(keyword)
                except ValueError:
                    raise ValueError(f'"{value}" is not a valid {self.name}') from None
            if typ is Color and isinstance(value, str):
                return Color.parse(value)
            if typ is AspectRatio and isinstance(value, (str, int, float)) and not isinstance(value, bool):
                try:
                    return AspectRatio(value) if isinstance(value, str) else AspectRatio.numeric(value)
                except ValueError:
                    raise ValueError(f'"{value}" is not a valid {self.name}') from None
            if typ is Orientation and isinstance(value, (int, float)) and not isinstance(value, bool):
                try:
                    return Orientation.custom(value)
                except ValueError:
                    raise ValueError(f'"{value}" is not a valid {self.name}') from None
            if typ is str and isinstance(value, os.PathLike):
                return os.fspath(value)
        raise TypeError(f'"{value}" is not a valid {self.name}')

    @staticmethod
    def _accepts(typ: type, value: Any) -> bool:
        if isinstance(value, bool):
            return typ is bool
        if typ is float:
            return isinstance(value, (int, float))
        return isinstance(value, typ)


class FillColor(Attribute):
    """The ``fillcolor`` slot.

    Filling only shows when the style is ``filled``, so every assignment
    also sets the ``style`` slot: to ``filled`` for a color, to nothing when
    the fill color is cleared.
    """

    def __init__(self, name: str, *types: type, filled: Enum):
        super().__init__(name, *types)
        self.filled = filled

    def __set__(self, instance: "Attributes", value: Any) -> None:
        super().__set__(instance, value)
        instance.style = None if value is None else self.filled


class Attributes:
    """Attributes is the base of the per-entity attribute mappings."""

    _kind = "attributes"
    _slots: Tuple[Attribute, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._slots = tuple(v for v in vars(cls).values() if isinstance(v, Attribute))
        names = [slot.name for slot in cls._slots]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise TypeError(f"{cls.__name__} declares {', '.join(duplicates)} more than once")

    def __init__(self, **values: Any):
        self._values: Dict[str, Any] = {}
        self.update(**values)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({values})"

    @classmethod
    def slots(cls) -> Tuple[Attribute, ...]:
        """Every declared slot, in declaration order."""
        return cls._slots

    def update(self, **values: Any) -> None:
        """Set several slots at once, by their Python names."""
        for key, value in values.items():
            if not isinstance(getattr(type(self), key, None), Attribute):
                raise ValueError(f'"{key}" is not a valid {self._kind} attribute')
            setattr(self, key, value)

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield ``(dot_name, value)`` for every slot holding a value."""
        for slot in self._slots:
            if slot.attr in self._values:
                yield slot.name, self._values[slot.attr]

    @property
    def is_empty(self) -> bool:
        return not self._values

    def copy(self) -> "Attributes":
        # Values are immutable.
        other = type(self)()
        other._values = dict(self._values)
        return other

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Attributes":
        return self.copy()


class GraphAttributes(Attributes):
    _kind = "graph"

    # fmt: off
    aspect_ratio = Attribute("ratio", AspectRatio)
    background_color = Attribute("bgcolor", Color, ColorList)
    bounding_box = Attribute("bb", Rectangle)
    center = Attribute("center", bool)
    class_ = Attribute("class", str)
    cluster_rank = Attribute("clusterrank", ClusterMode)
    comment = Attribute("comment", str)
    compound = Attribute("compound", bool)
    concentrate = Attribute("concentrate", bool)
    damping = Attribute("Damping", float)
    default_distance = Attribute("defaultdist", float)
    directed_edge_constraints = Attribute("diredgeconstraints", bool)
    epsilon = Attribute("epsilon", float)
    font_name = Attribute("fontname", str)
    font_naming_convention = Attribute("fontnames", FontNamingConvention)
    font_path = Attribute("fontpath", str)
    font_size = Attribute("fontsize", float)
    force_labels = Attribute("forcelabels", bool)
    guide_box_location = Attribute("showboxes", Location)
    href = Attribute("href", str)
    image_path = Attribute("imagepath", str)
    input_scale = Attribute("inputscale", float)
    label = Attribute("label", str)
    label_dimension_unit = Attribute("quantum", float)
    label_scheme = Attribute("label_scheme", LabelScheme)
    layout = Attribute("layout", LayoutAlgorithm)
    layout_dimensions = Attribute("dim", int)
    level_constraint_strictness = Attribute("levelsgap", float)
    margin = Attribute("margin", float)
    max_iterations = Attribute("maxiter", int)
    min_node_separation = Attribute("mindist", float)
    min_scale_factor = Attribute("mclimit", float)
    mode = Attribute("mode", Mode)
    model = Attribute("model", str)
    network_simplex_limit = Attribute("nslimit", float)
    network_simplex_ranking_limit = Attribute("nslimit1", float)
    new_rank = Attribute("newrank", bool)
    no_justify = Attribute("nojustify", bool)
    no_translate = Attribute("notranslate", bool)
    node_separation = Attribute("nodesep", float)
    normalize = Attribute("normalize", float)
    number_of_levels = Attribute("levels", int)
    ordering = Attribute("ordering", Ordering)
    orientation = Attribute("rotate", Orientation)
    output_order = Attribute("outputorder", OutputOrder)
    overlap = Attribute("overlap", bool, str)
    overlap_scaling = Attribute("overlap_scaling", float)
    overlap_shrink = Attribute("overlap_shrink", bool)
    pack_mode = Attribute("packmode", PackingMode)
    page = Attribute("page", Size)
    page_direction = Attribute("pagedir", PageDirection)
    quadtree_scheme = Attribute("quadtree", QuadtreeScheme)
    rank_direction = Attribute("rankdir", RankDirection)
    rank_separation = Attribute("ranksep", float)
    remincross = Attribute("remincross", bool)
    rendering_dimensions = Attribute("dimen", int)
    repulsive_force = Attribute("repulsiveforce", float)
    resolution = Attribute("resolution", float)
    rotation = Attribute("rotation", float)
    scale = Attribute("scale", Size)
    search_size = Attribute("searchsize", int)
    size = Attribute("size", Size)
    smoothing = Attribute("smoothing", Smoothing)
    sort_value = Attribute("sortv", int)
    splines = Attribute("splines", Splines)
    spring_constant = Attribute("K", float)
    start = Attribute("start", StartStrategy)
    stylesheet = Attribute("stylesheet", str)
    text_color = Attribute("fontcolor", Color)
    true_color = Attribute("truecolor", bool)
    url = Attribute("URL", str)
    use_mosek = Attribute("mosek", bool)
    viewport = Attribute("viewport", Viewport)
    voronoi_margin = Attribute("voro_margin", float)
    # fmt: on


class SubgraphAttributes(Attributes):
    _kind = "subgraph"

    # fmt: off
    class_ = Attribute("class", str)
    ordering = Attribute("ordering", Ordering)
    sort_value = Attribute("sortv", int)

    # Appearance
    shape = Attribute("shape", Shape)
    style = Attribute("style", SubgraphStyle, CompoundStyle)
    size = Attribute("size", Size)
    background_color = Attribute("bgcolor", Color, ColorList)
    stroke_color = Attribute("color", Color, ColorList)
    border_color = Attribute("pencolor", Color)
    border_width = Attribute("penwidth", float)
    fill_color = FillColor("fillcolor", Color, ColorList, filled=SubgraphStyle.FILLED)
    peripheries = Attribute("peripheries", int)

    # Links
    href = Attribute("href", str)
    url = Attribute("URL", str)
    tooltip = Attribute("tooltip", str)

    # Labels
    label = Attribute("label", str)
    font_name = Attribute("fontname", str)
    font_size = Attribute("fontsize", float)
    text_color = Attribute("fontcolor", Color)
    label_float = Attribute("labelfloat", bool)
    no_justify = Attribute("nojustify", bool)

    # Edges inside the subgraph
    constraint = Attribute("constraint", bool)
    decorate = Attribute("decorate", bool)
    arrow_size = Attribute("arrowsize", float)
    head = Attribute("arrowhead", Arrow)
    tail = Attribute("arrowtail", Arrow)

    # Layout
    rank = Attribute("rank", Rank)
    area = Attribute("area", float)
    # fmt: on


class NodeAttributes(Attributes):
    _kind = "node"

    # fmt: off
    comment = Attribute("comment", str)
    class_ = Attribute("class", str)
    ordering = Attribute("ordering", Ordering)
    sort_value = Attribute("sortv", int)

    # Drawing
    width = Attribute("width", float)
    height = Attribute("height", float)
    fixed_size = Attribute("fixedsize", FixedSize)
    shape = Attribute("shape", Shape)
    sides = Attribute("sides", int)
    regular = Attribute("regular", bool)
    peripheries = Attribute("peripheries", int)
    style = Attribute("style", NodeStyle, CompoundStyle)
    background_color = Attribute("bgcolor", Color, ColorList)
    stroke_color = Attribute("color", Color, ColorList)
    stroke_width = Attribute("penwidth", float)
    fill_color = FillColor("fillcolor", Color, ColorList, filled=NodeStyle.FILLED)
    image = Attribute("image", str)
    image_position = Attribute("imagepos", ImagePosition)

    # Links
    href = Attribute("href", str)
    url = Attribute("URL", str)
    tooltip = Attribute("tooltip", str)

    # Labels
    label = Attribute("label", str)
    font_name = Attribute("fontname", str)
    font_size = Attribute("fontsize", float)
    text_color = Attribute("fontcolor", Color)
    no_justify = Attribute("nojustify", bool)
    exterior_label = Attribute("xlabel", str)
    exterior_label_position = Attribute("xlp", Point)

    # dot
    group = Attribute("group", str)
    guide_box_location = Attribute("showboxes", Location)

    # dot, neato
    sample_points = Attribute("samplepoints", int)

    # neato, fdp
    pin = Attribute("pin", bool)
    position = Attribute("pos", Point)

    # circo, twopi
    root = Attribute("root", bool)

    # patchwork
    area = Attribute("area", float)
    # fmt: on


class EdgeAttributes(Attributes):
    _kind = "edge"

    # fmt: off
    comment = Attribute("comment", str)
    class_ = Attribute("class", str)
    constraint = Attribute("constraint", bool)
    ordering = Attribute("ordering", Ordering)
    weight = Attribute("weight", float)

    # Drawing
    style = Attribute("style", EdgeStyle, CompoundStyle)
    stroke_color = Attribute("color", Color, ColorList)
    stroke_width = Attribute("penwidth", float)
    arrow_size = Attribute("arrowsize", float)

    # Labels
    label = Attribute("label", str)
    font_name = Attribute("fontname", str)
    font_size = Attribute("fontsize", float)
    text_color = Attribute("fontcolor", Color)
    label_url = Attribute("labelURL", str)
    label_distance = Attribute("labeldistance", float)
    label_angle = Attribute("labelangle", float)
    label_float = Attribute("labelfloat", bool)
    exterior_label = Attribute("xlabel", str)
    exterior_label_position = Attribute("xlp", Point)
    decorate = Attribute("decorate", bool)
    no_justify = Attribute("nojustify", bool)

    # Links
    href = Attribute("href", str)
    url = Attribute("URL", str)
    tooltip = Attribute("tooltip", str)

    # Head
    head = Attribute("arrowhead", Arrow, ArrowShape)
    head_port = Attribute("headport", Port)
    head_label = Attribute("headlabel", str)
    head_label_position = Attribute("head_lp", Point)
    head_clip = Attribute("headclip", bool)
    head_url = Attribute("headURL", str)
    head_target = Attribute("headtarget", str)
    head_tooltip = Attribute("headtooltip", str)
    logical_head = Attribute("lhead", str)
    same_head = Attribute("samehead", str)

    # Tail
    tail = Attribute("arrowtail", Arrow, ArrowShape)
    tail_port = Attribute("tailport", Port)
    tail_label = Attribute("taillabel", str)
    tail_label_position = Attribute("tail_lp", Point)
    tail_clip = Attribute("tailclip", bool)
    tail_url = Attribute("tailURL", str)
    tail_target = Attribute("tailtarget", str)
    tail_tooltip = Attribute("tailtooltip", str)
    logical_tail = Attribute("ltail", str)
    same_tail = Attribute("sametail", str)

    # dot
    minimum_rank_difference = Attribute("minlen", int)
    guide_box_location = Attribute("showboxes", Location)

    # neato, fdp
    preferred_length = Attribute("len", float)
    position = Attribute("pos", Spline)
    # fmt: on
