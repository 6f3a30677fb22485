"""Typed attribute stores and their DOT attribute clauses."""

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any, ClassVar

from dotbuilder.enums import ArrowType, Dir, RankDir, RankType, Shape, Style
from dotbuilder.errors import InvalidPropertyValueError, UnknownPropertyError
from dotbuilder.quoting import quote_value


class Property:
    """A free-form attribute, rendered as a quoted string."""

    def __init__(self, name: str, value: Any = None):
        self.name = name
        self._value: Any = None
        self.set_value(value)

    def get_value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = None if value is None else self._coerce(value)

    def render(self) -> str:
        return f"{self.name}={self._format(self._value)}"

    def _coerce(self, value: Any) -> Any:
        return str(value)

    def _format(self, value: Any) -> str:
        return quote_value(value)


class EnumProperty(Property):
    """An attribute restricted to the members of one enum."""

    def __init__(self, name: str, symbols: type[Enum], value: Any = None):
        self.symbols = symbols
        super().__init__(name, value)

    def _coerce(self, value: Any) -> Enum:
        if isinstance(value, self.symbols):
            return value
        try:
            return self.symbols(value)
        except ValueError:
            allowed = [member.value for member in self.symbols]
            raise InvalidPropertyValueError(self.name, value, allowed) from None

    def _format(self, value: Enum) -> str:
        return value.value


class BoolProperty(Property):
    _TOKENS = {"true": True, "false": False}

    def _coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in self._TOKENS:
            return self._TOKENS[value.lower()]
        raise InvalidPropertyValueError(self.name, value, list(self._TOKENS))

    def _format(self, value: bool) -> str:
        return "true" if value else "false"


PropertyFactory = Callable[[str], Property]


def _enum(symbols: type[Enum]) -> PropertyFactory:
    return lambda name: EnumProperty(name, symbols)


def _free(*names: str) -> dict[str, PropertyFactory]:
    return {name: Property for name in names}


def _flags(*names: str) -> dict[str, PropertyFactory]:
    return {name: BoolProperty for name in names}


class PropertyStore:
    """Ordered name -> property mapping; one value per name, last write wins.

    ``KNOWN`` maps property names to the factory building their typed
    property. When ``KNOWN`` is ``None`` every name is accepted as a free-form
    property; otherwise names outside it raise ``UnknownPropertyError``.
    """

    KNOWN: ClassVar[dict[str, PropertyFactory] | None] = None

    def __init__(self, **values: Any):
        self._properties: dict[str, Property] = {}
        for key, value in values.items():
            self.set_value(key, value)

    def set_value(self, key: str, value: Any) -> None:
        """Set ``key`` to ``value``; ``None`` removes the property."""
        if value is None:
            self.remove(key)
            return
        prop = self._properties.get(key)
        if prop is None:
            prop = self._new_property(key)
            prop.set_value(value)
            self._properties[key] = prop
            return
        prop.set_value(value)

    def get_value(self, key: str, default: Any = None) -> Any:
        self._check_known(key)
        prop = self._properties.get(key)
        return prop.get_value() if prop is not None else default

    def remove(self, key: str) -> None:
        self._check_known(key)
        self._properties.pop(key, None)

    def items(self) -> Iterator[tuple[str, Any]]:
        for key, prop in self._properties.items():
            yield key, prop.get_value()

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def render(self) -> str:
        """Render the attribute list without any wrapping; empty when unset."""
        return ", ".join(self._rendered_properties())

    def _rendered_properties(self) -> list[str]:
        return [prop.render() for prop in self._properties.values()]

    def _new_property(self, key: str) -> Property:
        self._check_known(key)
        if self.KNOWN is None:
            return Property(key)
        return self.KNOWN[key](key)

    def _check_known(self, key: str) -> None:
        if self.KNOWN is not None and key not in self.KNOWN:
            raise UnknownPropertyError(key, type(self).__name__)


class _AttributeListProperties(PropertyStore):
    def render(self) -> str:
        if not self._properties:
            return ""
        return f"[{', '.join(self._rendered_properties())}]"


_COMMON = {
    **_free("label", "xlabel", "color", "fontcolor", "fontname", "fontsize"),
    **_free("penwidth", "tooltip", "URL", "target", "id", "class", "comment"),
    "style": _enum(Style),
}

NODE_PROPERTIES: dict[str, PropertyFactory] = {
    **_COMMON,
    **_free("fillcolor", "width", "height", "peripheries", "group", "margin"),
    **_free("image", "sides", "orientation", "distortion", "skew"),
    **_flags("fixedsize", "regular", "nojustify"),
    "shape": _enum(Shape),
}

EDGE_PROPERTIES: dict[str, PropertyFactory] = {
    **_COMMON,
    **_free("headlabel", "taillabel", "arrowsize", "weight", "minlen"),
    **_free("headport", "tailport", "lhead", "ltail", "samehead", "sametail"),
    **_free("labelfontsize", "labelfontcolor", "labeldistance", "labelangle"),
    **_flags("constraint", "decorate", "headclip", "tailclip"),
    "dir": _enum(Dir),
    "arrowhead": _enum(ArrowType),
    "arrowtail": _enum(ArrowType),
}

GRAPH_PROPERTIES: dict[str, PropertyFactory] = {
    **_COMMON,
    **_free("labelloc", "labeljust", "ranksep", "nodesep", "splines", "bgcolor"),
    **_free("fillcolor", "pencolor", "size", "ratio", "margin", "pad", "dpi"),
    **_free("ordering", "charset", "layout", "outputorder", "peripheries", "clusterrank"),
    **_flags("compound", "concentrate", "newrank", "center"),
    "rankdir": _enum(RankDir),
    "rank": _enum(RankType),
}


class NodeProperties(_AttributeListProperties):
    KNOWN = NODE_PROPERTIES


class EdgeProperties(_AttributeListProperties):
    KNOWN = EDGE_PROPERTIES


class GlobalNodeProperties(_AttributeListProperties):
    """Node defaults for one scope, rendered as a ``node [...]`` statement."""

    KNOWN = NODE_PROPERTIES

    def render(self) -> str:
        clause = super().render()
        return f"node {clause};" if clause else ""


class GlobalEdgeProperties(_AttributeListProperties):
    """Edge defaults for one scope, rendered as an ``edge [...]`` statement."""

    KNOWN = EDGE_PROPERTIES

    def render(self) -> str:
        clause = super().render()
        return f"edge {clause};" if clause else ""


class GraphProperties(PropertyStore):
    """Graph or subgraph attributes, one ``name=value;`` line each."""

    KNOWN = GRAPH_PROPERTIES

    def statements(self) -> list[str]:
        return [f"{line};" for line in self._rendered_properties()]

    def render(self) -> str:
        return "\n".join(self.statements())
