from dotbuilder.config import RenderOptions
from dotbuilder.elements import Edge, GraphElement, Node
from dotbuilder.enums import ArrowType, Dir, RankDir, RankType, Shape, Style
from dotbuilder.errors import DotBuilderError, InvalidPropertyValueError, UnknownPropertyError
from dotbuilder.graph import ClusterSubgraph, Graph, GraphContainer, Subgraph
from dotbuilder.properties import (
    BoolProperty,
    EdgeProperties,
    EnumProperty,
    GlobalEdgeProperties,
    GlobalNodeProperties,
    GraphProperties,
    NodeProperties,
    Property,
    PropertyStore,
)
from dotbuilder.quoting import quote

__all__ = [
    "ArrowType",
    "BoolProperty",
    "ClusterSubgraph",
    "Dir",
    "DotBuilderError",
    "Edge",
    "EdgeProperties",
    "EnumProperty",
    "GlobalEdgeProperties",
    "GlobalNodeProperties",
    "Graph",
    "GraphContainer",
    "GraphElement",
    "GraphProperties",
    "InvalidPropertyValueError",
    "Node",
    "NodeProperties",
    "Property",
    "PropertyStore",
    "RankDir",
    "RankType",
    "RenderOptions",
    "Shape",
    "Style",
    "Subgraph",
    "UnknownPropertyError",
    "quote",
]
