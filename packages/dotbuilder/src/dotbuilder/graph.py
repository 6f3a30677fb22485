"""Graph containers and the recursive DOT serializer.

``Graph``, ``Subgraph`` and ``ClusterSubgraph`` share one composition base and
differ only in their opening line and in how they treat their id. Rendering
always emits a scope in the same order: own attributes, node and edge
defaults, nested subgraphs, nodes, edges. Graphviz resolves scoping from that
layout, so subgraphs must be complete before the nodes of the enclosing scope.
"""

import logging

from dotbuilder.config import RenderOptions
from dotbuilder.elements import Edge, GraphElement, Node
from dotbuilder.enums import RankType, Shape
from dotbuilder.properties import GlobalEdgeProperties, GlobalNodeProperties, GraphProperties
from dotbuilder.quoting import quote, sanitize_cluster_id

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_NAME = "G"
EPILOG = "}"


class GraphContainer(GraphElement):
    global_node_properties: GlobalNodeProperties | None
    global_edge_properties: GlobalEdgeProperties | None

    def __init__(self, element_id: str, prolog: str):
        super().__init__(element_id, prolog=prolog, epilog=EPILOG)
        self._properties = GraphProperties()
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._subgraphs: list[GraphContainer] = []
        self.global_node_properties = GlobalNodeProperties()
        self.global_edge_properties = GlobalEdgeProperties()

    @property
    def properties(self) -> GraphProperties:
        return self._properties

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def subgraphs(self) -> tuple["GraphContainer", ...]:
        return tuple(self._subgraphs)

    @property
    def fontsize(self) -> str | None:
        return self._properties.get_value("fontsize")

    @fontsize.setter
    def fontsize(self, value: str) -> None:
        self._properties.set_value("fontsize", value)

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
        self._subgraphs.clear()

    def new_node(self, label: str) -> Node:
        node = Node(quote(label))
        self._nodes.append(node)
        return node

    def new_edge(self, source: Node | str, target: Node | str) -> Edge:
        """Connect two nodes, given as ``Node`` objects or labels.

        A label is looked up in this container only (never in nested
        subgraphs) and a new node is created here when it is missing. To reuse
        a node living in a subgraph, fetch it with
        ``get_node_or_none_in_all_graphs`` and pass the ``Node``.
        """
        edge = Edge(self._resolve_endpoint(source), self._resolve_endpoint(target))
        self._edges.append(edge)
        return edge

    def get_node_or_none(self, label: str) -> Node | None:
        quoted = quote(label)
        if not self._nodes:
            logger.debug("The graph %s contains no nodes.", self.id)
        for node in self._nodes:
            if node.id == quoted:
                return node
        return None

    def get_node_or_none_in_all_graphs(self, label: str) -> Node | None:
        node = self.get_node_or_none(label)
        if node is not None:
            return node
        for subgraph in self._subgraphs:
            node = subgraph.get_node_or_none_in_all_graphs(label)
            if node is not None:
                return node
        return None

    def new_subgraph(self, subgraph_id: str, rank_type: RankType | str = RankType.SAME) -> "Subgraph":
        subgraph = Subgraph(subgraph_id, rank_type)
        self._subgraphs.append(subgraph)
        return subgraph

    def new_cluster_subgraph(self, subgraph_id: str) -> "ClusterSubgraph":
        cleaned, stripped = sanitize_cluster_id(subgraph_id)
        if stripped:
            logger.warning(
                "Cluster id %r must not contain non word characters - replaced by %r.",
                subgraph_id,
                cleaned,
            )
        cluster = ClusterSubgraph(cleaned)
        self._subgraphs.append(cluster)
        return cluster

    def get_content(self, options: RenderOptions) -> str:
        lines = self._body_lines(options)
        if not lines:
            return "\n"
        return "\n" + "\n".join(lines) + "\n"

    def source_lines(self, options: RenderOptions) -> list[str]:
        """The rendered scope as statements; quoted text is never split or re-indented."""
        return [self.prolog, *self._body_lines(options), self.epilog]

    def _body_lines(self, options: RenderOptions) -> list[str]:
        statements = [
            *self._properties.statements(),
            _render_defaults(self.global_node_properties),
            _render_defaults(self.global_edge_properties),
        ]
        for subgraph in self._subgraphs:
            statements.extend(subgraph.source_lines(options))
        statements.extend(node.render(options) for node in self._nodes)
        statements.extend(edge.render(options) for edge in self._edges)
        return [options.indent + statement for statement in statements if statement]

    def _resolve_endpoint(self, endpoint: Node | str) -> Node:
        if isinstance(endpoint, Node):
            return endpoint
        node = self.get_node_or_none(endpoint)
        if node is None:
            node = self.new_node(endpoint)
        return node

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.id}, nodes={len(self._nodes)}, "
            f"edges={len(self._edges)}, subgraphs={len(self._subgraphs)})"
        )


class Graph(GraphContainer):
    """The root ``digraph``. See ``GraphContainer`` for the factory methods."""

    def __init__(self, name: str = DEFAULT_GRAPH_NAME):
        graph_id = quote(name)
        super().__init__(graph_id, prolog=f"digraph {graph_id} {{")
        self.global_node_properties = GlobalNodeProperties(shape=Shape.BOX)

    def render(self, options: RenderOptions | None = None) -> str:
        options = options or RenderOptions()
        source = super().render(options)
        return source + "\n" if options.final_newline else source


class Subgraph(GraphContainer):
    def __init__(self, subgraph_id: str, rank_type: RankType | str = RankType.SAME):
        quoted = quote(subgraph_id)
        super().__init__(quoted, prolog=f"subgraph {quoted} {{")
        self._properties.set_value("rank", rank_type)

    @property
    def rank_type(self) -> RankType:
        return self._properties.get_value("rank")


class ClusterSubgraph(GraphContainer):
    """A ``cluster_`` subgraph, drawn by Graphviz as a box around its nodes.

    ``subgraph_id`` must already be reduced to word characters; the
    ``new_cluster_subgraph`` factory takes care of that. Node defaults start
    out unset so the enclosing scope's defaults apply.
    """

    def __init__(self, subgraph_id: str):
        super().__init__(quote(subgraph_id), prolog=f"subgraph cluster_{subgraph_id} {{")
        self.name = subgraph_id
        self.global_node_properties = None
        self.global_edge_properties = None


def _render_defaults(defaults: GlobalNodeProperties | GlobalEdgeProperties | None) -> str:
    return defaults.render() if defaults is not None else ""
