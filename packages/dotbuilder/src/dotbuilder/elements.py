from abc import ABC, abstractmethod

from dotbuilder.config import RenderOptions
from dotbuilder.properties import EdgeProperties, NodeProperties, PropertyStore
from dotbuilder.quoting import unquote

EDGE_TOKEN = "->"
TERMINATOR = ";"


class GraphElement(ABC):
    """Anything with its own property store and DOT source.

    Nodes and graph containers carry a quoted identifier in ``id``. Edges are
    identified by their endpoints and have ``id`` set to ``None``.
    """

    def __init__(self, element_id: str | None, prolog: str = "", epilog: str = ""):
        self.id = element_id
        self.prolog = prolog
        self.epilog = epilog

    @property
    @abstractmethod
    def properties(self) -> PropertyStore: ...

    @abstractmethod
    def get_content(self, options: RenderOptions) -> str: ...

    def render(self, options: RenderOptions | None = None) -> str:
        return self.prolog + self.get_content(options or RenderOptions()) + self.epilog


class Node(GraphElement):
    def __init__(self, node_id: str):
        super().__init__(node_id, epilog=TERMINATOR)
        self._properties = NodeProperties()

    @property
    def properties(self) -> NodeProperties:
        return self._properties

    @property
    def label(self) -> str:
        return unquote(self.id)

    def get_content(self, options: RenderOptions) -> str:
        return _with_clause(self.id, self._properties.render())

    def __repr__(self) -> str:
        return f"Node({self.id})"


class Edge(GraphElement):
    def __init__(self, source: Node, target: Node):
        super().__init__(None, epilog=TERMINATOR)
        self.source = source
        self.target = target
        self._properties = EdgeProperties()

    @property
    def properties(self) -> EdgeProperties:
        return self._properties

    def get_content(self, options: RenderOptions) -> str:
        statement = f"{self.source.id} {EDGE_TOKEN} {self.target.id}"
        return _with_clause(statement, self._properties.render())

    def __repr__(self) -> str:
        return f"Edge({self.source.id} {EDGE_TOKEN} {self.target.id})"


def _with_clause(statement: str, clause: str) -> str:
    return f"{statement} {clause}" if clause else statement
