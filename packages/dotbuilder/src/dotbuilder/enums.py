from enum import Enum


class Shape(str, Enum):
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


class RankType(str, Enum):
    SAME = "same"
    MIN = "min"
    SOURCE = "source"
    MAX = "max"
    SINK = "sink"


class RankDir(str, Enum):
    TB = "TB"
    LR = "LR"
    BT = "BT"
    RL = "RL"


class Style(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    INVIS = "invis"
    FILLED = "filled"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    STRIPED = "striped"
    WEDGED = "wedged"
    RADIAL = "radial"
    TAPERED = "tapered"


class Dir(str, Enum):
    FORWARD = "forward"
    BACK = "back"
    BOTH = "both"
    NONE = "none"


class ArrowType(str, Enum):
    NORMAL = "normal"
    INV = "inv"
    DOT = "dot"
    INVDOT = "invdot"
    ODOT = "odot"
    INVODOT = "invodot"
    NONE = "none"
    TEE = "tee"
    EMPTY = "empty"
    INVEMPTY = "invempty"
    DIAMOND = "diamond"
    ODIAMOND = "odiamond"
    EDIAMOND = "ediamond"
    CROW = "crow"
    BOX = "box"
    OBOX = "obox"
    OPEN = "open"
    HALFOPEN = "halfopen"
    VEE = "vee"
