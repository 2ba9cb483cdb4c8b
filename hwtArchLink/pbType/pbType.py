from enum import Enum
from typing import List, Optional, Generator

from hwtArchLink.basicPort import BasicPort


class NODE_ITERATION_TYPE(Enum):
    PREORDER, POSTORDER = range(2)


class PB_PORT_DIRECTION(Enum):
    IN, OUT, CLOCK = range(3)


class PbPort():
    """
    A port of :class:`PbType`

    :ivar width: number of pins of this port
    """
    __slots__ = ["parent", "name", "width", "direction", "_id"]

    def __init__(self, parent: "PbType", name: str, width: int, direction: PB_PORT_DIRECTION):
        if width <= 0:
            raise ValueError("Port width must be positive", parent, name, width)
        self.parent = parent
        self.name = name
        self.width = width
        self.direction = direction
        self._id = parent.graph.getUniqId()

    def toBasicPort(self) -> BasicPort:
        return BasicPort.fromWidth(self.name, self.width)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__:s} {self.parent.name:s}.{self.name:s}[{self.width:d}] {self._id:d}>"


class PbMode():
    """
    One of alternative internal structures of :class:`PbType`

    :ivar parent: pb_type which has this mode
    :ivar children: pb_types instantiated in this mode
    """

    def __init__(self, parent: "PbType", name: str):
        self.parent = parent
        self.name = name
        self.children: List[PbType] = []

    def findChild(self, name: str) -> Optional["PbType"]:
        for c in self.children:
            if c.name == name:
                return c
        return None

    def addChild(self, name: str, blifModel: Optional[str]=None) -> "PbType":
        if self.findChild(name) is not None:
            raise ValueError("Duplicit child pb_type name in mode", self, name)
        c = PbType(self.parent.graph, name, parentMode=self, blifModel=blifModel)
        self.children.append(c)
        return c

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__:s} {self.parent.name:s}[{self.name:s}]>"


class PbType():
    """
    A node of pb_type graph (a programmable block type of the architecture).

    :ivar name: name unique between siblings (but not in whole graph)
    :ivar modes: alternative internal structures of this pb_type, exactly one of them
        exists in silicon (physical mode)
    :ivar ports: ordered list of ports of this pb_type
    :ivar blifModel: name of the model implemented by primitive pb_type, None for non-primitive pb_types
    :ivar parentMode: mode of parent pb_type where this pb_type is instantiated, None for root pb_types
    """

    def __init__(self, graph: "PbTypeGraph", name: str,
                 parentMode: Optional[PbMode]=None,
                 blifModel: Optional[str]=None):
        self.graph = graph
        self.name = name
        self.parentMode = parentMode
        self.blifModel = blifModel
        self.modes: List[PbMode] = []
        self.ports: List[PbPort] = []
        self._id = graph.getUniqId()

    def isPrimitive(self) -> bool:
        return self.blifModel is not None

    def isRoot(self) -> bool:
        return self.parentMode is None

    def findMode(self, name: str) -> Optional[PbMode]:
        for m in self.modes:
            if m.name == name:
                return m
        return None

    def findPort(self, name: str) -> Optional[PbPort]:
        for p in self.ports:
            if p.name == name:
                return p
        return None

    def addMode(self, name: str) -> PbMode:
        if self.isPrimitive():
            raise ValueError("Primitive pb_type can not have modes", self, name)
        if self.findMode(name) is not None:
            raise ValueError("Duplicit mode name", self, name)
        m = PbMode(self, name)
        self.modes.append(m)
        return m

    def addPort(self, name: str, width: int, direction: PB_PORT_DIRECTION=PB_PORT_DIRECTION.IN) -> PbPort:
        if self.findPort(name) is not None:
            raise ValueError("Duplicit port name", self, name)
        p = PbPort(self, name, width, direction)
        self.ports.append(p)
        return p

    def iterHierarchyPath(self) -> Generator[PbMode, None, None]:
        """
        :return: generator of modes on path from the root pb_type to this pb_type
        """
        path = []
        m = self.parentMode
        while m is not None:
            path.append(m)
            m = m.parent.parentMode
        yield from reversed(path)

    def getHierarchyName(self) -> str:
        """
        :return: name of this pb_type with names of parents and their modes, e.g. "clb[default].fle[physical].ff"
        """
        parts = [f"{m.parent.name:s}[{m.name:s}]" for m in self.iterHierarchyPath()]
        parts.append(self.name)
        return ".".join(parts)

    def iterAllPbTypes(self, itTy: NODE_ITERATION_TYPE):
        """
        :return: generator of this pb_type and all pb_types in all modes under it
        """
        if itTy == NODE_ITERATION_TYPE.PREORDER:
            yield self

        for m in self.modes:
            for c in m.children:
                yield from c.iterAllPbTypes(itTy)

        if itTy == NODE_ITERATION_TYPE.POSTORDER:
            yield self

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__:s} {self.name:s} {self._id:d}>"
