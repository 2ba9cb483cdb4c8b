from typing import Optional

from hwt.pyUtils.uniqList import UniqList
from hwtArchLink.pbType.pbType import PbType, NODE_ITERATION_TYPE


class PbTypeGraph():
    """
    A container of pb_type trees of the architecture (logical block types).

    :ivar label: name of this graph used in logs and debug files
    :ivar roots: top level pb_types, the order is the order of search
    :note: the graph is read only for annotation passes, the objects are used as keys
        in annotation index and the _id is a stable identifier of each object
    """

    def __init__(self, label: str="arch"):
        self.label = label
        self.roots: UniqList[PbType] = UniqList()
        self._uniqIdCntr = 0

    def getUniqId(self) -> int:
        n = self._uniqIdCntr
        self._uniqIdCntr += 1
        return n

    def addRoot(self, name: str, blifModel: Optional[str]=None) -> PbType:
        t = PbType(self, name, blifModel=blifModel)
        self.roots.append(t)
        return t

    def iterRoots(self):
        return iter(self.roots)

    def iterAllPbTypes(self, itTy: NODE_ITERATION_TYPE=NODE_ITERATION_TYPE.PREORDER):
        """
        :returns: iterator of all pb_types in all pb_type trees
        """
        for r in self.roots:
            yield from r.iterAllPbTypes(itTy)

    def __repr__(self):
        return f"<{self.__class__.__name__:s} {self.label:s}>"
