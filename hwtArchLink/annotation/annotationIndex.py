from typing import Dict, Optional, Tuple

from hwtArchLink.basicPort import BasicPort
from hwtArchLink.errors import PbTypeAnnotationConflictError
from hwtArchLink.pbType.pbType import PbType, PbMode, PbPort


class PbTypeAnnotationIndex():
    """
    The result of linking of the architecture annotation to pb_type graph.

    All dictionaries are keyed by the objects of the graph (never by the names because names are not unique).
    The index is append only, once a key is annotated its value can not be changed.

    :ivar _physicalModes: pb_type -> its physical mode
    :ivar _physicalPbTypes: operating pb_type -> physical pb_type
    :ivar _physicalPbPorts: operating pb_type port -> (physical pb_type port, range of bits of physical port)
    """

    def __init__(self):
        self._physicalModes: Dict[PbType, PbMode] = {}
        self._physicalPbTypes: Dict[PbType, PbType] = {}
        self._physicalPbPorts: Dict[PbPort, Tuple[PbPort, BasicPort]] = {}

    def physicalMode(self, pbType: PbType) -> Optional[PbMode]:
        return self._physicalModes.get(pbType, None)

    def addPbTypePhysicalMode(self, pbType: PbType, mode: PbMode):
        assert mode.parent is pbType, ("Mode does not belong to pb_type", pbType, mode)
        cur = self._physicalModes.get(pbType, None)
        if cur is not None:
            if cur is mode:
                return
            raise PbTypeAnnotationConflictError("pb_type already has a different physical mode", pbType, cur, mode)
        self._physicalModes[pbType] = mode

    def physicalPbType(self, operatingPbType: PbType) -> Optional[PbType]:
        return self._physicalPbTypes.get(operatingPbType, None)

    def addPhysicalPbType(self, operatingPbType: PbType, physicalPbType: PbType):
        cur = self._physicalPbTypes.get(operatingPbType, None)
        if cur is not None:
            if cur is physicalPbType:
                return
            raise PbTypeAnnotationConflictError("Operating pb_type already has a different physical pb_type",
                                                operatingPbType, cur, physicalPbType)
        self._physicalPbTypes[operatingPbType] = physicalPbType

    def physicalPbPort(self, operatingPort: PbPort) -> Optional[PbPort]:
        v = self._physicalPbPorts.get(operatingPort, None)
        if v is None:
            return None
        return v[0]

    def physicalPbPortRange(self, operatingPort: PbPort) -> Optional[BasicPort]:
        v = self._physicalPbPorts.get(operatingPort, None)
        if v is None:
            return None
        return v[1]

    def addPhysicalPbPort(self, operatingPort: PbPort, physicalPort: PbPort, portRange: BasicPort):
        assert portRange.contained(physicalPort.toBasicPort()), ("Range does not fit into physical port", physicalPort, portRange)
        cur = self._physicalPbPorts.get(operatingPort, None)
        if cur is not None:
            if cur[0] is physicalPort and cur[1] == portRange:
                return
            raise PbTypeAnnotationConflictError("Operating port already has a different physical port",
                                                operatingPort, cur, (physicalPort, portRange))
        self._physicalPbPorts[operatingPort] = (physicalPort, portRange)

    def iterPhysicalModes(self):
        return iter(self._physicalModes.items())

    def iterPhysicalPbTypes(self):
        return iter(self._physicalPbTypes.items())

    def iterPhysicalPbPorts(self):
        """
        :return: iterator of tuples (operating port, physical port, range of physical port)
        """
        for op, (phy, r) in self._physicalPbPorts.items():
            yield op, phy, r

    def physicalModeCnt(self) -> int:
        return len(self._physicalModes)

    def physicalPbTypeCnt(self) -> int:
        return len(self._physicalPbTypes)

    def physicalPbPortCnt(self) -> int:
        return len(self._physicalPbPorts)
