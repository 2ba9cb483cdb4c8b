from typing import List, Tuple, Optional

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation, formatPbTypePath
from hwtArchLink.basicPort import BasicPort
from hwtArchLink.link.archLinkPass import ArchLinkPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.link.pathResolver import tryFindPbTypeWithGivenPath
from hwtArchLink.pbType.pbType import PbType, PbPort


def pairOperatingAndPhysicalPbTypes(operatingPbType: PbType,
                                    physicalPbType: PbType,
                                    annotation: PbTypeAnnotation,
                                    index: PbTypeAnnotationIndex) -> bool:
    """
    Pair the operating pb_type with physical pb_type and pair all ports of the operating pb_type
    with ports of physical pb_type.

    * For the ports which are explicitly annotated the physical port and range from annotation is used.
    * Other ports are expected to have a physical port of same name and at least the same width.

    :return: True if all ports were paired, the index is updated only in this case
    """
    assert operatingPbType is not None and physicalPbType is not None, (operatingPbType, physicalPbType)
    cur = index.physicalPbType(operatingPbType)
    if cur is not None and cur is not physicalPbType:
        return False

    portPairs: List[Tuple[PbPort, PbPort, BasicPort]] = []
    for opPort in operatingPbType.ports:
        expected = annotation.physicalPbTypePort(opPort.name)
        if expected is None:
            expected = BasicPort.fromWidth(opPort.name, opPort.width)

        phyPort = physicalPbType.findPort(expected.name)
        if phyPort is None:
            return False

        if not expected.contained(phyPort.toBasicPort()):
            return False

        curPhyPort = index.physicalPbPort(opPort)
        if curPhyPort is not None and (curPhyPort is not phyPort or index.physicalPbPortRange(opPort) != expected):
            return False

        portPairs.append((opPort, phyPort, expected))

    # all ports paired, commit to index
    for opPort, phyPort, portRange in portPairs:
        index.addPhysicalPbPort(opPort, phyPort, portRange)
    index.addPhysicalPbType(operatingPbType, physicalPbType)
    return True


class ArchLinkPassPhysicalPbTypeAnnotation(ArchLinkPass):
    """
    Pair each operating pb_type with its physical pb_type by following the explicit definition
    in architecture annotations.

    :attention: should be executed only after the physical mode annotation is completed
    :note: a failure of a single annotation does not stop the processing of other annotations
    :ivar errors: messages for annotations which could not be paired
    """

    def __init__(self):
        self.errors: List[str] = []
        self.pairedCnt = 0

    def _resolvePair(self, ctx: ArchLinkCtx, a: PbTypeAnnotation) -> Optional[Tuple[PbType, PbType]]:
        """
        :return: operating and physical pb_type from the first root where both can be found
        """
        opTypeNames, opModeNames = a.operatingPbTypePath()
        phyTypeNames, phyModeNames = a.physicalPbTypePath()
        for r in ctx.iterRoots():
            op = tryFindPbTypeWithGivenPath(r, opTypeNames, opModeNames)
            if op is None:
                continue
            phy = tryFindPbTypeWithGivenPath(r, phyTypeNames, phyModeNames)
            if phy is None:
                continue
            return op, phy

        return None

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        tracer = ctx.tracer
        for a in ctx.annotations:
            # physical pb_type annotations do not pair anything
            if not a.isOperatingPbType():
                continue

            pair = self._resolvePair(ctx, a)
            if pair is not None:
                op, phy = pair
                if pairOperatingAndPhysicalPbTypes(op, phy, a, ctx.index):
                    tracer.log(f"Annotate operating pb_type '{op.name:s}' to its physical pb_type '{phy.name:s}'")
                    self.pairedCnt += 1
                    continue

            msg = (f"Unable to pair the operating pb_type '{formatPbTypePath(*a.operatingPbTypePath()):s}' "
                   f"to its physical pb_type '{formatPbTypePath(*a.physicalPbTypePath()):s}'!")
            tracer.error(msg)
            self.errors.append(msg)

        ctx.errors.extend(self.errors)
