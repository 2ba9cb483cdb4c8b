from typing import List

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.debugTracer import DebugTracer
from hwtArchLink.link.archLinkPass import ArchLinkAnalysisPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.pbType import PbType


class ArchLinkAnalysisPassPhysicalModeCheck(ArchLinkAnalysisPass):
    """
    Check the physical mode annotation of every pb_type in the graph:

    1. there is exactly one physical mode for each non-primitive pb_type under a physical mode
    2. physical mode appears only when parent pb_types are in physical mode

    All violations are collected, the index is not modified.

    :ivar errors: error messages
    """

    def __init__(self):
        self.errors: List[str] = []

    @property
    def errCnt(self) -> int:
        return len(self.errors)

    def isOk(self) -> bool:
        return not self.errors

    def _error(self, tracer: DebugTracer, msg: str):
        tracer.error(msg)
        self.errors.append(msg)

    def _checkPhysicalMode(self, pbType: PbType, expectPhysicalMode: bool,
                           index: PbTypeAnnotationIndex, tracer: DebugTracer):
        if pbType.isPrimitive():
            return

        physicalMode = index.physicalMode(pbType)
        if expectPhysicalMode:
            if physicalMode is None:
                self._error(tracer, f"Unable to find a physical mode for a multi-mode pb_type '{pbType.getHierarchyName():s}'!")
                return
        elif physicalMode is not None:
            self._error(tracer, f"Find a physical mode '{physicalMode.name:s}' for pb_type '{pbType.getHierarchyName():s}' "
                        "which is not under any physical mode!")
            return

        for m in pbType.modes:
            expectChildPhysicalMode = expectPhysicalMode and m is physicalMode
            for c in m.children:
                self._checkPhysicalMode(c, expectChildPhysicalMode, index, tracer)

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        tracer = ctx.tracer
        for r in ctx.iterRoots():
            # top pb_type should always have a physical mode
            self._checkPhysicalMode(r, True, ctx.index, tracer)

        if self.isOk():
            tracer.log("Check physical mode annotation for pb_types passed.")
        else:
            tracer.log(f"Check physical mode annotation for pb_types failed with {self.errCnt:d} errors!")
        ctx.errors.extend(self.errors)
        ctx.physicalModeCheck = self
