from typing import List

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.debugTracer import DebugTracer
from hwtArchLink.link.archLinkPass import ArchLinkPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.pbType import PbType


class ArchLinkPassPhysicalModeImplicitAnnotation(ArchLinkPass):
    """
    Infer the physical mode of pb_types which were not annotated explicitly.

    The following rule is applied:
    if there is only 1 mode under a pb_type, it is the physical mode of this pb_type.
    A multi-mode pb_type without explicit annotation is an error, no mode is guessed for it
    and its children are not visited.

    :attention: must be executed after :class:`hwtArchLink.link.physicalModeExplicit.ArchLinkPassPhysicalModeExplicitAnnotation`
    :ivar errors: messages for pb_types where the physical mode could not be resolved
    :ivar inferredCnt: number of physical modes inferred by this pass
    """

    def __init__(self):
        self.errors: List[str] = []
        self.inferredCnt = 0

    def _error(self, tracer: DebugTracer, msg: str):
        tracer.error(msg)
        self.errors.append(msg)

    def _inferPhysicalMode(self, pbType: PbType, index: PbTypeAnnotationIndex, tracer: DebugTracer):
        if pbType.isPrimitive():
            return

        physicalMode = index.physicalMode(pbType)
        if physicalMode is None:
            if len(pbType.modes) == 1:
                physicalMode = pbType.modes[0]
                index.addPbTypePhysicalMode(pbType, physicalMode)
                tracer.log(f"Implicitly infer physical mode '{physicalMode.name:s}' for pb_type '{pbType.name:s}'")
                self.inferredCnt += 1
            elif not pbType.modes:
                self._error(tracer, f"Non-primitive pb_type '{pbType.getHierarchyName():s}' does not have any mode!")
                return
            else:
                self._error(tracer, f"Unable to find a physical mode for a multi-mode pb_type '{pbType.getHierarchyName():s}'! "
                            "Please specify it in the architecture annotation.")
                return

        for c in physicalMode.children:
            self._inferPhysicalMode(c, index, tracer)

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        for r in ctx.iterRoots():
            self._inferPhysicalMode(r, ctx.index, ctx.tracer)
        ctx.errors.extend(self.errors)
