from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation, formatPbTypePath
from hwtArchLink.errors import UnresolvedPbTypePathError, PbTypeAnnotationConflictError
from hwtArchLink.link.archLinkPass import ArchLinkPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.link.pathResolver import findPbTypeInRoots


class ArchLinkPassPhysicalModeExplicitAnnotation(ArchLinkPass):
    """
    Identify the physical mode of multi-mode pb_types by following the explicit definition
    in architecture annotations.

    :note: any unresolved annotation is a configuration error which can not be worked around,
        the error is logged and :class:`hwtArchLink.errors.UnresolvedPbTypePathError` is raised
    """

    def __init__(self):
        self.annotatedCnt = 0

    def _annotate(self, ctx: ArchLinkCtx, a: PbTypeAnnotation):
        if a.isOperatingPbType():
            typeNames, modeNames = a.operatingPbTypePath()
        elif a.isPhysicalPbType():
            typeNames, modeNames = a.physicalPbTypePath()
        else:
            msg = f"Physical mode '{a.physicalModeName:s}' is specified for annotation {a} without the physical pb_type!"
            ctx.tracer.error(msg)
            raise UnresolvedPbTypePathError(msg)

        pbType = findPbTypeInRoots(ctx.iterRoots(), typeNames, modeNames)
        path = formatPbTypePath(typeNames, modeNames)
        if pbType is None:
            msg = f"Unable to find the pb_type '{path:s}' in architecture definition!"
            ctx.tracer.error(msg)
            raise UnresolvedPbTypePathError(msg, typeNames, modeNames)

        mode = pbType.findMode(a.physicalModeName)
        if mode is None:
            msg = f"Unable to find the physical mode '{a.physicalModeName:s}' of pb_type '{path:s}' in architecture definition!"
            ctx.tracer.error(msg)
            raise UnresolvedPbTypePathError(msg, typeNames, modeNames)

        try:
            ctx.index.addPbTypePhysicalMode(pbType, mode)
        except PbTypeAnnotationConflictError:
            ctx.tracer.error(f"Physical mode of pb_type '{path:s}' is specified multiple times "
                             f"('{ctx.index.physicalMode(pbType).name:s}' and '{mode.name:s}')!")
            raise

        ctx.tracer.log(f"Annotate pb_type '{pbType.name:s}' with physical mode '{mode.name:s}'")
        self.annotatedCnt += 1

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        for a in ctx.annotations:
            # the record does not specify the physical mode, nothing to annotate
            if not a.physicalModeName:
                continue
            self._annotate(ctx, a)
