from io import StringIO
from pathlib import Path
import sys
from time import perf_counter
from typing import Optional, Union, Set

from hwtArchLink.link.consistencyCheck import ArchLinkAnalysisPassConsistencyCheck
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.link.physicalModeCheck import ArchLinkAnalysisPassPhysicalModeCheck
from hwtArchLink.link.physicalModeExplicit import ArchLinkPassPhysicalModeExplicitAnnotation
from hwtArchLink.link.physicalModeImplicit import ArchLinkPassPhysicalModeImplicitAnnotation
from hwtArchLink.link.physicalPbType import ArchLinkPassPhysicalPbTypeAnnotation
from hwtArchLink.platform.debugBundle import ArchLinkDebugBundle, DebugId


class DefaultArchLinkPlatform():
    """
    A container of configuration of architecture linking and of the sequence of passes.

    :ivar logStream: stream where messages about resolved annotations and errors are written, None to disable
    :ivar _debugPassManager: if True the name of each executed pass is written to stderr
    """

    def __init__(self, debugDir:Optional[Union[str, Path]]=None,
                 debugFilter: Optional[Set[DebugId]]=ArchLinkDebugBundle.DEFAULT,
                 logStream: Optional[StringIO]=sys.stdout,
                 debugPassManager: bool=False):
        self._debug = ArchLinkDebugBundle(debugDir, debugFilter)
        self.logStream = logStream
        self._debugPassManager = debugPassManager

    def getPassManagerDebugLogFile(self) -> Optional[StringIO]:
        if self._debugPassManager:
            return sys.stderr
        return None

    def runPhysicalModePasses(self, ctx: ArchLinkCtx):
        """
        Annotate physical mode of each pb_type in the graph and check the result.

        :note: the check is only reported, errors do not stop the linking
        """
        DBG = self._debug.runDebugIfEnabled
        ArchLinkPassPhysicalModeExplicitAnnotation().runOnArchLinkCtx(ctx)
        ArchLinkPassPhysicalModeImplicitAnnotation().runOnArchLinkCtx(ctx)
        ArchLinkAnalysisPassPhysicalModeCheck().runOnArchLinkCtx(ctx)
        DBG(ArchLinkDebugBundle.DBG_1_0_physicalModes, ctx, constructorKwargs=dict(showPhysicalPbTypes=False))

    def runPhysicalPbTypePasses(self, ctx: ArchLinkCtx):
        DBG = self._debug.runDebugIfEnabled
        ArchLinkPassPhysicalPbTypeAnnotation().runOnArchLinkCtx(ctx)
        DBG(ArchLinkDebugBundle.DBG_2_0_physicalPbTypes, ctx)
        DBG(ArchLinkDebugBundle.DBG_2_0_annotationTxt, ctx)

    def runArchLinkPasses(self, ctx: ArchLinkCtx):
        tracer = ctx.tracer
        title = "Link architecture annotations to pb_type graph"
        with tracer.scoped(title):
            tracer.log(f"{title:s} of '{ctx.label:s}'")
            start = perf_counter()
            if self._debug.runConsistencyChecks:
                ArchLinkAnalysisPassConsistencyCheck().runOnArchLinkCtx(ctx)

            self._debug.runDebugIfEnabled(ArchLinkDebugBundle.DBG_0_0_pbTypeGraph, ctx,
                                          constructorKwargs=dict(useIndex=False))
            # annotate physical modes first because pairing of pb_types is defined for the physical pb_types
            self.runPhysicalModePasses(ctx)
            self.runPhysicalPbTypePasses(ctx)
            tracer.log(f"{title:s} took {perf_counter() - start:.3f} seconds ({len(ctx.errors):d} errors)")
