from pathlib import Path
from typing import Tuple, Type, Optional, Union, Set

from hwtArchLink.platform.fileUtils import outputFileGetter
from hwtArchLink.translation.dumpAnnotationTxt import ArchLinkAnalysisPassDumpAnnotationTxt
from hwtArchLink.translation.dumpPbTypeGraphDot import ArchLinkAnalysisPassDumpPbTypeGraphDot

DebugId = Tuple[Type, str]


class ArchLinkDebugBundle():
    """
    :note: if the number N in DBG_N_* is the same it means that these debug options are working with the same input
    """
    DEFAULT_DEBUG_DIR = "tmp"

    DBG_0_0_pbTypeGraph = (ArchLinkAnalysisPassDumpPbTypeGraphDot, "00.00.pbTypeGraph.dot")  # input graph without annotations
    DBG_1_0_physicalModes = (ArchLinkAnalysisPassDumpPbTypeGraphDot, "01.00.physicalModes.dot")  # graph after physical mode annotation
    DBG_2_0_physicalPbTypes = (ArchLinkAnalysisPassDumpPbTypeGraphDot, "02.00.physicalPbTypes.dot")  # graph with operating to physical pb_type pairs
    DBG_2_0_annotationTxt = (ArchLinkAnalysisPassDumpAnnotationTxt, "02.00.annotation.txt")  # final annotation index

    ALL = None
    NONE = {}
    DEFAULT = NONE

    # bundles of debug features to debug problems in a specific phase
    DBG_PHYSICAL_MODE = {
        DBG_0_0_pbTypeGraph,
        DBG_1_0_physicalModes,
    }
    DBG_PHYSICAL_PB_TYPE = {
        DBG_2_0_physicalPbTypes,
        DBG_2_0_annotationTxt,
    }

    def __init__(self, debugDir:Optional[Union[str, Path]], filter_: Optional[Set[DebugId]]):
        """
        :attention: if debugDir is None no debug option will be enabled
        """
        self.dir = None if debugDir is None else Path(debugDir)
        self.filter = filter_
        self.firstRun = True
        self.runConsistencyChecks = True

    def isActivated(self, item: DebugId):
        return self.filter is None or item in self.filter

    def runDebugIfEnabled(self, id_: DebugId, ctx: "ArchLinkCtx", constructorKwargs: Optional[dict]=None):
        """
        Run the debug pass specified by id_ on ctx if the output for this id is enabled,
        the output file is stored in debugDir/<label of ctx>/<file name from id_>
        """
        debugDir = self.dir
        if debugDir is not None and self.isActivated(id_):
            if self.firstRun:
                if not debugDir.exists():
                    debugDir.mkdir(parents=True)
                self.firstRun = False

            cls, fileName = id_
            if constructorKwargs is None:
                constructorKwargs = {}
            obj = cls(outputFileGetter(debugDir, fileName), **constructorKwargs)
            obj.runOnArchLinkCtx(ctx)
