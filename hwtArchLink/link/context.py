from io import StringIO
from typing import List, Optional, Sequence

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation
from hwtArchLink.debugTracer import DebugTracer
from hwtArchLink.pbType.graph import PbTypeGraph


class ArchLinkCtx():
    """
    A context of linking of architecture annotations to pb_type graph.

    :ivar graph: pb_type graph (read only for all passes)
    :ivar annotations: annotation records (read only for all passes)
    :ivar index: resolved annotations, the only object modified by passes
    :ivar platform: platform with configuration of this run
    :ivar tracer: log of actions of passes
    :ivar errors: messages of all non fatal errors found during linking
    :ivar physicalModeCheck: the result of physical mode check if it was executed
    """

    def __init__(self, graph: PbTypeGraph,
                 annotations: Sequence[PbTypeAnnotation],
                 platform: Optional["DefaultArchLinkPlatform"]=None,
                 index: Optional[PbTypeAnnotationIndex]=None):
        self.graph = graph
        self.annotations = tuple(annotations)
        self.index = index if index is not None else PbTypeAnnotationIndex()
        self.platform = platform
        self.errors: List[str] = []
        self.physicalModeCheck: Optional["ArchLinkAnalysisPassPhysicalModeCheck"] = None
        self._dbgLogPassExec: Optional[StringIO] = None
        if platform is not None:
            self.tracer = DebugTracer(platform.logStream)
            self._dbgLogPassExec = platform.getPassManagerDebugLogFile()
        else:
            self.tracer = DebugTracer(None)

    @property
    def label(self) -> str:
        return self.graph.label

    def iterRoots(self):
        return self.graph.iterRoots()

    def __repr__(self):
        return f"<{self.__class__.__name__:s} {self.label:s}>"
