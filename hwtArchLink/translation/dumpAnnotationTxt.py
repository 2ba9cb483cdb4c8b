from io import StringIO

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.link.archLinkPass import ArchLinkAnalysisPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.platform.fileUtils import OutputStreamGetter


class ArchLinkAnalysisPassDumpAnnotationTxt(ArchLinkAnalysisPass):
    """
    Dump the content of :class:`hwtArchLink.annotation.annotationIndex.PbTypeAnnotationIndex` as a text,
    one line for each entry.
    """

    def __init__(self, outStreamGetter: OutputStreamGetter):
        self.outStreamGetter = outStreamGetter

    @staticmethod
    def _printIndex(index: PbTypeAnnotationIndex, out: StringIO):
        # :note: sort is to improve readability
        out.write("physical modes:\n")
        for t, m in sorted(index.iterPhysicalModes(), key=lambda x: x[0]._id):
            out.write(f"  {t.getHierarchyName():s} -> {m.name:s}\n")

        out.write("physical pb_types:\n")
        for op, phy in sorted(index.iterPhysicalPbTypes(), key=lambda x: x[0]._id):
            out.write(f"  {op.getHierarchyName():s} -> {phy.getHierarchyName():s}\n")

        out.write("physical pb_type ports:\n")
        for op, phy, r in sorted(index.iterPhysicalPbPorts(), key=lambda x: x[0]._id):
            out.write(f"  {op.parent.getHierarchyName():s}.{op.name:s} -> "
                      f"{phy.parent.getHierarchyName():s}.{phy.name:s}[{r.msb:d}:{r.lsb:d}]\n")

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        out, doClose = self.outStreamGetter(ctx.label)
        try:
            self._printIndex(ctx.index, out)
        finally:
            if doClose:
                out.close()
