from hwtArchLink.link.context import ArchLinkCtx


class ArchLinkPass():
    """
    A base class for passes which are adding annotations to :class:`hwtArchLink.annotation.annotationIndex.PbTypeAnnotationIndex`
    """

    def runOnArchLinkCtx(self, ctx: ArchLinkCtx):
        log = ctx._dbgLogPassExec
        if log is not None:
            log.write(f"Running pass: {self.__class__.__name__} on {ctx}\n")
        with ctx.tracer.scoped(self.__class__):
            return self.runOnArchLinkCtxImpl(ctx)

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        raise NotImplementedError("Should be implemented in child class", self)


class ArchLinkAnalysisPass(ArchLinkPass):
    """
    A base class for passes which are only inspecting the graph and annotations and they do not modify anything
    """

    def runOnArchLinkCtx(self, ctx: ArchLinkCtx):
        log = ctx._dbgLogPassExec
        if log is not None:
            log.write(f"Running analysis: {self.__class__.__name__} on {ctx}\n")
        with ctx.tracer.scoped(self.__class__):
            return self.runOnArchLinkCtxImpl(ctx)
