from typing import Optional, Sequence

from hwtArchLink.annotation.pbTypeAnnotation import PbTypeAnnotation
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.graph import PbTypeGraph
from hwtArchLink.platform.platform import DefaultArchLinkPlatform


def linkArch(graph: PbTypeGraph,
             annotations: Sequence[PbTypeAnnotation],
             platform: Optional[DefaultArchLinkPlatform]=None) -> ArchLinkCtx:
    """
    Link architecture annotations to pb_type graph:

    * physical mode of each pb_type (explicit and then implicit)
    * check of physical modes (errors are only reported)
    * physical pb_type (and ports) of each operating pb_type

    :raise UnresolvedPbTypePathError: if an explicit physical mode annotation can not be resolved
    :return: the context with annotation index (ctx.index) and all reported errors (ctx.errors)
    """
    if platform is None:
        platform = DefaultArchLinkPlatform()
    ctx = ArchLinkCtx(graph, annotations, platform=platform)
    platform.runArchLinkPasses(ctx)
    return ctx
