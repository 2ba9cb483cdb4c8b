import html
import pydot
from typing import Dict, Optional, Union

from hwtArchLink.annotation.annotationIndex import PbTypeAnnotationIndex
from hwtArchLink.link.archLinkPass import ArchLinkAnalysisPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.graph import PbTypeGraph
from hwtArchLink.pbType.pbType import PbType, PbMode, PB_PORT_DIRECTION
from hwtArchLink.platform.fileUtils import OutputStreamGetter

COLOR_PRIMITIVE = "plum"
COLOR_PHYSICAL_MODE = "LightGreen"
COLOR_PHYSICAL_PB_TYPE_EDGE = "red"
COLOR_NON_PHYSICAL = "gray"


class PbTypeGraphToGraphviz():
    """
    Generate a Graphviz (dot) diagram of the pb_type graph,
    if annotation index is specified physical modes are highlighted and operating pb_types are connected to its physical pb_types.
    """
    PORT_DIRECTION_MARK = {
        PB_PORT_DIRECTION.IN: "&gt;",
        PB_PORT_DIRECTION.OUT: "&lt;",
        PB_PORT_DIRECTION.CLOCK: "clk",
    }

    def __init__(self, name: str, index: Optional[PbTypeAnnotationIndex], showPhysicalPbTypes: bool):
        self.name = name
        self.graph = pydot.Dot(f'"{name}"')
        self.index = index
        self.showPhysicalPbTypes = showPhysicalPbTypes
        self.obj_to_node: Dict[Union[PbType, PbMode], pydot.Node] = {}

    def _node_from_PbType(self, t: PbType, isPhysical: bool) -> pydot.Node:
        g = self.graph
        node = pydot.Node(f"t{t._id:d}", shape="plaintext")
        self.obj_to_node[t] = node
        if t.isPrimitive():
            bgcolor = COLOR_PRIMITIVE
            header = f"{html.escape(t.name):s} ({html.escape(t.blifModel):s})"
        else:
            bgcolor = "white"
            header = html.escape(t.name)

        fontColor = "black" if isPhysical else COLOR_NON_PHYSICAL
        rows = [f'    <tr><td bgcolor="{bgcolor:s}"><font color="{fontColor:s}">{header:s}</font></td></tr>']
        for p in t.ports:
            rows.append(f'    <tr><td port="p{p._id:d}">{self.PORT_DIRECTION_MARK[p.direction]:s} {html.escape(p.name):s}[{p.width:d}]</td></tr>')
        bodyStr = "\n".join(rows)
        node.set("label", f'<<table border="0" cellborder="1" cellspacing="0">\n{bodyStr:s}\n</table>>')
        g.add_node(node)
        return node

    def _construct(self, t: PbType, isPhysical: bool):
        g = self.graph
        index = self.index
        tNode = self._node_from_PbType(t, isPhysical)
        physicalMode = None if index is None else index.physicalMode(t)
        for m in t.modes:
            mNode = pydot.Node(f"t{t._id:d}_m{len(self.obj_to_node):d}", label=f'"{m.name:s}"', shape="ellipse")
            self.obj_to_node[m] = mNode
            if m is physicalMode:
                mNode.set("style", "filled")
                mNode.set("fillcolor", COLOR_PHYSICAL_MODE)
            elif index is not None:
                mNode.set("fontcolor", COLOR_NON_PHYSICAL)
            g.add_node(mNode)
            g.add_edge(pydot.Edge(tNode.get_name(), mNode.get_name()))
            childIsPhysical = isPhysical and (index is None or m is physicalMode)
            for c in m.children:
                self._construct(c, childIsPhysical)
                g.add_edge(pydot.Edge(mNode.get_name(), self.obj_to_node[c].get_name()))

    def construct(self, graph: PbTypeGraph):
        for r in graph.roots:
            self._construct(r, True)

        index = self.index
        if index is not None and self.showPhysicalPbTypes:
            for op, phy in index.iterPhysicalPbTypes():
                e = pydot.Edge(self.obj_to_node[op].get_name(), self.obj_to_node[phy].get_name(),
                               style="dashed", color=COLOR_PHYSICAL_PB_TYPE_EDGE, constraint="false")
                self.graph.add_edge(e)
            for opPort, phyPort, r in index.iterPhysicalPbPorts():
                e = pydot.Edge(f"{self.obj_to_node[opPort.parent].get_name():s}:p{opPort._id:d}",
                               f"{self.obj_to_node[phyPort.parent].get_name():s}:p{phyPort._id:d}",
                               style="dotted", color=COLOR_PHYSICAL_PB_TYPE_EDGE, constraint="false",
                               label=f'"[{r.msb:d}:{r.lsb:d}]"')
                self.graph.add_edge(e)

    def dumps(self):
        return self.graph.to_string()


class ArchLinkAnalysisPassDumpPbTypeGraphDot(ArchLinkAnalysisPass):
    """
    Dump pb_type graph in graphviz dot format

    :ivar useIndex: if True the annotations from the index are rendered
    :see: :class:`~.PbTypeGraphToGraphviz`
    """

    def __init__(self, outStreamGetter: OutputStreamGetter, useIndex: bool=True, showPhysicalPbTypes: bool=True):
        self.outStreamGetter = outStreamGetter
        self.useIndex = useIndex
        self.showPhysicalPbTypes = showPhysicalPbTypes

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        name = ctx.label
        out, doClose = self.outStreamGetter(name)
        try:
            toGraphviz = PbTypeGraphToGraphviz(name, ctx.index if self.useIndex else None, self.showPhysicalPbTypes)
            toGraphviz.construct(ctx.graph)
            out.write(toGraphviz.dumps())
        finally:
            if doClose:
                out.close()
