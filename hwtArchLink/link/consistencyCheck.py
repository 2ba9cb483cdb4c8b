from networkx.algorithms.components.strongly_connected import strongly_connected_components
from networkx.classes.digraph import DiGraph
from typing import Set

from hwtArchLink.link.archLinkPass import ArchLinkAnalysisPass
from hwtArchLink.link.context import ArchLinkCtx
from hwtArchLink.pbType.graph import PbTypeGraph
from hwtArchLink.pbType.pbType import PbType, PbMode


class ArchLinkAnalysisPassConsistencyCheck(ArchLinkAnalysisPass):
    """
    Check consistency of the pb_type graph before it is annotated.

    The annotation passes expect that the graph is a forest where names of siblings are unique,
    violations are reported as AssertionError.
    """

    @staticmethod
    def _buildHierarchyGraph(graph: PbTypeGraph) -> DiGraph:
        """
        Collect pb_types and modes to a DiGraph, an already seen object is not visited again
        so the collection terminates even if the pb_type graph is not a tree.
        """
        g = DiGraph()
        toSearch = list(graph.roots)
        seen: Set[PbType] = set()
        for r in toSearch:
            g.add_node(r)

        while toSearch:
            t = toSearch.pop()
            if t in seen:
                continue
            seen.add(t)
            for m in t.modes:
                g.add_edge(t, m)
                for c in m.children:
                    g.add_edge(m, c)
                    toSearch.append(c)
        return g

    @staticmethod
    def _checkTreeStructure(graph: PbTypeGraph):
        g = ArchLinkAnalysisPassConsistencyCheck._buildHierarchyGraph(graph)
        for scc in strongly_connected_components(g):
            if len(scc) > 1:
                raise AssertionError("pb_type hierarchy must be cycle free", sorted(repr(n) for n in scc))

        for n in g.nodes:
            if isinstance(n, PbType) and n.isRoot():
                assert n in graph.roots, ("pb_type without parent is not a root", n)

        for r in graph.roots:
            assert r.isRoot(), ("Root pb_type has a parent", r, r.parentMode)
            assert g.in_degree(r) == 0, ("Root pb_type is instantiated in some mode", r, list(g.predecessors(r)))

        for n in g.nodes:
            if isinstance(n, PbType) and not n.isRoot():
                assert g.in_degree(n) == 1, ("pb_type object is instantiated in multiple modes", n, list(g.predecessors(n)))

    @staticmethod
    def _checkPbType(t: PbType):
        assert t.name, ("pb_type without name", t)
        if t.isPrimitive():
            assert not t.modes, ("Primitive pb_type can not have modes", t, t.modes)

        modeNames = set()
        for m in t.modes:
            m: PbMode
            assert m.parent is t, ("Mode parent is not pb_type which has this mode", t, m, m.parent)
            assert m.name not in modeNames, ("Duplicit mode name", t, m)
            modeNames.add(m.name)

            childNames = set()
            for c in m.children:
                assert c.parentMode is m, ("Child pb_type parent is not the mode which contains it", m, c, c.parentMode)
                assert c.name not in childNames, ("Duplicit child pb_type name", m, c)
                childNames.add(c.name)

        portNames = set()
        for p in t.ports:
            assert p.parent is t, ("Port parent is not pb_type which has this port", t, p, p.parent)
            assert p.width > 0, ("Port width must be positive", p)
            assert p.name not in portNames, ("Duplicit port name", t, p)
            portNames.add(p.name)

    def runOnArchLinkCtxImpl(self, ctx: ArchLinkCtx):
        graph = ctx.graph
        self._checkTreeStructure(graph)
        rootNames = set()
        for r in graph.roots:
            assert r.name not in rootNames, ("Duplicit root pb_type name", r)
            rootNames.add(r.name)

        for t in graph.iterAllPbTypes():
            self._checkPbType(t)
