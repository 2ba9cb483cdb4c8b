"""
In-memory model of the pb_type graph (programmable block types of the FPGA architecture).

The graph is built by an external architecture reader (e.g. from VPR architecture description)
using :class:`hwtArchLink.pbType.graph.PbTypeGraph` and methods of :class:`hwtArchLink.pbType.pbType.PbType`
and :class:`hwtArchLink.pbType.pbType.PbMode`. Once built the topology of the graph is not modified.
"""
