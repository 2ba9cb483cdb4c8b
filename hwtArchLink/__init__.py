"""
hwtArchLink
===========

hwtArchLink is a library which links the annotations of an FPGA architecture to the graph of programmable block types (pb_types).

* :mod:`hwtArchLink.pbType`: the pb_type graph, each pb_type has modes (alternative internal structures)
  with child pb_types, primitive pb_types are leaves. The graph is built by an external architecture reader.

* :mod:`hwtArchLink.annotation`: annotation records which specify the physical mode of multi-mode pb_types
  and pairs of operating and physical pb_types, and the index of resolved annotations.

* :mod:`hwtArchLink.link`: passes which resolve the annotations against the graph, infer the physical modes
  which are not specified explicitly, check the consistency of the result and pair the ports of operating and physical pb_types.

* :mod:`hwtArchLink.platform`: configuration of the linking, log and debug outputs (:mod:`hwtArchLink.translation`).
"""
