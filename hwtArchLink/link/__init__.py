"""
Passes which link architecture annotations (:mod:`hwtArchLink.annotation`) to pb_type graph (:mod:`hwtArchLink.pbType`).

* :mod:`hwtArchLink.link.physicalModeExplicit`, :mod:`hwtArchLink.link.physicalModeImplicit`:
  select the physical mode of every pb_type (explicitly from annotations, then by default mode rule)

* :mod:`hwtArchLink.link.physicalModeCheck`: verify that exactly the pb_types under physical modes have a physical mode

* :mod:`hwtArchLink.link.physicalPbType`: pair operating pb_types and their ports with physical pb_types

The passes are executed by :func:`hwtArchLink.link.linkArch.linkArch` in the order given by
:class:`hwtArchLink.platform.platform.DefaultArchLinkPlatform`.
"""
