from typing import Iterable, Optional, Sequence

from hwtArchLink.pbType.pbType import PbType


def tryFindPbTypeWithGivenPath(top: PbType,
                               typeNames: Sequence[str],
                               modeNames: Sequence[str]) -> Optional[PbType]:
    """
    Walk the pb_type tree from top pb_type and find the pb_type specified by the path.

    :param typeNames: names of pb_types on the path, the first one is the name of the top pb_type
    :param modeNames: names of modes taken on each level of the path (one less than typeNames)
    :return: found pb_type or None if any name on the path does not match
    :note: there is no backtracking, the mode names make the path unambiguous
    """
    assert len(typeNames) == len(modeNames) + 1, ("Each parent pb_type requires a mode name", typeNames, modeNames)

    if len(typeNames) == 1:
        if typeNames[0] == top.name:
            return top
        return None

    cur = top
    for i, modeName in enumerate(modeNames):
        if typeNames[i] != cur.name:
            return None

        m = cur.findMode(modeName)
        if m is None:
            return None

        cur = m.findChild(typeNames[i + 1])
        if cur is None:
            return None

    return cur


def findPbTypeInRoots(roots: Iterable[PbType],
                      typeNames: Sequence[str],
                      modeNames: Sequence[str]) -> Optional[PbType]:
    """
    :return: pb_type resolved from the first root where the path matches
    """
    for r in roots:
        t = tryFindPbTypeWithGivenPath(r, typeNames, modeNames)
        if t is not None:
            return t
    return None

