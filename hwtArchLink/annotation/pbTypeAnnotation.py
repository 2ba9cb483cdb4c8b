from typing import Dict, Optional, Sequence, Tuple, List

from hwtArchLink.basicPort import BasicPort

PbTypePath = Tuple[Tuple[str, ...], Tuple[str, ...]]


def formatPbTypePath(typeNames: Sequence[str], modeNames: Sequence[str]) -> str:
    """
    :return: string in format "clb[default].fle[physical].ff"
    """
    parts = [f"{t:s}[{m:s}]" for t, m in zip(typeNames, modeNames)]
    parts.extend(typeNames[len(modeNames):])
    return ".".join(parts)


class PbTypeAnnotation():
    """
    A record of the architecture annotation for a single pb_type, the record is immutable.

    There are two kinds of records:

    * physical pb_type annotation: only the physical pb_type is specified,
      the record is used to select the physical mode of the pb_type
    * operating pb_type annotation: both operating and physical pb_type are specified,
      the record pairs the operating pb_type with its physical pb_type and the record may also
      specify the physical mode of the operating pb_type

    :ivar physicalPbTypePorts: explicit mapping of operating pb_type port names
        to a ports (and bit ranges) of the physical pb_type
    """

    def __init__(self,
                 operatingPbTypeName: str="",
                 operatingParentPbTypeNames: Sequence[str]=(),
                 operatingParentModeNames: Sequence[str]=(),
                 physicalPbTypeName: str="",
                 physicalParentPbTypeNames: Sequence[str]=(),
                 physicalParentModeNames: Sequence[str]=(),
                 physicalModeName: str="",
                 physicalPbTypePorts: Optional[Dict[str, BasicPort]]=None):
        if len(operatingParentPbTypeNames) != len(operatingParentModeNames):
            raise ValueError("Each parent of operating pb_type requires a mode name",
                             operatingPbTypeName, operatingParentPbTypeNames, operatingParentModeNames)
        if len(physicalParentPbTypeNames) != len(physicalParentModeNames):
            raise ValueError("Each parent of physical pb_type requires a mode name",
                             physicalPbTypeName, physicalParentPbTypeNames, physicalParentModeNames)
        if operatingParentPbTypeNames and not operatingPbTypeName:
            raise ValueError("Operating pb_type path without the operating pb_type name",
                             operatingParentPbTypeNames, operatingParentModeNames)
        if operatingPbTypeName and not physicalPbTypeName:
            raise ValueError("Operating pb_type requires a physical pb_type to be paired with",
                             operatingParentPbTypeNames, operatingParentModeNames, operatingPbTypeName)
        self._operatingPbTypeName = operatingPbTypeName
        self._operatingParentPbTypeNames = tuple(operatingParentPbTypeNames)
        self._operatingParentModeNames = tuple(operatingParentModeNames)
        self._physicalPbTypeName = physicalPbTypeName
        self._physicalParentPbTypeNames = tuple(physicalParentPbTypeNames)
        self._physicalParentModeNames = tuple(physicalParentModeNames)
        self._physicalModeName = physicalModeName
        self._physicalPbTypePorts: Dict[str, BasicPort] = dict(physicalPbTypePorts) if physicalPbTypePorts else {}

    @staticmethod
    def parsePath(path: str) -> Tuple[List[str], List[str], str]:
        """
        Parse the hierarchy of pb_type in format "clb[default].fle[physical].ff"

        :return: tuple (parent pb_type names, parent mode names, pb_type name)
        """
        parentNames = []
        parentModes = []
        parts = path.split(".")
        for p in parts[:-1]:
            if not p.endswith("]") or "[" not in p:
                raise ValueError("Parent pb_type requires mode name in brackets", path, p)
            name, mode = p[:-1].split("[", 1)
            if not name or not mode:
                raise ValueError("Empty pb_type or mode name", path, p)
            parentNames.append(name)
            parentModes.append(mode)

        name = parts[-1]
        if not name or "[" in name:
            raise ValueError("Invalid pb_type name", path, name)
        return parentNames, parentModes, name

    @classmethod
    def physical(cls, path: str, physicalModeName: str="") -> "PbTypeAnnotation":
        """
        Shortcut for physical pb_type annotation, path in format of :meth:`~.parsePath`
        """
        names, modes, name = cls.parsePath(path)
        return cls(physicalPbTypeName=name,
                   physicalParentPbTypeNames=names,
                   physicalParentModeNames=modes,
                   physicalModeName=physicalModeName)

    @classmethod
    def operating(cls, operatingPath: str, physicalPath: str,
                  physicalPbTypePorts: Optional[Dict[str, BasicPort]]=None,
                  physicalModeName: str="") -> "PbTypeAnnotation":
        """
        Shortcut for operating pb_type annotation, paths in format of :meth:`~.parsePath`
        """
        opNames, opModes, opName = cls.parsePath(operatingPath)
        phyNames, phyModes, phyName = cls.parsePath(physicalPath)
        return cls(operatingPbTypeName=opName,
                   operatingParentPbTypeNames=opNames,
                   operatingParentModeNames=opModes,
                   physicalPbTypeName=phyName,
                   physicalParentPbTypeNames=phyNames,
                   physicalParentModeNames=phyModes,
                   physicalModeName=physicalModeName,
                   physicalPbTypePorts=physicalPbTypePorts)

    @property
    def operatingPbTypeName(self) -> str:
        return self._operatingPbTypeName

    @property
    def operatingParentPbTypeNames(self) -> Tuple[str, ...]:
        return self._operatingParentPbTypeNames

    @property
    def operatingParentModeNames(self) -> Tuple[str, ...]:
        return self._operatingParentModeNames

    @property
    def physicalPbTypeName(self) -> str:
        return self._physicalPbTypeName

    @property
    def physicalParentPbTypeNames(self) -> Tuple[str, ...]:
        return self._physicalParentPbTypeNames

    @property
    def physicalParentModeNames(self) -> Tuple[str, ...]:
        return self._physicalParentModeNames

    @property
    def physicalModeName(self) -> str:
        return self._physicalModeName

    def isOperatingPbType(self) -> bool:
        return bool(self._operatingPbTypeName) and bool(self._physicalPbTypeName)

    def isPhysicalPbType(self) -> bool:
        return not self._operatingPbTypeName and bool(self._physicalPbTypeName)

    def operatingPbTypePath(self) -> PbTypePath:
        """
        :return: tuple (pb_type names, mode names) for the path from root to the operating pb_type
        """
        return (self._operatingParentPbTypeNames + (self._operatingPbTypeName,),
                self._operatingParentModeNames)

    def physicalPbTypePath(self) -> PbTypePath:
        """
        :see: :meth:`~.operatingPbTypePath`
        """
        return (self._physicalParentPbTypeNames + (self._physicalPbTypeName,),
                self._physicalParentModeNames)

    def physicalPbTypePort(self, operatingPortName: str) -> Optional[BasicPort]:
        return self._physicalPbTypePorts.get(operatingPortName, None)

    def __repr__(self) -> str:
        if self.isOperatingPbType():
            body = f"{formatPbTypePath(*self.operatingPbTypePath()):s} -> {formatPbTypePath(*self.physicalPbTypePath()):s}"
        elif self.isPhysicalPbType():
            body = formatPbTypePath(*self.physicalPbTypePath())
        else:
            body = "without pb_type"

        if self._physicalModeName:
            body = f"{body:s} physicalMode={self._physicalModeName:s}"
        return f"<{self.__class__.__name__:s} {body:s}>"
