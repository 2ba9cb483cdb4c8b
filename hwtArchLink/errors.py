from typing import Sequence


class ArchLinkError(Exception):
    """
    Base class for errors raised while linking architecture annotations to pb_type graph
    """
    pass


class UnresolvedPbTypePathError(ArchLinkError):
    """
    Exception raised when a pb_type or its mode specified by annotation can not be found in pb_type graph

    :ivar typeNames: names of pb_types on path from the root pb_type
    :ivar modeNames: names of modes taken on the path
    """

    def __init__(self, msg: str, typeNames: Sequence[str]=(), modeNames: Sequence[str]=()):
        super().__init__(msg)
        self.typeNames = tuple(typeNames)
        self.modeNames = tuple(modeNames)


class PbTypeAnnotationConflictError(ArchLinkError):
    """
    Exception raised when an already annotated object should be annotated with a different value
    """
    pass
