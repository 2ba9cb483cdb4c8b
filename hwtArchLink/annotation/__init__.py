"""
Architecture annotation records (:class:`hwtArchLink.annotation.pbTypeAnnotation.PbTypeAnnotation`)
parsed from the architecture description and the index of resolved annotations
(:class:`hwtArchLink.annotation.annotationIndex.PbTypeAnnotationIndex`) produced by :mod:`hwtArchLink.link`.
"""
