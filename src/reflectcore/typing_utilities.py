"""
Re-export utilities module for cleaner imports.

This allows: from reflectcore.typing_utilities import accepts_value
Instead of: from reflectcore.meta.typing.utilities import accepts_value
"""

from .meta.typing.utilities import (
    is_union,
    is_optional,
    crack_annotation,
    strip_annotated,
    annotation_markers,
    own_annotations,
    accepts_value,
)

__all__ = [
    "is_union",
    "is_optional",
    "crack_annotation",
    "strip_annotated",
    "annotation_markers",
    "own_annotations",
    "accepts_value",
]
