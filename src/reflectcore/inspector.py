"""
Re-export inspector module for cleaner imports.

This allows: from reflectcore.inspector import create_instance
Instead of: from reflectcore.meta.classes.inspector import create_instance
"""

from .meta.classes.inspector import (
    TypeInspector,
    get_annotated_fields,
    get_all_declared_methods,
    resolve_constructor,
    create_instance,
)
from .meta.classes.descriptors import (
    TypeDescriptor,
    FieldDescriptor,
    MethodDescriptor,
    MethodKind,
    ConstructorDescriptor,
    ConstructorKind,
)
from .meta.classes.python_descriptor import PythonTypeDescriptor, is_interface
from .meta.classes.implements import Implement, declared_implementations
from .meta.classes.errors import (
    InspectionError,
    NoMatchingConstructorError,
    ConstructionFailedError,
)

__all__ = [
    # Inspector
    "TypeInspector",
    "get_annotated_fields",
    "get_all_declared_methods",
    "resolve_constructor",
    "create_instance",
    # Descriptors
    "TypeDescriptor",
    "FieldDescriptor",
    "MethodDescriptor",
    "MethodKind",
    "ConstructorDescriptor",
    "ConstructorKind",
    "PythonTypeDescriptor",
    "is_interface",
    # Interfaces
    "Implement",
    "declared_implementations",
    # Errors
    "InspectionError",
    "NoMatchingConstructorError",
    "ConstructionFailedError",
]
