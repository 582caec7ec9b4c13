"""Type annotation utility functions.

This module provides helper functions for working with Python type annotations,
including utilities for checking union types, reading the markers attached to an
annotation with ``typing.Annotated`` and deciding whether a runtime value is accepted
by an annotation.
"""
import inspect
import logging
from types import UnionType, NoneType
from typing import (
    Annotated,
    Any,
    ClassVar,
    Final,
    ForwardRef,
    Literal,
    NewType,
    TypeAliasType,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

logger = logging.getLogger(__name__)

type Annotation = Any

# Errors raised while evaluating stringified annotations.
_EVALUATION_ERRORS = (NameError, AttributeError, SyntaxError, TypeError)


def is_union(annotation: Annotation) -> bool:
    """Check if an annotation is a union. A union is a Union or UnionType type.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is a union.
    """
    o = get_origin(annotation) or annotation
    return o in (Union, UnionType)


def is_optional(annotation: Annotation) -> bool:
    """Check if an annotation is an optional. An optional is a Union with NoneType.

    Args:
        annotation (Any): The annotation to check.

    Returns:
        bool: Whether the annotation is an optional.
    """
    return is_union(annotation) and NoneType in get_args(annotation)


def crack_annotation(annotation: Annotation) -> Annotation:
    """Remove the ClassVar and Final wrappers around an annotation.

    Examples:
        >>> crack_annotation(ClassVar[Final[int]])
        <class 'int'>
    """
    while get_origin(annotation) in (ClassVar, Final) and get_args(annotation):
        annotation = get_args(annotation)[0]
    return annotation


def strip_annotated(annotation: Annotation) -> Annotation:
    """Remove the Annotated metadata and the ClassVar and Final wrappers around an annotation.

    Args:
        annotation (Any): The annotation to strip.

    Returns:
        Any: The bare annotation.
    """
    annotation = crack_annotation(annotation)
    if get_origin(annotation) is Annotated:
        annotation = crack_annotation(get_args(annotation)[0])
    return annotation


def annotation_markers(annotation: Annotation) -> tuple[Any, ...]:
    """Get the markers attached to an annotation with typing.Annotated.

    Args:
        annotation (Any): The annotation to read.

    Returns:
        tuple[Any, ...]: The metadata of the annotation, empty if it is not Annotated.
    """
    annotation = crack_annotation(annotation)
    if get_origin(annotation) is Annotated:
        return tuple(annotation.__metadata__)
    return ()


def own_annotations(obj: Any) -> dict[str, Annotation]:
    """Get the annotations declared by a class or a function, without the inherited ones.

    Stringified annotations are evaluated. When one of them cannot be evaluated, all the
    annotations are returned unevaluated.

    Args:
        obj (Any): A class, a function or a module.

    Returns:
        dict[str, Any]: The annotations by name.
    """
    try:
        return inspect.get_annotations(obj, eval_str=True)
    except _EVALUATION_ERRORS as e:
        logger.debug("Could not evaluate the annotations of %r: %s", obj, e)
    return dict(inspect.get_annotations(obj))


def _name_in_mro(name: str, value: Any) -> bool:
    return any(name in (c.__name__, c.__qualname__) for c in type(value).__mro__)


def accepts_value(annotation: Annotation, value: Any) -> bool:
    """Check whether a parameter annotated with annotation accepts the runtime type of value.

    The value is accepted when its type is the annotated class or a subclass (or a registered
    implementer) of it. Parameterised generics are decided by their origin only, the content of
    containers is never inspected. None is only accepted by annotations admitting None.

    Args:
        annotation (Any): The parameter annotation. inspect.Parameter.empty means unannotated.
        value (Any): The argument value.

    Returns:
        bool: Whether the value can be passed for the annotated parameter.
    """
    annotation = strip_annotated(annotation)
    if annotation is Any or annotation is object or annotation is inspect.Parameter.empty:
        return True
    if annotation is None or annotation is NoneType:
        return value is None
    if is_union(annotation):
        return any(accepts_value(a, value) for a in get_args(annotation))
    if isinstance(annotation, str):
        return _name_in_mro(annotation, value)
    if isinstance(annotation, ForwardRef):
        return _name_in_mro(annotation.__forward_arg__, value)
    if isinstance(annotation, TypeAliasType):
        return accepts_value(annotation.__value__, value)
    if isinstance(annotation, NewType):
        return accepts_value(annotation.__supertype__, value)
    if isinstance(annotation, TypeVar):
        if annotation.__bound__ is not None:
            return accepts_value(annotation.__bound__, value)
        if annotation.__constraints__:
            return any(accepts_value(c, value) for c in annotation.__constraints__)
        return True

    origin = get_origin(annotation)
    if origin is Literal:
        return value in get_args(annotation)
    if origin is not None:
        annotation = origin
    if not isinstance(annotation, type):
        return False
    try:
        return issubclass(type(value), annotation)
    except TypeError:
        # Protocols that are not runtime checkable refuse issubclass.
        return False
