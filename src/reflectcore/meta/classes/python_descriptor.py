"""
MIT License

Copyright (c) 2026 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-13
Description: TypeDescriptor implementation for Python classes, built on inspect and typing.
            - Fields are the annotations declared by the class body. Markers are attached
              with typing.Annotated: `id: Annotated[int, Tracked]`.
            - Methods are the routines held by the class namespace.
            - Interfaces are the direct bases that are protocols or abstract classes, and the
              interfaces declared with Implement.
            - Constructors are __init__ (or __new__), one per typing.overload signature, and
              the class methods returning an instance of the class.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
import logging
from collections.abc import Iterator, Sequence
from types import ClassMethodDescriptorType
from typing import Any, Callable, Self, Union, get_args, get_overloads, is_protocol

from ..typing.utilities import (
    Annotation,
    annotation_markers,
    is_union,
    own_annotations,
    strip_annotated,
)
from .descriptors import (
    ConstructorDescriptor,
    ConstructorKind,
    FieldDescriptor,
    MethodDescriptor,
    MethodKind,
)
from .implements import declared_implementations

logger = logging.getLogger(__name__)

_INITIALIZER_NAMES = ("__init__", "__new__")
_MACHINERY_MODULES = frozenset({"typing", "abc", "_abc"})
_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _unwrap(member: Any) -> Any:
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def _is_declared_routine(member: Any) -> bool:
    """Check whether member, taken from a class namespace, is a routine of that class.

    Routines that typing and abc install in the namespaces of protocols and abstract
    classes (e.g. the __subclasshook__ added by Protocol) are not.
    """
    func = _unwrap(member)
    if not inspect.isroutine(func):
        return False
    return getattr(func, "__module__", None) not in _MACHINERY_MODULES


def _method_kind(member: Any) -> MethodKind:
    if isinstance(member, staticmethod):
        return MethodKind.STATIC
    if isinstance(member, (classmethod, ClassMethodDescriptorType)):
        return MethodKind.CLASS
    return MethodKind.INSTANCE


def _signature(obj: Any) -> inspect.Signature:
    """Signature of obj with evaluated annotations when they can be evaluated.

    Raises:
        ValueError, TypeError: When obj has no signature.
    """
    try:
        return inspect.signature(obj, eval_str=True)
    except (NameError, AttributeError, SyntaxError, TypeError) as e:
        logger.debug("Could not evaluate the annotations of %r: %s", obj, e)
    return inspect.signature(obj)


def is_interface(cls: Any) -> bool:
    """Check whether cls is an interface: a protocol or an abstract class.

    Args:
        cls (Any): The object to check.

    Returns:
        bool: Whether cls is an interface.
    """
    return isinstance(cls, type) and (is_protocol(cls) or inspect.isabstract(cls))


class PythonTypeDescriptor[T]:
    """Describe a Python class through reflection.

    Args:
        cls (type[T]): The class to describe.
        include_factories (bool): Whether the class methods returning an instance of the class
            are reported as constructors.
    """

    def __init__(self, cls: type[T], /, *, include_factories: bool = True) -> None:
        if not isinstance(cls, type):
            raise TypeError(f"Expected a class, got {cls!r}.")
        self._cls = cls
        self._include_factories = include_factories

    @property
    def type(self) -> type[T]:
        return self._cls

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cls.__qualname__})"

    # Fields

    def declared_fields(self) -> Iterator[FieldDescriptor]:
        for name, annotation in own_annotations(self._cls).items():
            yield FieldDescriptor(
                name, strip_annotated(annotation), annotation_markers(annotation)
            )

    # Methods

    def declared_methods(self) -> Iterator[MethodDescriptor]:
        for name, member in vars(self._cls).items():
            if name in _INITIALIZER_NAMES or not _is_declared_routine(member):
                continue
            yield MethodDescriptor(name, _method_kind(member))

    def interfaces(self) -> Iterator["PythonTypeDescriptor[Any]"]:
        implementations = declared_implementations(self._cls)
        seen: list[type] = []
        for base in (*self._cls.__bases__, *implementations):
            if base in seen or not (base in implementations or is_interface(base)):
                continue
            seen.append(base)
            yield PythonTypeDescriptor(base, include_factories=self._include_factories)

    # Constructors

    def declared_constructors(self) -> Iterator[ConstructorDescriptor]:
        namespace = vars(self._cls)
        initializer = next(
            (
                name
                for name in _INITIALIZER_NAMES
                if _is_declared_routine(namespace.get(name))
            ),
            None,
        )
        public_initializer = self._initializer_is_public()
        for name, member in namespace.items():
            if name == initializer:
                yield from self._variants(
                    name, _unwrap(member), ConstructorKind.INITIALIZER, public_initializer
                )
            elif (
                self._include_factories
                and isinstance(member, classmethod)
                and self._returns_instance(member.__func__)
            ):
                yield from self._variants(
                    name, member.__func__, ConstructorKind.FACTORY, not name.startswith("_")
                )
        if initializer is None:
            implicit = self._implicit_initializer()
            if implicit is not None:
                yield implicit

    def construct(self, constructor: ConstructorDescriptor, args: Sequence[Any]) -> T:
        """Invoke a constructor bypassing the gates of the class.

        Initializers run through type.__call__, skipping any metaclass __call__ override.
        Factories are called even if their name marks them private.
        """
        if constructor.kind is ConstructorKind.FACTORY:
            return getattr(self._cls, constructor.name)(*args)
        return type.__call__(self._cls, *args)

    def _initializer_is_public(self) -> bool:
        # A metaclass overriding __call__ gates the normal construction.
        return inspect.getattr_static(type(self._cls), "__call__") is type.__dict__["__call__"]

    def _returns_instance(self, func: Callable[..., Any]) -> bool:
        for f in (func, *get_overloads(func)):
            ret = strip_annotated(own_annotations(f).get("return"))
            if ret is Self or ret is self._cls:
                return True
            if isinstance(ret, str) and ret in (self._cls.__name__, self._cls.__qualname__, "Self"):
                return True
        return False

    def _variants(
        self, name: str, func: Callable[..., Any], kind: ConstructorKind, public: bool
    ) -> Iterator[ConstructorDescriptor]:
        """One constructor per overload of func, or func itself when not overloaded."""
        for variant in get_overloads(func) or [func]:
            try:
                signature = _signature(variant)
            except (ValueError, TypeError) as e:
                logger.debug("No signature for %s of %r: %s", name, self._cls, e)
                continue
            # Drop self or cls.
            parameters = list(signature.parameters.values())[1:]
            constructor = self._constructor(name, parameters, kind, public, variant)
            if constructor is not None:
                yield constructor

    def _implicit_initializer(self) -> ConstructorDescriptor | None:
        """Initializer of a class declaring neither __init__ nor __new__, from the signature
        type.__call__ honours."""
        public = self._initializer_is_public()
        try:
            parameters = self._inherited_parameters(public)
        except (ValueError, TypeError) as e:
            logger.debug("No call signature for %r: %s", self._cls, e)
            return None
        return self._constructor(
            "__init__", parameters, ConstructorKind.INITIALIZER, public, None
        )

    def _inherited_parameters(self, public: bool) -> list[inspect.Parameter]:
        """Parameters of the inherited __init__, or __new__ when only __new__ is overridden.

        The call signature of the class is used when the metaclass does not override
        __call__; otherwise it would be the signature of the metaclass __call__.
        """
        if public:
            return list(_signature(self._cls).parameters.values())
        for name in _INITIALIZER_NAMES:
            target = getattr(self._cls, name)
            if target is not getattr(object, name):
                # Drop self or cls.
                return list(_signature(target).parameters.values())[1:]
        return []

    def _constructor(
        self,
        name: str,
        parameters: list[inspect.Parameter],
        kind: ConstructorKind,
        public: bool,
        target: Callable[..., Any] | None,
    ) -> ConstructorDescriptor | None:
        if any(
            p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
            for p in parameters
        ):
            logger.debug(
                "Skipping %s of %r: required keyword-only parameters.", name, self._cls
            )
            return None
        positional = [p for p in parameters if p.kind in _POSITIONAL]
        return ConstructorDescriptor(
            name,
            tuple(self._resolve_self(p.annotation) for p in positional),
            kind,
            public,
            sum(1 for p in positional if p.default is not inspect.Parameter.empty),
            target,
        )

    def _resolve_self(self, annotation: Annotation) -> Annotation:
        if strip_annotated(annotation) is Self:
            return self._cls
        if is_union(annotation):
            return Union[tuple(self._resolve_self(a) for a in get_args(annotation))]
        return annotation
