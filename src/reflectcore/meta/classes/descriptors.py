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
Created: 2026-10-12
Description: Descriptors of the members declared by a type, and the TypeDescriptor protocol
            through which the inspector queries a type. Any object following the protocol can
            be inspected, not only Python classes.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from ..typing.utilities import Annotation, accepts_value


class MethodKind(Enum):
    """How a declared method binds."""

    INSTANCE = "instance"
    CLASS = "class"
    STATIC = "static"


class ConstructorKind(Enum):
    """How a declared constructor creates its instance.

    INITIALIZER: the type is called, running __new__ and __init__.
    FACTORY: a class method returning a new instance of the type is called.
    """

    INITIALIZER = "initializer"
    FACTORY = "factory"


@dataclass(frozen=True)
class FieldDescriptor:
    """A field declared by a type."""

    name: str
    annotation: Annotation
    markers: tuple[Any, ...] = ()

    def has_marker(self, marker: Any) -> bool:
        """Check whether the field carries the marker.

        A marker matches an attached marker that is the marker itself, equal to it, or an
        instance of it when the marker is a class.

        Args:
            marker (Any): The marker to look for, a class or an instance.

        Returns:
            bool: Whether the marker is attached to the field.
        """
        for m in self.markers:
            if m is marker or m == marker:
                return True
            if isinstance(marker, type) and isinstance(m, marker):
                return True
        return False


@dataclass(frozen=True)
class MethodDescriptor:
    """A method declared by a type."""

    name: str
    kind: MethodKind = MethodKind.INSTANCE


@dataclass(frozen=True)
class ConstructorDescriptor:
    """A constructor declared by a type.

    Attributes:
        name (str): Name of the constructor, __init__ for initializers.
        parameter_types (tuple[Any, ...]): Annotations of the positional parameters, in order.
        kind (ConstructorKind): How the constructor is invoked.
        public (bool): Whether the constructor can be invoked through the public interface of
            the type.
        defaults (int): Number of trailing parameters having a default value.
        target (Callable | None): The underlying callable, if any.
    """

    name: str
    parameter_types: tuple[Annotation, ...]
    kind: ConstructorKind = ConstructorKind.INITIALIZER
    public: bool = True
    defaults: int = 0
    target: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    @property
    def parameter_count(self) -> int:
        """Number of positional parameters."""
        return len(self.parameter_types)

    @property
    def required_count(self) -> int:
        """Number of positional parameters without a default value."""
        return self.parameter_count - self.defaults

    def accepts_count(self, count: int, *, honor_defaults: bool = False) -> bool:
        """Check whether the constructor can be called with count positional arguments.

        Args:
            count (int): Number of arguments.
            honor_defaults (bool): Whether parameters with a default value may be omitted.

        Returns:
            bool: Whether the count matches.
        """
        if honor_defaults:
            return self.required_count <= count <= self.parameter_count
        return count == self.parameter_count

    def accepts(self, args: Sequence[Any]) -> bool:
        """Check pairwise that each parameter accepts the runtime type of its argument.

        Only the first len(args) parameters are checked.
        """
        return all(accepts_value(p, a) for p, a in zip(self.parameter_types, args))

    def __str__(self) -> str:
        params = ", ".join(_annotation_name(p) for p in self.parameter_types)
        return f"{self.name}({params})"


def _annotation_name(annotation: Annotation) -> str:
    if isinstance(annotation, type):
        return annotation.__qualname__
    return str(annotation)


class TypeDescriptor[T](Protocol):
    """Capability to query the members a type declares and to construct it.

    Only members declared directly by the type are reported, never inherited ones.
    """

    @property
    def type(self) -> type[T]:
        """The described type."""
        ...

    def declared_fields(self) -> Iterable[FieldDescriptor]:
        """Fields declared directly by the type."""
        ...

    def declared_methods(self) -> Iterable[MethodDescriptor]:
        """Methods declared directly by the type. Constructors are not methods."""
        ...

    def interfaces(self) -> Iterable["TypeDescriptor[Any]"]:
        """Descriptors of the interfaces the type directly implements."""
        ...

    def declared_constructors(self) -> Iterable[ConstructorDescriptor]:
        """Constructors declared by the type, in declaration order."""
        ...

    def construct(self, constructor: ConstructorDescriptor, args: Sequence[Any]) -> T:
        """Invoke a constructor of the type with privileges, whatever its accessibility.

        Args:
            constructor (ConstructorDescriptor): One of the declared constructors.
            args (Sequence[Any]): The positional arguments.

        Returns:
            T: The new instance.
        """
        ...
