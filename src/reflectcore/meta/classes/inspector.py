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
Created: 2026-10-14
Description: This module provides the TypeInspector. It finds the fields of a class carrying a
            marker, lists the names of the methods a class declares or gets from the
            interfaces it implements, and creates instances through the first declared
            constructor accepting the given arguments, private ones included.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from typing import Any, Callable

from .descriptors import ConstructorDescriptor, TypeDescriptor
from .errors import ConstructionFailedError, NoMatchingConstructorError
from .python_descriptor import PythonTypeDescriptor

logger = logging.getLogger(__name__)

type DescriptorFactory = Callable[[type], TypeDescriptor[Any]]


class TypeInspector:
    """Stateless inspector of types. Every call describes the type anew.

    Examples:
        >>> class Tracked: ...
        >>> class Point:
        ...     x: Annotated[int, Tracked]
        ...     y: int
        ...     def __init__(self, x: int, y: int):
        ...         self.x, self.y = x, y
        ...     @classmethod
        ...     def _origin(cls) -> Self:
        ...         return cls(0, 0)

        >>> inspector = TypeInspector()
        >>> inspector.get_annotated_fields(Point, Tracked)
        {'x'}
        >>> inspector.create_instance(Point)  # through the private _origin factory
        <Point object at ...>

    Args:
        descriptor_factory (Callable[[type], TypeDescriptor]): Creates the descriptor of an
            inspected type. Defaults to PythonTypeDescriptor.
        honor_defaults (bool): Whether a constructor matches a number of arguments between its
            required and total positional parameter counts. Exact count otherwise.
    """

    def __init__(
        self,
        descriptor_factory: DescriptorFactory = PythonTypeDescriptor,
        *,
        honor_defaults: bool = False,
    ) -> None:
        self._describe = descriptor_factory
        self._honor_defaults = honor_defaults

    def get_annotated_fields(self, cls: type, marker: Any) -> set[str]:
        """Find the fields declared directly by cls that carry the marker.

        Args:
            cls (type): The inspected type.
            marker (Any): The marker to look for.

        Returns:
            set[str]: The unique names of the marked fields. Empty when there is none.
        """
        return {
            f.name for f in self._describe(cls).declared_fields() if f.has_marker(marker)
        }

    def get_all_declared_methods(self, cls: type) -> set[str]:
        """Names of the methods declared directly by cls or by the interfaces it directly
        implements. Overloads collapse to a single name.

        Args:
            cls (type): The inspected type.

        Returns:
            set[str]: The unique method names. Empty when there is none.
        """
        descriptor = self._describe(cls)
        names = {m.name for m in descriptor.declared_methods()}
        for interface in descriptor.interfaces():
            names.update(m.name for m in interface.declared_methods())
        return names

    def resolve_constructor(self, cls: type, *args: Any) -> ConstructorDescriptor:
        """Find the first declared constructor of cls accepting args.

        Constructors are tried in declaration order; the first one with the right parameter
        count whose parameters accept the runtime types of the arguments wins.

        Raises:
            NoMatchingConstructorError: No declared constructor accepts the arguments.
        """
        return self._resolve(self._describe(cls), args)

    def create_instance[T](self, cls: type[T], *args: Any) -> T:
        """Create an instance of cls with the first declared constructor accepting args, even a
        private one.

        Args:
            cls (type[T]): The type to instantiate.
            *args (Any): The positional arguments of the constructor.

        Raises:
            NoMatchingConstructorError: No declared constructor accepts the arguments.
            ConstructionFailedError: The selected constructor raised.

        Returns:
            T: The new instance.
        """
        descriptor = self._describe(cls)
        constructor = self._resolve(descriptor, args)
        try:
            return descriptor.construct(constructor, args)
        except Exception as e:
            raise ConstructionFailedError(cls, constructor) from e

    def _resolve(
        self, descriptor: TypeDescriptor[Any], args: tuple[Any, ...]
    ) -> ConstructorDescriptor:
        for constructor in descriptor.declared_constructors():
            if constructor.accepts_count(
                len(args), honor_defaults=self._honor_defaults
            ) and constructor.accepts(args):
                logger.debug(
                    "Selected constructor %s of %r.", constructor, descriptor.type
                )
                return constructor
        raise NoMatchingConstructorError(descriptor.type, args)


_inspector = TypeInspector()


def get_annotated_fields(cls: type, marker: Any) -> set[str]:
    """See TypeInspector.get_annotated_fields."""
    return _inspector.get_annotated_fields(cls, marker)


def get_all_declared_methods(cls: type) -> set[str]:
    """See TypeInspector.get_all_declared_methods."""
    return _inspector.get_all_declared_methods(cls)


def resolve_constructor(cls: type, *args: Any) -> ConstructorDescriptor:
    """See TypeInspector.resolve_constructor."""
    return _inspector.resolve_constructor(cls, *args)


def create_instance[T](cls: type[T], *args: Any) -> T:
    """See TypeInspector.create_instance."""
    return _inspector.create_instance(cls, *args)
