"""Errors raised by the type inspector."""

from typing import Any

from ...abstract.exceptions.traced_exceptions import TracedException


class InspectionError(TracedException):
    """General error of the type inspector."""


class NoMatchingConstructorError(InspectionError):
    """Signals that no declared constructor accepts the provided arguments."""

    def __init__(self, cls: type, args: tuple[Any, ...]) -> None:
        self.type = cls
        self.arguments = args
        arg_names = ", ".join(type(a).__name__ for a in args)
        super().__init__(
            f"No constructor of '{cls.__qualname__}' accepts the arguments ({arg_names})."
        )


class ConstructionFailedError(InspectionError):
    """Signals that the selected constructor was invoked but failed."""

    def __init__(self, cls: type, constructor: Any) -> None:
        self.type = cls
        self.constructor = constructor
        super().__init__(
            f"Constructor '{constructor}' of '{cls.__qualname__}' failed to create an instance."
        )
