from typing import Any, cast


class _Implementation:
    """Base list entry standing for an interface. Removes itself from the bases."""

    __slots__ = ("interface",)

    def __init__(self, interface: type) -> None:
        self.interface = interface

    def __mro_entries__(self, bases: tuple[Any, ...]) -> tuple[type, ...]:
        return ()

    def __repr__(self) -> str:
        return f"Implement({self.interface.__qualname__})"


class Implement[T]:
    """Declare that a class implements an interface without actually inheriting from it.
    The type checker still sees the interface as a base, the inspector reports it as a directly
    implemented interface.

    class Runnable(Protocol):
      def run(self) -> None: ...

    class Task(Implement(Runnable)):
      def __getattr__(self, name: str):
        if name == "run":
          return lambda: print("run")

    Task.__mro__  # does not contain Runnable.
    declared_implementations(Task)  # (Runnable,)
    """

    def __new__(cls, interface: type[T], /) -> type[T]:
        return cast(type[T], _Implementation(interface))


def declared_implementations(cls: type) -> tuple[type, ...]:
    """Interfaces declared with Implement in the bases of cls, in order."""
    orig_bases = vars(cls).get("__orig_bases__", ())
    return tuple(b.interface for b in orig_bases if isinstance(b, _Implementation))
