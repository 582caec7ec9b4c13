"""Tests for Implement and declared_implementations."""

from typing import Protocol

from reflectcore.inspector import (
    Implement,
    PythonTypeDescriptor,
    declared_implementations,
    get_all_declared_methods,
)


class Runnable(Protocol):
    """Test"""

    def run(self) -> None: ...


class Closeable(Protocol):
    """Test"""

    def close(self) -> None: ...


class Base:
    """Test"""

    def base(self) -> None: ...


class Task(Implement(Runnable)):
    """Test"""

    def __getattr__(self, name: str):
        if name == "run":
            return lambda: "ran"
        raise AttributeError(name)


class Resource(Base, Implement(Runnable), Implement(Closeable)):
    """Test"""

    def open(self) -> None: ...


class TestImplement:
    """Test the Implement base entry."""

    def test_not_in_mro(self):
        """Test that the interface is not added to the MRO."""
        assert Runnable not in Task.__mro__
        assert Task.__bases__ == (object,)

    def test_other_bases_are_kept(self):
        """Test that regular bases are kept."""
        assert Resource.__bases__ == (Base,)

    def test_behaviour(self):
        """Test that the class keeps its own behaviour."""
        assert Task().run() == "ran"

    def test_repr(self):
        """Test the representation of the base entry."""
        assert repr(Implement(Runnable)) == "Implement(Runnable)"


class TestDeclaredImplementations:
    """Test declared_implementations."""

    def test_single(self):
        """Test a single declared interface."""
        assert declared_implementations(Task) == (Runnable,)

    def test_several_in_order(self):
        """Test several interfaces in declaration order."""
        assert declared_implementations(Resource) == (Runnable, Closeable)

    def test_none(self):
        """Test a class declaring no interface."""
        assert declared_implementations(Base) == ()

    def test_not_inherited(self):
        """Test that declared interfaces are not inherited."""
        class SubTask(Task):
            """Test"""

        assert declared_implementations(SubTask) == ()

    def test_interfaces_of_descriptor(self):
        """Test that the descriptor reports declared interfaces."""
        interfaces = [i.type for i in PythonTypeDescriptor(Resource).interfaces()]
        assert interfaces == [Runnable, Closeable]

    def test_methods_include_declared_implementations(self):
        """Test methods of declared interfaces."""
        assert get_all_declared_methods(Resource) == {"open", "run", "close"}
