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
Description: Tests for the TracedException class.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import pytest

from reflectcore.exceptions import TracedException, format_exception
from reflectcore.inspector import (
    ConstructionFailedError,
    InspectionError,
    NoMatchingConstructorError,
)


class TestFormatException:
    """Test cases for the format_exception function."""

    def test_format_exception_with_simple_exception(self):
        """Test formatting a simple exception with traceback."""
        try:
            raise ValueError("Test error message")
        except ValueError as e:
            result = format_exception(e)

            assert isinstance(result, str)
            assert "ValueError: Test error message" in result
            assert "Traceback" in result
            assert "test_format_exception_with_simple_exception" in result

    def test_format_exception_with_no_traceback(self):
        """Test formatting an exception that has no traceback."""
        e = ValueError("No traceback")
        result = format_exception(e)

        assert "ValueError: No traceback" in result
        assert "Traceback" not in result

    def test_format_exception_with_exception_chain(self):
        """Test formatting an exception with a cause chain."""
        try:
            try:
                raise ValueError("Original error")
            except ValueError as e:
                raise RuntimeError("Chained error") from e
        except RuntimeError as e:
            result = format_exception(e)

            assert "RuntimeError: Chained error" in result
            assert "ValueError: Original error" in result
            assert "direct cause" in result

    def test_format_exception_without_chain(self):
        """Test that the cause is left out when chain is False."""
        try:
            try:
                raise ValueError("Original error")
            except ValueError as e:
                raise RuntimeError("Chained error") from e
        except RuntimeError as e:
            result = format_exception(e, chain=False)

            assert "RuntimeError: Chained error" in result
            assert "ValueError: Original error" not in result


class TestTracedException:
    """Test cases for the TracedException class."""

    def test_is_exception(self):
        """Test that TracedException can be raised and caught as an Exception."""
        with pytest.raises(Exception):
            raise TracedException("boom")

    def test_traceback_format(self):
        """Test that a raised TracedException formats itself with its traceback."""
        try:
            raise TracedException("Traced error")
        except TracedException as e:
            result = e.traceback_format()

            assert "TracedException: Traced error" in result
            assert "test_traceback_format" in result

    def test_cause(self):
        """Test that cause gives the exception it was raised from."""
        original = KeyError("missing")
        try:
            raise TracedException("wrapped") from original
        except TracedException as e:
            assert e.cause is original

    def test_cause_none_when_not_chained(self):
        """Test that cause is None without an explicit cause."""
        assert TracedException("alone").cause is None

    def test_subclass_traceback_format(self):
        """Test that subclasses keep their own name in the formatted traceback."""

        class CustomTraced(TracedException):
            """Test"""

        try:
            raise CustomTraced("custom")
        except CustomTraced as e:
            assert "CustomTraced: custom" in e.traceback_format()


class TestInspectionErrors:
    """Test the errors of the inspector."""

    def test_hierarchy(self):
        """Test that the inspector errors are traced exceptions."""
        assert issubclass(InspectionError, TracedException)
        assert issubclass(NoMatchingConstructorError, InspectionError)
        assert issubclass(ConstructionFailedError, InspectionError)

    def test_no_matching_constructor_message(self):
        """Test that the message names the type and the argument types."""

        class Point:
            """Test"""

        e = NoMatchingConstructorError(Point, ("a", 1))

        assert e.type is Point
        assert e.arguments == ("a", 1)
        assert "Point" in str(e)
        assert "(str, int)" in str(e)

    def test_construction_failed_message(self):
        """Test that the message names the type and the constructor."""

        class Point:
            """Test"""

        e = ConstructionFailedError(Point, "__init__(int, int)")

        assert e.type is Point
        assert e.constructor == "__init__(int, int)"
        assert "__init__(int, int)" in str(e)
        assert "Point" in str(e)
