"""
Re-export exceptions module for cleaner imports.

This allows: from reflectcore.exceptions import TracedException
Instead of: from reflectcore.abstract.exceptions.traced_exceptions import TracedException
"""

from .abstract.exceptions.traced_exceptions import TracedException, format_exception

__all__ = [
    "TracedException",
    "format_exception",
]
