"""
reflectcore: Runtime introspection of Python classes.

This library provides:
- Lookup of the fields carrying a marker (typing.Annotated metadata)
- Enumeration of the methods a class declares or gets from its interfaces
- Instance creation through the first declared constructor matching the arguments,
  private constructors included
- TracedException for enhanced exception formatting
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
