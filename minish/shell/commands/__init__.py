"""Import built-in modules for their registration side-effects."""

from . import navigation as _navigation  # noqa: F401
from . import processes as _processes  # noqa: F401
from . import text as _text  # noqa: F401

__all__ = []
