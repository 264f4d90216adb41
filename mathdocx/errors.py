# mathdocx/errors.py
"""Exception classes for mathdocx.

A failure in one math fragment is scoped to that fragment: callers catch
``MathConversionError`` and substitute a fallback. ``InvariantViolation`` is
deliberately outside that hierarchy, it signals a bug in the tree builders.
"""

from typing import Optional


class MathConversionError(Exception):
    """Base exception for errors raised while converting one math fragment."""


class ParseError(MathConversionError):
    """Raised when a fragment cannot be tokenized or parsed at all."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        location = f" (at offset {position})" if position is not None else ""
        super().__init__(f"{message}{location}")


class NestingDepthError(ParseError):
    """Raised when groups, arguments or markup elements nest too deeply."""

    def __init__(self, max_depth: int, position: Optional[int] = None):
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded", position)


class UnsupportedConstructError(MathConversionError):
    """A recognized-but-unmapped command or element, raised only in strict mode."""

    def __init__(self, construct: str, position: Optional[int] = None):
        self.construct = construct
        self.position = position
        location = f" at offset {position}" if position is not None else ""
        super().__init__(f"Unsupported construct '{construct}'{location}")


class InvariantViolation(RuntimeError):
    """A serializer precondition failed: the expression tree is malformed."""
