"""
Error taxonomy for reflective test helpers.

Every failure surfaced by the package is a ReflectionHelperError. The
concrete classes also derive from the closest builtin exception so callers
can catch them the way they would catch the underlying problem.
"""

from typing import Any, Dict, Optional


class ReflectionHelperError(Exception):
    """Base exception for all reflection helper errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (target, member name, types)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentType(ReflectionHelperError, TypeError):
    """An argument was added without a type tag."""


class NoParametersSet(ReflectionHelperError, LookupError):
    """Types or values were requested from an empty parameter list."""

    def __init__(self, message: str = "No parameter is set. Parameter is required.",
                 context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, context)


class EmptyMethodName(ReflectionHelperError, ValueError):
    """The method name passed to an invocation was None or blank."""

    def __init__(self, message: str = "Method name must not be empty.",
                 context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, context)


class _ReflectiveFailure(ReflectionHelperError, RuntimeError):
    """Failure that wraps the low-level exception which caused it."""

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, context)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} ({type(self.cause).__name__}: {self.cause})"


class ReflectiveAccessFailure(_ReflectiveFailure):
    """Field lookup, access override or assignment failed."""


class ReflectiveInvocationFailure(_ReflectiveFailure):
    """Method lookup, receiver construction, argument binding or the call itself failed.

    When the invoked method raised, ``cause`` is that exception.
    """
