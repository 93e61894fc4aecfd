"""src/uriparts/exceptions.py

uriparts Exceptions hierarchy.
"""

from typing import Any, Optional


class UriPartsError(Exception):
    """Base exception for all uriparts errors."""


class InvalidComponentError(UriPartsError, ValueError):
    """
    A component or part could not be built from the given value.

    Raised at construction and by ``with_content``; the value is never
    silently coerced into something valid.

    Attributes:
        component: Name of the component kind being built (``"port"``, ...).
        value: The rejected input.
    """

    def __init__(
        self,
        message: str = "Invalid URI component",
        component: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.component = component
        self.value = value


class TypeMismatchError(UriPartsError, TypeError):
    """A URI component was compared or combined with an incompatible type."""


class UnsupportedOperationError(UriPartsError, NotImplementedError):
    """The operation is not available on this component or part."""
