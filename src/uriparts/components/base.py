"""src/uriparts/components/base.py

Immutable value objects shared by every URI component and part.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, NoReturn, Union

from uriparts.components.grammar import Grammar
from uriparts.exceptions import (
    InvalidComponentError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from uriparts.utils.encoding import decode, encode

__all__ = ["UriPart", "Component", "MAX_COMPONENT_LENGTH"]

logger = logging.getLogger(__name__)

MAX_COMPONENT_LENGTH = 65536

Content = Union[str, int, None]


class UriPart(ABC):
    """
    Read-only contract of every URI component and composite part.

    Instances are immutable: attributes cannot be set or deleted after
    construction, "modifications" build new instances.
    """

    __slots__ = ()

    @abstractmethod
    def get_content(self) -> Content:
        """Return the normalized content, or ``None`` when absent."""

    @abstractmethod
    def to_delimited_form(self) -> str:
        """Return the content with its structural delimiters."""

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """Return a single-entry mapping of the part name to its content."""

    @property
    def content(self) -> Content:
        return self.get_content()

    def to_display_string(self) -> str:
        """Return the content as a string, absent and empty both giving ``""``."""
        content = self.get_content()
        if content is None:
            return ""
        return str(content)

    def same_value_as(self, other: Any) -> bool:
        """
        Compare the delimited forms of two URI parts.

        Raises:
            TypeMismatchError: If ``other`` is not a URI component or part.
        """
        if not isinstance(other, UriPart):
            raise TypeMismatchError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return self.to_delimited_form() == other.to_delimited_form()

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_content()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriPart):
            return NotImplemented
        return type(self) is type(other) and (
            self.get_content() == other.get_content()
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.get_content()))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Component(UriPart):
    """
    A single URI component, normalized once at construction.

    Subclasses only bind a :class:`Grammar`; kinds needing more than the
    generic encoding (scheme, host, port) override :meth:`_normalize`.

    Caveat: the value must not carry the component's own delimiter
    (``"#frag"`` for a fragment). Such input is accepted and the delimiter
    ends up encoded into the content.
    """

    __slots__ = ("_data",)

    grammar: ClassVar[Grammar]

    def __init__(self, data: Any = None):
        if not hasattr(type(self), "grammar"):
            raise UnsupportedOperationError(
                f"{type(self).__name__} has no grammar, build one of its kinds instead"
            )
        content = None if data is None else self._normalize(data)
        object.__setattr__(self, "_data", content)

    @property
    def name(self) -> str:
        return self.grammar.kind.value

    def _invalid(self, data: Any, reason: str) -> InvalidComponentError:
        logger.debug("Rejected %s component %r: %s", self.name, data, reason)
        return InvalidComponentError(
            f"Invalid {self.name} component {data!r}: {reason}",
            component=self.name,
            value=data,
        )

    def _check_string(self, data: Any) -> str:
        if not isinstance(data, str):
            raise self._invalid(data, f"expected a string, got {type(data).__name__}")

        if len(data) > MAX_COMPONENT_LENGTH:
            raise self._invalid(
                data[:32] + "...", f"longer than {MAX_COMPONENT_LENGTH} characters"
            )

        for char in self.grammar.forbidden:
            if char in data:
                raise self._invalid(data, f"contains the delimiter {char!r}")
        return data

    def _normalize(self, data: Any) -> Content:
        return encode(self._check_string(data), self.grammar.safe)

    def get_content(self) -> Content:
        return self._data

    def get_value(self) -> str:
        """
        Return the fully percent-decoded, human readable value.

        Raises:
            UnsupportedOperationError: If the kind has no decoded value.
        """
        if not self.grammar.has_value:
            raise UnsupportedOperationError(
                f"{type(self).__name__} does not expose a decoded value"
            )
        if self._data is None:
            return ""
        return decode(str(self._data))

    def to_delimited_form(self) -> str:
        if self._data is None:
            return ""

        content = str(self._data)
        if content == "" and not self.grammar.delimit_empty:
            return ""
        return f"{self.grammar.prefix}{content}{self.grammar.suffix}"

    def with_content(self, data: Any = None) -> "Component":
        """
        Return a new component of the same kind holding ``data``.

        The same validation as construction applies; ``self`` is untouched.
        """
        return type(self)(data)

    def describe(self) -> Dict[str, Any]:
        return {self.name: self._data}
