"""src/uriparts/components/kinds.py

Components whose behavior is fully described by their grammar.
"""

from typing import Any

from uriparts.components.base import Component, Content
from uriparts.components.grammar import GRAMMARS, Kind
from uriparts.utils.validators import validate_scheme

__all__ = ["Scheme", "User", "Pass", "Path", "Query", "Fragment"]


class Scheme(Component):
    """URI scheme, lower-cased. Never percent-encoded."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.SCHEME]

    def _normalize(self, data: Any) -> Content:
        scheme = self._check_string(data)
        if not validate_scheme(scheme):
            raise self._invalid(
                data,
                "must start with a letter followed by letters, digits, '+', '-' or '.'",
            )
        return scheme.lower()


class User(Component):
    """Value object representing a URI user component."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.USER]


class Pass(Component):
    """Value object representing a URI pass component."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.PASS]


class Path(Component):
    """URI path, each segment encoded with the ``pchar`` rule."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.PATH]


class Query(Component):
    """URI query, kept as an opaque encoded string."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.QUERY]


class Fragment(Component):
    __slots__ = ()

    grammar = GRAMMARS[Kind.FRAGMENT]
