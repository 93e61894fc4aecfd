"""src/uriparts/components/__init__.py

The eight atomic URI components.
"""

from uriparts.components.base import MAX_COMPONENT_LENGTH, Component, UriPart
from uriparts.components.grammar import GRAMMARS, Grammar, Kind, allowed_chars
from uriparts.components.host import Host
from uriparts.components.kinds import Fragment, Pass, Path, Query, Scheme, User
from uriparts.components.port import Port

__all__ = [
    "MAX_COMPONENT_LENGTH",
    "UriPart",
    "Component",
    "Kind",
    "Grammar",
    "GRAMMARS",
    "allowed_chars",
    "Scheme",
    "User",
    "Pass",
    "Host",
    "Port",
    "Path",
    "Query",
    "Fragment",
]
