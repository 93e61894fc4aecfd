"""src/uriparts/components/grammar.py

Per-kind character rules for URI components.
"""

import enum
import string
from dataclasses import dataclass
from typing import Dict, FrozenSet

from uriparts.utils.encoding import PCHAR_EXTRAS, SUB_DELIMS, UNRESERVED_CHARACTERS

__all__ = ["Kind", "Grammar", "GRAMMARS", "allowed_chars"]


class Kind(enum.Enum):
    """The eight atomic URI components."""

    SCHEME = "scheme"
    USER = "user"
    PASS = "pass"
    HOST = "host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"


@dataclass(frozen=True)
class Grammar:
    """
    Character rules and rendering shape of one component kind.

    Attributes:
        kind: Component kind described.
        safe: Characters allowed unencoded in the normalized content.
        forbidden: Delimiters of the enclosing part that may not appear raw
            in the input; they must be supplied percent-encoded.
        prefix: Delimiter written before the content in the delimited form.
        suffix: Delimiter written after the content in the delimited form.
        delimit_empty: Whether an empty (but present) component still
            renders its delimiter.
        has_value: Whether the kind exposes a decoded ``get_value()``.
    """

    kind: Kind
    safe: str
    forbidden: str = ""
    prefix: str = ""
    suffix: str = ""
    delimit_empty: bool = False
    has_value: bool = False


_USERINFO_SAFE = UNRESERVED_CHARACTERS + SUB_DELIMS
_PCHAR_SAFE = UNRESERVED_CHARACTERS + SUB_DELIMS + PCHAR_EXTRAS

GRAMMARS: Dict[Kind, Grammar] = {
    Kind.SCHEME: Grammar(
        Kind.SCHEME, safe=string.ascii_letters + string.digits + "+-.", suffix=":"
    ),
    Kind.USER: Grammar(
        Kind.USER, safe=_USERINFO_SAFE, forbidden="/:@?#", has_value=True
    ),
    Kind.PASS: Grammar(
        Kind.PASS,
        safe=_USERINFO_SAFE + ":",
        forbidden="/@?#",
        prefix=":",
        delimit_empty=True,
        has_value=True,
    ),
    Kind.HOST: Grammar(Kind.HOST, safe=UNRESERVED_CHARACTERS + SUB_DELIMS),
    Kind.PORT: Grammar(Kind.PORT, safe=string.digits, prefix=":"),
    Kind.PATH: Grammar(Kind.PATH, safe=_PCHAR_SAFE + "/", forbidden="?#"),
    Kind.QUERY: Grammar(
        Kind.QUERY,
        safe=_PCHAR_SAFE + "/?",
        forbidden="#",
        prefix="?",
        delimit_empty=True,
    ),
    Kind.FRAGMENT: Grammar(
        Kind.FRAGMENT,
        safe=_PCHAR_SAFE + "/?",
        prefix="#",
        delimit_empty=True,
        has_value=True,
    ),
}


def allowed_chars(kind: Kind) -> FrozenSet[str]:
    """Return the characters a component of ``kind`` may hold unencoded."""
    return frozenset(GRAMMARS[kind].safe)
