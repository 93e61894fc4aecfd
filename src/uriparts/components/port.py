"""src/uriparts/components/port.py

URI port component.
"""

from typing import Any, Optional

from uriparts.components.base import Component
from uriparts.components.grammar import GRAMMARS, Kind
from uriparts.utils.validators import MAX_PORT, MIN_PORT, parse_port, validate_port

__all__ = ["Port"]


class Port(Component):
    """
    URI port, stored as an integer.

    Accepts an ``int`` or a digit-only string. The empty string is treated
    as an absent port.
    """

    __slots__ = ()

    grammar = GRAMMARS[Kind.PORT]

    def _normalize(self, data: Any) -> Optional[int]:
        if isinstance(data, bool):
            raise self._invalid(data, "expected an integer or a string, got bool")

        if isinstance(data, int):
            port = data
        else:
            raw = self._check_string(data)
            if raw == "":
                return None

            parsed = parse_port(raw)
            if parsed is None:
                raise self._invalid(data, "must only contain digits")
            port = parsed

        if not validate_port(port):
            raise self._invalid(data, f"must be between {MIN_PORT} and {MAX_PORT}")
        return port
