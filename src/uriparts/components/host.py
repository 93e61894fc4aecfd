"""src/uriparts/components/host.py

URI host component.

Handles the three RFC3986 host forms (IP-literal, IPv4address, reg-name)
plus internationalized names, which are stored in their A-label form.
See https://www.rfc-editor.org/rfc/rfc3986#section-3.2.2
"""

import ipaddress
from typing import Any

import idna

from uriparts.components.base import Component
from uriparts.components.grammar import GRAMMARS, Kind
from uriparts.utils.encoding import PERCENT_ENCODED_REGEX, encode
from uriparts.utils.validators import IPV4_STYLE_HOSTNAME

__all__ = ["Host"]

_HOST_DELIMITERS = "/?#@:[]"


class Host(Component):
    """URI host, lower-cased and validated."""

    __slots__ = ()

    grammar = GRAMMARS[Kind.HOST]

    @property
    def is_ip(self) -> bool:
        """Whether the host is an IPv4 address or an IP literal."""
        host = self.get_content()
        if not host:
            return False
        return host.startswith("[") or IPV4_STYLE_HOSTNAME.fullmatch(host) is not None

    def _normalize(self, data: Any) -> str:
        host = self._check_string(data)
        if not host:
            return ""

        if host.startswith("["):
            return self._normalize_ip_literal(host)

        for char in _HOST_DELIMITERS:
            if char in host:
                raise self._invalid(data, f"contains the delimiter {char!r}")

        if IPV4_STYLE_HOSTNAME.fullmatch(host):
            try:
                ipaddress.IPv4Address(host)
            except ipaddress.AddressValueError as exc:
                raise self._invalid(data, "invalid IPv4 address") from exc
            return host

        if host.isascii():
            return _lower_case(encode(host, self.grammar.safe))

        try:
            return idna.encode(host.lower(), uts46=True).decode("ascii")
        except idna.IDNAError as exc:
            raise self._invalid(data, "invalid IDNA hostname") from exc

    def _normalize_ip_literal(self, host: str) -> str:
        if not host.endswith("]"):
            raise self._invalid(host, "unterminated IP literal")

        try:
            ipaddress.IPv6Address(host[1:-1])
        except ipaddress.AddressValueError as exc:
            raise self._invalid(host, "invalid IPv6 address") from exc
        return host.lower()


def _lower_case(host: str) -> str:
    # reg-name is case-insensitive, percent-triplets keep uppercase hex
    return PERCENT_ENCODED_REGEX.sub(lambda match: match.group(0).upper(), host.lower())
