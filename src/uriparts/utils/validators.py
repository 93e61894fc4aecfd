"""utils/validators.py

Validation utilities for uriparts.
"""

import re
from typing import Optional

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_REGEX = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*")

# port = *DIGIT
PORT_REGEX = re.compile(r"[0-9]+")

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4_STYLE_HOSTNAME = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")

MIN_PORT = 1
MAX_PORT = 65535
MAX_PORT_DIGITS = len(str(MAX_PORT))


def validate_scheme(scheme: str) -> bool:
    """Check a scheme against the RFC3986 grammar. The empty scheme is valid."""
    return scheme == "" or SCHEME_REGEX.fullmatch(scheme) is not None


def parse_port(port: str) -> Optional[int]:
    """
    Return the port number for a digit-only string, ``None`` otherwise.

    Strings with more significant digits than ``MAX_PORT`` are returned as
    ``MAX_PORT + 1`` without being converted, so they fail ``validate_port``.
    """
    if PORT_REGEX.fullmatch(port) is None:
        return None
    digits = port.lstrip("0") or "0"
    if len(digits) > MAX_PORT_DIGITS:
        return MAX_PORT + 1
    return int(digits)


def validate_port(port: int) -> bool:
    """Check that ``port`` is a usable TCP/UDP port number."""
    return MIN_PORT <= port <= MAX_PORT
