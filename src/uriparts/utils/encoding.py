"""src/uriparts/utils/encoding.py

Percent-encoding primitives shared by every URI component.

See https://www.rfc-editor.org/rfc/rfc3986#section-2.1
"""

import re
import urllib.parse

__all__ = [
    "UNRESERVED_CHARACTERS",
    "SUB_DELIMS",
    "PCHAR_EXTRAS",
    "PERCENT_ENCODED_REGEX",
    "percent",
    "percent_encoded",
    "encode",
    "decode",
]

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS = "!$&'()*+,;="

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
PCHAR_EXTRAS = ":@"

# pct-encoded = "%" HEXDIG HEXDIG
PERCENT_ENCODED_REGEX = re.compile("%[A-Fa-f0-9]{2}")


def percent(string: str) -> str:
    """Percent-encode every UTF-8 byte of ``string`` with uppercase hex digits."""
    return "".join(
        f"%{byte:02X}" for byte in string.encode("utf-8", "surrogatepass")
    )


def percent_encoded(string: str, safe: str) -> str:
    """
    Percent-encode every character of ``string`` that is not in ``safe``.

    Existing ``%xx`` sequences are not recognized here; a ``%`` is always
    escaped as ``%25`` unless the caller lists it as safe.
    """
    # Fast path for strings that don't need escaping.
    if not string.rstrip(safe):
        return string

    return "".join(char if char in safe else percent(char) for char in string)


def _normalize_triplet(triplet: str, decodable: str) -> str:
    char = chr(int(triplet[1:], 16))
    if char in decodable:
        return char
    return triplet.upper()


def encode(
    string: str, safe: str, decodable: str = UNRESERVED_CHARACTERS
) -> str:
    """
    Normalize ``string`` into a valid percent-encoded token.

    Characters listed in ``safe`` pass through unchanged, anything else is
    percent-encoded. Well-formed ``%xx`` sequences are kept with their hex
    digits upper-cased, except those encoding a character in ``decodable``
    which are replaced by the literal character. A ``%`` that does not start
    a well-formed sequence is encoded as ``%25``.

    The result is stable: ``encode(encode(s, safe), safe) == encode(s, safe)``.

    Args:
        string: Raw or partially encoded input.
        safe: Characters allowed unencoded.
        decodable: Characters whose ``%xx`` form is decoded back. Must be a
            subset of ``safe``.

    Returns:
        The normalized, percent-encoded string.
    """
    parts = []
    current_position = 0
    for match in PERCENT_ENCODED_REGEX.finditer(string):
        start_position, end_position = match.start(), match.end()
        if start_position != current_position:
            leading_text = string[current_position:start_position]
            parts.append(percent_encoded(leading_text, safe=safe))

        parts.append(_normalize_triplet(match.group(0), decodable))
        current_position = end_position

    if current_position != len(string):
        trailing_text = string[current_position:]
        parts.append(percent_encoded(trailing_text, safe=safe))

    return "".join(parts)


def decode(string: str) -> str:
    """Percent-decode every ``%xx`` sequence of ``string`` as UTF-8."""
    return urllib.parse.unquote(string, encoding="utf-8", errors="replace")
