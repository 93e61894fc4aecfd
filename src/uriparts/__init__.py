"""src/uriparts/__init__.py

uriparts - Immutable, validated value objects for RFC3986 URI components.

Each component (scheme, user, pass, host, port, path, query, fragment) is
validated and normalized once at construction. The normalized content is
always a valid RFC3986 token: percent-encoded triplets use uppercase hex
digits, over-encoded unreserved characters are decoded back, and nothing
that the component's grammar forbids is left unescaped.

Key Features:
    - Immutable value objects (``__slots__``)
    - Absent (``None``) and empty (``""``) components kept distinct
    - Shared, idempotent percent-encoding engine
    - Composite ``UserInfo`` and ``Authority`` parts
    - IDNA host names through the ``idna`` package

Example:
    Components::

        from uriparts import Fragment, Path, Port

        Path("/toto le heros/file.xml").get_content()
        # '/toto%20le%20heros/file.xml'
        Fragment("%E2%82%AC").get_value()
        # '€'
        Port("8042").get_content()
        # 8042

    Parts::

        from uriparts import Authority

        Authority.from_string("john:doe@Example.com:8042").to_delimited_form()
        # '//john:doe@example.com:8042'
"""

import logging

from uriparts.components import (
    Component,
    Fragment,
    Host,
    Kind,
    Pass,
    Path,
    Port,
    Query,
    Scheme,
    UriPart,
    User,
)
from uriparts.exceptions import (
    InvalidComponentError,
    TypeMismatchError,
    UnsupportedOperationError,
    UriPartsError,
)
from uriparts.parts import Authority, UserInfo
from uriparts.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "UriPart",
    "Component",
    "Kind",
    "Scheme",
    "User",
    "Pass",
    "Host",
    "Port",
    "Path",
    "Query",
    "Fragment",
    "UserInfo",
    "Authority",
    "UriPartsError",
    "InvalidComponentError",
    "TypeMismatchError",
    "UnsupportedOperationError",
    "__version__",
]
