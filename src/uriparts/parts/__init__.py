"""src/uriparts/parts/__init__.py

Composite URI parts built from components.
"""

from uriparts.parts.authority import Authority
from uriparts.parts.userinfo import UserInfo

__all__ = ["Authority", "UserInfo"]
