"""src/uriparts/parts/userinfo.py

User information part (``user:pass@``) of a URI authority.
"""

from typing import Any, Dict, NoReturn, Optional, Type, TypeVar, Union

from uriparts.components.base import Component, UriPart
from uriparts.components.kinds import Pass, User
from uriparts.exceptions import TypeMismatchError, UnsupportedOperationError

__all__ = ["UserInfo"]

_C = TypeVar("_C", bound=Component)


def coerce_component(value: Any, component_class: Type[_C]) -> _C:
    """
    Return ``value`` as an instance of ``component_class``.

    Raw values (strings, ints, ``None``) are run through the component
    constructor; instances of the right class are returned as-is.

    Raises:
        TypeMismatchError: If ``value`` is another kind of URI part.
    """
    if isinstance(value, component_class):
        return value
    if isinstance(value, UriPart):
        raise TypeMismatchError(
            f"Expected {component_class.__name__}, got {type(value).__name__}"
        )
    return component_class(value)


class UserInfo(UriPart):
    """
    Read-only pairing of a :class:`User` and a :class:`Pass`.

    The password is only rendered when a user is present. To change either
    half, build a new ``UserInfo`` from ``user.with_content(...)`` or
    ``password.with_content(...)``.
    """

    __slots__ = ("_user", "_pass")

    def __init__(
        self,
        user: Union[User, str, None] = None,
        password: Union[Pass, str, None] = None,
    ):
        object.__setattr__(self, "_user", coerce_component(user, User))
        object.__setattr__(self, "_pass", coerce_component(password, Pass))

    @classmethod
    def from_string(cls, data: Optional[str]) -> "UserInfo":
        """
        Split a ``user[:pass]`` string on its first colon.

        Args:
            data: Encoded userinfo without the trailing ``@``, or ``None``.

        Returns:
            A new ``UserInfo``; empty when ``data`` is ``None``.
        """
        if data is None:
            return cls()

        user, sep, password = data.partition(":")
        return cls(user, password if sep else None)

    @property
    def user(self) -> User:
        return self._user

    @property
    def password(self) -> Pass:
        return self._pass

    def get_content(self) -> Optional[str]:
        user = self._user.get_content()
        if user is None:
            return None

        password = self._pass.get_content()
        if password is None:
            return str(user)
        return f"{user}:{password}"

    def to_delimited_form(self) -> str:
        content = self.get_content()
        if content is None:
            return ""
        return f"{content}@"

    def describe(self) -> Dict[str, Any]:
        return {"userinfo": self.get_content()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriPart):
            return NotImplemented
        return isinstance(other, UserInfo) and (self._user, self._pass) == (
            other._user,
            other._pass,
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._user, self._pass))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._user!r}, {self._pass!r})"

    def get_value(self) -> NoReturn:
        raise UnsupportedOperationError("UserInfo does not expose a decoded value")

    def with_content(self, data: Any = None) -> NoReturn:
        raise UnsupportedOperationError(
            "UserInfo cannot be modified directly, change its user or password"
        )
