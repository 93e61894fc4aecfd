"""src/uriparts/parts/authority.py

Authority part (``//userinfo@host:port``) of a URI.
"""

import logging
from typing import Any, Dict, NoReturn, Optional, Tuple, Union

from uriparts.components.base import UriPart
from uriparts.components.host import Host
from uriparts.components.port import Port
from uriparts.exceptions import (
    InvalidComponentError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from uriparts.parts.userinfo import UserInfo, coerce_component

__all__ = ["Authority"]

logger = logging.getLogger(__name__)


class Authority(UriPart):
    """
    Read-only grouping of user information, host and port.

    Without a host there is no authority: user information or a port on
    their own are rejected.
    """

    __slots__ = ("_user_info", "_host", "_port")

    def __init__(
        self,
        user_info: Union[UserInfo, str, None] = None,
        host: Union[Host, str, None] = None,
        port: Union[Port, int, str, None] = None,
    ):
        if user_info is None or isinstance(user_info, str):
            user_info = UserInfo.from_string(user_info)
        elif not isinstance(user_info, UserInfo):
            raise TypeMismatchError(
                f"Expected UserInfo, got {type(user_info).__name__}"
            )

        host = coerce_component(host, Host)
        port = coerce_component(port, Port)

        if host.get_content() is None and (
            user_info.get_content() is not None or port.get_content() is not None
        ):
            logger.debug("Rejected authority without host: %r %r", user_info, port)
            raise InvalidComponentError(
                "An authority with user information or a port requires a host",
                component="authority",
                value=(user_info.get_content(), port.get_content()),
            )

        object.__setattr__(self, "_user_info", user_info)
        object.__setattr__(self, "_host", host)
        object.__setattr__(self, "_port", port)

    @classmethod
    def from_string(cls, data: Optional[str]) -> "Authority":
        """
        Split an encoded ``[userinfo@]host[:port]`` string.

        Args:
            data: Authority without the leading ``//``, or ``None``.

        Returns:
            A new ``Authority``.

        Raises:
            InvalidComponentError: If any of the pieces is invalid.
        """
        if data is None:
            return cls()

        user_info, sep, host_port = data.rpartition("@")
        host, port = _split_host_port(host_port)
        return cls(user_info if sep else None, host, port)

    @property
    def user_info(self) -> UserInfo:
        return self._user_info

    @property
    def host(self) -> Host:
        return self._host

    @property
    def port(self) -> Port:
        return self._port

    def get_content(self) -> Optional[str]:
        host = self._host.get_content()
        if host is None:
            return None
        return (
            f"{self._user_info.to_delimited_form()}{host}"
            f"{self._port.to_delimited_form()}"
        )

    def to_delimited_form(self) -> str:
        content = self.get_content()
        if content is None:
            return ""
        return f"//{content}"

    def describe(self) -> Dict[str, Any]:
        return {"authority": self.get_content()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriPart):
            return NotImplemented
        return isinstance(other, Authority) and self._parts() == other._parts()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._parts())

    def _parts(self) -> Tuple[UserInfo, Host, Port]:
        return (self._user_info, self._host, self._port)

    def get_value(self) -> NoReturn:
        raise UnsupportedOperationError("Authority does not expose a decoded value")

    def with_content(self, data: Any = None) -> NoReturn:
        raise UnsupportedOperationError(
            "Authority cannot be modified directly, change its components"
        )


def _split_host_port(data: str) -> Tuple[str, Optional[str]]:
    if data.startswith("["):
        end = data.find("]")
        if end != -1 and data[end + 1 : end + 2] == ":":
            return data[: end + 1], data[end + 2 :]
        return data, None

    host, sep, port = data.rpartition(":")
    if not sep:
        return data, None
    return host, port
