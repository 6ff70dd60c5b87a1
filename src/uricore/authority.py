"""uricore.authority
The authority component of a hierarchical URI: [ userinfo "@" ] host [ ":" port ]
"""

import dataclasses
import logging

from typing import Self

from ._abnf import PORT_PAT
from .errors import InvalidHost, InvalidPortNumber

logger = logging.getLogger(__name__)

# Ports are kept to the range of a signed 32-bit integer.
_MAX_PORT: int = 2**31 - 1


@dataclasses.dataclass(frozen=True, kw_only=True)
class Authority:
    """The authority part of a URI, see RFC 3986 section 3.2

    An empty host is how an empty authority is represented, as in "file:///etc/hosts".
    """

    userinfo: str | None = None
    host: str
    port: int | None = None

    def __str__(self: Self) -> str:
        return self.serialize()

    def serialize(self: Self) -> str:
        """userinfo@host:port"""
        result: str = ""
        if self.userinfo is not None:
            result += f"{self.userinfo}@"
        result += self.host
        if self.port is not None:
            result += f":{self.port}"
        return result

    @classmethod
    def parse(cls: type[Self], data: str) -> Self:
        """Parses the text between "//" and the next "/", "?", "#" or the end of a URI."""
        userinfo, host_and_port = _split_userinfo(data)
        host, port = _split_host_and_port(host_and_port)
        if host.startswith("[") and not host.endswith("]"):
            raise InvalidHost(host)
        result = cls(userinfo=userinfo, host=host, port=port)
        logger.debug("parsed authority %r as %r", data, result)
        return result


def _split_userinfo(data: str) -> tuple[str | None, str]:
    userinfo, at, host_and_port = data.partition("@")
    if not at:
        return None, data
    return userinfo, host_and_port


def _split_host_and_port(data: str) -> tuple[str, int | None]:
    if data.startswith("["):
        # IP-literal. Colons inside the brackets belong to the address.
        end: int = data.find("]")
        if end == -1 or end == len(data) - 1:
            # Either a bare literal or an unterminated one; Authority.parse rejects the latter.
            return data, None
        # The character after "]" is the port delimiter and is not checked.
        return data[: end + 1], _parse_port(data[end + 2 :])

    # IPv4address or reg-name
    host, colon, port = data.partition(":")
    if not colon:
        return data, None
    return host, _parse_port(port)


def _parse_port(data: str) -> int:
    if PORT_PAT.fullmatch(data) is None:
        raise InvalidPortNumber(data)
    port: int = int(data, base=10)
    if port > _MAX_PORT:
        raise InvalidPortNumber(data)
    return port


def parse_authority(data: str) -> Authority:
    return Authority.parse(data)
