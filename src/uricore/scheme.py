"""uricore.scheme
URI scheme names and the registry that Uri.parse looks them up in.
Lookups are exact: "HTTP" and "http" are different names here.
"""

import dataclasses
import logging

from typing import Self

from ._abnf import SCHEME_PAT
from .errors import UnknownScheme

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class UriScheme:
    """The scheme of a URI, see RFC 3986 section 3.1"""

    name: str

    def __str__(self: Self) -> str:
        return self.name

    @classmethod
    def value_of(cls: type[Self], name: str) -> "UriScheme":
        """Returns the registered scheme called name, or raises UnknownScheme."""
        return lookup_scheme(name)


_REGISTRY: dict[str, UriScheme] = {}


def register_scheme(name: str) -> UriScheme:
    """Adds name to the registry so that URIs using it can be parsed.
    Registering a name twice returns the scheme from the first registration.
    """
    if SCHEME_PAT.fullmatch(name) is None:
        raise ValueError(f"not a valid URI scheme name: {name!r}")
    scheme: UriScheme | None = _REGISTRY.get(name)
    if scheme is None:
        scheme = _REGISTRY.setdefault(name, UriScheme(name))
        logger.debug("registered URI scheme %r", name)
    return scheme


def lookup_scheme(name: str) -> UriScheme:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownScheme(name) from None


def is_registered_scheme(name: str) -> bool:
    return name in _REGISTRY


# Permanent IANA registrations that are commonly seen in the wild.
ABOUT: UriScheme = register_scheme("about")
DATA: UriScheme = register_scheme("data")
FILE: UriScheme = register_scheme("file")
FTP: UriScheme = register_scheme("ftp")
HTTP: UriScheme = register_scheme("http")
HTTPS: UriScheme = register_scheme("https")
LDAP: UriScheme = register_scheme("ldap")
MAILTO: UriScheme = register_scheme("mailto")
NEWS: UriScheme = register_scheme("news")
TEL: UriScheme = register_scheme("tel")
TELNET: UriScheme = register_scheme("telnet")
URN: UriScheme = register_scheme("urn")
WS: UriScheme = register_scheme("ws")
WSS: UriScheme = register_scheme("wss")
