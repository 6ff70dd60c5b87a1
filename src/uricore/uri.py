"""uricore.uri
Parse and serialize URIs following the generic syntax of RFC 3986:

    URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
"""

import dataclasses
import logging
import re

from typing import Self

from .authority import Authority
from .scheme import UriScheme, lookup_scheme

logger = logging.getLogger(__name__)

# The authority is terminated by the next "/", "?", "#", or by the end of the URI.
_AUTHORITY_END_PAT: re.Pattern[str] = re.compile(r"[/?#]")


@dataclasses.dataclass(frozen=True, kw_only=True)
class Uri:
    """A Uniform Resource Identifier, see RFC 3986

    authority is None exactly when the URI is not hierarchical, i.e. when the
    scheme is not followed by "//" (urn:, mailto:, and KDE style file:/ URIs).
    Empty queries and fragments are stored as None.
    """

    scheme: UriScheme
    authority: Authority | None = None
    path: str
    query: str | None = None
    fragment: str | None = None

    def __str__(self: Self) -> str:
        return self.serialize()

    def serialize(self: Self) -> str:
        if self.authority is None:
            # The query and fragment are never split out of non-hierarchical URIs.
            return f"{self.scheme}:{self.path}"
        result: str = f"{self.scheme}://{self.authority}{self.path}"
        if self.query is not None:
            result += f"?{self.query}"
        if self.fragment is not None:
            result += f"#{self.fragment}"
        return result

    @property
    def is_hierarchical(self: Self) -> bool:
        return self.authority is not None

    @property
    def userinfo(self: Self) -> str | None:
        return self.authority.userinfo if self.authority is not None else None

    @property
    def host(self: Self) -> str | None:
        return self.authority.host if self.authority is not None else None

    @property
    def port(self: Self) -> int | None:
        return self.authority.port if self.authority is not None else None

    @classmethod
    def parse(cls: type[Self], data: str) -> Self:
        """Parses an absolute URI such as "https://localhost:8020/a/b?x=1#frag".

        Raises UnknownScheme when the scheme is not registered, and InvalidHost
        or InvalidPortNumber when the authority is malformed.
        """
        scheme_name, _, rest = data.partition(":")
        scheme: UriScheme = lookup_scheme(scheme_name)

        if not rest.startswith("//"):
            result = cls(scheme=scheme, path=rest)
            logger.debug("parsed non-hierarchical URI %r as %r", data, result)
            return result

        m: re.Match[str] | None = _AUTHORITY_END_PAT.search(rest, 2)
        if m is None:
            authority_text, path_and_rest = rest[2:], ""
        else:
            authority_text, path_and_rest = rest[2 : m.start()], rest[m.start() :]
        authority: Authority = Authority.parse(authority_text)

        # The first "?" ends the path, even when a "#" comes before it.
        # The fragment is then taken from whichever tail is left.
        path, question, query_and_fragment = path_and_rest.partition("?")
        query: str
        fragment: str
        if question:
            query, _, fragment = query_and_fragment.partition("#")
        else:
            path, _, fragment = path.partition("#")
            query = ""

        result = cls(
            scheme=scheme,
            authority=authority,
            path=path,
            query=query or None,
            fragment=fragment or None,
        )
        logger.debug("parsed URI %r as %r", data, result)
        return result


def parse_uri(data: str) -> Uri:
    """RFC 3986 URI parser. Equivalent to Uri.parse."""
    return Uri.parse(data)
