"""Exceptions raised while parsing URIs and their authority component."""

from typing import Self


class UriError(ValueError):
    """Base class for every error raised by uricore."""


class InvalidHost(UriError):
    """The host part of the authority is an unterminated IP literal, e.g. "[::1"."""

    def __init__(self: Self, host: str) -> None:
        super().__init__(f"Invalid host: {host}")
        self.host: str = host


class InvalidPortNumber(UriError):
    """The port part of the authority is not a decimal number."""

    def __init__(self: Self, port: str) -> None:
        super().__init__(f"Invalid port number: {port}")
        self.port: str = port


class UnknownScheme(UriError):
    """The scheme name is not in the scheme registry."""

    def __init__(self: Self, name: str) -> None:
        super().__init__(f"Unknown URI scheme: {name}")
        self.name: str = name
