"""uricore._abnf
The two RFC 3986 rules that are checked character by character: scheme names
on registration and port numbers on parse. Everything else is split on delimiters.
"""

import re

_ALPHA: str = r"[A-Za-z]"
_DIGIT: str = r"[0-9]"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PAT: re.Pattern[str] = re.compile(rf"{_ALPHA}[A-Za-z0-9+\-.]*")

# port = *DIGIT, but an empty port is rejected like any other non-number.
PORT_PAT: re.Pattern[str] = re.compile(rf"{_DIGIT}+")
