__version__ = "0.1"

from .authority import Authority, parse_authority
from .errors import InvalidHost, InvalidPortNumber, UnknownScheme, UriError
from .scheme import UriScheme, is_registered_scheme, lookup_scheme, register_scheme
from .uri import Uri, parse_uri
