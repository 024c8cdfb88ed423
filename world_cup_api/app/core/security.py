"""
Static access token check for write operations.

Reading the winners list is open to everyone; appending a winner
requires the client to send the process-wide shared secret from
``settings.access_token`` in the ``X-ACCESS-TOKEN`` header.  There
are no users, roles or expiring tokens.
"""

import hmac
from typing import Optional

from .config import settings


ACCESS_TOKEN_HEADER = "X-ACCESS-TOKEN"


def is_access_token_valid(token: Optional[str], expected: Optional[str] = None) -> bool:
    """Compare a client supplied token against the configured one.

    The comparison is byte-for-byte and constant-time to prevent
    timing attacks.  A missing token never matches, and neither does
    anything when the configured token is empty.

    Parameters
    ----------
    token : Optional[str]
        Value of the ``X-ACCESS-TOKEN`` header, ``None`` if absent.
    expected : Optional[str]
        Token to compare against.  Defaults to ``settings.access_token``.
    """
    expected = settings.access_token if expected is None else expected
    if token is None or not expected:
        return False
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))
