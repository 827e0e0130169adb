"""Shape check for intranet autologin tokens.

The token is a credential: it is never interpreted, never logged, and only
forwarded to the intranet as part of the planning URL. Whether it is a real
credential is decided by the intranet itself.
"""

import re

AUTOLOGIN_PATTERN = re.compile(r"[a-z0-9]{40}")


def validate_token(token: str | None) -> bool:
    """Return True if token is exactly 40 lowercase alphanumeric characters."""
    if not isinstance(token, str):
        return False
    return AUTOLOGIN_PATTERN.fullmatch(token) is not None
