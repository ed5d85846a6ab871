"""Authentication schemes for the Miniflux API.

Miniflux accepts either an API token in the ``X-Auth-Token`` header or HTTP
Basic credentials. A client holds exactly one of the variants below.
"""

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TokenAuth:
    """API token sent as ``X-Auth-Token``."""

    token: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {"X-Auth-Token": self.token}


@dataclass(frozen=True)
class BasicAuth:
    """Username and password sent as an ``Authorization: Basic`` header."""

    username: str
    password: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        pair = f"{self.username}:{self.password}".encode()
        return {"Authorization": f"Basic {base64.b64encode(pair).decode('ascii')}"}


@dataclass(frozen=True)
class NoAuth:
    """No credentials. The server is expected to reject such requests."""

    def headers(self) -> dict[str, str]:
        return {}


Auth = TokenAuth | BasicAuth | NoAuth


def resolve_auth(credentials: Mapping[str, str | None] | Auth | None) -> Auth:
    """Pick the auth variant for a credentials mapping.

    A token takes precedence over username/password. Incomplete credentials
    fall back to NoAuth.
    """
    if isinstance(credentials, TokenAuth | BasicAuth | NoAuth):
        return credentials
    if not credentials:
        return NoAuth()

    token = credentials.get("token")
    if token is not None:
        return TokenAuth(token)

    username = credentials.get("username")
    password = credentials.get("password")
    if username is not None and password is not None:
        return BasicAuth(username, password)

    return NoAuth()
