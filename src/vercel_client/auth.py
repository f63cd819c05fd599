from __future__ import annotations

from typing import Generator, Optional

import httpx

from .core.config import MissingTokenError


class VercelAuth(httpx.Auth):
    """
    Request decorator for the Vercel API.
    - Bearer token in Authorization
    - JSON Content-Type on every request
    - teamId query parameter merged in when a team is configured
    Sending is left to the client's underlying transport.
    """

    def __init__(self, token: str, team_id: Optional[str] = None):
        if not token:
            raise MissingTokenError("missing Vercel API token")
        self._token = token
        self._team_id = team_id or None

    @property
    def team_id(self) -> Optional[str]:
        return self._team_id

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        request.headers["Content-Type"] = "application/json"

        if self._team_id:
            request.url = request.url.copy_merge_params({"teamId": self._team_id})

        yield request

    def __repr__(self) -> str:
        return f"VercelAuth(team_id={self._team_id!r})"


__all__ = ["VercelAuth"]
