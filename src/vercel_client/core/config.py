from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.vercel.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

TOKEN_ENV = "VERCEL_TOKEN"
TEAM_ID_ENV = "VERCEL_TEAM_ID"


class MissingTokenError(ValueError):
    """Raised when the Vercel API token is required but missing."""


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, Optional[str]]:
    """Load the Vercel token and team id from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    token = os.getenv(TOKEN_ENV, "").strip()
    team_id = os.getenv(TEAM_ID_ENV, "").strip()
    return token, team_id or None


@dataclass(frozen=True)
class VercelConfig:
    token: str
    team_id: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.token:
            raise MissingTokenError("missing Vercel API token")

    def __repr__(self) -> str:
        # keep the token out of tracebacks and logs
        return (
            f"VercelConfig(team_id={self.team_id!r}, base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True, **kwargs) -> "VercelConfig":
        token, team_id = load_env_config(use_dotenv=use_dotenv)
        if not token:
            raise MissingTokenError(f"{TOKEN_ENV} not set")
        return cls(token=token, team_id=team_id, **kwargs)


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "TOKEN_ENV",
    "TEAM_ID_ENV",
    "MissingTokenError",
    "VercelConfig",
    "load_env_config",
]
