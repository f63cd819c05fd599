import logging
import time
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .auth import VercelAuth
from .core.config import VercelConfig
from .core.observability import log_event
from .models import ErrorResponse
from .projects import ProjectApi

T = TypeVar("T", bound=BaseModel)


class VercelClientError(Exception):
    """Base error for client failures."""


class VercelAPIError(VercelClientError):
    """
    The API answered with a status other than the one the operation expects.
    `code` is the stable identity from the error envelope, e.g. "not_found".
    """

    def __init__(
        self,
        *,
        code: str,
        message: str,
        status_code: int,
        method: str,
        url: str,
    ):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url

    def __repr__(self) -> str:
        return (
            f"VercelAPIError(code={self.code!r}, status_code={self.status_code}, "
            f"method={self.method!r}, url={self.url!r})"
        )


class VercelParseError(VercelClientError):
    """A response body could not be decoded."""


class VercelModelValidationError(VercelParseError):
    """A response body was JSON but did not match the expected model."""


class VercelClient:
    """
    Async HTTP client for the Vercel REST API.
    - Handles auth (bearer token + optional teamId), base URL, timeouts
    - One request per call; no retries
    - Transport errors (network, timeouts, cancellation) propagate unchanged
    - Resource methods live on `client.projects`
    """

    def __init__(
        self,
        config: VercelConfig,
        *,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.log = logger or logging.getLogger("vercel_client.client")

        self._auth = VercelAuth(config.token, config.team_id)

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=config.timeout_seconds,
        )

        self.projects = ProjectApi(self)

    @classmethod
    def from_env(cls, **kwargs) -> "VercelClient":
        return cls(VercelConfig.from_env(), **kwargs)

    def __repr__(self) -> str:
        return f"VercelClient(base_url={self.base_url!r}, team_id={self.config.team_id!r})"

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "VercelClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        expected_status: int,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
    ) -> httpx.Response:
        """
        Core request method.
        - Returns the response when its status equals expected_status
        - Raises VercelAPIError with the envelope's error code otherwise
        - Raises VercelParseError if the error body can't be decoded
        """
        method = method.upper()
        start = time.perf_counter()
        status: Any = "exception"
        error_type: Optional[str] = None

        try:
            resp = await self.http.request(
                method, path, params=params, json=json, auth=self._auth
            )
            status = resp.status_code
        except BaseException as exc:
            error_type = type(exc).__name__
            raise
        finally:
            log_event(
                "vercel_call",
                logger=self.log,
                operation=operation,
                method=method,
                endpoint=path,
                status=status,
                duration_ms=int((time.perf_counter() - start) * 1000),
                error_type=error_type,
            )

        if resp.status_code != expected_status:
            raise self._to_api_error(resp, method=method)

        return resp

    def _decode_json(self, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise VercelParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    def _to_api_error(self, resp: httpx.Response, *, method: str) -> VercelClientError:
        url = str(resp.request.url)
        payload = self._decode_json(resp)
        try:
            envelope = ErrorResponse.model_validate(payload)
        except ValidationError as exc:
            return VercelParseError(
                f"Unexpected {resp.status_code} from {method} {url} "
                f"without an error envelope: {exc}"
            )

        self.log.debug(
            "vercel.error",
            extra={
                "method": method,
                "endpoint": resp.request.url.path,
                "status": resp.status_code,
                "error_type": envelope.error.code,
            },
        )
        return VercelAPIError(
            code=envelope.error.code,
            message=envelope.error.message,
            status_code=resp.status_code,
            method=method,
            url=url,
        )

    def parse_model(self, model: Type[T], resp: httpx.Response) -> T:
        payload = self._decode_json(resp)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise VercelModelValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc

    def parse_model_list(self, model: Type[T], resp: httpx.Response) -> List[T]:
        payload = self._decode_json(resp)
        try:
            return TypeAdapter(List[model]).validate_python(payload)
        except ValidationError as exc:
            raise VercelModelValidationError(
                f"Response did not match list of {model.__name__}: {exc}"
            ) from exc

    async def request_model(
        self, model: Type[T], method: str, path: str, **kwargs: Any
    ) -> T:
        resp = await self.request(method, path, **kwargs)
        return self.parse_model(model, resp)

    async def request_model_list(
        self, model: Type[T], method: str, path: str, **kwargs: Any
    ) -> List[T]:
        resp = await self.request(method, path, **kwargs)
        return self.parse_model_list(model, resp)


def create_client_from_env(**kwargs) -> VercelClient:
    """Create a VercelClient from VERCEL_TOKEN / VERCEL_TEAM_ID."""
    return VercelClient.from_env(**kwargs)


__all__ = [
    "VercelClient",
    "VercelClientError",
    "VercelAPIError",
    "VercelParseError",
    "VercelModelValidationError",
    "create_client_from_env",
]
