import asyncio
from json import JSONDecodeError, loads
from typing import Any, Optional, Protocol

import httpx
from loguru import logger

from core.exceptions import BackendServiceError
from core.services.internal.session_store import SessionStore


class APIClientHTTPError(BackendServiceError):
    def __init__(
        self,
        status: int,
        text: str,
        *,
        method: str,
        url: str,
        retryable: bool = False,
        reason: str | None = None,
    ) -> None:
        self.status = status
        self.text = text
        self.retryable = retryable
        self.reason = reason
        super().__init__(
            f"HTTP {status} on {method.upper()} {url}: {text}" if text else f"HTTP {status} on {method.upper()} {url}",
            code=status,
            details=reason or "",
        )


class APIClientTransportError(BackendServiceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=503)


class APISettings(Protocol):
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    SUPABASE_REST_URL: str | None
    SUPABASE_AUTH_URL: str | None
    SUPABASE_STORAGE_URL: str | None
    API_MAX_RETRIES: int
    API_RETRY_INITIAL_DELAY: float
    API_RETRY_BACKOFF_FACTOR: float
    API_RETRY_MAX_DELAY: float
    API_TIMEOUT: int


class APIClient:
    def __init__(self, client: httpx.AsyncClient, settings: APISettings, session_store: SessionStore) -> None:
        self.client = client
        self.settings = settings
        self.session_store = session_store
        self.api_key = getattr(settings, "SUPABASE_ANON_KEY", "")
        base_url = getattr(settings, "SUPABASE_URL", "").rstrip("/")
        self.rest_url = (getattr(settings, "SUPABASE_REST_URL", None) or f"{base_url}/rest/v1").rstrip("/")
        self.auth_url = (getattr(settings, "SUPABASE_AUTH_URL", None) or f"{base_url}/auth/v1").rstrip("/")
        self.storage_url = (getattr(settings, "SUPABASE_STORAGE_URL", None) or f"{base_url}/storage/v1").rstrip("/")
        self.max_retries = getattr(settings, "API_MAX_RETRIES", 0)
        self.initial_delay = getattr(settings, "API_RETRY_INITIAL_DELAY", 0.0)
        self.backoff_factor = getattr(settings, "API_RETRY_BACKOFF_FACTOR", 0.0)
        self.max_delay = getattr(settings, "API_RETRY_MAX_DELAY", 0.0)
        self.default_timeout = getattr(settings, "API_TIMEOUT", 0)

    def _auth_headers(self) -> dict[str, str]:
        token = self.session_store.access_token or self.api_key
        headers = {"apikey": self.api_key}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _build_url(base: str, path: str) -> str:
        return f"{base.rstrip('/')}/{path.lstrip('/')}"

    def _rest(self, path: str) -> str:
        return self._build_url(self.rest_url, path)

    def _auth(self, path: str) -> str:
        return self._build_url(self.auth_url, path)

    def _storage(self, path: str) -> str:
        return self._build_url(self.storage_url, path)

    async def _api_request(
        self,
        method: str,
        url: str,
        data: Optional[dict[str, Any] | list[Any]] = None,
        *,
        params: Optional[dict[str, Any]] = None,
        body_bytes: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
        timeout: int | None = None,
        allow_statuses: set[int] | None = None,
        retry_server_errors: bool = True,
    ) -> tuple[int, Any | None]:
        request_headers = self._auth_headers()
        request_headers.update(headers or {})
        timeout_value = timeout or self.default_timeout or None
        allowed = allow_statuses or set()
        attempts = max(1, self.max_retries + 1)
        delay = self.initial_delay

        for attempt in range(1, attempts + 1):
            try:
                request_kwargs: dict[str, Any] = {
                    "headers": request_headers,
                    "params": params,
                    "timeout": timeout_value,
                }
                # raw bodies (storage uploads) bypass json serialization
                if body_bytes is not None:
                    request_kwargs["content"] = body_bytes
                elif data is not None:
                    request_kwargs["json"] = data

                response = await self.client.request(method.upper(), url, **request_kwargs)

                if response.status_code in allowed:
                    return response.status_code, self._parse_response_json(response)

                response.raise_for_status()
                return response.status_code, self._parse_response_json(response)

            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                body = exc.response.text
                reason = self._extract_reason(body)
                retryable = status == 429 or (retry_server_errors and status >= 500)
                if retryable and attempt < attempts:
                    logger.warning(
                        f"Retrying {method.upper()} {url} after HTTP {status} (attempt {attempt}/{attempts})"
                    )
                    await self._sleep(delay)
                    delay = self._next_delay(delay)
                    continue
                raise APIClientHTTPError(
                    status,
                    body,
                    method=method,
                    url=url,
                    retryable=retryable,
                    reason=reason,
                ) from exc

            except httpx.RequestError as exc:
                if attempt >= attempts:
                    raise APIClientTransportError(f"{type(exc).__name__} on {method.upper()} {url}: {exc}") from exc
                logger.warning(
                    f"Retrying {method.upper()} {url} after transport error {type(exc).__name__} "
                    f"(attempt {attempt}/{attempts})"
                )
                await self._sleep(delay)
                delay = self._next_delay(delay)

        raise APIClientTransportError(f"Exhausted retries for {method.upper()} {url}")

    @staticmethod
    async def _sleep(delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)

    def _next_delay(self, current: float) -> float:
        if current <= 0:
            return self.initial_delay or 0.0
        next_delay = current * self.backoff_factor
        if self.max_delay:
            next_delay = min(next_delay, self.max_delay)
        return next_delay

    @staticmethod
    def _parse_response_json(response: httpx.Response) -> Any | None:
        content_type = response.headers.get("content-type", "")
        if "json" in content_type and response.content:
            try:
                return response.json()
            except JSONDecodeError:
                logger.warning(f"Failed to decode JSON response from {response.request.url}")
                return None
        return None

    @staticmethod
    def _extract_reason(body: str) -> str | None:
        if not body:
            return None
        try:
            data = loads(body)
        except JSONDecodeError:
            return None
        if isinstance(data, dict):
            for key in ("message", "msg", "error_description", "error"):
                reason = data.get(key)
                if isinstance(reason, str) and reason:
                    return reason
        return None


__all__ = ["APIClient", "APIClientHTTPError", "APIClientTransportError", "APISettings"]
