# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful HTTP client for talking to the review web service: it waits a bounded time, retries
# harmless reads when the network hiccups, and turns error replies into clear app errors.

# 🧪 Purpose (Technical Summary):
# Async httpx client with timeout configuration, tenacity retries for idempotent GETs and translation
# of transport failures and HTTP error statuses into the ReviewAppException hierarchy.

# 🔗 Dependencies:
# - httpx: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - app.shared.config.settings (REVIEW_API_BASE_URL, REVIEW_API_TIMEOUT)

# 🔄 Connected Modules / Calls From:
# Used by: HttpReviewStore, HttpProfileStore

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ReviewAppException,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class APIClient:
    """
    Async HTTP client for the Oyster Review API.

    Features:
    - Bearer token authentication
    - Transport timeout (REVIEW_API_TIMEOUT by default)
    - Automatic retry with exponential backoff, for GET requests only
    - Error responses ({"error": {...}}) mapped back to application exceptions
    """

    def __init__(
        self,
        api_name: str,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        read_attempts: int = 3,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.api_name = api_name
        self.base_url = (base_url or settings.REVIEW_API_BASE_URL).rstrip("/")
        self.read_attempts = max(1, read_attempts)

        headers = self._get_default_headers(access_token)
        if client is None:
            client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=timeout or settings.REVIEW_API_TIMEOUT,
                headers=headers,
            )
        else:
            client.headers.update(headers)
        self._client = client

    def _get_default_headers(self, access_token: Optional[str]) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": f"{get_settings().APP_NAME}/{get_settings().APP_VERSION}",
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def close(self) -> None:
        await self._client.aclose()

    # =========================================================================
    # REQUESTS
    # =========================================================================

    async def get(self, path: str, operation: str) -> Any:
        """GET with retries on transport errors (timeouts included)."""
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.read_attempts),
                wait=wait_exponential(multiplier=0.2, max=2),
                retry=retry_if_exception_type(httpx.TransportError),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.get(path)
        except httpx.HTTPError as e:
            raise self._transform_exception(e, "GET", path, operation) from e

        return self._handle_response(response, operation)

    async def send(self, method: str, path: str, payload: Dict[str, Any], operation: str) -> Any:
        """Write request; never retried here."""
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            raise self._transform_exception(e, method, path, operation) from e

        return self._handle_response(response, operation)

    # =========================================================================
    # RESPONSE HANDLING
    # =========================================================================

    def _handle_response(self, response: httpx.Response, operation: str) -> Any:
        """Decoded JSON body; its shape is checked by the caller."""
        if not response.is_success:
            raise self._status_to_exception(response, operation)

        logger.debug(
            f"{self.api_name} API request successful: "
            f"{response.request.method} {response.request.url.path} - {response.status_code}"
        )
        try:
            return response.json()
        except ValueError as e:
            raise StoreError(
                f"{self.api_name} API returned an invalid JSON body",
                operation=operation,
                store=self.api_name,
            ) from e

    def _status_to_exception(self, response: httpx.Response, operation: str) -> ReviewAppException:
        """Transform an error response into the matching application exception."""
        error = self._error_body(response)
        message = error.get("message") or f"{self.api_name} API returned {response.status_code}"
        details = error.get("details") or {}
        status_code = response.status_code

        logger.warning(f"{self.api_name} API {operation} failed: {status_code} {message}")

        if status_code == 404:
            return NotFoundError(message, details=details)
        if status_code == 409:
            return ConflictError(message, details=details)
        if status_code == 401:
            return AuthenticationError(message, details=details)
        if status_code == 403:
            return AuthorizationError(message, details=details)
        if status_code == 422:
            return ValidationError(message, field=details.get("field"), details=details)
        return StoreError(
            message,
            operation=operation,
            store=self.api_name,
            details={"status_code": status_code, **details},
        )

    def _transform_exception(self, exception: httpx.HTTPError, method: str, path: str, operation: str) -> StoreError:
        """Transform transport exceptions into StoreError."""
        if isinstance(exception, httpx.TimeoutException):
            logger.warning(f"{self.api_name} API timeout: {method} {path}")
            return StoreError(f"{self.api_name} API request timed out", operation=operation, store=self.api_name)

        logger.warning(f"{self.api_name} API transport error: {method} {path}: {exception}")
        return StoreError(f"{self.api_name} API unreachable: {exception}", operation=operation, store=self.api_name)

    @staticmethod
    def _error_body(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"]
        return {}
