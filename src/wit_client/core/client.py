import logging
import time
from typing import Generator, Optional

import httpx

from .observability import log_event
from .paths import with_version

DEFAULT_BASE_URL = "https://api.wit.ai"
API_VERSION = "20151127"
USER_AGENT = "wit-client/0.1.0 (httpx)"

# Bodies larger than this are summarized in debug logs.
DEBUG_BODY_LIMIT = 1000


class WitClientError(Exception):
    """Base error for client failures."""


class WitTransportError(WitClientError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""


class WitHTTPError(WitClientError):
    """
    Non-200 response. The message is the standard reason phrase for the
    status code; the response body is discarded.
    """

    def __init__(self, *, status_code: int, method: str, url: str, reason: str):
        super().__init__(reason)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.reason = reason


class WitDecodeError(WitClientError):
    def __init__(self, message: str, *, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class WitInvalidRequestError(WitClientError, ValueError):
    """Caller-supplied request is structurally invalid."""


class BearerAuth(httpx.Auth):
    def __init__(self, token: str):
        self._header = f"Bearer {token}"

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request


def reason_phrase(status_code: int) -> str:
    return httpx.codes.get_reason_phrase(status_code) or f"HTTP {status_code}"


class WitClient:
    """
    Shared HTTP transport for the wit.ai REST API.
    - Handles bearer auth, base URL, the API version marker and headers
    - Returns raw body bytes on 200; decoding belongs to the codec
    - One attempt per call; no retries
    """

    def __init__(
        self,
        *,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = API_VERSION,
        timeout_seconds: Optional[float] = None,
        debug: bool = False,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        access_token = access_token or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not access_token:
            raise ValueError("access_token must be provided.")

        self.base_url = base_url
        self.api_version = api_version
        self.timeout_seconds = timeout_seconds
        self.debug = debug
        self.log = logger or logging.getLogger("wit_client.client")

        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=self.base_url,
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=timeout_seconds,
        )
        self._auth = BearerAuth(access_token)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "WitClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
        resource: Optional[str] = None,
    ) -> bytes:
        """
        Core request method.
        - Raises WitHTTPError on any status other than 200
        - Raises WitTransportError on network/timeout errors
        - Returns the full response body on success
        """
        method = method.upper()
        # path is relative ("/entities/...") and may already carry a query.
        url = with_version(f"{self.base_url}{path}", self.api_version)

        headers = {"Accept": "application/json"}
        if content and content_type:
            headers["Content-Type"] = content_type

        if self.debug:
            self._debug_body("wit_request", method, url, content)

        start = time.perf_counter()
        try:
            resp = self.http.request(
                method,
                url,
                content=content or None,
                headers=headers,
                auth=self._auth,
            )
        except httpx.TransportError as exc:
            self._log_call(method, path, "exception", start, resource, exc)
            raise WitTransportError(
                f"Network/timeout error calling {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log_call(method, path, "exception", start, resource, exc)
            raise WitClientError(f"HTTPX error calling {method} {path}: {exc}") from exc

        body = resp.content
        self._log_call(method, path, resp.status_code, start, resource)

        if self.debug:
            self._debug_body("wit_response", method, url, body)

        if resp.status_code != 200:
            raise WitHTTPError(
                status_code=resp.status_code,
                method=method,
                url=str(resp.request.url),
                reason=reason_phrase(resp.status_code),
            )
        return body

    def get(self, path: str, *, resource: Optional[str] = None) -> bytes:
        return self.request("GET", path, resource=resource)

    def post(
        self,
        path: str,
        content: bytes,
        *,
        content_type: Optional[str] = "application/json",
        resource: Optional[str] = None,
    ) -> bytes:
        return self.request(
            "POST", path, content=content, content_type=content_type, resource=resource
        )

    def put(
        self,
        path: str,
        content: bytes,
        *,
        content_type: Optional[str] = "application/json",
        resource: Optional[str] = None,
    ) -> bytes:
        return self.request(
            "PUT", path, content=content, content_type=content_type, resource=resource
        )

    def delete(self, path: str, *, resource: Optional[str] = None) -> bytes:
        return self.request("DELETE", path, resource=resource)

    def _log_call(
        self,
        method: str,
        endpoint: str,
        status,
        start: float,
        resource: Optional[str],
        exc: Optional[BaseException] = None,
    ) -> None:
        log_event(
            "wit_call",
            method=method,
            endpoint=endpoint,
            status=status,
            duration_ms=int((time.perf_counter() - start) * 1000),
            resource=resource,
            error_type=type(exc).__name__ if exc is not None else None,
        )

    def _debug_body(
        self, event: str, method: str, url: str, body: Optional[bytes]
    ) -> None:
        size = len(body or b"")
        if size > DEBUG_BODY_LIMIT:
            payload = f"DATA TOO LARGE {size}"
        else:
            payload = (body or b"").decode("utf-8", errors="replace")
        self.log.debug(
            event, extra={"method": method, "endpoint": url, "body": payload}
        )
