import logging
import re
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import httpx

from . import jsonapi
from .auth import BearerTokenAuth, TokenProvider
from .models import JsonApiError, parse_error_list
from .observability import log_event

DEFAULT_BASE_URL = "https://api.appstoreconnect.apple.com"
DEFAULT_MAX_PAGES = 50

ALLOWED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})
VERSIONED_PATH_RE = re.compile(r"^/v\d+/")


class AppStoreConnectClientError(Exception):
    """Base error for client failures."""


class AppStoreConnectAPIError(AppStoreConnectClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        errors: List[JsonApiError],
    ):
        summary = "; ".join(e.summary() for e in errors) or "request failed"
        super().__init__(f"{status_code} {method} {url}: {summary}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.errors = errors

    @property
    def error_list(self) -> List[Dict[str, Any]]:
        return [e.as_dict() for e in self.errors]


class AppStoreConnectParseError(AppStoreConnectClientError):
    pass


class AppStoreConnectClient:
    """
    Shared HTTP client for the App Store Connect JSON:API.
    - Signs every request with a bearer token from the injected provider
    - Returns raw dict envelopes; never interprets data/included
    - No retries: a failed call surfaces immediately
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        base_url: str = DEFAULT_BASE_URL,
        max_pages: int = DEFAULT_MAX_PAGES,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")

        self.base_url = base_url
        self.max_pages = max_pages
        self.token_provider = token_provider
        self.log = logger or logging.getLogger("appstore_connect_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=BearerTokenAuth(token_provider),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "AppStoreConnectClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _check_target(self, url: str) -> None:
        if VERSIONED_PATH_RE.match(url):
            return
        parts = urlsplit(url)
        if parts.scheme and parts.netloc:
            own = urlsplit(self.base_url)
            if (parts.scheme, parts.netloc) == (own.scheme, own.netloc):
                return
            raise ValueError(f"Refusing to call foreign host: {parts.netloc}")
        raise ValueError(
            f"Path must start with a version segment like /v1/ (got {url!r})"
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        tool: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Core request method.
        - url is a versioned path ("/v1/apps") or an absolute URL on the API host
        - Raises AppStoreConnectAPIError on non-2xx HTTP responses
        - Raises AppStoreConnectClientError on network/timeout errors
        - Raises AppStoreConnectParseError if a 2xx body isn't a JSON object
        - Returns {"data": None} for empty bodies (204 No Content, DELETE)
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        self._check_target(url)

        endpoint = urlsplit(url).path
        start = time.perf_counter()
        try:
            resp = await self.http.request(method, url, params=params, json=json)
        except Exception as exc:
            log_event(
                "asc_call",
                tool=tool,
                method=method,
                endpoint=endpoint,
                page=page,
                status="exception",
                error_type=type(exc).__name__,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            if isinstance(exc, httpx.HTTPError):
                raise AppStoreConnectClientError(
                    f"Network error calling {method} {url}: {exc}"
                ) from exc
            raise

        log_event(
            "asc_call",
            tool=tool,
            method=method,
            endpoint=endpoint,
            page=page,
            status=resp.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )

        if not resp.is_success:
            raise self._to_api_error(resp, method=method)

        return self._safe_json(resp)

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        if not resp.content or not resp.content.strip():
            return jsonapi.empty_document()

        try:
            data = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise AppStoreConnectParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise AppStoreConnectParseError(
                f"Expected top-level JSON object from "
                f"{resp.request.method} {resp.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _to_api_error(
        self, resp: httpx.Response, *, method: str
    ) -> AppStoreConnectAPIError:
        try:
            parsed = resp.json()
        except ValueError:
            parsed = None

        errors = parse_error_list(parsed)
        if errors is None:
            # Synthetic entry carrying the raw status when the body is unusable.
            errors = [
                JsonApiError(
                    status=str(resp.status_code),
                    code=f"HTTP_{resp.status_code}",
                    title=resp.reason_phrase or "HTTP error",
                    detail=(resp.text or "")[:500] or None,
                )
            ]

        return AppStoreConnectAPIError(
            status_code=resp.status_code,
            method=method,
            url=str(resp.request.url),
            errors=errors,
        )

    async def request_all_pages(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        tool: Optional[str] = None,
        max_pages: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Follow links.next until exhausted (or max_pages) and concatenate data.
        All-or-nothing: any failing page raises and discards what was gathered.
        """
        limit = max_pages or self.max_pages
        first = await self.request(
            method, url, json=json, params=params, tool=tool, page=1
        )
        if not isinstance(first.get("data"), list):
            return first

        items: List[Any] = list(first["data"])
        next_url = jsonapi.next_link(first)
        pages = 1

        while next_url and pages < limit:
            pages += 1
            # follow-up pages are always plain reads
            page = await self.request("GET", next_url, tool=tool, page=pages)
            items.extend(jsonapi.collection_data(page))
            next_url = jsonapi.next_link(page)

        if next_url:
            self.log.warning(
                "Stopped paginating %s after %d pages; more results remain",
                url,
                pages,
            )

        return jsonapi.merge_pages(first, items)

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, str]] = None,
        tool: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.request("GET", url, params=params, tool=tool)

    async def post(
        self, url: str, *, json: Any, tool: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.request("POST", url, json=json, tool=tool)

    async def patch(
        self, url: str, *, json: Any, tool: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.request("PATCH", url, json=json, tool=tool)

    async def delete(
        self, url: str, *, json: Optional[Any] = None, tool: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.request("DELETE", url, json=json, tool=tool)
