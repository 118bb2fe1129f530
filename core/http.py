# =============================================================================
# core/http.py  —  HTTP Fetch Adapter
# =============================================================================
#
# One small wrapper around a requests.Session used by every provider flow.
#
# Both verbs return a FetchResult instead of raising:
#   FetchSuccess(data)                       → parsed JSON body
#   FetchFailure(reason, status_code, ...)   → anything else
#
# Callers branch on `result.ok`.  Turning a failure into user-facing text is
# NOT done here; provider flows raise core.exceptions errors and the tool
# dispatcher renders them.
#
# There are no retries and no caching.  The timeout is whatever Settings
# says (None = wait for the server).
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import requests
from requests import Response
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

GEO_JSON = "application/geo+json"


@dataclass(frozen=True)
class FetchSuccess:
    data: Any
    status_code: int = 200

    ok = True


@dataclass(frozen=True)
class FetchFailure:
    """Why a fetch produced no usable JSON.

    reason is one of "network", "http_status" or "invalid_json".
    message carries the provider's own error text when the body had one.
    """

    reason: str
    status_code: Optional[int] = None
    message: Optional[str] = None

    ok = False

    def describe(self) -> str:
        if self.message:
            return self.message
        if self.status_code is not None:
            return f"{self.reason} (HTTP {self.status_code})"
        return self.reason


FetchResult = Union[FetchSuccess, FetchFailure]


def _provider_message(response: Response) -> Optional[str]:
    """Pull an error string out of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("error", "detail", "title"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class HttpClient:
    """Thin JSON-over-HTTP client shared by the provider flows."""

    def __init__(
        self,
        user_agent: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_json(self, url: str) -> FetchResult:
        """GET `url` with the fixed Accept / User-Agent headers."""
        headers = {"User-Agent": self.user_agent, "Accept": GEO_JSON}
        return self._request("GET", url, headers=headers)

    def post_json(self, url: str, payload: dict, headers: Optional[dict] = None) -> FetchResult:
        """POST `payload` as a JSON body, merging any extra headers."""
        merged = {"User-Agent": self.user_agent, "Content-Type": "application/json"}
        merged.update(headers or {})
        return self._request("POST", url, headers=merged, json=payload)

    def close(self) -> None:
        self._session.close()

    def _request(self, method: str, url: str, **kwargs) -> FetchResult:
        try:
            response: Response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return FetchFailure(reason="network", message=None)

        if not response.ok:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            return FetchFailure(
                reason="http_status",
                status_code=response.status_code,
                message=_provider_message(response),
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body", method, url)
            return FetchFailure(reason="invalid_json", status_code=response.status_code)

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return FetchSuccess(data=data, status_code=response.status_code)
