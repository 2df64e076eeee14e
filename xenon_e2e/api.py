"""
REST client for API scenarios.

Thin wrapper over Playwright's request context that carries the bearer
token and knows the paging convention of list endpoints.
"""

import json
import logging
from typing import Any, Dict, Optional

from playwright.sync_api import APIRequestContext, APIResponse
from playwright.sync_api import Error as PlaywrightError

from .auth import auth_headers

logger = logging.getLogger(__name__)


class ApiClient:
    """Token-bearing API client bound to a request context."""

    def __init__(self, request: APIRequestContext, token: str):
        self.request = request
        self.token = token

    @property
    def headers(self) -> Dict[str, str]:
        return auth_headers(self.token)

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> APIResponse:
        logger.debug("GET %s %s", endpoint, params or "")
        return self.request.get(endpoint, params=params, headers=self.headers)

    def post(self, endpoint: str, data: Any = None) -> APIResponse:
        logger.debug("POST %s", endpoint)
        return self.request.post(endpoint, data=_encode(data), headers=self.headers)

    def put(self, endpoint: str, data: Any = None) -> APIResponse:
        logger.debug("PUT %s", endpoint)
        return self.request.put(endpoint, data=_encode(data), headers=self.headers)

    def delete(self, endpoint: str) -> APIResponse:
        logger.debug("DELETE %s", endpoint)
        return self.request.delete(endpoint, headers=self.headers)

    def list(self, endpoint: str, page: Optional[int] = 1, page_size: int = 10) -> APIResponse:
        """GET a paged list endpoint (``page`` / ``pageSize`` query params)."""
        params: Dict[str, Any] = {"pageSize": page_size}
        if page is not None:
            params["page"] = page
        return self.get(endpoint, params=params)

    @staticmethod
    def first_item_id(response: APIResponse) -> Optional[Any]:
        """id of the first ``items`` entry of a 200 list response, else None."""
        if response.status != 200:
            return None
        try:
            payload = response.json()
        except (PlaywrightError, ValueError):
            return None
        items = payload.get("items") if isinstance(payload, dict) else None
        if not items:
            return None
        return items[0].get("id")


def _encode(data: Any) -> Optional[str]:
    # {} must still go out as a JSON body
    return json.dumps(data) if data is not None else None
