"""
midas/client.py

HTTP client used by the frontend to talk to the Midas API.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from midas.config import MidasSettings

logger = logging.getLogger(__name__)


class MidasAPIError(RuntimeError):
    """
    Raised when the API rejects a request or cannot be reached.

    ``code`` mirrors the API's error code (e.g. ``invalid_url``) when one
    was returned, else ``request_failed``.
    """

    def __init__(self, message: str, *, code: str = "request_failed", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class MidasAPIClient:
    """
    Thin JSON client over the Midas HTTP API. Requests are never retried.
    """

    def __init__(
        self,
        *,
        settings: MidasSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = settings.api_base_url
        self._timeout_seconds = settings.api_timeout_seconds
        self._session = session or requests.Session()

    def login(self, username: str, password: str) -> dict[str, Any]:
        return self._request("POST", "/login", json={"username": username, "password": password})

    def retailers(self) -> list[str]:
        return self._request("GET", "/retailers")["retailers"]

    def add_product(
        self,
        *,
        user: str,
        url: str,
        name: str,
        retailer: str,
        target_price: str | None = None,
    ) -> str:
        payload = {"url": url, "name": name, "retailer": retailer, "target_price": target_price}
        return self._request("POST", "/products", params={"user": user}, json=payload)["message"]

    def products(self, user: str) -> dict[str, Any]:
        return self._request("GET", "/products", params={"user": user})

    def dashboard(self, user: str) -> dict[str, Any]:
        return self._request("GET", "/dashboard", params={"user": user})

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                json=json,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("Midas API unreachable method=%s url=%s error=%s", method, url, exc)
            raise MidasAPIError("The Midas API could not be reached.") from exc

        if response.status_code >= 400:
            raise _error_from_response(response)

        try:
            return response.json()
        except ValueError as exc:
            raise MidasAPIError("The Midas API returned an invalid response.") from exc


def _error_from_response(response: requests.Response) -> MidasAPIError:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None

    if isinstance(detail, dict) and detail.get("message"):
        return MidasAPIError(
            str(detail["message"]),
            code=str(detail.get("code") or "request_failed"),
            status_code=response.status_code,
        )
    return MidasAPIError(
        f"Request failed with status {response.status_code}.",
        status_code=response.status_code,
    )
