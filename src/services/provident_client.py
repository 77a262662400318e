from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class SpotPriceError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class FetchError(SpotPriceError):
    """Network failure, timeout or non-success HTTP status."""


class ParseError(SpotPriceError):
    """Response body is not valid JSON."""


class SchemaError(SpotPriceError):
    """Decoded payload lacks the records or fields the summary needs."""


class ProvidentMetalsClient:
    """Minimal client for the Provident Metals spot summary feed (refreshed upstream every ~60s)."""

    def __init__(
        self,
        *,
        base_url: str = "https://www.providentmetals.com",
        currency: str = "USD",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if not currency:
            msg = "currency must be provided"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be > 0"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.currency = currency.upper()
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def summary_url(self) -> str:
        return f"{self.base_url}/services/spot/summary.{self.currency}.json"

    def get_spot_summary(self) -> Any:
        return self._request("GET", self.summary_url)

    def _request(self, method: str, url: str) -> Any:
        logger.info("Requesting spot summary %s", url)
        try:
            response = self._session.request(method, url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            payload: Any | None = None
            if resp is not None:
                payload = resp.text
            raise FetchError("Spot summary request failed", status_code=status_code, payload=payload) from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            raise FetchError("Spot summary request failed", status_code=status_code) from exc

        try:
            payload_raw = response.json()
        except ValueError as exc:
            raise ParseError(
                "Spot summary returned invalid JSON", status_code=response.status_code, payload=response.text
            ) from exc

        logger.debug("Spot summary payload: %s", payload_raw)
        return payload_raw


__all__ = ["FetchError", "ParseError", "ProvidentMetalsClient", "SchemaError", "SpotPriceError"]
