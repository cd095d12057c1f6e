"""Authenticated HTTP transport for the payment service"""

import time
from typing import Any, Dict, List, Optional, Tuple

import httpx

from payment_connector.config import Settings, get_settings
from payment_connector.infrastructure.observability.logging import log_request
from payment_connector.infrastructure.observability.metrics import record_request, record_transport_failure


def encode_query(params: Dict[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    """
    Flatten nested query parameters using bracket notation.

    Example:
        {"filter": {"state": "disabled"}, "ids": [1, 2]}
        → [("filter[state]", "disabled"), ("ids[]", "1"), ("ids[]", "2")]
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, dict):
            pairs.extend(encode_query(value, name))
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, dict):
                    pairs.extend(encode_query(item, f"{name}[]"))
                else:
                    pairs.append((f"{name}[]", _query_value(item)))
        elif value is not None:
            pairs.append((name, _query_value(value)))
    return pairs


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PaymentTransport:
    """
    Sends requests to the payment service with basic auth.

    GET parameters travel in the query string, POST/PUT parameters as a
    JSON body. When a locale is set it is added to every query string.
    Transport errors from httpx are not translated.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        locale: str | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.locale = locale if locale is not None else self.settings.locale
        self._auth = httpx.BasicAuth(self.settings.secret, self.settings.password)
        self._client = httpx.Client(base_url=self.settings.base_uri, transport=http_transport)

    def request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        method = method.upper()
        query: Dict[str, Any] = {"locale": self.locale} if self.locale else {}
        body: Optional[Dict[str, Any]] = None

        if method == "GET":
            query.update(params or {})
        else:
            body = params or {}

        start_time = time.time()
        try:
            response = self._client.request(
                method,
                path,
                params=encode_query(query),
                json=body,
                auth=self._auth,
            )
        except httpx.TransportError:
            record_transport_failure(method)
            raise

        duration = time.time() - start_time
        record_request(method, path, response.status_code, duration)
        log_request(method, path, response.status_code, duration * 1000)
        return response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PaymentTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
