"""Shared plumbing for payment service clients"""

from typing import Any, Dict, Optional

from payment_connector.config import Settings
from payment_connector.infrastructure.clients.responses import handle_response
from payment_connector.infrastructure.clients.transport import PaymentTransport


class ServiceClient:
    """Base for clients: one request per call, response passed through handle_response"""

    def __init__(
        self,
        settings: Settings | None = None,
        locale: str | None = None,
        transport: PaymentTransport | None = None,
    ):
        self.transport = transport or PaymentTransport(settings, locale=locale)

    @property
    def locale(self) -> Optional[str]:
        return self.transport.locale

    def _call(
        self,
        verb: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        root_key: Optional[str] = None,
    ) -> Any:
        response = self.transport.request(verb, path, params)
        return handle_response(verb, response, path, root_key)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
