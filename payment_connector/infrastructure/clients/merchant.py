"""Payment service client bound to a single merchant"""

from typing import Any, Dict, Optional

from payment_connector.config import Settings
from payment_connector.domain.charges import verify_charge_params
from payment_connector.infrastructure.clients.base import ServiceClient
from payment_connector.infrastructure.clients.transport import PaymentTransport


class MerchantClient(ServiceClient):
    """Client for one merchant's account, charges, bank accounts and connected account"""

    def __init__(
        self,
        mid: str,
        settings: Settings | None = None,
        locale: str | None = None,
        transport: PaymentTransport | None = None,
    ):
        super().__init__(settings=settings, locale=locale, transport=transport)
        self.mid = mid

    @property
    def base_path(self) -> str:
        return f"/v1/merchants/{self.mid}"

    def get_merchant(self) -> Optional[Dict[str, Any]]:
        """Retrieve the merchant; None if the payment service does not know it"""
        return self._call("GET", self.base_path, root_key="merchant")

    def create_merchant(self, current_user: str, meta: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        params = {"current_user": current_user, "meta": meta or {}}
        return self._call("POST", self.base_path, params)

    def update_merchant(self, current_user: str, attributes: Dict[str, Any]) -> Optional[Any]:
        """Partially update non-stripe attributes of the merchant"""
        params = {**attributes, "current_user": current_user}
        return self._call("PUT", self.base_path, params)

    def get_charges(self, query: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Retrieve the merchant's charges.

        Args:
            query: Pagination parameters (page, per_page)

        Returns:
            Decoded body holding a "charges" array
        """
        return self._call("GET", f"{self.base_path}/charges", query or {})

    def get_charge(self, charge_id: str) -> Optional[Dict[str, Any]]:
        return self._call("GET", f"{self.base_path}/charges/{charge_id}", root_key="charge")

    def get_charge_for_appointment(self, appointment_id: str) -> Optional[Dict[str, Any]]:
        return self._call(
            "GET",
            f"{self.base_path}/charges/for_appointment/{appointment_id}",
            root_key="charge",
        )

    def create_charge(self, current_user: str, params: Dict[str, Any]) -> Optional[Any]:
        """
        Create a charge for the merchant.

        Raises:
            ParameterError: Before any request when a required parameter is
                missing or an unknown one is passed
        """
        payload = verify_charge_params(params)
        return self._call("POST", f"{self.base_path}/charges", {"current_user": current_user, **payload})

    def update_charge(self, current_user: str, charge_id: str, attributes: Dict[str, Any]) -> Optional[Any]:
        params = {**attributes, "current_user": current_user}
        return self._call("PUT", f"{self.base_path}/charges/{charge_id}", params)

    def capture_charge(self, current_user: str, charge_id: str) -> Optional[Any]:
        """Capture a previously uncaptured charge"""
        return self._call(
            "POST",
            f"{self.base_path}/charges/{charge_id}/capture",
            {"current_user": current_user},
        )

    def create_refund(self, current_user: str, charge_id: str, amount_refunded_cents: int) -> Optional[Any]:
        params = {"current_user": current_user, "amount_refunded_cents": amount_refunded_cents}
        return self._call("POST", f"{self.base_path}/charges/{charge_id}/refund", params)

    def add_bank_account(self, current_user: str, bank_token: str) -> Optional[Any]:
        """
        Attach a bank account to the merchant.

        Args:
            current_user: Identifier of the acting user
            bank_token: Token generated by the payment processor's API
        """
        params = {"current_user": current_user, "bank_token": bank_token}
        return self._call("POST", f"{self.base_path}/bank_accounts", params)

    def add_stripe_account(self, current_user: str, stripe_payload: Dict[str, Any]) -> Optional[Any]:
        """Create or edit the merchant's connected account; same endpoint for both"""
        params = {"current_user": current_user, **stripe_payload}
        return self._call("PUT", f"{self.base_path}/stripe", params)

    def get_tax_calculations(self, query: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        return self._call("GET", f"{self.base_path}/tax_calculations", query or {})
