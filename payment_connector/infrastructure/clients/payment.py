"""Payment service client for resources not bound to a single merchant"""

from typing import Any, Dict, List, Optional

from payment_connector.infrastructure.clients.base import ServiceClient


class PaymentClient(ServiceClient):
    """Client for merchant listings, disputes and country reference data"""

    def get_merchants(self, query: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Retrieve a filtered list of merchants.

        Args:
            query: Filter and cursor parameters (e.g. filter, page, per_page)

        Returns:
            Decoded body: the "merchants" array plus the "meta" pagination block
        """
        return self._call("GET", "/v1/merchants/", query or {})

    def get_disputes(self, query: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """Retrieve a filtered list of disputes; body holds "disputes" and "meta" """
        return self._call("GET", "/v1/disputes/", query or {})

    def get_dispute(self, dispute_id: str) -> Optional[Dict[str, Any]]:
        return self._call("GET", f"/v1/disputes/{dispute_id}", root_key="dispute")

    def update_dispute(
        self,
        current_user: str,
        dispute_id: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """
        Update a dispute, i.e. attach new evidence.

        Args:
            current_user: Identifier of the acting user
            dispute_id: Dispute to update
            payload: Attributes to change, usually {"evidence": {...}}
        """
        params = {"current_user": current_user, **(payload or {})}
        return self._call("PUT", f"/v1/disputes/{dispute_id}", params)

    def get_supported_countries(self) -> Optional[List[Any]]:
        return self._call("GET", "/v1/countries/", root_key="countries")

    def get_verification_fields(self, country: str) -> Optional[Any]:
        """Fields the payment processor requires to verify accounts in a country"""
        return self._call(
            "GET",
            f"/v1/countries/{country}/verification_fields",
            root_key="verification_fields",
        )

    def get_bank_account_currencies(self, country: str) -> Optional[Any]:
        return self._call(
            "GET",
            f"/v1/countries/{country}/bank_account_currencies",
            root_key="bank_account_currencies",
        )
