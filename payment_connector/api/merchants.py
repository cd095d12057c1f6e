"""Merchant operations combining the merchant client with domain models"""

import logging
from typing import Any, Dict, List, Optional, Union

from payment_connector.api.dependencies import get_merchant_client, get_payment_client
from payment_connector.config import Settings
from payment_connector.domain.models import Charge, Collection, ConnectedAccount, LegalEntity, Merchant

logger = logging.getLogger(__name__)


def _unwrap(payload: Any, root_key: str) -> Any:
    if isinstance(payload, dict) and root_key in payload:
        return payload[root_key]
    return payload


def fetch_or_create_merchant(
    current_user: str,
    mid: str,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Merchant:
    """
    Fetch a merchant from the payment service, creating it when it does not exist.

    Flow:
    1. GET the merchant
    2. On 404, POST an empty merchant with the same id
    3. Build the Merchant model from whichever body came back
    """
    with get_merchant_client(mid, locale=locale, settings=settings) as client:
        payload = client.get_merchant()
        if payload is None:
            logger.info("Merchant not found, creating it", extra={"mid": mid})
            payload = _unwrap(client.create_merchant(current_user), "merchant")

    return Merchant.model_validate(payload or {"id": mid})


def list_merchants(
    params: Optional[Dict[str, Any]] = None,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Optional[Collection[Merchant]]:
    """Page of merchants matching the filter; None on 404"""
    with get_payment_client(locale=locale, settings=settings) as client:
        response = client.get_merchants(params or {})

    if response is None:
        return None
    return Collection[Merchant].from_response(response, "merchants")


def list_charges(
    mid: str,
    query: Optional[Dict[str, Any]] = None,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> List[Charge]:
    """Charges of a merchant in the order the payment service returns them"""
    with get_merchant_client(mid, locale=locale, settings=settings) as client:
        response = client.get_charges(query or {})

    charges = _unwrap(response, "charges") or []
    return [Charge.model_validate(attrs) for attrs in charges]


class MerchantAccount:
    """A merchant together with the user acting on it"""

    def __init__(
        self,
        current_user: str,
        merchant: Union[Merchant, Dict[str, Any]],
        locale: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self.current_user = current_user
        self.merchant = merchant if isinstance(merchant, Merchant) else Merchant.model_validate(merchant)
        self.locale = locale
        self.settings = settings

    @classmethod
    def from_payment_service(
        cls,
        current_user: str,
        mid: str,
        locale: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> "MerchantAccount":
        merchant = fetch_or_create_merchant(current_user, mid, locale=locale, settings=settings)
        return cls(current_user, merchant, locale=locale, settings=settings)

    @property
    def id(self) -> Optional[str]:
        return self.merchant.id

    @property
    def mid(self) -> Optional[str]:
        return self.merchant.id

    @property
    def meta(self) -> Optional[Dict[str, Any]]:
        return self.merchant.meta

    @property
    def stripe(self) -> ConnectedAccount:
        return self.merchant.stripe

    @property
    def stripe_publishable_key(self) -> Optional[str]:
        return self.merchant.stripe_publishable_key

    def add_bank_account(self, bank_token: str) -> Any:
        with get_merchant_client(self.mid, locale=self.locale, settings=self.settings) as client:
            return client.add_bank_account(self.current_user, bank_token)

    def create_stripe_account(self, country: str, legal_entity: Optional[LegalEntity] = None) -> Any:
        """Open the connected account for a country with the given (or current) legal entity"""
        legal_entity = legal_entity or self.stripe.legal_entity
        payload = {"country": country, "legal_entity": legal_entity.as_hash(include_none=False)}
        return self.update_stripe_account(payload)

    def update_stripe_account(self, stripe_payload: Dict[str, Any]) -> Any:
        payload = {
            key: value.as_hash(include_none=False) if isinstance(value, LegalEntity) else value
            for key, value in stripe_payload.items()
        }
        with get_merchant_client(self.mid, locale=self.locale, settings=self.settings) as client:
            return client.add_stripe_account(self.current_user, payload)

    def charges(self, query: Optional[Dict[str, Any]] = None) -> List[Charge]:
        return list_charges(self.mid, query, locale=self.locale, settings=self.settings)

    def supported_countries(self) -> List[Any]:
        with get_payment_client(locale=self.locale, settings=self.settings) as client:
            return client.get_supported_countries() or []

    def bank_account_currencies(self, country: Optional[str] = None) -> Any:
        """Currencies accepted for payout accounts; defaults to the connected account's country"""
        with get_payment_client(locale=self.locale, settings=self.settings) as client:
            return client.get_bank_account_currencies(country or self.stripe.country)

    def verification_fields(self, country: Optional[str] = None) -> Any:
        with get_payment_client(locale=self.locale, settings=self.settings) as client:
            return client.get_verification_fields(country or self.stripe.country)
