"""Domain models - typed representations of payment service payloads"""

import re
from datetime import date, datetime
from functools import total_ordering
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from payment_connector.utils.date_utils import parse_date, parse_datetime

T = TypeVar("T")

# Sent in place of an owner list to make the payment service delete all owners
CLEAR_OWNERS = ""


class PaymentObject(BaseModel):
    """Base for objects decoded from payment service JSON; unknown keys are dropped"""

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        coerce_numbers_to_str=True,
    )

    def update_attributes(self, attrs: Optional[Dict[str, Any]] = None) -> "PaymentObject":
        """Assign every known field or settable property present in attrs"""
        cls = type(self)
        for key, value in (attrs or {}).items():
            key = str(key)
            descriptor = getattr(cls, key, None)
            if key in cls.model_fields or (isinstance(descriptor, property) and descriptor.fset):
                setattr(self, key, value)
        return self


class DateOfBirth(PaymentObject):
    """Date of birth; each part is optional and kept as sent"""

    day: Optional[Union[int, str]] = None
    month: Optional[Union[int, str]] = None
    year: Optional[Union[int, str]] = None

    def is_complete(self) -> bool:
        return all(part is not None and part != "" for part in (self.day, self.month, self.year))


class Address(PaymentObject):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class Verification(PaymentObject):
    """Identity document verification state"""

    details: Optional[str] = None
    details_code: Optional[str] = None
    document: Optional[str] = None
    status: Optional[str] = None


class DobConvertible(PaymentObject):
    """Adds conversion between the dob parts and a calendar date"""

    dob: Optional[DateOfBirth] = None

    @model_validator(mode="before")
    @classmethod
    def _apply_dob_date(cls, data: Any) -> Any:
        # "dob_date" in an incoming map wins over "dob" when it parses
        if isinstance(data, dict) and "dob_date" in data:
            data = dict(data)
            parsed = parse_date(data.pop("dob_date"))
            if parsed is not None:
                data["dob"] = {"year": parsed.year, "month": parsed.month, "day": parsed.day}
        return data

    @property
    def dob_date(self) -> Optional[date]:
        if self.dob is None or not self.dob.is_complete():
            return None
        try:
            return date(int(self.dob.year), int(self.dob.month), int(self.dob.day))
        except (TypeError, ValueError):
            return None

    @dob_date.setter
    def dob_date(self, value: Any) -> None:
        parsed = parse_date(value)
        if parsed is None:
            return
        self.dob = DateOfBirth(year=parsed.year, month=parsed.month, day=parsed.day)


class AdditionalOwner(DobConvertible):
    """Company owner besides the account representative"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[Address] = None
    verification: Optional[Verification] = None


def _owner_index(key: Any) -> Any:
    try:
        return (0, int(key))
    except (TypeError, ValueError):
        return (1, str(key))


class LegalEntity(DobConvertible):
    """Business or personal identity required for account verification"""

    # A new owner list always replaces the old one; CLEAR_OWNERS deletes all
    additional_owners: Union[List[AdditionalOwner], Literal[""], None] = None
    address: Optional[Address] = None
    business_name: Optional[str] = None
    business_tax_id: Optional[str] = None
    business_tax_id_provided: Optional[bool] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    personal_id_number: Optional[str] = None
    personal_id_number_provided: Optional[bool] = None
    ssn_last_4: Optional[str] = None
    ssn_last_4_provided: Optional[bool] = None
    type: Optional[str] = None
    verification: Optional[Verification] = None

    @field_validator("additional_owners", mode="before")
    @classmethod
    def _normalize_owners(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, dict):
            # Index-keyed form submissions: {"0": {...}, "1": {...}}
            return [value[key] for key in sorted(value, key=_owner_index)]
        return list(value)

    def model_post_init(self, __context: Any) -> None:
        self._clear_owners_if_single()

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in ("type", "additional_owners"):
            self._clear_owners_if_single()

    def _clear_owners_if_single(self) -> None:
        if (self.type == "individual" or self.number_of_owners == 1) and self.additional_owners != CLEAR_OWNERS:
            self.additional_owners = CLEAR_OWNERS

    def clear_additional_owners(self) -> None:
        self.additional_owners = CLEAR_OWNERS

    @property
    def number_of_owners(self) -> int:
        """Every account has one owner; companies may have additional ones"""
        return len(self.additional_owners or []) + 1

    def as_hash(self, include_none: bool = True) -> Dict[str, Any]:
        """JSON-ready payload; without include_none, empty values and empty maps are dropped"""
        data = self.model_dump(mode="json")
        return data if include_none else _prune(data)


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {key: _prune(item) for key, item in value.items()}
        return {key: item for key, item in pruned.items() if item is not None and item != {}}
    if isinstance(value, list):
        return [_prune(item) for item in value]
    return value


class BankAccount(PaymentObject):
    """Payout bank account attached to a connected account"""

    bank_name: Optional[str] = None
    currency: Optional[str] = None
    created_at: Optional[str] = None
    last4: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None

    @property
    def date_created(self) -> Optional[date]:
        return parse_date(self.created_at)


def _empty_legal_entity() -> LegalEntity:
    return LegalEntity(additional_owners=[], address=Address(), verification=Verification())


class ConnectedAccount(PaymentObject):
    """Payment processor sub-account: verification, payouts and capabilities"""

    account_id: Optional[str] = None
    active_bank_accounts: List[BankAccount] = Field(default_factory=list)
    charges_count: Optional[int] = None
    last_charge_created_at: Optional[str] = None
    legal_entity: LegalEntity = Field(default_factory=_empty_legal_entity)
    meta: Optional[Dict[str, Any]] = None
    publishable_key: Optional[str] = None
    verification_disabled_reason: Optional[str] = None
    verification_due_by: Optional[str] = None
    verification_fields_needed: List[str] = Field(default_factory=list)
    charges_enabled: Optional[bool] = None
    transfers_enabled: Optional[bool] = None
    country: Optional[str] = None

    @field_validator("active_bank_accounts", mode="before")
    @classmethod
    def _normalize_bank_accounts(cls, value: Any) -> Any:
        if not value:
            return []
        return list(value.values()) if isinstance(value, dict) else value

    @field_validator("legal_entity", mode="before")
    @classmethod
    def _normalize_legal_entity(cls, value: Any) -> Any:
        return _empty_legal_entity() if value is None else value

    @field_validator("verification_fields_needed", mode="before")
    @classmethod
    def _normalize_fields_needed(cls, value: Any) -> Any:
        return value or []

    @property
    def account_exists(self) -> bool:
        return bool(self.account_id)

    @property
    def account_active(self) -> bool:
        return self.account_exists and self.verification_disabled_reason is None

    @property
    def disabled_reason(self) -> str:
        """Human readable disabled reason, e.g. "fields needed" """
        if self.verification_disabled_reason is None:
            return ""
        return " ".join(self.verification_disabled_reason.split("_"))

    @property
    def update_until(self) -> Optional[date]:
        return parse_date(self.verification_due_by)

    @property
    def last_charge(self) -> Optional[date]:
        return parse_date(self.last_charge_created_at)

    @property
    def fields_needed(self) -> str:
        """
        Comma separated list of the missing verification fields.

        Example:
            ["legal_entity.dob.day", "external_account"]
            → "Legal Entity Dob Day, External Account"
        """
        return ", ".join(
            " ".join(word.capitalize() for word in re.split(r"[._]", field))
            for field in self.verification_fields_needed
        )


class Merchant(PaymentObject):
    """Merchant known to the payment service"""

    id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    stripe: ConnectedAccount = Field(default_factory=ConnectedAccount)
    stripe_publishable_key: Optional[str] = None
    charge_limit_per_day: Optional[int] = None

    @field_validator("stripe", mode="before")
    @classmethod
    def _normalize_stripe(cls, value: Any) -> Any:
        return ConnectedAccount() if value is None else value

    @property
    def mid(self) -> Optional[str]:
        return self.id


class CustomerAddress(PaymentObject):
    street: Optional[str] = None
    zip: Optional[str] = None
    city: Optional[str] = None


class ChargeService(PaymentObject):
    """Service line item billed with a charge"""

    service_name: Optional[str] = None
    service_price_cents: Optional[int] = None


@total_ordering
class Charge(PaymentObject):
    """Card charge; charges compare by charge_id"""

    charge_id: Optional[str] = None
    status: Optional[str] = None
    captured: Optional[bool] = None
    amount_cents: Optional[int] = None
    amount_refunded_cents: Optional[int] = None
    currency: Optional[str] = None
    customer_name: Optional[str] = None
    customer_address: Optional[CustomerAddress] = None
    customer_email: Optional[str] = None
    credit_card_brand: Optional[str] = None
    credit_card_last4: Optional[str] = None
    description: Optional[str] = None
    services: List[ChargeService] = Field(default_factory=list)
    origin: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("services", mode="before")
    @classmethod
    def _normalize_services(cls, value: Any) -> Any:
        return value or []

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, value: Any) -> Any:
        return parse_datetime(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Charge):
            return NotImplemented
        return self.charge_id == other.charge_id

    def __lt__(self, other: "Charge") -> bool:
        if not isinstance(other, Charge):
            return NotImplemented
        return (self.charge_id or "") < (other.charge_id or "")


class Evidence(PaymentObject):
    """Counter-evidence submitted for a dispute"""

    product_description: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email_address: Optional[str] = None
    billing_address: Optional[str] = None
    receipt: Optional[str] = None
    customer_signature: Optional[str] = None
    customer_communication: Optional[str] = None
    uncategorized_file: Optional[str] = None
    uncategorized_text: Optional[str] = None
    service_date: Optional[str] = None
    service_documentation: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_carrier: Optional[str] = None
    shipping_date: Optional[str] = None
    shipping_documentation: Optional[str] = None
    shipping_tracking_number: Optional[str] = None


class Dispute(PaymentObject):
    """Chargeback raised against a charge"""

    id: Optional[str] = Field(default=None, validation_alias=AliasChoices("id", "dispute_id"))
    status: Optional[str] = None
    reason: Optional[str] = None
    amount_cents: Optional[int] = None
    currency: Optional[str] = None
    merchant_id: Optional[str] = None
    has_evidence: Optional[bool] = None
    past_due: Optional[bool] = None
    submission_count: Optional[int] = None
    evidence: Optional[Evidence] = None
    due_by: Optional[date] = None
    created_at: Optional[date] = None
    charge: Optional[Charge] = None

    @field_validator("due_by", "created_at", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Any:
        return parse_date(value)


class Collection(BaseModel, Generic[T]):
    """A page of items plus the pagination block of a list response"""

    current_page: Optional[int] = None
    per_page: Optional[int] = None
    total_pages: Optional[int] = None
    total_count: Optional[int] = None
    items: List[T] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Union[Dict[str, Any], List[Any]], root_key: str) -> "Collection[T]":
        """
        Build from a list response.

        Example:
            Collection[Dispute].from_response(
                {"meta": {"current_page": 1, ...}, "disputes": [...]}, "disputes"
            )
        """
        if isinstance(response, list):
            return cls.model_validate({"items": response})
        meta = response.get("meta") or {}
        return cls.model_validate({**meta, "items": response.get(root_key) or []})

    def __len__(self) -> int:
        return len(self.items)
