"""Pytest fixtures for testing"""

import json
import uuid
from typing import Any, Dict, List, Optional

import httpx
import pytest

from payment_connector.config import Settings
from payment_connector.infrastructure.clients.merchant import MerchantClient
from payment_connector.infrastructure.clients.payment import PaymentClient
from payment_connector.infrastructure.clients.transport import PaymentTransport

TEST_BASE_URI = "http://payment.test/"


class FakePaymentService:
    """Records requests and replays one canned response for each of them"""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Optional[bytes] = b"{}"

    def respond(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        if body is None:
            self.body = b""
        elif isinstance(body, (str, bytes)):
            self.body = body.encode() if isinstance(body, str) else body
        else:
            self.body = json.dumps(body).encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"content-type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(base_uri=TEST_BASE_URI, secret="secret", password="", locale="en")


@pytest.fixture
def payment_service() -> FakePaymentService:
    return FakePaymentService()


@pytest.fixture
def transport(settings: Settings, payment_service: FakePaymentService) -> PaymentTransport:
    return PaymentTransport(settings, http_transport=httpx.MockTransport(payment_service.handler))


@pytest.fixture
def mid() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def merchant_client(mid: str, transport: PaymentTransport) -> MerchantClient:
    return MerchantClient(mid, transport=transport)


@pytest.fixture
def payment_client(transport: PaymentTransport) -> PaymentClient:
    return PaymentClient(transport=transport)


def merchant_response(mid: str, **attributes: Any) -> Dict[str, Any]:
    """Merchant body as the payment service returns it"""
    response = {
        "id": mid,
        "stripe_publishable_key": "test key",
        "stripe": {
            "account_id": "acct_test",
            "verification_disabled_reason": "fields_needed",
            "verification_due_by": "2016-04-03",
            "verification_fields_needed": [
                "external_account",
                "legal_entity.dob.day",
                "legal_entity.dob.month",
                "legal_entity.dob.year",
                "legal_entity.first_name",
                "legal_entity.last_name",
                "legal_entity.type",
                "tos_acceptance.date",
                "tos_acceptance.ip",
            ],
            "active_bank_accounts": [
                {
                    "status": "new",
                    "currency": "usd",
                    "bank_name": "STRIPE TEST BANK",
                    "name": None,
                    "last4": "6789",
                },
                {
                    "status": "new",
                    "currency": "eur",
                    "bank_name": "STRIPE TEST BANK",
                    "name": "Body and Soul",
                    "created_at": "2016-02-05",
                    "last4": "3000",
                },
            ],
            "country": "DE",
            "charges_enabled": True,
            "transfers_enabled": False,
            "legal_entity": {
                "address": {
                    "city": "Munchen",
                    "country": "DE",
                    "line1": "Mittenwalder Str. 1",
                    "line2": "",
                    "postal_code": "82000",
                    "state": "",
                },
                "first_name": "First",
                "last_name": "Last",
                "dob": {"year": "1970", "month": "2", "day": "3"},
                "type": "company",
                "additional_owners": [
                    {
                        "address": {
                            "city": "Munchen",
                            "country": "DE",
                            "line1": "Mittenwalder Str. 1",
                            "line2": "",
                            "postal_code": "82000",
                            "state": "",
                        },
                        "first_name": "Joe",
                        "last_name": "Smith",
                        "dob": {"year": "1980", "month": "11", "day": "01"},
                        "verification": {
                            "details": "additional detail",
                            "details_code": "scan_corrupt",
                            "document": "fil_95BZxW2eZvKYlo2CvQbrn9dc",
                            "status": "verified",
                        },
                    },
                    {
                        "first_name": "Jane",
                        "last_name": "Smith",
                        "dob": {"year": "1981", "month": "12", "day": "21"},
                    },
                ],
                "verification": {
                    "details": "detail",
                    "details_code": "scan_corrupt",
                    "document": "fil_15BZxW2eZvKYlo2CvQbrn9dc",
                    "status": "verified",
                },
            },
        },
    }
    response.update(attributes)
    return response


def disputes_response() -> Dict[str, Any]:
    return {
        "meta": {"current_page": 1, "per_page": 20, "total_pages": 1, "total_count": 0},
        "disputes": [
            {
                "created_at": "2016-02-18T10:10:10Z",
                "dispute_id": "dp_17Vv962eZvKYlo2CU7XhGGzB",
                "due_by": "2016-03-18T10:10:10Z",
                "has_evidence": False,
                "merchant_id": str(uuid.uuid4()),
                "reason": "general",
                "status": "lost",
            },
            {
                "created_at": "2016-02-19T11:09:10Z",
                "dispute_id": "dp_18Vv962eZvKYlo2CU7XhGGzB",
                "due_by": "2016-03-19T11:09:10Z",
                "has_evidence": True,
                "merchant_id": str(uuid.uuid4()),
                "reason": "bank_cannot_process",
                "status": "under_review",
            },
        ],
    }


def dispute_response(mid: str) -> Dict[str, Any]:
    return {
        "dispute": {
            "id": "dp_17Vv962eZvKYlo2CU7XhGGzB",
            "status": "under_review",
            "reason": "bank_cannot_process",
            "amount_cents": 10000,
            "currency": "eur",
            "created_at": "2016-02-19T11:09:10Z",
            "merchant_id": mid,
            "due_by": "2016-03-19T11:09:10Z",
            "has_evidence": True,
            "past_due": False,
            "submission_count": 0,
            "charge": {"charge_id": "ch_17kyvuBJMmId6xqIDWIRAimq"},
            "evidence": {
                "product_description": None,
                "customer_name": None,
                "customer_email_address": None,
                "receipt": None,
                "shipping_tracking_number": None,
            },
        }
    }


def charge_response() -> Dict[str, Any]:
    return {
        "charge": {
            "charge_id": "ch_17ft3sBJMmId6xqIBzqPSK6a",
            "amount_cents": 11825,
            "amount_refunded_cents": 1800,
            "status": "succeeded",
            "captured": "true",
            "customer_name": "James Bond",
            "customer_address": {
                "street": "Rosenheimerstr. 1145e",
                "zip": "81321",
                "city": "Munchen",
            },
            "customer_email": "jb@mail.com",
            "credit_card_brand": "Visa",
            "credit_card_last4": "1121",
            "description": "Lorem ipsum...",
            "currency": "eur",
            "created_at": "2016-02-18T14:47:20Z",
            "services": [
                {"service_name": "Haircut Women", "service_price_cents": 1800},
                {"service_name": "Haircut Women - Wash, cut and blow dry", "service_price_cents": 1800},
            ],
        }
    }


@pytest.fixture
def make_merchant_response():
    return merchant_response


@pytest.fixture
def merchant_payload(mid: str) -> Dict[str, Any]:
    return merchant_response(mid)


@pytest.fixture
def dispute_payload(mid: str) -> Dict[str, Any]:
    return dispute_response(mid)


@pytest.fixture
def disputes_payload() -> Dict[str, Any]:
    return disputes_response()


@pytest.fixture
def charge_payload() -> Dict[str, Any]:
    return charge_response()
