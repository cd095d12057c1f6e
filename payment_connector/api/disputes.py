"""Dispute operations combining the payment client with domain models"""

from typing import Any, Dict, Optional, Union

from payment_connector.api.dependencies import get_payment_client
from payment_connector.config import Settings
from payment_connector.domain.models import Collection, Dispute, Evidence


def fetch_dispute(
    dispute_id: str,
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Optional[Dispute]:
    """Dispute by id; None when the payment service does not know it"""
    with get_payment_client(locale=locale, settings=settings) as client:
        payload = client.get_dispute(dispute_id)
    return Dispute.model_validate(payload) if payload is not None else None


def list_disputes(
    params: Optional[Dict[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> Optional[Collection[Dispute]]:
    """
    Page of disputes matching the filter.

    A "locale" entry in params selects the response language and is
    not sent as a filter.
    """
    params = dict(params or {})
    locale = params.pop("locale", None)

    with get_payment_client(locale=locale, settings=settings) as client:
        response = client.get_disputes(params)

    if response is None:
        return None
    return Collection[Dispute].from_response(response, "disputes")


def update_dispute_evidence(
    current_user: str,
    dispute: Union[Dispute, str],
    evidence: Union[Evidence, Dict[str, Any]],
    locale: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """Submit counter-evidence for a dispute"""
    dispute_id = dispute.id if isinstance(dispute, Dispute) else dispute
    if isinstance(evidence, Evidence):
        evidence = evidence.model_dump(exclude_none=True)

    with get_payment_client(locale=locale, settings=settings) as client:
        return client.update_dispute(current_user, dispute_id, {"evidence": evidence})
