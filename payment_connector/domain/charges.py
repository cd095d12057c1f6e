"""Charge creation parameters - key set checked locally before they reach the payment service"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from payment_connector.domain.exceptions import ParameterError

REQUIRED_PARAMS = ("credit_card_token", "amount_cents", "currency")
OPTIONAL_PARAMS = (
    "customer_name",
    "customer_address",
    "customer_email",
    "statement_descriptor",
    "services",
    "description",
    "capture",
)


class CreateChargeParams(BaseModel):
    """Allowed keys of the body for POST /v1/merchants/{mid}/charges; values pass through untouched"""

    model_config = ConfigDict(extra="forbid")

    credit_card_token: Any
    amount_cents: Any
    currency: Any

    customer_name: Any = None
    customer_address: Any = None
    customer_email: Any = None
    statement_descriptor: Any = None
    services: Any = None
    description: Any = None
    capture: Any = None


def verify_charge_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check charge parameter keys and return the payload to send.

    Requirements:
    - credit_card_token, amount_cents and currency must be present
    - No keys outside the required and optional sets
    - Values are not checked; the payment service validates them

    Raises:
        ParameterError: Naming the first missing or unknown parameter
    """
    params = {str(key): value for key, value in params.items()}

    for required in REQUIRED_PARAMS:
        if required not in params:
            raise ParameterError(required, f"Parameter {required} missing")

    try:
        CreateChargeParams(**params)
    except PydanticValidationError as e:
        parameter = str(e.errors()[0]["loc"][0])
        raise ParameterError(parameter, f"Unknown parameter {parameter} passed in") from e

    return params
