"""Classification of payment service responses"""

from typing import Any, Optional

import httpx

from payment_connector.domain.exceptions import RequestFailedError, ValidationError

GENERIC_VALIDATION_MESSAGE = "request error"


def handle_response(verb: str, response: httpx.Response, path: str, root_key: Optional[str] = None) -> Any:
    """
    Turn a payment service response into decoded JSON, None, or an exception.

    Policy:
    - 2xx: decoded body, or body[root_key] when a root key is given
    - 404: None, never an exception
    - 422: ValidationError with the body's "error" field
    - anything else: RequestFailedError naming verb, path and status

    Raises:
        ValidationError: On 422 Unprocessable Entity
        RequestFailedError: On any other non-2xx status except 404
    """
    status_code = response.status_code

    if 200 <= status_code <= 299:
        return _handle_success(response, root_key)
    if status_code == 404:
        return None
    if status_code == 422:
        raise ValidationError(verb, path, _validation_message(response))
    raise RequestFailedError(verb, path, status_code)


def _handle_success(response: httpx.Response, root_key: Optional[str]) -> Any:
    if not response.content:
        return None
    data = response.json()
    if root_key is None:
        return data
    # A missing root key reads as None, same as an absent resource
    return data.get(root_key) if isinstance(data, dict) else None


def _validation_message(response: httpx.Response) -> Any:
    try:
        data = response.json()
    except ValueError:
        return GENERIC_VALIDATION_MESSAGE
    if isinstance(data, dict) and "error" in data:
        return data["error"]
    return GENERIC_VALIDATION_MESSAGE
