"""Domain-specific exceptions"""


class PaymentConnectorError(Exception):
    """Base exception for everything raised by the payment connector"""

    pass


class ValidationError(PaymentConnectorError):
    """Payment service rejected the request with 422 Unprocessable Entity"""

    def __init__(self, verb: str, path: str, message: str):
        self.verb = verb
        self.path = path
        self.message = message
        super().__init__(f"'{verb} {path}' failed with status = 422, message: {message}.")


class RequestFailedError(PaymentConnectorError):
    """Payment service answered with an unexpected status code"""

    def __init__(self, verb: str, path: str, status_code: int):
        self.verb = verb
        self.path = path
        self.status_code = status_code
        super().__init__(f"'{verb} {path}' failed with status = {status_code}.")


class ParameterError(PaymentConnectorError):
    """Request parameters were rejected locally, before any network call"""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(message)
