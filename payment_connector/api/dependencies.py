"""Client factories and logging setup for SDK entry points"""

from payment_connector.config import Settings, get_settings
from payment_connector.infrastructure.clients.merchant import MerchantClient
from payment_connector.infrastructure.clients.payment import PaymentClient
from payment_connector.infrastructure.observability.logging import setup_logging


def get_payment_client(locale: str | None = None, settings: Settings | None = None) -> PaymentClient:
    """Provide a client for merchant listings, disputes and reference data"""
    return PaymentClient(settings=settings or get_settings(), locale=locale)


def get_merchant_client(mid: str, locale: str | None = None, settings: Settings | None = None) -> MerchantClient:
    """Provide a client bound to one merchant"""
    return MerchantClient(mid, settings=settings or get_settings(), locale=locale)


def configure_logging(settings: Settings | None = None) -> None:
    """Install JSON logging at the configured level"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, service_name=settings.service_name)
