"""Payment request data models."""

from monero_request.models.request import Currency, PaymentRequest

__all__ = ["Currency", "PaymentRequest"]
