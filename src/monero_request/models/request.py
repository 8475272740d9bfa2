"""Payment request data model.

``PaymentRequest`` is the record carried inside a ``monero-request``
envelope. Attributes are snake_case; ``to_dict``/``from_dict`` map them to
the case-sensitive field names used on the wire.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

DEFAULT_LABEL = "Monero Payment Request"
CURRENT_VERSION = "1"

# Wire name → (attribute, type), in canonical serialization order
WIRE_FIELDS: dict[str, tuple[str, type]] = {
    "CustomLabel": ("custom_label", str),
    "SellersWallet": ("sellers_wallet", str),
    "Currency": ("currency", str),
    "Amount": ("amount", str),
    "PaymentID": ("payment_id", str),
    "StartDate": ("start_date", str),
    "DaysPerBillingCycle": ("days_per_billing_cycle", int),
    "NumberOfPayments": ("number_of_payments", int),
    "ChangeIndicatorURL": ("change_indicator_url", str),
    "Version": ("version", str),
}

# DaysPerBillingCycle / NumberOfPayments are single unsigned bytes
COUNTER_MAX = 255


class Currency(enum.StrEnum):
    """Currencies a payment request may be denominated in."""

    XMR = "XMR"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    BTC = "BTC"


def is_counter(value: Any) -> bool:
    """Check that *value* is a plain int that fits in one unsigned byte."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= COUNTER_MAX


def is_utf8_text(value: str) -> bool:
    """Check that *value* encodes as UTF-8 (no lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(slots=True)
class PaymentRequest:
    """A Monero payment request.

    Empty ``custom_label``, ``payment_id``, ``start_date`` and ``version``
    mean "use the default"; validation fills them in.

    Attributes:
        custom_label: Free-form label shown to the payer.
        sellers_wallet: Standard (95) or integrated (106) Monero address.
        currency: Currency code, one of :class:`Currency`.
        amount: Amount per payment, as text.
        payment_id: 16 lowercase hex characters.
        start_date: First payment date, canonical UTC text once validated.
        days_per_billing_cycle: Days between payments, nonzero.
        number_of_payments: Number of payments (0 is allowed).
        change_indicator_url: Where the payer checks for updated terms.
        version: Request format version.
    """

    sellers_wallet: str
    currency: str
    amount: str
    days_per_billing_cycle: int
    number_of_payments: int
    custom_label: str = ""
    payment_id: str = ""
    start_date: str = ""
    change_indicator_url: str = ""
    version: str = ""

    def validate(self, **kwargs: Any) -> None:
        """Normalize and validate this request in place.

        Keyword arguments are passed to :func:`monero_request.validation.validate`.
        """
        from monero_request.validation import validate

        validate(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a wire-keyed dict in canonical field order."""
        return {wire: getattr(self, attr) for wire, (attr, _) in WIRE_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaymentRequest:
        """Parse a wire-keyed dict.

        Args:
            data: Mapping with every field of :data:`WIRE_FIELDS`.

        Returns:
            A PaymentRequest (not yet validated).

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        values: dict[str, Any] = {}
        for wire, (attr, kind) in WIRE_FIELDS.items():
            if wire not in data:
                msg = f"missing field: {wire}"
                raise ValueError(msg)
            value = data[wire]
            if kind is int:
                if not is_counter(value):
                    msg = f"field {wire} must be an integer between 0 and {COUNTER_MAX}"
                    raise ValueError(msg)
            elif not isinstance(value, str):
                msg = f"field {wire} must be a string"
                raise ValueError(msg)
            elif not is_utf8_text(value):
                msg = f"field {wire} is not valid UTF-8 text"
                raise ValueError(msg)
            values[attr] = value
        return cls(**values)
