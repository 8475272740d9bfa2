"""monero-request — encode and decode Monero payment request envelopes."""

from monero_request.codec import decode, decode_payment_request, encode, encode_payment_request
from monero_request.errors.request_errors import CodecError, MoneroRequestError, ValidationError
from monero_request.models.request import Currency, PaymentRequest
from monero_request.payment_id import generate_payment_id
from monero_request.validation import validate

__all__ = [
    "CodecError",
    "Currency",
    "MoneroRequestError",
    "PaymentRequest",
    "ValidationError",
    "decode",
    "decode_payment_request",
    "encode",
    "encode_payment_request",
    "generate_payment_id",
    "validate",
]
