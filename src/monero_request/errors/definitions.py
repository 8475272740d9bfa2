"""All error definitions raised by the validator and the envelope codec."""

from __future__ import annotations

from monero_request.errors.request_errors import CodecError, ValidationError

# -- Seller wallet ---------------------------------------------------------

ErrEmptyWallet = ValidationError("No seller wallet specified.", code="empty-wallet")
ErrBadWalletLength = ValidationError(
    "Incorrect seller wallet address length.", code="bad-wallet-length"
)
ErrBadWalletPrefix = ValidationError(
    "Invalid wallet address. Doesn't start with 4 or 8.", code="bad-wallet-prefix"
)
ErrBadWalletChar = ValidationError("Invalid character in wallet address.", code="bad-wallet-char")

# -- Payment ID ------------------------------------------------------------

ErrBadPaymentIdLength = ValidationError("Invalid PaymentID length.", code="bad-payment-id-length")
ErrBadPaymentIdChar = ValidationError(
    "Invalid character in PaymentID.", code="bad-payment-id-char"
)

# -- Terms -----------------------------------------------------------------

ErrBadDate = ValidationError("StartDate is not a valid date-time.", code="bad-date")
ErrBadCurrency = ValidationError("Unsupported currency.", code="bad-currency")
ErrBadAmount = ValidationError("Amount does not contain a number.", code="bad-amount")
ErrZeroBillingCycle = ValidationError(
    "DaysPerBillingCycle cannot be zero.", code="zero-billing-cycle"
)
ErrCounterOutOfRange = ValidationError(
    "DaysPerBillingCycle and NumberOfPayments must be integers between 0 and 255.",
    code="counter-out-of-range",
)
ErrBadUrl = ValidationError("ChangeIndicatorURL is not a valid absolute URL.", code="bad-url")
ErrUnsupportedVersion = ValidationError("Unsupported version.", code="unsupported-version")

# -- Encoding --------------------------------------------------------------

ErrSerializationFailed = CodecError(
    "Error serializing payment request.", code="serialization-failed"
)
ErrCompressionFailed = CodecError("Error compressing data.", code="compression-failed")

# -- Decoding --------------------------------------------------------------

ErrBadEnvelope = CodecError(
    "Not a supported monero-request envelope.", code="bad-envelope"
)
ErrBadEncoding = CodecError("Envelope payload is not valid base64.", code="bad-encoding")
ErrBadCompression = CodecError(
    "Envelope payload is not a valid compressed stream.", code="bad-compression"
)
ErrBadPayload = CodecError("Envelope payload is not a valid payment request.", code="bad-payload")
