"""Payment request field validation.

Rules are evaluated in a fixed order so the reported error is deterministic
when several fields are invalid:

1. CustomLabel — empty → default label
2. SellersWallet — presence, length, prefix, charset
3. PaymentID — empty → random; length, charset
4. StartDate — empty → now; parsed and re-rendered as canonical UTC
5. Currency — member of :class:`Currency`
6. Amount — contains a number
7. DaysPerBillingCycle — nonzero byte
8. NumberOfPayments — any byte
9. ChangeIndicatorURL — empty or an absolute URL usable as a base
10. Version — empty → "1"; otherwise must be "1"

Defaults are written back to the request only once every rule has passed.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from monero_request.errors.definitions import (
    ErrBadAmount,
    ErrBadCurrency,
    ErrBadDate,
    ErrBadPaymentIdChar,
    ErrBadPaymentIdLength,
    ErrBadUrl,
    ErrBadWalletChar,
    ErrBadWalletLength,
    ErrBadWalletPrefix,
    ErrCounterOutOfRange,
    ErrEmptyWallet,
    ErrUnsupportedVersion,
    ErrZeroBillingCycle,
)
from monero_request.models.request import (
    CURRENT_VERSION,
    DEFAULT_LABEL,
    Currency,
    PaymentRequest,
    is_counter,
)
from monero_request.payment_id import HEX_CHARS, PAYMENT_ID_LENGTH, generate_payment_id

if TYPE_CHECKING:
    import random

logger = logging.getLogger(__name__)

# Standard and integrated address lengths
WALLET_LENGTHS = frozenset({95, 106})
WALLET_PREFIXES = frozenset("48")
# Superset of base58; not a strict base58 check
_WALLET_REGEX = re.compile(r"[0-9A-Za-z]+")
_PAYMENT_ID_REGEX = re.compile(f"[{HEX_CHARS}]+")
# Digits with optional grouping / decimal separators, anywhere in the text
_AMOUNT_REGEX = re.compile(r"[0-9]+(?:[.,][0-9]+)*")

_CURRENCIES = frozenset(c.value for c in Currency)
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as canonical UTC text, e.g. ``2023-04-26T13:45:33.123Z``.

    Millisecond precision, widened to microseconds when the value carries
    sub-millisecond digits so the rendered text denotes the same instant.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC)
    timespec = "microseconds" if utc.microsecond % 1000 else "milliseconds"
    return utc.isoformat(timespec=timespec).replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO 8601 / RFC 3339 or RFC 2822 date-time.

    Naive values are taken to be UTC.

    Raises:
        ValueError: If *raw* is not a recognisable date-time.
    """
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(raw)
        except (TypeError, ValueError, IndexError) as exc:
            msg = f"unrecognised date-time: {raw!r}"
            raise ValueError(msg) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _check_wallet(wallet: str) -> None:
    if not wallet:
        raise ErrEmptyWallet()
    if len(wallet) not in WALLET_LENGTHS:
        raise ErrBadWalletLength()
    if wallet[0] not in WALLET_PREFIXES:
        raise ErrBadWalletPrefix()
    if not _WALLET_REGEX.fullmatch(wallet):
        raise ErrBadWalletChar()


def _check_payment_id(payment_id: str) -> None:
    if len(payment_id) != PAYMENT_ID_LENGTH:
        raise ErrBadPaymentIdLength()
    if not _PAYMENT_ID_REGEX.fullmatch(payment_id):
        raise ErrBadPaymentIdChar()


def _normalize_start_date(start_date: str, now: datetime | None) -> str:
    if not start_date:
        return format_timestamp(now if now is not None else datetime.now(UTC))
    try:
        return format_timestamp(parse_timestamp(start_date))
    except (ValueError, OverflowError) as exc:
        raise ErrBadDate() from exc


def _check_url(url: str) -> None:
    if not url:
        return
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except PydanticValidationError as exc:
        raise ErrBadUrl() from exc
    # Opaque URLs (mailto:, data:) cannot serve as a base
    if not str(parsed).partition(":")[2].startswith("/"):
        raise ErrBadUrl()


def validate(
    request: PaymentRequest,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> None:
    """Normalize and validate *request* in place.

    Args:
        request: The request to check. Its ``custom_label``, ``payment_id``,
            ``start_date`` and ``version`` are rewritten on success.
        rng: Randomness for a generated payment ID.
        now: Moment used when ``start_date`` is empty. Defaults to the
            current UTC time.

    Raises:
        ValidationError: The first rule (in order) that the request breaks.
    """
    custom_label = request.custom_label or DEFAULT_LABEL

    _check_wallet(request.sellers_wallet or "")

    payment_id = request.payment_id
    if not payment_id:
        payment_id = generate_payment_id(rng)
        logger.debug("Generated payment ID for request without one")
    _check_payment_id(payment_id)

    start_date = _normalize_start_date(request.start_date or "", now)

    if request.currency not in _CURRENCIES:
        raise ErrBadCurrency()

    if not isinstance(request.amount, str) or not _AMOUNT_REGEX.search(request.amount):
        raise ErrBadAmount()

    if not is_counter(request.days_per_billing_cycle):
        raise ErrCounterOutOfRange()
    if request.days_per_billing_cycle == 0:
        raise ErrZeroBillingCycle()

    if not is_counter(request.number_of_payments):
        raise ErrCounterOutOfRange()

    _check_url(request.change_indicator_url or "")

    version = request.version or CURRENT_VERSION
    if version != CURRENT_VERSION:
        raise ErrUnsupportedVersion()

    request.custom_label = custom_label
    request.payment_id = payment_id
    request.start_date = start_date
    request.version = version
