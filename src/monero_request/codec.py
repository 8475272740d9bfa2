"""Envelope codec — ``monero-request:<version>:<base64(gzip(json))>``.

Encoding validates the request, serializes it to compact JSON in canonical
field order, gzips it with a fixed modification time and base64-encodes
the result behind the ``monero-request:1:`` tag. Identical requests always
produce identical envelopes.

Decoding is the exact inverse and validates the reconstructed request
before returning it.
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
import gzip
import json
import logging
import zlib
from typing import TYPE_CHECKING, Any

from monero_request.errors.definitions import (
    ErrBadCompression,
    ErrBadEncoding,
    ErrBadEnvelope,
    ErrBadPayload,
    ErrCompressionFailed,
    ErrSerializationFailed,
)
from monero_request.errors.request_errors import CodecError
from monero_request.models.request import PaymentRequest
from monero_request.validation import validate

if TYPE_CHECKING:
    import random
    from datetime import datetime

logger = logging.getLogger(__name__)

ENVELOPE_TAG = "monero-request"
ENVELOPE_VERSION = "1"
SUPPORTED_ENVELOPE_VERSIONS = frozenset({ENVELOPE_VERSION})

# Upper bound on the inflated JSON payload
MAX_PAYLOAD_SIZE = 64 * 1024

# Accept either a gzip or a zlib header when inflating
_AUTO_HEADER_WBITS = 32 + zlib.MAX_WBITS


def _serialize(request: PaymentRequest) -> bytes:
    try:
        text = json.dumps(request.to_dict(), separators=(",", ":"), ensure_ascii=False)
        data = text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ErrSerializationFailed() from exc
    if len(data) > MAX_PAYLOAD_SIZE:
        # Would not decode
        raise ErrSerializationFailed()
    return data


def _compress(data: bytes) -> bytes:
    try:
        return gzip.compress(data, mtime=0)
    except (OSError, zlib.error) as exc:
        raise ErrCompressionFailed() from exc


def _split_envelope(envelope: str) -> str:
    """Check the tag and version and return the base64 payload."""
    if not isinstance(envelope, str):
        raise ErrBadEnvelope()
    parts = envelope.split(":", 2)
    if len(parts) != 3:
        raise ErrBadEnvelope()
    tag, version, payload = parts
    if tag != ENVELOPE_TAG or version not in SUPPORTED_ENVELOPE_VERSIONS:
        raise ErrBadEnvelope()
    return payload


def _b64decode(payload: str) -> bytes:
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ErrBadEncoding() from exc


def _inflate(data: bytes) -> bytes:
    try:
        inflater = zlib.decompressobj(wbits=_AUTO_HEADER_WBITS)
        raw = inflater.decompress(data, MAX_PAYLOAD_SIZE + 1)
    except zlib.error as exc:
        raise ErrBadCompression() from exc
    if len(raw) > MAX_PAYLOAD_SIZE or inflater.unconsumed_tail:
        # Inflates past MAX_PAYLOAD_SIZE
        raise ErrBadCompression()
    if not inflater.eof or inflater.unused_data:
        # Truncated stream, or trailing garbage after it
        raise ErrBadCompression()
    return raw


def _deserialize(raw: bytes) -> PaymentRequest:
    try:
        data: Any = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise ErrBadPayload() from exc
    if not isinstance(data, dict):
        raise ErrBadPayload()
    try:
        return PaymentRequest.from_dict(data)
    except ValueError as exc:
        raise ErrBadPayload() from exc


def encode_payment_request(
    request: PaymentRequest,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> str:
    """Validate *request* and encode it as a ``monero-request`` envelope.

    The caller's object is not modified; validation runs on a copy.

    Args:
        request: The payment request to encode.
        rng: Randomness for a generated payment ID.
        now: Moment used when ``start_date`` is empty.

    Returns:
        ASCII envelope string starting with ``monero-request:1:``.

    Raises:
        ValidationError: If the request fails validation.
        CodecError: If serialization or compression fails.
    """
    normalized = dataclasses.replace(request)
    validate(normalized, rng=rng, now=now)

    compressed = _compress(_serialize(normalized))
    payload = base64.b64encode(compressed).decode("ascii")
    envelope = f"{ENVELOPE_TAG}:{ENVELOPE_VERSION}:{payload}"
    logger.debug(
        "Encoded payment request %s (%d bytes compressed)",
        normalized.payment_id,
        len(compressed),
    )
    return envelope


def decode_payment_request(
    envelope: str,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> PaymentRequest:
    """Decode a ``monero-request`` envelope into a validated request.

    Args:
        envelope: The envelope string.
        rng: Randomness for a generated payment ID, should the payload
            carry an empty one.
        now: Moment used should the payload carry an empty start date.

    Returns:
        The reconstructed, validated PaymentRequest.

    Raises:
        CodecError: If the tag, base64, compression or JSON is malformed.
        ValidationError: If the decoded request fails validation.
    """
    try:
        payload = _split_envelope(envelope)
        raw = _inflate(_b64decode(payload))
        request = _deserialize(raw)
    except CodecError as exc:
        logger.warning("Rejected payment request envelope: %s", exc.code)
        raise

    validate(request, rng=rng, now=now)
    logger.debug("Decoded payment request %s", request.payment_id)
    return request


encode = encode_payment_request
decode = decode_payment_request
