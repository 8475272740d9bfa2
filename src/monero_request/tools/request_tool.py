#!/usr/bin/env python3
"""Monero Request Tool — encode, decode and generate payment IDs.

    # Encode a JSON payment request (file path, or - for stdin)
    python -m monero_request.tools.request_tool encode request.json

    # Decode an envelope back to JSON
    python -m monero_request.tools.request_tool decode monero-request:1:H4sI...

    # Generate random payment IDs
    python -m monero_request.tools.request_tool payment-id [count]

The JSON record uses the envelope field names (CustomLabel, SellersWallet,
Currency, Amount, PaymentID, StartDate, DaysPerBillingCycle,
NumberOfPayments, ChangeIndicatorURL, Version). CustomLabel, PaymentID,
StartDate, ChangeIndicatorURL and Version may be omitted.

Settings come from MONEROREQUEST_* environment variables, optionally
backed by a YAML file named in MONEROREQUEST_CONFIG_PATH.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from monero_request.codec import decode_payment_request, encode_payment_request
from monero_request.config.settings import ToolConfig
from monero_request.errors.request_errors import MoneroRequestError
from monero_request.models.request import PaymentRequest
from monero_request.payment_id import generate_payment_id

logger = logging.getLogger(__name__)

# Fields a hand-written request may leave out
_OPTIONAL_FIELDS = {
    "CustomLabel": "",
    "PaymentID": "",
    "StartDate": "",
    "ChangeIndicatorURL": "",
    "Version": "",
}


def _read_request(source: str) -> PaymentRequest:
    """Load a JSON payment request from a file path, or stdin for ``-``."""
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, dict):
        msg = "payment request JSON must be an object"
        raise ValueError(msg)
    return PaymentRequest.from_dict({**_OPTIONAL_FIELDS, **data})


def _cmd_encode(source: str) -> None:
    """Encode a JSON payment request and print the envelope."""
    request = _read_request(source)
    print(encode_payment_request(request))


def _cmd_decode(envelope: str, *, pretty: bool) -> None:
    """Decode an envelope and print the payment request as JSON."""
    request = decode_payment_request(envelope.strip())
    print(json.dumps(request.to_dict(), indent=2 if pretty else None, ensure_ascii=False))


def _cmd_payment_id(count: int) -> None:
    """Print *count* random payment IDs."""
    if count < 1:
        msg = f"payment ID count must be at least 1, got {count}"
        raise ValueError(msg)
    for _ in range(count):
        print(generate_payment_id())


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    config = ToolConfig()
    logging.basicConfig(level=config.log_level.value)

    if not args:
        print(__doc__)
        return 1

    cmd = args[0].lower()
    try:
        if cmd == "encode":
            if len(args) < 2:
                print("Usage: request_tool encode <request.json|->")
                return 1
            _cmd_encode(args[1])
        elif cmd == "decode":
            if len(args) < 2:
                print("Usage: request_tool decode <envelope>")
                return 1
            _cmd_decode(args[1], pretty=config.output.pretty)
        elif cmd == "payment-id":
            count = int(args[1]) if len(args) > 1 else config.output.payment_id_count
            _cmd_payment_id(count)
        else:
            print(f"Unknown command: {cmd}")
            print(__doc__)
            return 1
    except MoneroRequestError as exc:
        print(f"{exc.code}: {exc.message}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        logger.debug("Command %s failed", cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
