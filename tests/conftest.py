"""Shared test fixtures for the monero-request test suite."""

from __future__ import annotations

import random
from datetime import UTC, datetime

import pytest

from monero_request.models.request import PaymentRequest

VALID_WALLET = (
    "4At3X5rvVypTofgmueN9s9QtrzdRe5BueFrskAZi17BoYbhzysozzoMFB6zWnTKdGC6AxEAbEE5czFR3hbEEJbsm4hCeX2S"
)
VALID_PAYMENT_ID = "60b6a010501201f1"


@pytest.fixture
def sample_request() -> PaymentRequest:
    """Provide a fully populated, valid payment request."""
    return PaymentRequest(
        custom_label="A label",
        sellers_wallet=VALID_WALLET,
        currency="USD",
        amount="123.45",
        payment_id=VALID_PAYMENT_ID,
        start_date="2023-04-26T13:45:33.123Z",
        days_per_billing_cycle=30,
        number_of_payments=12,
        change_indicator_url="https://example.com",
        version="1",
    )


@pytest.fixture
def minimal_request() -> PaymentRequest:
    """Provide a valid request with every defaultable field left empty."""
    return PaymentRequest(
        sellers_wallet=VALID_WALLET,
        currency="XMR",
        amount="1",
        days_per_billing_cycle=7,
        number_of_payments=0,
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic randomness for generated payment IDs."""
    return random.Random(1234)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed 'current time' for empty start dates."""
    return datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


@pytest.fixture
def valid_wallet() -> str:
    """A well-formed 95-character standard address."""
    return VALID_WALLET
