"""Random payment ID generation."""

from __future__ import annotations

import random

HEX_CHARS = "0123456789abcdef"
PAYMENT_ID_LENGTH = 16

# OS entropy, safe to share between threads
_SYSTEM_RANDOM = random.SystemRandom()


def generate_payment_id(rng: random.Random | None = None) -> str:
    """Generate a random payment ID for an integrated address.

    Args:
        rng: Source of randomness. Defaults to a process-wide
            ``random.SystemRandom``; pass a seeded ``random.Random`` for
            reproducible output.

    Returns:
        16 lowercase hex characters, e.g. ``"60b6a010501201f1"``.
    """
    source = rng if rng is not None else _SYSTEM_RANDOM
    return "".join(source.choice(HEX_CHARS) for _ in range(PAYMENT_ID_LENGTH))
