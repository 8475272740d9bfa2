"""Tests for random payment ID generation."""

from __future__ import annotations

import random
import re
import threading

from monero_request.payment_id import HEX_CHARS, PAYMENT_ID_LENGTH, generate_payment_id

_HEX16 = re.compile(r"[0-9a-f]{16}")


class TestGeneratePaymentId:
    def test_length_and_charset(self) -> None:
        pid = generate_payment_id()
        assert len(pid) == PAYMENT_ID_LENGTH == 16
        assert _HEX16.fullmatch(pid)

    def test_no_repeats(self) -> None:
        ids = {generate_payment_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_injected_rng_is_deterministic(self) -> None:
        a = generate_payment_id(random.Random(42))
        b = generate_payment_id(random.Random(42))
        assert a == b
        assert _HEX16.fullmatch(a)

    def test_injected_rng_advances(self) -> None:
        rng = random.Random(42)
        assert generate_payment_id(rng) != generate_payment_id(rng)

    def test_all_symbols_reachable(self) -> None:
        rng = random.Random(7)
        seen = set("".join(generate_payment_id(rng) for _ in range(200)))
        assert seen == set(HEX_CHARS)

    def test_concurrent_callers(self) -> None:
        results: list[str] = []
        lock = threading.Lock()

        def worker() -> None:
            batch = [generate_payment_id() for _ in range(100)]
            with lock:
                results.extend(batch)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 800
        assert len(set(results)) == 800
