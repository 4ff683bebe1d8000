"""
Concurrent decoding tests.

Leader decoding holds no shared state, so many threads can decode from the
same buffer at once and each gets its own independent result.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from marc21 import Incomplete, InvalidRecordLength, Leader


def make_buffer(count):
    """Helper to build back-to-back five digit length fields."""
    return b"".join(str(n).zfill(5).encode("ascii") for n in range(count))


class TestConcurrentDecoding:
    """Decode leaders from several threads."""

    def test_parallel_decode_shared_buffer(self):
        count = 2000
        buffer = memoryview(make_buffer(count))

        def decode(n):
            return Leader.from_bytes(buffer[n * 5:]).record_length()

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(decode, range(count)))

        assert results == list(range(count))

    def test_parallel_errors_are_independent(self):
        inputs = [b"00001", b"12", b"-1000", b"99999"] * 50

        def classify(data):
            try:
                return Leader.from_bytes(data).record_length()
            except Incomplete as e:
                return ("incomplete", e.needed.size)
            except InvalidRecordLength:
                return "invalid"

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(classify, inputs))

        assert results == [1, ("incomplete", 3), "invalid", 99999] * 50

    @pytest.mark.parametrize("workers", [1, 2, 4])
    def test_results_are_not_shared(self, workers):
        with ThreadPoolExecutor(max_workers=workers) as executor:
            leaders = list(executor.map(Leader.from_bytes, [b"00042"] * 10))
        assert all(leader == Leader(42) for leader in leaders)
        assert len({id(leader) for leader in leaders}) == 10
