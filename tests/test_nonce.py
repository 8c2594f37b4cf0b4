# tests/test_nonce.py

import time

from bitstamp_client.connection.nonce import NonceGenerator


def test_nonce_is_epoch_milliseconds():
    generator = NonceGenerator(clock=lambda: 1_600_000_000_123_456_789)
    assert generator.generate() == 1_600_000_000_123


def test_nonce_one_second_apart_is_strictly_greater():
    readings = iter([1_600_000_000_000_000_000, 1_600_000_001_000_000_000])
    generator = NonceGenerator(clock=lambda: next(readings))

    first = generator.generate()
    second = generator.generate()

    assert second > first
    assert second - first == 1000


def test_same_millisecond_may_repeat():
    """The clock is the only source, so calls inside one millisecond collide."""
    generator = NonceGenerator(clock=lambda: 1_600_000_000_000_100_000)
    assert generator.generate() == generator.generate()


def test_nonce_format():
    """Ensure nonce is an integer (epoch milliseconds)."""
    generator = NonceGenerator()
    nonce = generator.generate()
    assert isinstance(nonce, int)

    # Sanity check: nonce should be close to current time in ms
    now_ms = int(time.time() * 1000)
    assert abs(nonce - now_ms) < 1000  # Within 1 second
