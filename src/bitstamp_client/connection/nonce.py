# src/bitstamp_client/connection/nonce.py

import time
from typing import Callable


class NonceGenerator:
    """
    Generates millisecond nonces for Bitstamp private requests from the wall clock.

    The clock is read once per call and no state is kept between calls, so two
    calls landing in the same millisecond (or straddling a clock adjustment) can
    return the same or a smaller value. Callers that need strictly ordered
    nonces must serialize their private requests.
    """
    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock

    def generate(self) -> int:
        """
        Returns the current epoch time in milliseconds.
        """
        return self._clock() // 1_000_000
