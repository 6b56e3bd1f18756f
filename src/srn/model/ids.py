"""
Root identifier generation.

Two 128-bit identifier sources back the root strategies:

1. Time-ordered: UUIDv7 (48-bit Unix milliseconds, then random bits). A
   process-wide generator keeps values strictly increasing, even within one
   millisecond, by stepping the random field forward.
2. Content-addressable: UUIDv5 (SHA-1 of SRN_NAMESPACE + label bytes).

Identifiers are rendered as 26 lowercase Crockford base32 characters. The
alphabet is in ASCII order and the first character only carries 3 bits, so
lexicographic order of the text equals numeric order of the identifier.
"""
from __future__ import annotations

import logging
import secrets
import threading
import time
import uuid
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Fixed namespace for content-addressable roots. Changing it changes every
# content-addressable root ever produced.
SRN_NAMESPACE = uuid.UUID("6f1c0b3e-2d4a-5b8e-9c71-a0d2e4f6b813")

CROCKFORD_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
_DECODE_MAP = {c: i for i, c in enumerate(CROCKFORD_ALPHABET)}
ENCODED_LENGTH = 26

_RAND_BITS = 74
_RAND_MAX = (1 << _RAND_BITS) - 1
_RAND_B_BITS = 62
_MAX_STEP_BITS = 32


def encode_id(value: uuid.UUID) -> str:
    """Encode a UUID as 26 lowercase Crockford base32 characters."""
    n = value.int
    chars = []
    for shift in range(5 * (ENCODED_LENGTH - 1), -1, -5):
        chars.append(CROCKFORD_ALPHABET[(n >> shift) & 0x1F])
    return "".join(chars)


def decode_id(text: str) -> Optional[uuid.UUID]:
    """Decode the output of encode_id; None if `text` is not a valid encoding."""
    if len(text) != ENCODED_LENGTH or text[0] not in "01234567":
        return None
    n = 0
    for char in text:
        digit = _DECODE_MAP.get(char)
        if digit is None:
            return None
        n = (n << 5) | digit
    return uuid.UUID(int=n)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TimeOrderedIdGenerator:
    """
    Monotonic UUIDv7 generator.

    Safe to share between threads: the last timestamp and random field are
    the only state and are updated under a lock.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._clock = clock
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_rand = 0

    def next_id(self) -> uuid.UUID:
        with self._lock:
            now_ms = self._clock()
            if now_ms > self._last_ms:
                ms = now_ms
                rand = secrets.randbits(_RAND_BITS)
            else:
                # Same (or earlier) millisecond: step forward from the last value
                ms = self._last_ms
                rand = self._last_rand + 1 + secrets.randbits(_MAX_STEP_BITS)
                if rand > _RAND_MAX:
                    ms += 1
                    rand = secrets.randbits(_RAND_BITS)
            self._last_ms = ms
            self._last_rand = rand

        rand_a = rand >> _RAND_B_BITS
        rand_b = rand & ((1 << _RAND_B_BITS) - 1)
        value = (
            (ms & 0xFFFF_FFFF_FFFF) << 80
            | 0x7 << 76
            | rand_a << 64
            | 0b10 << 62
            | rand_b
        )
        generated = uuid.UUID(int=value)
        logger.debug("Generated time-ordered id %s (ms=%d)", generated, ms)
        return generated


_default_generator = TimeOrderedIdGenerator()


def new_time_ordered_id() -> uuid.UUID:
    """Next id from the process-wide monotonic generator."""
    return _default_generator.next_id()


def content_id(label: str) -> uuid.UUID:
    """Deterministic UUIDv5 for `label` under SRN_NAMESPACE."""
    return uuid.uuid5(SRN_NAMESPACE, label)


def timestamp_ms(value: uuid.UUID) -> int:
    """Unix milliseconds embedded in a UUIDv7."""
    return value.int >> 80
