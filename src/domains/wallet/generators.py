"""
Injectable sources for contact ids, wallet address tokens and avatar URLs.
Tests pass deterministic sources; the app uses the clock- and random-backed defaults.
"""

from __future__ import annotations

import random
import time
import uuid
from typing import Callable, Iterable, Iterator

IdSource = Callable[[], int]
TokenSource = Callable[[], str]

AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?u={seed}"

_ADDRESS_HEX_DIGITS = 40


class ClockIdSource:
    """Millisecond clock ids, bumped so consecutive calls never repeat or go backwards."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        now = int(self._clock() * 1000)
        self._last = max(now, self._last + 1)
        return self._last


def sequence_ids(start: int = 1) -> IdSource:
    """Deterministic increasing ids: start, start+1, ..."""
    counter: Iterator[int] = iter(range(start, 2**63))
    return lambda: next(counter)


def random_hex(digits: int = _ADDRESS_HEX_DIGITS, rng: random.Random | None = None) -> str:
    """Return `digits` pseudo-random lowercase hex characters. Not for key material."""
    r = rng or random.Random()
    return "".join(f"{r.randrange(16):x}" for _ in range(digits))


def random_address_source(rng: random.Random | None = None) -> TokenSource:
    """Source of mock wallet addresses: "0x" followed by 40 hex digits."""
    r = rng or random.Random()
    return lambda: "0x" + random_hex(_ADDRESS_HEX_DIGITS, r)


def fixed_tokens(tokens: Iterable[str]) -> TokenSource:
    """Replay the given tokens in order; raises StopIteration when exhausted."""
    it = iter(tokens)
    return lambda: next(it)


def avatar_url(seed: int | str) -> str:
    return AVATAR_URL_TEMPLATE.format(seed=seed)


def opaque_token() -> str:
    """Unguessable one-shot token (delete confirmations)."""
    return uuid.uuid4().hex
