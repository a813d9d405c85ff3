"""java.util.Random compatible generator.

Every value is derived from the 48-bit LCG below and reproduces, bit
for bit, what a JVM returns for the same seed and call sequence. This
is not a cryptographic generator.
"""
import logging
import time
from abc import ABC, abstractmethod

from pydantic import ValidationError

from javarand.config import settings
from javarand.errors import ErrorCode, RandomError
from javarand.logic.bits import to_i32, to_i64, to_u64, to_u8
from javarand.logic.models import RandomState


logger = logging.getLogger(__name__)

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
MASK = (1 << 48) - 1

# Integer.MAX_VALUE; larger bounds are negative ints on the JVM
MAX_BOUND = (1 << 31) - 1


class RNGBase(ABC):
    """Minimal RNG interface shared by simulation code."""

    @abstractmethod
    def random(self) -> float:
        """Return random float in [0, 1)."""
        pass

    @abstractmethod
    def randint(self, a: int, b: int) -> int:
        """Return random int in [a, b] inclusive."""
        pass


def resolve_default_seed() -> int:
    """Raw seed for JavaRandom(): the configured default, else the clock."""
    if settings.default_seed is not None:
        logger.debug("Seeding from configured default_seed=%d", settings.default_seed)
        return settings.default_seed

    millis = to_i64(time.time_ns() // 1_000_000)
    logger.debug("Seeding from wall clock: %d", millis)
    return millis


class JavaRandom(RNGBase):
    """
    Python port of the java.util.Random algorithm.

    The seed passed in is scrambled before it is stored, so ``seed``
    reports the internal register rather than the caller's value:

        >>> JavaRandom(0).seed
        25214903917
        >>> JavaRandom(0).next_int()
        -1155484576

    Each draw mutates the instance. Share one across threads only under
    an external lock; there is no internal synchronization.
    """

    def __init__(self, seed: int | None = None):
        self._seed = 0
        self.set_seed(resolve_default_seed() if seed is None else seed)

    @classmethod
    def from_state(cls, state: RandomState | dict) -> "JavaRandom":
        """Build a generator positioned exactly at a saved state."""
        rng = cls(0)
        rng.set_state(state)
        return rng

    @property
    def seed(self) -> int:
        """The scrambled 48-bit internal seed (not the constructor argument)."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Re-seed in place; identical to constructing with ``seed``."""
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise RandomError(
                ErrorCode.INVALID_SEED,
                f"Seed must be an integer, got {type(seed).__name__}.",
            )
        self._seed = (to_i64(seed) ^ MULTIPLIER) & MASK

    def get_state(self) -> RandomState:
        return RandomState(seed=self._seed)

    def set_state(self, state: RandomState | dict) -> None:
        """Restore a snapshot taken with get_state(). No scrambling is applied."""
        if not isinstance(state, RandomState):
            try:
                state = RandomState.model_validate(state)
            except ValidationError as exc:
                raise RandomError(ErrorCode.INVALID_STATE, str(exc)) from exc
        logger.debug("Restoring state 0x%012x", state.seed)
        self._seed = state.seed

    def _next(self, bits: int) -> int:
        """Advance the LCG and return its top ``bits`` bits as a signed int32."""
        self._seed = (self._seed * MULTIPLIER + INCREMENT) & MASK
        return to_i32(to_u64(self._seed) >> (48 - bits))

    def next_int(self, bound: int | None = None) -> int:
        """
        Return a signed 32-bit int, or an int in [0, bound) when bound is given.

        Raises:
            RandomError: INVALID_BOUND unless 0 < bound <= 2**31 - 1
        """
        if bound is None:
            return self._next(32)

        if isinstance(bound, bool) or not isinstance(bound, int) or not 0 < bound <= MAX_BOUND:
            raise RandomError(
                ErrorCode.INVALID_BOUND,
                f"bound must be between 1 and {MAX_BOUND}, got {bound!r}.",
            )

        if bound & -bound == bound:
            return to_i32((bound * self._next(31)) >> 31)

        # Reject draws from the truncated top of the range to stay unbiased.
        # The sum overflows int32 exactly when bits falls in that range.
        while True:
            bits = self._next(31)
            val = bits % bound
            if to_i32(bits - val + (bound - 1)) >= 0:
                return val

    def next_long(self) -> int:
        """Return a signed 64-bit int built from two 32-bit draws."""
        high = self._next(32)
        low = self._next(32)
        # low is added as a signed value, not OR'd in
        return to_i64((high << 32) + low)

    def next_boolean(self) -> bool:
        return self._next(1) != 0

    def next_float(self) -> float:
        """Return a float in [0.0, 1.0) with 24 bits of precision."""
        return self._next(24) / float(1 << 24)

    def next_double(self) -> float:
        """Return a float in [0.0, 1.0) with 53 bits of precision."""
        high = self._next(26)
        low = self._next(27)
        return ((high << 27) + low) / float(1 << 53)

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """
        Fill a writable byte buffer in place.

        Uses one next_int() per four bytes, low byte first, so a buffer of
        length n consumes ceil(n / 4) draws.
        """
        length = len(buffer)
        i = 0
        while i < length:
            rnd = self.next_int()
            for _ in range(min(length - i, 4)):
                buffer[i] = to_u8(rnd)
                rnd >>= 8
                i += 1

    # RNGBase

    def random(self) -> float:
        return self.next_double()

    def randint(self, a: int, b: int) -> int:
        return a + self.next_int(b - a + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavaRandom):
            return NotImplemented
        return self._seed == other._seed

    def __repr__(self) -> str:
        return f"JavaRandom(state=0x{self._seed:012x})"
