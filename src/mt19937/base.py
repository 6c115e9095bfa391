"""Pure Python MT19937 reference implementation.

Bit-compatible with mt19937ar.c (2002 initialization) and therefore with
CPython's ``random.Random``: ``MT19937.new_from_words(key_from_int(s))``
yields the same words and doubles as ``random.Random(s)``.
"""

from __future__ import annotations
import operator
from typing import List, Optional, Sequence, Tuple

import numpy as np

N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
WORD_MASK = 0xFFFFFFFF

DEFAULT_SEED = 5489
ARRAY_SEED = 19650218
UNSEEDED = N + 1  # index sentinel: state never initialized
SEED_SIZE = N * 4  # bytes accepted by MT19937.from_seed


def temper(y: int) -> int:
    y ^= (y >> 11)
    y ^= (y << 7) & 0x9D2C5680
    y ^= (y << 15) & 0xEFC60000
    y ^= (y >> 18)
    return y & WORD_MASK


def key_from_int(n: int) -> List[int]:
    """Split ``abs(n)`` into little-endian 32-bit words, the way CPython seeds from an int."""
    n = abs(int(n))
    if n == 0:
        return [0]
    key = []
    while n:
        key.append(n & WORD_MASK)
        n >>= 32
    return key


def gen_res53(rng) -> float:
    """53-bit double in [0, 1) from two consecutive ``rng.next_u32()`` words."""
    a = rng.next_u32() >> 5
    b = rng.next_u32() >> 6
    return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)


class MT19937:
    def __init__(self):
        self._mt = [0] * N
        self._index = UNSEEDED

    @classmethod
    def new_from_words(cls, key: Sequence[int]) -> "MT19937":
        rng = cls()
        rng.seed_words(key)
        return rng

    @classmethod
    def from_seed(cls, seed: bytes) -> "MT19937":
        """Array-seed from ``SEED_SIZE`` bytes read as 624 little-endian words."""
        buf = memoryview(seed).cast("B")
        if buf.nbytes != SEED_SIZE:
            raise ValueError(f"Seed must be exactly {SEED_SIZE} bytes, got {buf.nbytes}")
        words = np.frombuffer(buf, dtype="<u4")
        return cls.new_from_words(words.tolist())

    def seed_scalar(self, seed: int):
        mt = self._mt
        mt[0] = int(seed) & WORD_MASK
        for i in range(1, N):
            mt[i] = (1812433253 * (mt[i - 1] ^ (mt[i - 1] >> 30)) + i) & WORD_MASK
        self._index = N

    def seed_words(self, key: Sequence[int]):
        key = [int(k) & WORD_MASK for k in key]
        key_length = len(key)
        self.seed_scalar(ARRAY_SEED)
        mt = self._mt
        i, j = 1, 0
        for _ in range(max(N, key_length)):
            # An empty key mixes in zero with j pinned at 0.
            k = key[j] if key_length else 0
            mt[i] = ((mt[i] ^ ((mt[i - 1] ^ (mt[i - 1] >> 30)) * 1664525)) + k + j) & WORD_MASK
            i += 1
            j += 1
            if i >= N:
                mt[0] = mt[N - 1]
                i = 1
            if j >= key_length:
                j = 0
        for _ in range(N - 1):
            mt[i] = ((mt[i] ^ ((mt[i - 1] ^ (mt[i - 1] >> 30)) * 1566083941)) - i) & WORD_MASK
            i += 1
            if i >= N:
                mt[0] = mt[N - 1]
                i = 1
        mt[0] = 0x80000000  # MSB set, state is never all zero
        self._index = N

    def _twist(self):
        mt = self._mt
        for i in range(N):
            y = (mt[i] & UPPER_MASK) | (mt[(i + 1) % N] & LOWER_MASK)
            yA = y >> 1
            if y & 1:
                yA ^= MATRIX_A
            mt[i] = mt[(i + M) % N] ^ yA
        self._index = 0

    def next_u32(self) -> int:
        if self._index >= N:
            if self._index == UNSEEDED:
                self.seed_scalar(DEFAULT_SEED)
            self._twist()
        y = self._mt[self._index]
        self._index += 1
        return temper(y)

    def next_u64(self) -> int:
        lo = self.next_u32()
        hi = self.next_u32()
        return (hi << 32) | lo

    def random_double(self) -> float:
        return gen_res53(self)

    def fill_bytes(self, buf):
        """Fill a writable buffer with consecutive little-endian words, truncating the last one."""
        view = memoryview(buf).cast("B")
        n = view.nbytes
        if n == 0:
            return
        count = (n + 3) // 4
        words = np.fromiter((self.next_u32() for _ in range(count)), dtype="<u4", count=count)
        view[:] = words.tobytes()[:n]

    def random_bytes(self, n: int) -> bytes:
        buf = bytearray(n)
        self.fill_bytes(buf)
        return bytes(buf)

    def get_state(self) -> np.ndarray:
        return np.array(self._mt, dtype=np.uint32)

    def set_state(self, words: Sequence[int]):
        words = [int(w) & WORD_MASK for w in words]
        if len(words) != N:
            raise ValueError(f"State must contain exactly {N} words, got {len(words)}")
        self._mt = words

    def get_index(self) -> int:
        return self._index

    def set_index(self, index: int):
        index = operator.index(index)
        if not 0 <= index <= N:
            raise ValueError(f"Index must be in [0, {N}], got {index}")
        self._index = index

    def copy(self) -> "MT19937":
        rng = type(self)()
        rng._mt = list(self._mt)
        rng._index = self._index
        return rng

    def to_random_state(self) -> Tuple[int, Tuple[int, ...], Optional[float]]:
        """State in the shape of ``random.Random.getstate()``."""
        if self._index == UNSEEDED:
            raise ValueError("Generator has not been seeded")
        return (3, tuple(self._mt) + (self._index,), None)

    @classmethod
    def from_random_state(cls, state) -> "MT19937":
        version, internal, _gauss_next = state
        if version != 3:
            raise ValueError(f"Unsupported random state version {version}")
        if len(internal) != N + 1:
            raise ValueError(f"Random state must hold {N + 1} values, got {len(internal)}")
        rng = cls()
        rng.set_index(internal[-1])
        rng.set_state(internal[:-1])
        return rng

    def __repr__(self) -> str:
        return f"MT19937(index={self._index})"
