"""MT19937 Mersenne Twister, bit-compatible with mt19937ar.c and CPython's random.

This package provides:
- base: Pure Python reference implementation
- jax_impl: JAX implementation (parity-tested with base)
- config: Dataclass configuration for reproducible streams

Example:
    >>> from mt19937 import MT19937
    >>>
    >>> rng = MT19937.new_from_words([12345])
    >>> rng.random_double()
    0.41661987254534116
"""

from . import base
from . import config
from . import jax_impl
from .base import MT19937, SEED_SIZE, gen_res53, key_from_int
from .config import StreamConfig

__version__ = "0.1.0"
__all__ = [
    "base",
    "config",
    "jax_impl",
    "MT19937",
    "SEED_SIZE",
    "StreamConfig",
    "gen_res53",
    "key_from_int",
]
