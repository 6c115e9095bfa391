"""JAX implementation of MT19937 (parity-tested with base).

Every function is pure: it takes an ``MTState`` and returns a new one.
Doubles require ``jax_enable_x64``.
"""

from __future__ import annotations
from typing import Tuple, NamedTuple
import jax
import jax.numpy as jnp
from functools import partial

N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
DEFAULT_SEED = 5489
UNSEEDED = N + 1


class MTState(NamedTuple):
    """Generator state: 624 words plus the extraction cursor."""
    mt: jax.Array  # [624] uint32
    index: jnp.int32  # 624 means a twist is due, 625 means never seeded


@jax.jit
def mt19937_init(seed: jnp.ndarray) -> MTState:
    """Scalar-seed MT19937 state."""
    seed = jnp.asarray(seed).astype(jnp.uint32)
    indices = jnp.arange(1, N, dtype=jnp.uint32)

    def scan_fn(prev, i_val):
        new_val = jnp.uint32(1812433253) * (prev ^ (prev >> jnp.uint32(30))) + i_val
        return new_val, new_val

    _, mt_values = jax.lax.scan(scan_fn, seed, indices)
    mt = jnp.concatenate([seed[None], mt_values])
    return MTState(mt, jnp.int32(N))


@jax.jit
def mt19937_init_by_array(key: jax.Array) -> MTState:
    """Array-seed MT19937 state from a 1-D uint32 key."""
    key = jnp.asarray(key, dtype=jnp.uint32)
    key_length = key.shape[0]
    if key_length == 0:
        # Same as the reference: j stays at 0 and contributes nothing.
        key = jnp.zeros(1, dtype=jnp.uint32)
        key_length = 1
    mt = mt19937_init(jnp.uint32(19650218)).mt

    def mix_key(_, carry):
        mt, i, j = carry
        prev = mt[i - 1]
        val = (mt[i] ^ ((prev ^ (prev >> jnp.uint32(30))) * jnp.uint32(1664525))) + key[j] + j.astype(jnp.uint32)
        mt = mt.at[i].set(val)
        i = i + 1
        j = j + 1
        mt = jnp.where(i >= N, mt.at[0].set(mt[N - 1]), mt)
        i = jnp.where(i >= N, jnp.int32(1), i)
        j = jnp.where(j >= key_length, jnp.int32(0), j)
        return mt, i, j

    def mix_index(_, carry):
        mt, i = carry
        prev = mt[i - 1]
        val = (mt[i] ^ ((prev ^ (prev >> jnp.uint32(30))) * jnp.uint32(1566083941))) - i.astype(jnp.uint32)
        mt = mt.at[i].set(val)
        i = i + 1
        mt = jnp.where(i >= N, mt.at[0].set(mt[N - 1]), mt)
        i = jnp.where(i >= N, jnp.int32(1), i)
        return mt, i

    mt, i, _ = jax.lax.fori_loop(0, max(N, key_length), mix_key, (mt, jnp.int32(1), jnp.int32(0)))
    mt, _ = jax.lax.fori_loop(0, N - 1, mix_index, (mt, i))
    mt = mt.at[0].set(jnp.uint32(0x80000000))
    return MTState(mt, jnp.int32(N))


@jax.jit
def mt19937_twist(mt: jax.Array) -> jax.Array:
    """Perform MT19937 twist operation."""
    def twist_step(i, mt):
        y = (mt[i] & jnp.uint32(UPPER_MASK)) | (mt[(i + 1) % N] & jnp.uint32(LOWER_MASK))
        yA = y >> jnp.uint32(1)
        yA = jnp.where(y & jnp.uint32(1), yA ^ jnp.uint32(MATRIX_A), yA)
        return mt.at[i].set(mt[(i + M) % N] ^ yA)

    return jax.lax.fori_loop(0, N, twist_step, mt)


@jax.jit
def mt19937_temper(y: jnp.ndarray) -> jnp.ndarray:
    """Apply the MT19937 tempering transform."""
    y = jnp.asarray(y).astype(jnp.uint32)
    y = y ^ (y >> jnp.uint32(11))
    y = y ^ ((y << jnp.uint32(7)) & jnp.uint32(0x9D2C5680))
    y = y ^ ((y << jnp.uint32(15)) & jnp.uint32(0xEFC60000))
    y = y ^ (y >> jnp.uint32(18))
    return y


@jax.jit
def mt19937_extract(state: MTState) -> Tuple[MTState, jnp.ndarray]:
    """Extract a tempered 32-bit word, twisting first if the state is exhausted.

    An index of 625 marks a never-seeded state, which is seeded with 5489
    before the twist.
    """
    index = jnp.int32(state.index)
    mt = jax.lax.cond(index == UNSEEDED, lambda _: mt19937_init(jnp.uint32(DEFAULT_SEED)).mt, lambda mt: mt, state.mt)
    needs_twist = index >= N
    mt = jax.lax.cond(needs_twist, mt19937_twist, lambda mt: mt, mt)
    index = jnp.where(needs_twist, jnp.int32(0), index)
    y = mt19937_temper(mt[index])
    return MTState(mt, index + jnp.int32(1)), y


@jax.jit
def mt19937_random_double(state: MTState) -> Tuple[MTState, jnp.ndarray]:
    """Generate a 53-bit random double in [0, 1)."""
    if not jax.config.jax_enable_x64:
        raise RuntimeError("mt19937_random_double needs float64; enable jax_enable_x64")
    state, a_raw = mt19937_extract(state)
    state, b_raw = mt19937_extract(state)

    a = a_raw >> jnp.uint32(5)
    b = b_raw >> jnp.uint32(6)
    result = (a.astype(jnp.float64) * 67108864.0 + b.astype(jnp.float64)) * (1.0 / 9007199254740992.0)
    return state, result


@partial(jax.jit, static_argnums=1)
def mt19937_generate(state: MTState, n: int) -> Tuple[MTState, jax.Array]:
    """Generate ``n`` consecutive words."""
    def scan_fn(state, _):
        return mt19937_extract(state)

    return jax.lax.scan(scan_fn, state, None, length=n)
