"""Throughput benchmark for the Python and JAX MT19937 implementations."""

import time
import jax
import jax.numpy as jnp

from mt19937 import base
from mt19937 import jax_impl
from mt19937.config import StreamConfig


def benchmark_python(n_words: int):
    """Benchmark word generation with the pure Python implementation."""
    print("\n" + "="*60)
    print(f"PYTHON BENCHMARK (n_words={n_words})")
    print("="*60)

    rng = StreamConfig(key=(12345,)).build()

    start = time.time()
    for _ in range(n_words):
        rng.next_u32()
    elapsed = time.time() - start

    print(f"\nResults:")
    print(f"  Total time: {elapsed:.4f}s")
    print(f"  Words/sec: {n_words/elapsed:.2f}")
    print(f"  Twists: {n_words // base.N}")

    return n_words / elapsed


def benchmark_jax(n_words: int):
    """Benchmark word generation with the JAX implementation."""
    print("\n" + "="*60)
    print(f"JAX BENCHMARK (n_words={n_words})")
    print("="*60)

    state = jax_impl.mt19937_init_by_array(jnp.array([12345], dtype=jnp.uint32))

    # Warmup
    print("\nWarming up JIT compilation...")
    start = time.time()
    _, words = jax_impl.mt19937_generate(state, n_words)
    words.block_until_ready()
    first_run = time.time() - start
    print(f"  Warmup completed in {first_run:.4f}s")

    start = time.time()
    _, words = jax_impl.mt19937_generate(state, n_words)
    words.block_until_ready()
    elapsed = time.time() - start

    print(f"\nResults:")
    print(f"  Total time: {elapsed:.4f}s")
    print(f"  Words/sec: {n_words/elapsed:.2f}")
    print(f"  Compilation overhead: {first_run - elapsed:.4f}s")

    return n_words / elapsed


def main():
    """Run all benchmarks."""
    print("="*60)
    print("MT19937 PERFORMANCE TEST")
    print("="*60)

    print(f"\nDevice: {jax.devices()[0]}")
    print(f"Backend: {jax.default_backend()}")

    sizes = [624, 10_000, 100_000]
    rows = []
    for n_words in sizes:
        rows.append((n_words, benchmark_python(n_words), benchmark_jax(n_words)))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)
    for n_words, py_rate, jax_rate in rows:
        print(f"  {n_words:7d} words: python {py_rate:12.2f}/s  jax {jax_rate:12.2f}/s ({jax_rate / py_rate:5.2f}x)")


if __name__ == "__main__":
    main()
