"""Shared pytest setup: JAX doubles must be float64 to match the reference."""

import jax

jax.config.update("jax_enable_x64", True)
