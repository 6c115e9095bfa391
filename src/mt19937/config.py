"""Configuration for reproducible MT19937 streams."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .base import MT19937, DEFAULT_SEED


@dataclass
class StreamConfig:
    """How a generator is seeded and positioned before use."""

    # Seeding
    seed_mode: str = 'words'  # 'scalar', 'words', or 'default'
    seed: Optional[int] = None  # used by 'scalar'
    key: Tuple[int, ...] = field(default_factory=tuple)  # used by 'words'

    # Positioning
    skip: int = 0  # words discarded after seeding

    def __post_init__(self):
        """Validate configuration."""
        assert self.seed_mode in ['scalar', 'words', 'default'], \
            f"seed_mode must be 'scalar', 'words', or 'default', got {self.seed_mode}"
        if self.seed_mode == 'scalar':
            assert self.seed is not None, "seed is required when seed_mode is 'scalar'"
            assert 0 <= self.seed <= 0xFFFFFFFF, f"seed must fit in 32 bits, got {self.seed}"
        self.key = tuple(int(k) for k in self.key)
        assert all(0 <= k <= 0xFFFFFFFF for k in self.key), "key words must fit in 32 bits"
        assert self.skip >= 0, "skip must be non-negative"

    def build(self) -> MT19937:
        """Create a generator seeded and advanced as configured."""
        rng = MT19937()
        if self.seed_mode == 'scalar':
            rng.seed_scalar(self.seed)
        elif self.seed_mode == 'words':
            rng.seed_words(self.key)
        else:
            rng.seed_scalar(DEFAULT_SEED)
        for _ in range(self.skip):
            rng.next_u32()
        return rng
