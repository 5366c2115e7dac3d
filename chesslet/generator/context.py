"""
Generation Context Module - Random stream and time budget for one generation run.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Optional

from ..solver import SolutionContext


@dataclass
class GenerationContext(SolutionContext):
    """
    SolutionContext plus the random stream owned by a generation run.

    Every random choice (piece counts, cells, piece kinds, mutations) is
    drawn from rng, so a run is reproducible under a fixed seed.

    Attributes:
        rng: Random stream for this run
    """
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(cls, seed: Optional[int] = None,
               timeout_sec: Optional[float] = None) -> 'GenerationContext':
        """
        Create a context with its own seeded random stream.

        Args:
            seed: Seed for the random stream (None = OS entropy)
            timeout_sec: Wall-clock budget for the run (None = unbounded)
        """
        return cls(rng=random.Random(seed), timeout_sec=timeout_sec)

    def child(self, timeout_sec: Optional[float]) -> 'GenerationContext':
        """
        Create a sub-budget that starts now and never outlives this context.

        The child shares the random stream and cancel flag.
        """
        remaining = self.remaining_time()
        if remaining is not None:
            remaining = max(0.0, remaining)
            timeout_sec = remaining if timeout_sec is None else min(timeout_sec, remaining)
        return GenerationContext(
            cancel_flag=self.cancel_flag,
            timeout_sec=timeout_sec,
            start_time=time.time(),
            progress_callback=self.progress_callback,
            rng=self.rng,
        )
