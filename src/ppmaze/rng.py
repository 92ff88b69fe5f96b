# src/ppmaze/rng.py
# Portable seeded random source. A given seed yields the same maze on every
# interpreter, which random.Random does not promise across versions.

import random
from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1

class RandomSource(Protocol):
    def randrange(self, n: int) -> int: ...
    def shuffle(self, seq: MutableSequence) -> None: ...

def pm_next(state: int) -> int:
    return (state * A) % M

def seed_state(seed: int) -> int:
    """Fold any int into a valid Park–Miller state (1..M-1); 0 is a fixed point."""
    s = seed % M
    return s if s else 1

@dataclass
class PMRandom:
    state: int
    seed: int = field(init=False)

    def __post_init__(self):
        self.seed = self.state
        self.state = seed_state(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randrange(self, n: int) -> int:
        """Uniform int in [0, n)."""
        if n <= 0:
            raise ValueError("randrange() needs a positive bound")
        # Outputs cover 1..M-1; reject the tail so every residue is equally likely.
        span = M - 1
        limit = span - (span % n)
        while True:
            v = self.next32() - 1
            if v < limit:
                return v % n

    def shuffle(self, seq: MutableSequence) -> None:
        # Fisher–Yates, in place
        for i in reversed(range(1, len(seq))):
            j = self.randrange(i + 1)
            seq[i], seq[j] = seq[j], seq[i]

def make_rng(seed: Optional[int] = None) -> PMRandom:
    if seed is None:
        seed = random.SystemRandom().randrange(1, M)
    return PMRandom(seed)
