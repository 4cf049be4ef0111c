from __future__ import annotations
import time
from typing import Tuple

# Park-Miller "minimal standard" constants (Numerical Recipes in C)
IA = 16807
IM = 2147483647
AM = 1.0 / IM
IQ = 127773
IR = 2836


def ran01(seed: int) -> Tuple[float, int]:
    """One draw of the minimal standard generator.

    Returns the uniform value in (0, 1) and the next seed. The caller keeps
    the seed and passes it back in for the following draw.
    """
    k = seed // IQ
    seed = IA * (seed - k * IQ) - IR * k
    if seed < 0:
        seed += IM
    return AM * seed, seed


def normalize_seed(seed: int) -> int:
    # 0 is a fixed point of the recurrence
    seed = int(seed) % IM
    return seed if seed != 0 else 1


def seed_from_time(ntry: int = 0) -> int:
    return normalize_seed(int(time.time()) * (ntry + 1))


class ParkMillerRNG:
    """Carries the seed between draws so the colony can share one stream."""
    def __init__(self, seed: int):
        self.seed = normalize_seed(seed)

    def random(self) -> float:
        value, self.seed = ran01(self.seed)
        return value
