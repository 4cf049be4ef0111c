from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np


class PheromoneStore:
    """Trail matrix with two columns per gate: column j is the trail for option j."""
    def __init__(self, n_gates: int, initial_trail: float = 0.0):
        if n_gates < 1:
            raise ValueError("PheromoneStore needs at least one gate.")
        self.n = n_gates
        self.matrix = np.full((n_gates, 2), float(initial_trail))

    def init(self, initial_trail: float):
        self.matrix.fill(initial_trail)

    def evaporate(self, rho: float):
        if not 0.0 <= rho <= 1.0:
            raise ValueError(f"rho must lie in [0, 1], got {rho}")
        self.matrix *= (1.0 - rho)

    def deposit(self, solution: Sequence[int], score: float, weight: float = 1.0):
        """Reinforce the option chosen at every gate by weight/score."""
        if score <= 0:
            raise ValueError("deposit needs a positive score.")
        d_tau = weight / score
        self.matrix[np.arange(self.n), np.asarray(solution, dtype=int)] += d_tau

    def clamp(self, trail_min: float, trail_max: float):
        np.clip(self.matrix, trail_min, trail_max, out=self.matrix)

    def probabilities(self, gate: int) -> Tuple[float, float]:
        tau0, tau1 = self.matrix[gate]
        total = tau0 + tau1
        if total == 0.0:
            # no signal yet: both options equally likely
            return 0.5, 0.5
        return tau0 / total, tau1 / total

    def snapshot(self) -> np.ndarray:
        return self.matrix.copy()

    def min(self) -> float:
        return float(self.matrix.min())

    def max(self) -> float:
        return float(self.matrix.max())
