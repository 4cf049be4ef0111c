from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List

import numpy as np

from .pheromone import PheromoneStore
from .rng import ParkMillerRNG
from .toymodel import ObjectiveFunction


@dataclass(eq=False)
class Ant:
    solution: np.ndarray
    score: float = math.inf

    @staticmethod
    def empty(n: int) -> "Ant":
        return Ant(solution=np.zeros(n, dtype=int))


def copy_from_to(src: Ant, dst: Ant):
    """Overwrite dst with src's gate vector and score."""
    dst.score = src.score
    dst.solution[:] = src.solution


@dataclass
class Colony:
    """Fixed set of ants, re-used across the iterations of a trial."""
    n_ants: int
    n: int
    ants: List[Ant] = field(init=False)

    def __post_init__(self):
        if self.n_ants < 1:
            raise ValueError("A colony needs at least one ant.")
        self.ants = [Ant.empty(self.n) for _ in range(self.n_ants)]

    @property
    def scores(self) -> List[float]:
        return [ant.score for ant in self.ants]

    def select_gate(self, ant: Ant, gate: int, pheromone: PheromoneStore,
                    rng: ParkMillerRNG, q0: float = 0.0):
        p0, p1 = pheromone.probabilities(gate)
        # skip the draw entirely when exploitation is off
        if q0 > 0.0 and rng.random() < q0:
            ant.solution[gate] = 0 if p1 < p0 else 1
            return
        ant.solution[gate] = 0 if rng.random() < p0 else 1

    def construct_all(self, pheromone: PheromoneStore, rng: ParkMillerRNG,
                      objective: ObjectiveFunction, q0: float = 0.0):
        for ant in self.ants:
            for gate in range(self.n):
                self.select_gate(ant, gate, pheromone, rng, q0)
            ant.score = objective.score(ant.solution)

    def construct_initial(self, rng: ParkMillerRNG, objective: ObjectiveFunction):
        """Uniform random solutions, used before any pheromone signal exists."""
        for ant in self.ants:
            for gate in range(self.n):
                ant.solution[gate] = 1 if rng.random() >= 0.5 else 0
            ant.score = objective.score(ant.solution)

    def find_best(self) -> int:
        k_min, best = 0, self.ants[0].score
        for k in range(1, self.n_ants):
            if self.ants[k].score < best:
                k_min, best = k, self.ants[k].score
        return k_min

    def find_worst(self) -> int:
        k_max, worst = 0, self.ants[0].score
        for k in range(1, self.n_ants):
            if self.ants[k].score > worst:
                k_max, worst = k, self.ants[k].score
        return k_max
