from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np

from .rng import normalize_seed, seed_from_time


@dataclass
class ACOConfig:
    max_tries: int = 10         # independent trials
    n_ants: int = 100
    rho: float = 0.5            # evaporation rate
    q0: float = 0.0             # probability of the greedy gate choice
    max_iters: int = 5000
    restart_iters: int = 100    # iterations without improvement before a restart
    max_time: float = 12.0      # seconds of wall-clock time per trial
    u_gb: int = 20              # initial best-so-far deposit period
    optimal: float = 0.0        # stop once the best score reaches this value
    mmas: bool = True           # trail limits and restarts
    tau0: Optional[float] = None  # initial trail without MMAS; 0 if None
    deposit_weight: float = 1.0
    seed: Optional[int] = None  # None -> derived from the clock per trial

    def trial_seed(self, ntry: int) -> int:
        if self.seed is None:
            return seed_from_time(ntry)
        return normalize_seed(self.seed + ntry)

    def validate(self):
        if self.max_tries < 1:
            raise ValueError("max_tries must be >= 1.")
        if self.n_ants < 1:
            raise ValueError("n_ants must be >= 1.")
        if not 0.0 <= self.rho <= 1.0:
            raise ValueError("rho must lie in [0, 1].")
        if not 0.0 <= self.q0 <= 1.0:
            raise ValueError("q0 must lie in [0, 1].")
        if self.u_gb < 1 or self.restart_iters < 1:
            raise ValueError("u_gb and restart_iters must be >= 1.")
        if self.mmas and self.rho == 0.0:
            raise ValueError("MMAS trail limits need rho > 0.")


class Phase(Enum):
    INIT = "init"
    RUNNING = "running"
    DONE = "done"


@dataclass
class RunState:
    iteration: int = 1
    best_iteration: int = 1
    restart_best: int = 1
    n_restarts: int = 0
    u_gb: int = 20
    trail_max: float = 0.0
    trail_min: float = 0.0
    trail_0: float = 0.0
    time_used: float = 0.0
    best_time: float = 0.0
    restart_time: float = 0.0
    phase: Phase = Phase.INIT


@dataclass
class ACOResult:
    best_solution: np.ndarray
    best_score: float
    iterations: int
    best_iteration: int
    best_time: float
    n_restarts: int
    elapsed_sec: float
    cpu_sec: float
    seed: int
    history_best_scores: List[float] = field(default_factory=list)
    history_pheromone: List[np.ndarray] = field(default_factory=list)
