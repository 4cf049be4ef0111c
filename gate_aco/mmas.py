from __future__ import annotations
import logging
from typing import Optional, Tuple

from .aco_base import ACOConfig, ACOResult, Phase, RunState
from .colony import Ant, Colony, copy_from_to
from .pheromone import PheromoneStore
from .report import ReportWriter
from .rng import ParkMillerRNG, normalize_seed
from .timer import Timer, TimerType
from .toymodel import ObjectiveFunction

logger = logging.getLogger(__name__)

# stands in for the best score before any ant has been evaluated
INITIAL_BOUND_SCORE = 0.5


def mmas_trail_limits(rho: float, best_score: float, n: int) -> Tuple[float, float]:
    """(trail_max, trail_min) for the current best-so-far score."""
    trail_max = 1.0 / (rho * best_score)
    return trail_max, trail_max / (2.0 * n)


def adapt_u_gb(since_restart: int, restart_iters: int) -> int:
    """Best-so-far deposit period; shrinks as the colony nears a restart."""
    if since_restart < int(restart_iters / 10):
        return 10
    if since_restart < int(restart_iters / 2):
        return 5
    if since_restart < int(restart_iters / 1.3):
        return 3
    if since_restart < restart_iters:
        return 2
    return 1


class MaxMinAntSystem:
    """MAX-MIN Ant System over `n` binary gates.

    One instance runs one trial: init_trial() allocates the colony and the
    trails, step() performs one iteration (construction, statistics, trail
    update) and exit_trial() reports and releases them. run() chains the three
    until termination_condition() holds. With cfg.mmas False the trail limits
    and the stagnation restarts are switched off.
    """
    def __init__(self, n: int, objective: ObjectiveFunction, cfg: ACOConfig,
                 report: Optional[ReportWriter] = None, ntry: int = 0,
                 seed: Optional[int] = None, record_pheromone: bool = False):
        if n < 1:
            raise ValueError("Problem size must be positive.")
        cfg.validate()
        self.n = n
        self.objective = objective
        self.cfg = cfg
        self.report = report
        self.ntry = ntry
        self.seed = normalize_seed(seed) if seed is not None else cfg.trial_seed(ntry)
        self.rng = ParkMillerRNG(self.seed)
        self.timer = Timer()
        self.record_pheromone = record_pheromone

        self.state = RunState(u_gb=cfg.u_gb)
        self.colony: Optional[Colony] = None
        self.pheromone: Optional[PheromoneStore] = None
        self.best_so_far: Optional[Ant] = None
        self.history_best_scores = []
        self.history_pheromone = []

    # ----------------------------------------------------------------- INIT
    def init_trial(self):
        cfg = self.cfg
        self.rng = ParkMillerRNG(self.seed)
        st = self.state = RunState(u_gb=cfg.u_gb)

        self.colony = Colony(cfg.n_ants, self.n)
        self.best_so_far = Ant.empty(self.n)
        self.history_best_scores = []
        self.history_pheromone = []

        self.timer.start()
        st.time_used = self.timer.elapsed()

        if cfg.mmas:
            st.trail_max, st.trail_min = mmas_trail_limits(cfg.rho, INITIAL_BOUND_SCORE, self.n)
            st.trail_0 = st.trail_max
        else:
            st.trail_0 = cfg.tau0 if cfg.tau0 is not None else 0.0
        self.pheromone = PheromoneStore(self.n, st.trail_0)

        if self.report is not None:
            self.report.start_trial(self.ntry)
        st.phase = Phase.RUNNING
        logger.debug("try %d: seed %d, n=%d, trail_0=%.4f", self.ntry, self.seed, self.n, st.trail_0)

    # -------------------------------------------------------------- RUNNING
    def termination_condition(self) -> bool:
        cfg, st = self.cfg, self.state
        return (st.iteration >= cfg.max_iters
                or self.timer.elapsed() >= cfg.max_time
                or self.best_so_far.score <= cfg.optimal)

    def construct_solutions(self):
        if self.state.iteration == 1:
            self.colony.construct_initial(self.rng, self.objective)
        else:
            self.colony.construct_all(self.pheromone, self.rng, self.objective, self.cfg.q0)

    def step(self):
        if self.state.phase is not Phase.RUNNING:
            raise RuntimeError("init_trial() must be called before step().")
        self.construct_solutions()
        self.update_statistics()
        self.pheromone_trail_update()

        self.history_best_scores.append(self.best_so_far.score)
        if self.record_pheromone:
            self.history_pheromone.append(self.pheromone.snapshot())
        self.state.iteration += 1

    def update_statistics(self):
        cfg, st = self.cfg, self.state
        iteration_best = self.colony.ants[self.colony.find_best()]

        if logger.isEnabledFor(logging.DEBUG):
            worst = self.colony.ants[self.colony.find_worst()].score
            logger.debug("iteration %d: best %.4f worst %.4f best-so-far %.4f",
                         st.iteration, iteration_best.score, worst, self.best_so_far.score)

        if iteration_best.score < self.best_so_far.score:
            st.time_used = self.timer.elapsed()
            copy_from_to(iteration_best, self.best_so_far)
            if self.report is not None:
                self.report.log_improvement(self.best_so_far.score, st.time_used, st.iteration)

            st.best_iteration = st.iteration
            st.restart_best = st.iteration
            st.best_time = st.time_used

            # a zero score would make the limits infinite; the run stops on `optimal` anyway
            if cfg.mmas and self.best_so_far.score > 0:
                st.trail_max, st.trail_min = mmas_trail_limits(cfg.rho, self.best_so_far.score, self.n)
                st.trail_0 = st.trail_max

        if cfg.mmas and st.iteration - st.restart_best > cfg.restart_iters:
            self.restart()

    def restart(self):
        st = self.state
        st.n_restarts += 1
        self.pheromone.init(st.trail_0)
        st.restart_best = st.iteration
        st.restart_time = self.timer.elapsed()
        logger.info("try %d: restart %d at iteration %d (best-so-far %.4f)",
                    self.ntry, st.n_restarts, st.iteration, self.best_so_far.score)

    def pheromone_trail_update(self):
        self.pheromone.evaporate(self.cfg.rho)
        self.mmas_update()
        if self.cfg.mmas:
            self.pheromone.clamp(self.state.trail_min, self.state.trail_max)

    def mmas_update(self):
        """Deposit with the iteration-best ant, or with best-so-far every u_gb-th iteration."""
        st = self.state
        if st.iteration % st.u_gb:
            ant = self.colony.ants[self.colony.find_best()]
        else:
            ant = self.best_so_far
        # an exact optimum leaves nothing to divide by
        if ant.score > 0:
            self.pheromone.deposit(ant.solution, ant.score, self.cfg.deposit_weight)

        st.u_gb = adapt_u_gb(st.iteration - st.restart_best, self.cfg.restart_iters)

    # ----------------------------------------------------------------- DONE
    def exit_trial(self) -> ACOResult:
        st = self.state
        result = ACOResult(
            best_solution=self.best_so_far.solution.copy(),
            best_score=self.best_so_far.score,
            iterations=st.iteration - 1,
            best_iteration=st.best_iteration,
            best_time=st.best_time,
            n_restarts=st.n_restarts,
            elapsed_sec=self.timer.elapsed(),
            cpu_sec=self.timer.elapsed(TimerType.VIRTUAL),
            seed=self.seed,
            history_best_scores=list(self.history_best_scores),
            history_pheromone=list(self.history_pheromone),
        )
        if self.report is not None:
            self.report.write_trial(self.ntry, result)
        logger.info("try %d: best %.4f at iteration %d after %d iterations, %d restarts, %.3fs",
                    self.ntry, result.best_score, result.best_iteration, result.iterations,
                    result.n_restarts, result.elapsed_sec)

        self.colony = None
        self.pheromone = None
        st.phase = Phase.DONE
        return result

    def run(self) -> ACOResult:
        self.init_trial()
        while not self.termination_condition():
            self.step()
        return self.exit_trial()
