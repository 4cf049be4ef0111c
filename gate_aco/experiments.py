from __future__ import annotations
import itertools, statistics, os
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import asdict, replace
import csv

from .aco_base import ACOConfig, ACOResult
from .mmas import MaxMinAntSystem
from .report import ReportWriter
from .toymodel import ToyModelInstance


def run_trial(instance: ToyModelInstance, cfg: ACOConfig, ntry: int = 0,
              report: Optional[ReportWriter] = None, record_pheromone: bool = False) -> ACOResult:
    solver = MaxMinAntSystem(instance.n_gates(), instance.objective(), cfg,
                             report=report, ntry=ntry, record_pheromone=record_pheromone)
    return solver.run()


def summarize(results: List[ACOResult]) -> Dict[str, Any]:
    scores = [r.best_score for r in results]
    times = [r.elapsed_sec for r in results]
    return {
        "mean_score": statistics.mean(scores),
        "std_score": statistics.stdev(scores) if len(scores) > 1 else 0.0,
        "min_score": min(scores),
        "max_score": max(scores),
        "median_score": statistics.median(scores),
        "mean_time": statistics.mean(times),
        "mean_best_time": statistics.mean(r.best_time for r in results),
        "mean_restarts": statistics.mean(r.n_restarts for r in results),
        "n_runs": len(results),
    }


def run_repeated_trials(instance: ToyModelInstance, cfg: ACOConfig, n_runs: Optional[int] = None,
                        report: Optional[ReportWriter] = None) -> Tuple[Dict[str, Any], List[ACOResult]]:
    """Run independent trials (cfg.max_tries unless n_runs is given), each with its own seed."""
    n_runs = cfg.max_tries if n_runs is None else n_runs
    if n_runs < 1:
        raise ValueError("At least one trial is required.")
    results = []
    for ntry in range(n_runs):
        results.append(run_trial(instance, cfg, ntry=ntry, report=report))
    return summarize(results), results


def trial_records(results: List[ACOResult]) -> List[Dict[str, Any]]:
    return [
        {
            "try": ntry,
            "seed": r.seed,
            "best_score": r.best_score,
            "iterations": r.iterations,
            "best_iteration": r.best_iteration,
            "best_time": r.best_time,
            "elapsed_sec": r.elapsed_sec,
            "cpu_sec": r.cpu_sec,
            "n_restarts": r.n_restarts,
        }
        for ntry, r in enumerate(results)
    ]


def run_parameter_sweep(instance: ToyModelInstance, param_grid: Dict[str, List[Any]],
                        base_cfg: Optional[ACOConfig] = None, n_runs: int = 5, base_seed: int = 100,
                        csv_path: Optional[str] = None):
    base_cfg = base_cfg or ACOConfig()
    keys = sorted(param_grid.keys())
    unknown = set(keys) - set(asdict(base_cfg))
    if unknown:
        raise ValueError(f"Unknown config fields in grid: {sorted(unknown)}")
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg = replace(base_cfg, seed=base_seed, **dict(zip(keys, values)))
        stats, _ = run_repeated_trials(instance, cfg, n_runs=n_runs)
        row = {**{k: getattr(cfg, k) for k in keys}, **stats}
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
