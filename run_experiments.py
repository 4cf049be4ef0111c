# run_experiments.py
import os, sys, json, argparse, logging
from dataclasses import replace

import pandas as pd

from gate_aco import ToyModelInstance, BenchmarkError, ReportWriter, read_parameters, format_parameters
from gate_aco.experiments import run_repeated_trials, trial_records
from gate_aco.parameters import DEFAULT_PARAMETERS_FILE

logger = logging.getLogger("gate_aco")


def build_parser():
    ap = argparse.ArgumentParser(description="MAX-MIN Ant System on a binary gate benchmark")
    ap.add_argument("benchmark", help="file with n followed by the n target gate values")
    ap.add_argument("--params", default=DEFAULT_PARAMETERS_FILE, help="key/value parameter file")
    ap.add_argument("--outdir", default=".", help="where reports and the summary CSV go")
    ap.add_argument("--seed", type=int, default=None, help="base seed; trial k uses seed+k")
    ap.add_argument("--runs", type=int, default=None, help="override max_tries")
    ap.add_argument("--plot", action="store_true", help="save the convergence plot of the best trial")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    cfg = read_parameters(args.params)
    if args.seed is not None:
        cfg = replace(cfg, seed=args.seed)
    if args.runs is not None:
        cfg = replace(cfg, max_tries=args.runs)
    try:
        cfg.validate()
    except ValueError as exc:
        print(f"Invalid parameters, abort ({exc})", file=sys.stderr)
        return 1
    print(format_parameters(cfg, seed=cfg.trial_seed(0)))

    try:
        inst = ToyModelInstance.from_file(args.benchmark)
    except OSError as exc:
        print(f"No instance benchmark file specified, abort ({exc})", file=sys.stderr)
        return 1
    except BenchmarkError as exc:
        print(f"Invalid benchmark file, abort ({exc})", file=sys.stderr)
        return 1

    try:
        with ReportWriter(args.outdir) as report:
            stats, results = run_repeated_trials(inst, cfg, report=report)
    except MemoryError:
        logger.critical("Out of memory, exit.")
        return 1

    print(json.dumps(stats, indent=2))
    summary_csv = os.path.join(args.outdir, "trials_summary.csv")
    pd.DataFrame.from_records(trial_records(results)).to_csv(summary_csv, index=False)

    if args.plot:
        from visualize import plot_convergence
        best = min(results, key=lambda r: r.best_score)
        plot_convergence(best.history_best_scores, os.path.join(args.outdir, "convergence.png"),
                         title=f"{inst.name} convergence")
    return 0


if __name__ == "__main__":
    sys.exit(main())
