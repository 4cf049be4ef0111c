from __future__ import annotations
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Union

if TYPE_CHECKING:
    from .aco_base import ACOResult

CONV_REPORT = "conv_report"
CONV_REPORT_ITER = "conv_report_iter"
FINAL_REPORT = "final_report"
RESULTS_REPORT = "results_report"


class ReportWriter:
    """Plain-text run reports, one file per stream, written in `outdir`.

    conv_report       best score and elapsed seconds at every improvement
    conv_report_iter  best score and iteration at every improvement
    final_report      one summary line per trial
    results_report    best gate vector of every trial
    """
    def __init__(self, outdir: Union[str, Path] = "."):
        self.outdir = Path(outdir)
        self.outdir.mkdir(parents=True, exist_ok=True)
        with ExitStack() as stack:
            self.report = stack.enter_context(open(self.outdir / CONV_REPORT, "w"))
            self.report_iter = stack.enter_context(open(self.outdir / CONV_REPORT_ITER, "w"))
            self.final_report = stack.enter_context(open(self.outdir / FINAL_REPORT, "w"))
            self.results_report = stack.enter_context(open(self.outdir / RESULTS_REPORT, "w"))
            # all four opened: keep them past the with block
            stack.pop_all()

    def _files(self):
        return (self.report, self.report_iter, self.final_report, self.results_report)

    def start_trial(self, ntry: int):
        self.report.write(f"******** Try: {ntry} **********\n")
        self.report_iter.write(f"******** Try: {ntry} **********\n")

    def log_improvement(self, best_score: float, elapsed: float, iteration: int):
        self.report.write(f"{best_score:f} \t {elapsed:f}\n")
        self.report_iter.write(f"{best_score:f} \t {iteration}\n")

    def write_solution(self, ntry: int, solution: Sequence[int]):
        gates = " ".join(str(int(g)) for g in solution)
        self.results_report.write(f"Try: {ntry}, sol=[ {gates}  ]\n")

    def write_trial(self, ntry: int, result: "ACOResult"):
        self.final_report.write(
            f" Try {ntry}:\t iters {result.iterations}\t best_iter {result.best_iteration}\t"
            f" time {result.elapsed_sec:f}\t best_time {result.best_time:f} \t"
            f" best_score {result.best_score:f}\t restarts {result.n_restarts} \n"
        )
        self.write_solution(ntry, result.best_solution)
        self.flush()

    def flush(self):
        for f in self._files():
            f.flush()

    def close(self):
        for f in self._files():
            if not f.closed:
                f.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
