from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

logger = logging.getLogger(__name__)


class BenchmarkError(ValueError):
    """Raised when a benchmark file cannot be interpreted."""


class ObjectiveFunction(Protocol):
    def score(self, solution: Sequence[int]) -> float:
        """Score one complete solution; lower is better, 0 is the optimum."""
        ...


@dataclass
class ToyModelInstance:
    target: List[int]
    name: str = "toymodel"

    @staticmethod
    def random(n: int, seed: Optional[int] = None, name: str = "random_toymodel"):
        rng = random.Random(seed)
        return ToyModelInstance(target=[rng.randint(0, 1) for _ in range(n)], name=name)

    @staticmethod
    def from_file(path: Union[str, Path]) -> "ToyModelInstance":
        """Read `n` followed by the `n` target gate values, whitespace separated.

        Raises FileNotFoundError when the file is missing and BenchmarkError
        when the contents do not describe a 0/1 vector of length `n`.
        """
        path = Path(path)
        try:
            tokens = path.read_text().split()
        except UnicodeDecodeError as exc:
            raise BenchmarkError(f"{path}: not a text file ({exc.reason})") from exc
        if not tokens:
            raise BenchmarkError(f"{path}: empty benchmark file")
        try:
            values = [int(tok) for tok in tokens]
        except ValueError as exc:
            raise BenchmarkError(f"{path}: non-integer token ({exc})") from exc

        n, target = values[0], values[1:]
        if n < 1:
            raise BenchmarkError(f"{path}: problem size must be positive, got {n}")
        if len(target) < n:
            raise BenchmarkError(f"{path}: expected {n} gate values, found {len(target)}")
        if len(target) > n:
            logger.warning("%s: ignoring %d values beyond n=%d", path, len(target) - n, n)
            target = target[:n]
        if any(v not in (0, 1) for v in target):
            raise BenchmarkError(f"{path}: gate values must be 0 or 1")
        return ToyModelInstance(target=target, name=path.stem)

    def n_gates(self) -> int:
        return len(self.target)

    def objective(self) -> "HammingObjective":
        return HammingObjective(self.target)


class HammingObjective:
    """Distance to a known optimum: number of gates that differ from the target."""
    def __init__(self, target: Sequence[int]):
        self.target = list(target)

    def score(self, solution: Sequence[int]) -> float:
        sc = 0
        for want, got in zip(self.target, solution):
            if want != got:
                sc += 1
        return float(sc)
