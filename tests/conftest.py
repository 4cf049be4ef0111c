import pytest

from gate_aco import ACOConfig


class ConstantObjective:
    """Scores every solution the same, so the colony never improves after iteration 1."""
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def score(self, solution):
        self.calls += 1
        return float(self.value)


@pytest.fixture
def constant_objective():
    return ConstantObjective


@pytest.fixture
def small_cfg():
    return ACOConfig(max_tries=1, n_ants=10, max_iters=50, max_time=60.0, seed=12345)
