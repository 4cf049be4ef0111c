"""Benchmark loading and the Hamming objective."""

import logging

import pytest

from gate_aco import BenchmarkError, HammingObjective, ToyModelInstance


class TestFromFile:
    def test_reads_size_and_target(self, tmp_path):
        path = tmp_path / "bench.txt"
        path.write_text("5\n1 0 1 1 0\n")
        inst = ToyModelInstance.from_file(path)
        assert inst.n_gates() == 5
        assert inst.target == [1, 0, 1, 1, 0]
        assert inst.name == "bench"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ToyModelInstance.from_file(tmp_path / "nope.txt")

    @pytest.mark.parametrize("content", ["", "4\n0 1 0\n", "3\n0 2 1\n", "3\n0 x 1\n", "0\n"])
    def test_malformed(self, tmp_path, content):
        path = tmp_path / "bench.txt"
        path.write_text(content)
        with pytest.raises(BenchmarkError):
            ToyModelInstance.from_file(path)

    def test_binary_file(self, tmp_path):
        path = tmp_path / "bench.bin"
        path.write_bytes(b"\xff\xfe\x00\x01garbage")
        with pytest.raises(BenchmarkError):
            ToyModelInstance.from_file(path)

    def test_extra_values_are_ignored(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="gate_aco.toymodel")
        path = tmp_path / "bench.txt"
        path.write_text("2 1 0 1 1")
        assert ToyModelInstance.from_file(path).target == [1, 0]
        assert "ignoring 2 values" in caplog.text


class TestObjective:
    def test_hamming_distance(self):
        objective = HammingObjective([0, 1, 0, 1])
        assert objective.score([0, 1, 0, 1]) == 0.0
        assert objective.score([1, 1, 0, 0]) == 2.0
        assert objective.score([1, 0, 1, 0]) == 4.0

    def test_random_instance_is_reproducible(self):
        a = ToyModelInstance.random(16, seed=3)
        b = ToyModelInstance.random(16, seed=3)
        assert a.target == b.target
        assert set(a.target) <= {0, 1}
        assert a.objective().score(a.target) == 0.0
