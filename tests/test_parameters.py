"""Parameter file parsing."""

import logging

import pytest

from gate_aco import ACOConfig, format_parameters, read_parameters


class TestReadParameters:
    def test_missing_file_gives_defaults(self, tmp_path, caplog):
        caplog.set_level(logging.INFO, logger="gate_aco.parameters")
        cfg = read_parameters(tmp_path / "parameters.txt")
        assert cfg == ACOConfig()
        assert (cfg.max_tries, cfg.n_ants, cfg.rho, cfg.q0) == (10, 100, 0.5, 0.0)
        assert (cfg.max_iters, cfg.max_time, cfg.optimal, cfg.u_gb, cfg.restart_iters) == (5000, 12.0, 0.0, 20, 100)
        assert "default parameters" in caplog.text

    def test_known_keys_are_applied(self, tmp_path):
        path = tmp_path / "parameters.txt"
        path.write_text("max_tries 3\nn_ants 50\nrho 0.2\nq_0 0.9\nmax_iters 100\n"
                        "restart_iters 25\nmax_time 1.5\nu_gb 7\noptimal 2\nseed 11\nmmas 0\n")
        cfg = read_parameters(path)
        assert cfg.max_tries == 3 and isinstance(cfg.max_tries, int)
        assert cfg.n_ants == 50 and isinstance(cfg.n_ants, int)
        assert cfg.rho == pytest.approx(0.2)
        assert cfg.q0 == pytest.approx(0.9)
        assert cfg.max_iters == 100
        assert cfg.restart_iters == 25
        assert cfg.max_time == pytest.approx(1.5)
        assert cfg.u_gb == 7
        assert cfg.optimal == 2.0
        assert cfg.seed == 11
        assert cfg.mmas is False

    def test_unknown_key_is_reported_and_skipped(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="gate_aco.parameters")
        path = tmp_path / "parameters.txt"
        path.write_text("alpha 2.0\nn_ants 12\n")
        cfg = read_parameters(path)
        assert cfg.n_ants == 12
        assert "Unknown parameter: alpha" in caplog.text

    def test_reading_stops_at_non_numeric_value(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="gate_aco.parameters")
        path = tmp_path / "parameters.txt"
        path.write_text("n_ants 5 rho abc max_iters 7")
        cfg = read_parameters(path)
        assert cfg.n_ants == 5
        assert cfg.rho == 0.5
        assert cfg.max_iters == 5000
        assert "not a number" in caplog.text

    def test_base_config_is_overlaid(self, tmp_path):
        path = tmp_path / "parameters.txt"
        path.write_text("rho 0.1")
        cfg = read_parameters(path, base=ACOConfig(n_ants=9))
        assert (cfg.n_ants, cfg.rho) == (9, 0.1)


def test_format_parameters_lists_settings():
    text = format_parameters(ACOConfig(n_ants=42, q0=0.25), seed=1234)
    assert text.startswith("Parameter settings are:")
    assert "n_ants" in text and "42" in text
    assert "q_0" in text and "0.25" in text
    assert "1234" in text


class TestValidate:
    def test_defaults_are_valid(self):
        ACOConfig().validate()

    def test_rho_zero_allowed_without_limits(self):
        ACOConfig(rho=0.0, mmas=False).validate()

    @pytest.mark.parametrize("changes", [
        {"max_tries": 0}, {"n_ants": 0}, {"rho": -0.5}, {"q0": 1.5}, {"u_gb": 0},
        {"restart_iters": 0}, {"rho": 0.0},
    ])
    def test_rejects(self, changes):
        with pytest.raises(ValueError):
            ACOConfig(**changes).validate()


def test_format_parameters_with_trial_seed():
    cfg = ACOConfig()
    text = format_parameters(cfg, seed=cfg.trial_seed(0))
    assert "None" not in text
