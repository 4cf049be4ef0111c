from __future__ import annotations
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from .aco_base import ACOConfig

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS_FILE = "parameters.txt"


def _flag(value: float) -> bool:
    return value != 0

# file key -> (ACOConfig field, conversion)
PARAMETER_KEYS = {
    "max_tries": ("max_tries", int),
    "n_ants": ("n_ants", int),
    "rho": ("rho", float),
    "q_0": ("q0", float),
    "max_iters": ("max_iters", int),
    "restart_iters": ("restart_iters", int),
    "max_time": ("max_time", float),
    "u_gb": ("u_gb", int),
    "optimal": ("optimal", float),
    "seed": ("seed", int),
    "mmas": ("mmas", _flag),
    "tau0": ("tau0", float),
    "deposit_weight": ("deposit_weight", float),
}


def read_parameters(path: Union[str, Path] = DEFAULT_PARAMETERS_FILE,
                    base: Optional[ACOConfig] = None) -> ACOConfig:
    """Overlay `key value` pairs from `path` on `base` (defaults if None).

    A missing file leaves the defaults in place. Unknown keys are reported
    and skipped; reading stops at the first value that is not a number.
    """
    cfg = base if base is not None else ACOConfig()
    path = Path(path)
    if not path.is_file():
        logger.info("Without parameters file %s => default parameters", path)
        return cfg

    tokens = path.read_text().split()
    overrides = {}
    for key, raw in zip(tokens[0::2], tokens[1::2]):
        try:
            number = float(raw)
        except ValueError:
            logger.warning("%s: value %r for %s is not a number, ignoring the rest of the file",
                           path, raw, key)
            break
        if key not in PARAMETER_KEYS:
            logger.warning("Unknown parameter: %s", key)
            continue
        field_name, convert = PARAMETER_KEYS[key]
        overrides[field_name] = convert(number)
    else:
        if len(tokens) % 2:
            logger.warning("%s: trailing key %r has no value", path, tokens[-1])
    return replace(cfg, **overrides)


def format_parameters(cfg: ACOConfig, seed: Optional[int] = None) -> str:
    rows = [
        ("max_tries", f"{cfg.max_tries}"),
        ("max_iters", f"{cfg.max_iters}"),
        ("max_time", f"{cfg.max_time:.2f}"),
        ("seed", f"{seed if seed is not None else cfg.seed}"),
        ("optimum", f"{cfg.optimal:f}"),
        ("n_ants", f"{cfg.n_ants}"),
        ("rho", f"{cfg.rho:.2f}"),
        ("q_0", f"{cfg.q0:.2f}"),
        ("restart_iters", f"{cfg.restart_iters}"),
        ("u_gb", f"{cfg.u_gb}"),
        ("mmas", f"{int(cfg.mmas)}"),
    ]
    lines = ["Parameter settings are:"]
    lines += [f"{name:<16}{value}" for name, value in rows]
    return "\n".join(lines)
