from .toymodel import ToyModelInstance, HammingObjective, ObjectiveFunction, BenchmarkError
from .aco_base import ACOConfig, ACOResult, RunState, Phase
from .pheromone import PheromoneStore
from .colony import Ant, Colony, copy_from_to
from .mmas import MaxMinAntSystem, adapt_u_gb, mmas_trail_limits
from .parameters import read_parameters, format_parameters
from .report import ReportWriter
from .experiments import run_trial, run_repeated_trials, run_parameter_sweep
