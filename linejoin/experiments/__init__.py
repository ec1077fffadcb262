"""
Timing experiments comparing the two line-join strategies.
"""
from .fixtures import pairwise_fixture, chain_fixture
from .generators import make_rng, shuffled, random_chain, dangling_chain
from .timing import time_call
from .runner import ExperimentResult, run_experiment, default_experiments, run_all, results_frame

__all__ = [
    'pairwise_fixture', 'chain_fixture', 'make_rng', 'shuffled', 'random_chain',
    'dangling_chain', 'time_call', 'ExperimentResult', 'run_experiment',
    'default_experiments', 'run_all', 'results_frame',
]
