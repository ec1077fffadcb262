"""
Runs both line-join strategies over the same input, times them and checks
that they agree.
"""
import logging
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from ..relational.engine.join_engine import JoinEngine
from ..relational.engine.join_types import LineJoinStrategy
from ..relational.engine.statistics import JoinStatistics
from ..relational.model.relation import Relation
from .fixtures import chain_fixture, pairwise_fixture
from .generators import dangling_chain, make_rng, random_chain
from .timing import time_call

logger = logging.getLogger(__name__)


@dataclass
class ExperimentResult:
    """
    Outcome of one experiment. Times are means over all repeats, in
    microseconds; row and intermediate counts come from the last repeat.
    """
    name: str
    input_rows: int
    reduction_us: float
    chaining_us: float
    reduction_rows: int
    chaining_rows: int
    reduction_max_intermediate: int
    chaining_max_intermediate: int
    equivalent: bool
    reduced: Relation = field(repr=False, compare=False)
    chained: Relation = field(repr=False, compare=False)

    def summary(self) -> Dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)
                if f.name not in ("reduced", "chained")}


def run_experiment(name: str, relations: Sequence[Relation], repeats: int = 1,
                   progress: bool = True) -> ExperimentResult:
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    timings: Dict[str, List[float]] = {s.value: [] for s in LineJoinStrategy}
    stats: Dict[str, JoinStatistics] = {}
    results: Dict[str, Relation] = {}

    for _ in tqdm(range(repeats), desc=name, disable=not progress, leave=False):
        for strategy in LineJoinStrategy:
            run_stats = JoinStatistics()
            result, elapsed = time_call(JoinEngine.execute, relations, strategy, stats=run_stats)
            timings[strategy.value].append(elapsed)
            stats[strategy.value] = run_stats
            results[strategy.value] = result

    reduced = results[LineJoinStrategy.REDUCTION.value]
    chained = results[LineJoinStrategy.CHAINING.value]
    equivalent = reduced.tuple_set() == chained.tuple_set()
    if not equivalent:
        logger.warning(f"[EXPERIMENT] {name}: strategies disagree "
                       f"({reduced.row_count()} vs {chained.row_count()} rows)")

    return ExperimentResult(
        name=name,
        input_rows=sum(r.row_count() for r in relations),
        reduction_us=sum(timings["reduction"]) / repeats,
        chaining_us=sum(timings["chaining"]) / repeats,
        reduction_rows=reduced.row_count(),
        chaining_rows=chained.row_count(),
        reduction_max_intermediate=stats["reduction"].max_intermediate_rows,
        chaining_max_intermediate=stats["chaining"].max_intermediate_rows,
        equivalent=equivalent,
        reduced=reduced,
        chained=chained,
    )


def default_experiments(seed: Optional[int] = None, random_rows: int = 100,
                        dangling_block: int = 500) -> Dict[str, List[Relation]]:
    """The pairwise, fixed-chain, random-chain and dangling-chain inputs."""
    rng = make_rng(seed)
    return {
        "pairwise": list(pairwise_fixture()),
        "chain_fixture": chain_fixture(),
        "random_chain": random_chain(rows=random_rows, rng=rng),
        "dangling_chain": dangling_chain(block=dangling_block, rng=rng),
    }


def run_all(experiments: Dict[str, List[Relation]], repeats: int = 1,
            progress: bool = True) -> List[ExperimentResult]:
    results = []
    for name, relations in experiments.items():
        logger.info(f"Running experiment '{name}' over {len(relations)} relations")
        results.append(run_experiment(name, relations, repeats=repeats, progress=progress))
    return results


def results_frame(results: Sequence[ExperimentResult]) -> pd.DataFrame:
    return pd.DataFrame([r.summary() for r in results])
