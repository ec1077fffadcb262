"""
Line join experiments.

    python -m linejoin.experiments --seed 7 --repeats 5 --show-relations

Prints the fixture relations and join results, then a table comparing the
reduction and chaining strategies on every experiment input.
"""
import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from ..relational.engine.config import config
from ..relational.engine.join_engine import JoinEngine
from .fixtures import chain_fixture, pairwise_fixture
from .runner import default_experiments, results_frame, run_all


def _print_relation(title: str, relation) -> None:
    print(f"{title}:")
    print(relation)


def show_fixtures() -> None:
    r1, r2 = pairwise_fixture()
    _print_relation("Relation R1", r1)
    _print_relation("Relation R2", r2)
    _print_relation("Join between relations R1 and R2", JoinEngine.natural_join(r1, r2))

    chain = chain_fixture()
    for rel in chain[2:]:
        _print_relation(f"Relation {rel.name}", rel)
    pairwise = chain[0]
    for rel in chain[1:]:
        pairwise = JoinEngine.natural_join(pairwise, rel)
    _print_relation("Result of chain of natural joins of R1, R2, R3 & R4", pairwise)
    _print_relation("Result of line join by semi-join reduction of R1, R2, R3 & R4",
                    JoinEngine.line_join_reduced(chain))
    _print_relation("Result of line join by chaining of R1, R2, R3 & R4",
                    JoinEngine.line_join_chained(chain))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m linejoin.experiments",
        description="Compare semi-join reduction against chained natural joins on line joins.",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random inputs")
    parser.add_argument("--repeats", type=int, default=None, help="timed runs per strategy")
    parser.add_argument("--random-rows", type=int, default=100,
                        help="rows per relation in the random chain")
    parser.add_argument("--dangling-block", type=int, default=500,
                        help="block size of the dangling chain")
    parser.add_argument("--show-relations", action="store_true",
                        help="print the fixture relations and their joins")
    parser.add_argument("--no-progress", action="store_true", help="hide progress bars")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    args = build_parser().parse_args(argv)

    if args.config:
        config.load_from_file(args.config)

    seed = args.seed if args.seed is not None else config.get('experiments.seed')
    repeats = args.repeats if args.repeats is not None else int(config.get('experiments.repeats', 1))
    progress = config.get('experiments.progress', True) and not args.no_progress

    if args.show_relations:
        show_fixtures()

    experiments = default_experiments(seed=seed, random_rows=args.random_rows,
                                      dangling_block=args.dangling_block)
    results = run_all(experiments, repeats=repeats, progress=progress)

    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(results_frame(results).to_string(index=False))

    if all(r.equivalent for r in results):
        print("The two methods of executing the query produced equivalent results.")
        return 0
    print("The two methods of executing the query did not produce equivalent results.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
