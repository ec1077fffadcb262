"""
Random line-join inputs for the timing experiments.

All randomness comes from a numpy Generator so a run can be reproduced
from its seed.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..relational.model.relation import Relation

logger = logging.getLogger(__name__)

Rows = List[Tuple[int, int]]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def shuffled(rows: Sequence[Tuple[int, int]], rng: np.random.Generator) -> Rows:
    """Return a random permutation of rows; the input is left as is."""
    order = rng.permutation(len(rows))
    return [tuple(rows[i]) for i in order]


def random_chain(rows: int = 100, value_range: int = 5000,
                 rng: Optional[np.random.Generator] = None) -> List[Relation]:
    """
    Three-relation chain R1(A, B), R2(B, C), R3(C, D).

    R1 pairs keys 1..rows with random B values, R2 pairs random B values with
    keys 1..rows, and R3 is the identity on 1..rows. Random values are drawn
    from [1, value_range], so most R1 rows dangle when value_range >> rows.
    """
    rng = rng if rng is not None else make_rng()
    keys = np.arange(1, rows + 1)
    r1 = list(zip(keys, rng.integers(1, value_range, size=rows, endpoint=True)))
    r2 = list(zip(rng.integers(1, value_range, size=rows, endpoint=True), keys))
    r3 = list(zip(keys, keys))
    logger.debug(f"[GEN] random_chain rows={rows} value_range={value_range}")
    return [
        Relation.from_rows(["A", "B"], r1, name="R1"),
        Relation.from_rows(["B", "C"], r2, name="R2"),
        Relation.from_rows(["C", "D"], r3, name="R3"),
    ]


def dangling_chain(block: int = 1000, rng: Optional[np.random.Generator] = None) -> List[Relation]:
    """
    Three-relation chain where R1 join R2 is large but almost nothing of it
    survives the join with R3.

    R1 holds 2 * block rows on B = 5 and B = 7 plus (2*block+1, 2*block+2);
    R2 mirrors them as (5, i) and (7, i) plus (2*block+2, 8). R3 holds
    2 * block random rows whose C lies above every C of R2, plus (8, 30).
    Chaining materializes 2 * block**2 + 1 rows of R1 join R2; the full
    result has only block + 1 rows. Row order is shuffled.

    block must be at least 8 so that R2 holds (5, 8) and no random C of R3
    can collide with 8.
    """
    if block < 8:
        raise ValueError(f"dangling_chain needs block >= 8, got {block}")
    rng = rng if rng is not None else make_rng()

    r1: Rows = [(i, 5) for i in range(1, block + 1)]
    r1 += [(i, 7) for i in range(block + 1, 2 * block + 1)]
    r1.append((2 * block + 1, 2 * block + 2))

    r2: Rows = [(5, i) for i in range(1, block + 1)]
    r2 += [(7, i) for i in range(block + 1, 2 * block + 1)]
    r2.append((2 * block + 2, 8))

    c_values = rng.integers(2 * block + 2, 3 * block, size=2 * block, endpoint=True)
    d_values = rng.integers(1, 3 * block, size=2 * block, endpoint=True)
    r3: Rows = list(zip(c_values, d_values))
    r3.append((8, 30))

    logger.debug(f"[GEN] dangling_chain block={block}")
    return [
        Relation.from_rows(["A", "B"], shuffled(r1, rng), name="R1"),
        Relation.from_rows(["B", "C"], shuffled(r2, rng), name="R2"),
        Relation.from_rows(["C", "D"], shuffled(r3, rng), name="R3"),
    ]
