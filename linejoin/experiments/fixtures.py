"""
Fixed relations used by the pairwise and four-way chain experiments.
"""
from typing import List, Tuple

from ..relational.model.relation import Relation

R1_ROWS = [
    (1, 2), (4, 5), (7, 8), (10, 9), (1, 3),
    (2, 2), (11, 3), (6, 7), (11, 5), (12, 15),
]
R2_ROWS = [
    (2, 4), (5, 2), (7, 8), (13, 9), (1, 3),
    (5, 9), (15, 6), (3, 7), (3, 5), (9, 4),
]
R3_ROWS = [
    (4, 8), (5, 2), (8, 9), (6, 21), (1, 3),
    (10, 2), (9, 20), (3, 8), (3, 12), (9, 15),
]
R4_ROWS = [
    (8, 16), (8, 1), (7, 12), (15, 37), (3, 3),
    (12, 7), (21, 6), (2, 4), (3, 5), (20, 5),
]


def pairwise_fixture() -> Tuple[Relation, Relation]:
    """R1(A, B) and R2(B, C)."""
    r1 = Relation.from_rows(["A", "B"], R1_ROWS, name="R1")
    r2 = Relation.from_rows(["B", "C"], R2_ROWS, name="R2")
    return r1, r2


def chain_fixture() -> List[Relation]:
    """R1(A, B), R2(B, C), R3(C, D), R4(D, E)."""
    r1, r2 = pairwise_fixture()
    r3 = Relation.from_rows(["C", "D"], R3_ROWS, name="R3")
    r4 = Relation.from_rows(["D", "E"], R4_ROWS, name="R4")
    return [r1, r2, r3, r4]
