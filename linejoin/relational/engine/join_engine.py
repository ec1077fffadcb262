import logging
import os
from typing import Dict, List, Optional, Sequence, Set, Union

from ..model.relation import Relation
from .config import config
from .join_types import LineJoinStrategy
from .path_validator import validate_line_join
from .statistics import JoinStatistics

logger = logging.getLogger(__name__)
log_level_str = os.environ.get("LINEJOIN_DEBUG", "INFO").upper()
try:
    logger.setLevel(getattr(logging, log_level_str))
except AttributeError:
    logger.setLevel(logging.INFO)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False


class JoinEngine:
    """
    Stateless join algorithms over Relation values.

    Every method returns a new Relation and leaves its operands untouched,
    so the same input relation can be reused across the repeated semi-joins
    of the reduction sweep.
    """

    # ------------------------------------------------------------------
    # Pairwise operators
    # ------------------------------------------------------------------
    @staticmethod
    def natural_join(left: Relation, right: Relation, stats: Optional[JoinStatistics] = None) -> Relation:
        """
        Hash join on all attributes shared by left and right.

        The right relation is indexed on one shared attribute; each left row
        probes the index and every candidate is checked on all shared
        attributes. Output columns are the left attributes followed by the
        right-only attributes. Without a shared attribute the result is the
        empty relation; no Cartesian product is formed.
        """
        left_attrs = left.attribute_names()
        right_attrs = right.attribute_names()
        shared: Set[str] = set(left_attrs) & set(right_attrs)

        if not shared:
            logger.debug(f"[JOIN] No shared attributes between {left_attrs} and {right_attrs}, empty result")
            res = Relation()
            if stats is not None:
                stats.record("natural_join", left.row_count(), right.row_count(), 0)
            return res

        shared_attrs = [a for a in left_attrs if a in shared]
        right_only = [a for a in right_attrs if a not in shared]
        res = Relation(left_attrs + right_only)

        key_attr = shared_attrs[0]
        left_key = left.column_index(key_attr)
        right_key = right.column_index(key_attr)
        checks = [(left.column_index(a), right.column_index(a)) for a in shared_attrs]
        right_only_idx = [right.column_index(a) for a in right_only]

        index: Dict[int, List[int]] = {}
        right_rows = right.rows()
        for pos, row in enumerate(right_rows):
            index.setdefault(row[right_key], []).append(pos)

        logger.debug(f"[JOIN] Shared {shared_attrs}, key '{key_attr}', "
                     f"{len(index)} distinct key values over {len(right_rows)} right rows")

        for lrow in left:
            for pos in index.get(lrow[left_key], ()):
                rrow = right_rows[pos]
                if all(lrow[li] == rrow[ri] for li, ri in checks):
                    res._rows.append(lrow + tuple(rrow[i] for i in right_only_idx))

        if stats is not None:
            stats.record("natural_join", left.row_count(), right.row_count(), res.row_count())
        logger.debug(f"[JOIN] {left.row_count()} x {right.row_count()} rows -> {res.row_count()} rows")
        return res

    @staticmethod
    def semi_join(left: Relation, right: Relation, stats: Optional[JoinStatistics] = None) -> Relation:
        """
        Rows of left (deduplicated, first-seen order) that have at least one
        join partner in right.

        Same result as projecting natural_join(left, right) onto the left
        attributes, but the join is never built: right contributes only the
        set of its shared-attribute value tuples.
        """
        left_attrs = left.attribute_names()
        right_attrs = set(right.attribute_names())
        shared_attrs = [a for a in left_attrs if a in right_attrs]

        if not shared_attrs:
            res = Relation(name=left.name)
        else:
            left_idx = [left.column_index(a) for a in shared_attrs]
            right_idx = [right.column_index(a) for a in shared_attrs]
            keys: Set[tuple] = {tuple(row[i] for i in right_idx) for row in right}

            res = Relation(left_attrs, name=left.name)
            seen: Set[tuple] = set()
            for row in left:
                if row in seen or tuple(row[i] for i in left_idx) not in keys:
                    continue
                seen.add(row)
                res._rows.append(row)

        if stats is not None:
            stats.record("semi_join", left.row_count(), right.row_count(), res.row_count())
        logger.debug(f"[SEMIJOIN] '{left.name}' reduced from {left.row_count()} to {res.row_count()} rows")
        return res

    # ------------------------------------------------------------------
    # Line joins
    # ------------------------------------------------------------------
    @staticmethod
    def _check_path(relations: Sequence[Relation]) -> None:
        if config.get_validate_path():
            validate_line_join(relations)

    @staticmethod
    def reduce(relations: Sequence[Relation], stats: Optional[JoinStatistics] = None) -> List[Relation]:
        """
        Semi-join reduction of a line join: a tail-to-head sweep followed by
        a head-to-tail sweep. Afterwards every remaining row takes part in at
        least one tuple of the full join.
        """
        k = len(relations)
        if k == 0:
            return []
        reduced: List[Relation] = [r.copy() for r in relations]

        for i in range(k - 2, -1, -1):
            reduced[i] = JoinEngine.semi_join(reduced[i], reduced[i + 1], stats=stats)
        logger.debug(f"[REDUCE] After tail-to-head sweep: {[r.row_count() for r in reduced]}")

        for i in range(1, k):
            reduced[i] = JoinEngine.semi_join(reduced[i], reduced[i - 1], stats=stats)
        logger.debug(f"[REDUCE] After head-to-tail sweep: {[r.row_count() for r in reduced]}")

        return reduced

    @staticmethod
    def line_join_reduced(relations: Sequence[Relation], stats: Optional[JoinStatistics] = None) -> Relation:
        """
        Evaluate q(A1, ..., Ak+1) :- R1(A1, A2), ..., Rk(Ak, Ak+1) in
        O(N + OUT): reduce with semi-joins, then fold natural joins from the
        tail back to the head.
        """
        k = len(relations)
        if k == 0:
            return Relation()
        if k == 1:
            return relations[0].copy()
        JoinEngine._check_path(relations)

        pruned = JoinEngine.reduce(relations, stats=stats)
        result = pruned[k - 1]
        for i in range(k - 2, -1, -1):
            result = JoinEngine.natural_join(pruned[i], result, stats=stats)

        logger.debug(f"[LINEJOIN][reduction] {k} relations -> {result.row_count()} rows")
        return result

    @staticmethod
    def line_join_chained(relations: Sequence[Relation], stats: Optional[JoinStatistics] = None) -> Relation:
        """
        Evaluate the same line join as a left fold of natural joins,
        R1 join R2, then that join R3, and so on, with no pruning.
        """
        k = len(relations)
        if k == 0:
            return Relation()
        if k == 1:
            return relations[0].copy()
        JoinEngine._check_path(relations)

        result = relations[0]
        for rel in relations[1:]:
            result = JoinEngine.natural_join(result, rel, stats=stats)

        logger.debug(f"[LINEJOIN][chaining] {k} relations -> {result.row_count()} rows")
        return result

    @staticmethod
    def execute(
        relations: Sequence[Relation],
        strategy: Optional[Union[str, LineJoinStrategy]] = None,
        stats: Optional[JoinStatistics] = None,
    ) -> Relation:
        """Run a line join with the given strategy, or the configured default."""
        if strategy is None:
            strategy = config.get_default_strategy()
        if isinstance(strategy, LineJoinStrategy):
            strategy = strategy.value

        if not LineJoinStrategy.is_valid(strategy):
            error_msg = f"Unknown line join strategy: {strategy}. Valid options: {LineJoinStrategy.get_all_strategies()}"
            logger.error(error_msg)
            raise ValueError(error_msg)

        if strategy == LineJoinStrategy.REDUCTION.value:
            return JoinEngine.line_join_reduced(relations, stats=stats)
        return JoinEngine.line_join_chained(relations, stats=stats)
