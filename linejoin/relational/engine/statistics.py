from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class JoinRecord:
    """
    Sizes observed for one pairwise operator call.
      operator: "natural_join" or "semi_join"
      left_rows / right_rows: operand row counts
      output_rows: row count of the returned relation
    """
    operator: str
    left_rows: int
    right_rows: int
    output_rows: int

    def __repr__(self) -> str:
        return f"{self.operator}({self.left_rows} x {self.right_rows}) -> {self.output_rows}"


@dataclass
class JoinStatistics:
    """Collects a JoinRecord for every pairwise join run during one evaluation."""
    records: List[JoinRecord] = field(default_factory=list)

    def record(self, operator: str, left_rows: int, right_rows: int, output_rows: int) -> None:
        self.records.append(JoinRecord(operator, left_rows, right_rows, output_rows))

    @property
    def joins_performed(self) -> int:
        return len(self.records)

    @property
    def max_intermediate_rows(self) -> int:
        return max((r.output_rows for r in self.records), default=0)

    @property
    def total_output_rows(self) -> int:
        return sum(r.output_rows for r in self.records)

    def for_operator(self, operator: str) -> List[JoinRecord]:
        return [r for r in self.records if r.operator == operator]

    def clear(self) -> None:
        self.records.clear()
