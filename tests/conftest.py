import pytest

from linejoin import Relation
from linejoin.relational.engine.config import config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts and ends with the default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def scenario_a():
    r1 = Relation.from_rows(["A", "B"], [(1, 2), (4, 5), (7, 8), (1, 3)], name="R1")
    r2 = Relation.from_rows(["B", "C"], [(2, 4), (5, 2), (1, 3), (3, 7)], name="R2")
    return r1, r2


@pytest.fixture
def abc_relation():
    return Relation.from_rows(["A", "B"], [(1, 2), (2, 2), (1, 3)], name="R")
