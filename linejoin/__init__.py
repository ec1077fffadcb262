"""
In-memory relations over integer tuples and two evaluators for line joins.
"""
from .relational.model.schema import Schema, SchemaError
from .relational.model.relation import Relation
from .relational.engine.join_engine import JoinEngine
from .relational.engine.join_types import LineJoinStrategy
from .relational.engine.path_validator import PathJoinError, validate_line_join
from .relational.engine.statistics import JoinStatistics, JoinRecord

__all__ = [
    'Schema', 'SchemaError', 'Relation', 'JoinEngine', 'LineJoinStrategy',
    'PathJoinError', 'validate_line_join', 'JoinStatistics', 'JoinRecord',
]
