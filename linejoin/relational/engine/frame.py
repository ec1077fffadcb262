import pandas as pd
import numpy as np
import logging

from ..model.relation import Relation

logger = logging.getLogger(__name__)


def to_frame(relation: Relation) -> pd.DataFrame:
    """
    Copy a relation into a pandas.DataFrame with one int64 column per
    attribute, in column order. Duplicate rows are kept.
    """
    columns = relation.attribute_names()
    if not columns:
        return pd.DataFrame()
    data = np.array(relation.rows(), dtype=np.int64).reshape(relation.row_count(), len(columns))
    return pd.DataFrame(data, columns=columns)


def from_frame(frame: pd.DataFrame, name: str = "") -> Relation:
    """
    Build a relation from a DataFrame whose columns are attribute names and
    whose values are integers.
    """
    columns = [str(c) for c in frame.columns]
    for col in frame.columns:
        if not pd.api.types.is_integer_dtype(frame[col].dtype):
            error_msg = f"Column '{col}' has dtype {frame[col].dtype}; relations hold integers only"
            logger.error(error_msg)
            raise ValueError(error_msg)
    rel = Relation(columns, name=name)
    for row in frame.itertuples(index=False, name=None):
        rel.insert_tuple(row)
    logger.debug(f"[FRAME] Built relation '{name}' with {rel.row_count()} rows from DataFrame")
    return rel
