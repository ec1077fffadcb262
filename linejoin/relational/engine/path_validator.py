"""
Validation of the line-join adjacency contract.

A line join R1(A1,A2), R2(A2,A3), ..., Rk(Ak,Ak+1) is only evaluated
correctly by the reduction sweep when relation i and relation i+1 share
exactly one attribute and no other pair of relations shares any. The check
builds an undirected sharing graph, one node per relation position, and
compares it with the path graph on k nodes.
"""
import logging
from typing import List, Sequence, Set

import networkx as nx

from ..model.relation import Relation

logger = logging.getLogger(__name__)


class PathJoinError(ValueError):
    """Raised when a sequence of relations does not form a line join."""


def _label(relations: Sequence[Relation], idx: int) -> str:
    name = relations[idx].name
    return f"#{idx} '{name}'" if name else f"#{idx}"


def build_sharing_graph(relations: Sequence[Relation]) -> nx.Graph:
    """
    Graph with a node per relation position and an edge for every pair of
    relations with at least one attribute in common. Each edge carries the
    shared attribute names under 'shared'.
    """
    G = nx.Graph()
    attr_sets: List[Set[str]] = [set(r.attribute_names()) for r in relations]
    for i in range(len(relations)):
        G.add_node(i)
    for i in range(len(relations)):
        for j in range(i + 1, len(relations)):
            shared = attr_sets[i] & attr_sets[j]
            if shared:
                G.add_edge(i, j, shared=sorted(shared))
    return G


def validate_line_join(relations: Sequence[Relation]) -> None:
    """
    Raise PathJoinError unless the relations, in the given order, form a
    path join. Sequences of fewer than two relations are always valid.
    """
    k = len(relations)
    if k < 2:
        return

    G = build_sharing_graph(relations)
    expected = nx.path_graph(k)

    for i, j in expected.edges():
        if not G.has_edge(i, j):
            raise PathJoinError(
                f"Line join: relations {_label(relations, i)} and {_label(relations, j)} "
                f"share no attribute"
            )
        shared = G.edges[i, j]["shared"]
        if len(shared) != 1:
            raise PathJoinError(
                f"Line join: relations {_label(relations, i)} and {_label(relations, j)} "
                f"must share exactly one attribute, found {shared}"
            )

    for i, j in G.edges():
        if not expected.has_edge(i, j):
            raise PathJoinError(
                f"Line join: non-adjacent relations {_label(relations, i)} and {_label(relations, j)} "
                f"share attributes {G.edges[i, j]['shared']}"
            )

    logger.debug(f"[PATH] Validated line join over {k} relations")
