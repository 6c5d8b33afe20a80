"""Transitive closure of the city graph by fixed-point expansion.

Edges come out in two phases. First every direct edge, row by row. Then
rounds of expansion: in each round, for every city u (ascending), every city v
that u reached by the end of the previous round (ascending) and every direct
successor w of v (ascending), the pair (u, w) is set and yielded if it is new
and w is not u. Rounds repeat until one adds nothing.

Because of the w != u rule, expansion never sets (u, u). A diagonal cell is
only present when the input already has the self-edge.
"""
import logging
from typing import Iterator, Optional

from . import instrumentation, measurements
from .graph_store import Matrix
from .net import Edge

logger = logging.getLogger(__name__)


def compute_closure(matrix: Matrix, tracker: Optional[instrumentation.Tracker] = None) -> Iterator[Edge]:
    metrics = _Measurements(instrumentation.ensure_tracker(tracker))
    with metrics.closure_seconds_sum:
        adjacency = matrix.rows()
        n = matrix.size
        closure = matrix.rows()

        for u in range(n):
            for w in range(n):
                if closure[u][w] == 1:
                    metrics.closure_direct_edge_count.increase(1)
                    yield u, w

        rounds = 0
        changed = True
        while changed:
            changed = False
            rounds += 1
            previous = [list(row) for row in closure]
            metrics.closure_round_count.increase(1)
            for u in range(n):
                for v in range(n):
                    if not previous[u][v]:
                        continue
                    for w in range(n):
                        if adjacency[v][w] and not closure[u][w] and u != w:
                            closure[u][w] = 1
                            changed = True
                            metrics.closure_derived_edge_count.increase(1)
                            yield u, w
            logger.debug("closure round %d finished, changed=%s", rounds, changed)


def closure_table(matrix: Matrix, tracker: Optional[instrumentation.Tracker] = None) -> list[list[int]]:
    table = [[0 for _ in range(matrix.size)] for _ in range(matrix.size)]
    for u, w in compute_closure(matrix, tracker):
        table[u][w] = 1
    # cells that are set but not exactly 1 are never emitted, keep them visible
    for u, row in enumerate(matrix.rows()):
        for w, value in enumerate(row):
            if value:
                table[u][w] = 1
    return table


class _Measurements:
    def __init__(self, tracker: instrumentation.Tracker):
        self.closure_round_count = tracker.get_counter(measurements.CLOSURE_ROUND_COUNT)
        self.closure_direct_edge_count = tracker.get_counter(measurements.CLOSURE_DIRECT_EDGE_COUNT)
        self.closure_derived_edge_count = tracker.get_counter(measurements.CLOSURE_DERIVED_EDGE_COUNT)
        self.closure_seconds_sum = tracker.get_timer(measurements.CLOSURE_SECONDS_SUM)
