import logging
from typing import Optional

from . import instrumentation, measurements
from .errors import InvalidNode
from .graph_store import Matrix
from .net import NodeId, Path

logger = logging.getLogger(__name__)


def find_path(
        matrix: Matrix,
        source: NodeId,
        destination: NodeId,
        tracker: Optional[instrumentation.Tracker] = None,
) -> Optional[Path]:
    """Depth-first search with backtracking from source to destination.

    Candidates are tried in ascending index order and the first path that
    reaches the destination is returned. A node is unmarked when every branch
    through it fails, so other branches may pass through it again. Returns
    None when the destination is not reachable.
    """
    for node in (source, destination):
        if not matrix.contains(node):
            raise InvalidNode(node, matrix.size)
    metrics = _Measurements(instrumentation.ensure_tracker(tracker))
    with metrics.search_seconds_sum:
        path = _search(matrix, source, destination, metrics)
    if path is None:
        logger.debug("no path from %d to %d", source, destination)
    else:
        logger.debug("path from %d to %d has %d cities", source, destination, len(path))
    return path


def _search(matrix: Matrix, source: NodeId, destination: NodeId, metrics: '_Measurements') -> Optional[Path]:
    visited = [False] * matrix.size
    path: Path = [source]
    # next candidate index to try, one entry per node on the path
    next_candidates = [0]
    visited[source] = True
    metrics.search_visit_count.increase(1)
    if source == destination:
        return path
    while len(path) != 0:
        current = path[-1]
        successor = _next_candidate(matrix, current, next_candidates[-1], visited)
        if successor is None:
            visited[current] = False
            path.pop()
            next_candidates.pop()
            metrics.search_backtrack_count.increase(1)
            continue
        next_candidates[-1] = successor + 1
        visited[successor] = True
        path.append(successor)
        next_candidates.append(0)
        metrics.search_visit_count.increase(1)
        if successor == destination:
            return path
    return None


def _next_candidate(matrix: Matrix, current: NodeId, start: NodeId, visited: list[bool]) -> Optional[NodeId]:
    for candidate in range(start, matrix.size):
        if not visited[candidate] and matrix.has_edge(current, candidate):
            return candidate
    return None


class _Measurements:
    def __init__(self, tracker: instrumentation.Tracker):
        self.search_visit_count = tracker.get_counter(measurements.SEARCH_VISIT_COUNT)
        self.search_backtrack_count = tracker.get_counter(measurements.SEARCH_BACKTRACK_COUNT)
        self.search_seconds_sum = tracker.get_timer(measurements.SEARCH_SECONDS_SUM)
