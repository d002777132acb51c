"""
DBSCAN over opaque point identifiers.

The engine never looks at coordinates. It receives identifiers and a
``distance(id_a, id_b)`` callable, evaluates the pairwise distance matrix
once, and labels points the way classic DBSCAN does.
"""
from typing import Callable, Hashable, List, Sequence, TypeVar

import numpy as np

from routeclusters.core.exceptions import ConfigurationError

NOISE = -1
_UNVISITED = -2

T = TypeVar("T")
DistanceFunction = Callable[[Hashable, Hashable], float]


def group_by_label(items: Sequence[T], labels: np.ndarray) -> List[List[T]]:
    """Collect items into one list per cluster label, dropping noise."""
    num_clusters = int(labels.max()) + 1 if len(labels) else 0
    clusters: List[List[T]] = [[] for _ in range(max(num_clusters, 0))]
    for item, label in zip(items, labels):
        if label >= 0:
            clusters[label].append(item)
    return clusters


class DBSCAN:
    """
    Density-based clustering with a pluggable distance.

    A point's neighbourhood is every point within ``eps``, and always the
    point itself, whatever its self-distance. A job served at several
    locations has a non-zero average distance to itself. Points whose
    neighbourhood holds at least ``min_points`` points are core points.
    Clusters are grown through core points; points reached by no core point
    are labelled noise (-1).

    Args:
        eps: Neighbourhood radius. Negative values leave every point without
            neighbours, itself included.
        min_points: Minimum neighbourhood size of a core point. With 0 or 1,
            every point is core and isolated points become singleton clusters.
        distance: Callable returning the distance between two identifiers.
    """

    def __init__(self, eps: float, min_points: int, distance: DistanceFunction):
        if min_points < 0:
            raise ConfigurationError(f"min_points must be >= 0, got {min_points}")
        self.eps = eps
        self.min_points = min_points
        self.distance = distance
        # 0 counts as 1, the point itself
        self._core_size = max(min_points, 1)

    def distance_matrix(self, point_ids: Sequence[Hashable]) -> np.ndarray:
        """Evaluate the symmetric pairwise distance matrix."""
        n = len(point_ids)
        matrix = np.zeros((n, n), dtype=float)
        for i in range(n):
            for j in range(i, n):
                d = self.distance(point_ids[i], point_ids[j])
                matrix[i, j] = d
                matrix[j, i] = d
        return matrix

    def fit(self, point_ids: Sequence[Hashable]) -> np.ndarray:
        """
        Label every point.

        Args:
            point_ids: Identifiers understood by ``distance``

        Returns:
            Integer labels (1D array, -1 for noise), clusters numbered from 0
            in discovery order
        """
        n = len(point_ids)
        labels = np.full(n, _UNVISITED, dtype=int)
        if n == 0:
            return labels

        within = self.distance_matrix(point_ids) <= self.eps
        if self.eps >= 0:
            np.fill_diagonal(within, True)
        neighbours = [np.flatnonzero(row) for row in within]

        cluster_id = 0
        for i in range(n):
            if labels[i] != _UNVISITED:
                continue
            if len(neighbours[i]) < self._core_size:
                labels[i] = NOISE
                continue
            self._expand(i, cluster_id, neighbours, labels)
            cluster_id += 1

        return labels

    def _expand(self, seed: int, cluster_id: int, neighbours: List[np.ndarray], labels: np.ndarray) -> None:
        labels[seed] = cluster_id
        queue = list(neighbours[seed])
        queued = set(queue)
        idx = 0
        while idx < len(queue):
            current = queue[idx]
            idx += 1
            if labels[current] == _UNVISITED and len(neighbours[current]) >= self._core_size:
                for q in neighbours[current]:
                    if q not in queued:
                        queued.add(q)
                        queue.append(q)
            # Noise reached from a core point becomes a border point
            if labels[current] < 0:
                labels[current] = cluster_id

    def cluster(self, point_ids: Sequence[Hashable]) -> List[List[Hashable]]:
        """
        Group identifiers into clusters, dropping noise.

        Returns:
            Non-empty, disjoint clusters in discovery order
        """
        return group_by_label(point_ids, self.fit(point_ids))
