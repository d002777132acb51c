"""
DBSCAN clustering of the jobs on a vehicle route.
Groups jobs by transport cost so a ruin step can remove a coherent subset.
"""
import numpy as np
from typing import List, Dict, Optional, Sequence, Tuple, Union
from dataclasses import dataclass

from routeclusters.clustering.dbscan import DBSCAN, NOISE, group_by_label
from routeclusters.clustering.metric import JobDistance
from routeclusters.clustering.points import extract_job_points
from routeclusters.clustering.radius import RadiusEstimator
from routeclusters.core.costs import TransportCosts
from routeclusters.core.exceptions import ConfigurationError
from routeclusters.core.models import Job, JobPoint, VehicleRoute
from routeclusters.utils.logger import logger
from routeclusters.utils.randomness import make_rng, next_item
from routeclusters.config import settings


class _FromSettings:
    """Marker for constructor arguments that fall back to settings."""

    def __repr__(self) -> str:
        return "FROM_SETTINGS"


FROM_SETTINGS = _FromSettings()


@dataclass
class ClusterStats:
    """Statistics about clustering results."""

    num_clusters: int
    num_noise_points: int
    total_points: int
    cluster_sizes: Dict[int, int]
    avg_cluster_size: float
    largest_cluster_size: int
    smallest_cluster_size: int
    noise_fraction: float
    radius: float


class DBSCANJobClusterer:
    """
    Density-based clustering of route jobs.

    Every distinct job on the route becomes one point carrying all of its
    locations. Two jobs are as far apart as the average transport cost
    between their locations. Unless a fixed radius is set, the DBSCAN
    radius is sampled from the route itself:

        radius = max(0, (mean sampled cost - min sampled cost) * radius_factor)

    Queries keep no result state on the instance. The only shared state they
    touch is the random source, so threads running in parallel should each
    use their own clusterer or their own generator.
    """

    def __init__(
        self,
        costs: TransportCosts,
        min_points: Optional[int] = None,
        sample_count: Optional[int] = None,
        radius_factor: Optional[float] = None,
        radius: Union[float, None, _FromSettings] = FROM_SETTINGS,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the clusterer.

        Args:
            costs: Transport cost function used for the metric and sampling.

            min_points: Minimum neighbourhood size (point itself included) of
                a core point. 0 and 1 both turn every isolated job into its
                own cluster. Defaults to settings.MIN_POINTS_PER_CLUSTER.

            sample_count: Activity pairs drawn to estimate the radius.
                Defaults to settings.SAMPLE_COUNT.

            radius_factor: Scale applied to the sampled cost spread.
                Defaults to settings.RADIUS_FACTOR.

            radius: Fixed radius. Disables sampling and is used unchanged.
                None samples the radius even if settings.RADIUS is set.
                Defaults to settings.RADIUS.

            rng: Random source for sampling and random cluster selection.
                Defaults to a generator seeded with settings.RANDOM_SEED.
        """
        self.costs = costs
        self.min_points = settings.MIN_POINTS_PER_CLUSTER if min_points is None else min_points
        self.sample_count = settings.SAMPLE_COUNT if sample_count is None else sample_count
        self.radius_factor = settings.RADIUS_FACTOR if radius_factor is None else radius_factor
        self.radius: Optional[float] = settings.RADIUS if radius is FROM_SETTINGS else radius
        self.rng = rng if rng is not None else make_rng()

        self._validate()

        logger.debug(
            "Initialized DBSCANJobClusterer",
            min_points=self.min_points,
            sample_count=self.sample_count,
            radius_factor=self.radius_factor,
            radius=self.radius,
        )

    def _validate(self) -> None:
        if self.min_points < 0:
            raise ConfigurationError(f"min_points must be >= 0, got {self.min_points}")
        if self.sample_count < 0:
            raise ConfigurationError(f"sample_count must be >= 0, got {self.sample_count}")
        if self.radius_factor < 0:
            raise ConfigurationError(f"radius_factor must be >= 0, got {self.radius_factor}")

    def set_random(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def set_min_points(self, min_points: int) -> None:
        if min_points < 0:
            raise ConfigurationError(f"min_points must be >= 0, got {min_points}")
        self.min_points = min_points

    def set_radius_factor(self, radius_factor: float) -> None:
        if radius_factor < 0:
            raise ConfigurationError(f"radius_factor must be >= 0, got {radius_factor}")
        self.radius_factor = radius_factor

    def set_radius(self, radius: Optional[float]) -> None:
        """Fix the radius, or pass None to go back to sampling."""
        self.radius = radius

    def get_clusters(self, route: VehicleRoute) -> List[List[Job]]:
        """
        Cluster the jobs on a route.

        Args:
            route: Route snapshot, left untouched

        Returns:
            One job list per cluster. Noise jobs are in none of them.
        """
        return [self._job_list(c) for c in self._cluster(route)]

    def get_random_cluster(self, route: VehicleRoute) -> List[Job]:
        """
        Cluster the jobs on a route and return one cluster picked uniformly at random.

        Returns:
            Jobs of the chosen cluster, or an empty list if the route is
            empty or no cluster was found
        """
        if route.is_empty:
            return []
        clusters = self._cluster(route)
        if not clusters:
            return []
        return self._job_list(next_item(clusters, self.rng))

    def _label(self, route: VehicleRoute) -> Tuple[List[JobPoint], np.ndarray, float]:
        points = extract_job_points(route)
        if not points:
            return points, np.empty(0, dtype=int), 0.0

        estimator = RadiusEstimator(
            self.costs,
            self.rng,
            sample_count=self.sample_count,
            radius_factor=self.radius_factor,
            radius=self.radius,
        )
        radius = estimator.resolve(route)

        metric = JobDistance(points, self.costs)
        engine = DBSCAN(eps=radius, min_points=self.min_points, distance=metric)
        labels = engine.fit([p.point_id for p in points])

        logger.debug(
            "DBSCAN job clustering complete",
            radius=radius,
            radius_source="fixed" if self.radius is not None else "sampled",
            num_clusters=int(labels.max()) + 1,
            num_noise_points=int(np.sum(labels == NOISE)),
            total_points=len(points),
        )
        return points, labels, radius

    def _cluster(self, route: VehicleRoute) -> List[List[JobPoint]]:
        points, labels, _ = self._label(route)
        return group_by_label(points, labels)

    @staticmethod
    def _job_list(cluster: Optional[Sequence[JobPoint]]) -> List[Job]:
        if cluster is None:
            return []
        return [p.job for p in cluster]

    def get_stats(self, route: VehicleRoute) -> ClusterStats:
        """
        Cluster a route and summarize the result.

        Runs a clustering of its own, so a sampled radius draws from the
        random source like any other query.

        Args:
            route: Route snapshot, left untouched

        Returns:
            ClusterStats object with detailed information
        """
        _, labels, radius = self._label(route)

        unique_labels = set(int(label) for label in labels)
        num_clusters = len(unique_labels) - (1 if NOISE in unique_labels else 0)

        num_noise = int(np.sum(labels == NOISE))
        total_points = len(labels)

        cluster_sizes = {}
        for label in unique_labels:
            if label != NOISE:
                cluster_sizes[label] = int(np.sum(labels == label))

        avg_cluster_size = float(np.mean(list(cluster_sizes.values()))) if cluster_sizes else 0.0
        largest_cluster = max(cluster_sizes.values()) if cluster_sizes else 0
        smallest_cluster = min(cluster_sizes.values()) if cluster_sizes else 0
        noise_fraction = num_noise / total_points if total_points > 0 else 0.0

        return ClusterStats(
            num_clusters=num_clusters,
            num_noise_points=num_noise,
            total_points=total_points,
            cluster_sizes=cluster_sizes,
            avg_cluster_size=avg_cluster_size,
            largest_cluster_size=largest_cluster,
            smallest_cluster_size=smallest_cluster,
            noise_fraction=noise_fraction,
            radius=radius,
        )
