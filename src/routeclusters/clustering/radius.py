"""
Neighbourhood radius estimation for DBSCAN.
"""
from typing import Optional

import numpy as np

from routeclusters.core.costs import TransportCosts
from routeclusters.core.exceptions import ConfigurationError
from routeclusters.core.models import VehicleRoute
from routeclusters.utils.logger import logger
from routeclusters.utils.randomness import next_item


class RadiusEstimator:
    """
    Derives the clustering radius from the route's own cost distribution.

    Samples random activity pairs and returns the spread of their costs
    above the tightest pair, scaled by ``radius_factor``. Dense routes get a
    small radius and sparse routes a large one.
    """

    def __init__(
        self,
        costs: TransportCosts,
        rng: np.random.Generator,
        sample_count: int = 10,
        radius_factor: float = 0.8,
        radius: Optional[float] = None,
    ):
        if sample_count < 0:
            raise ConfigurationError(f"sample_count must be >= 0, got {sample_count}")
        if radius_factor < 0:
            raise ConfigurationError(f"radius_factor must be >= 0, got {radius_factor}")
        self.costs = costs
        self.rng = rng
        self.sample_count = sample_count
        self.radius_factor = radius_factor
        self.radius = radius

    def resolve(self, route: VehicleRoute) -> float:
        """Return the fixed radius if one is configured, else estimate it."""
        if self.radius is not None:
            return self.radius
        return self.estimate(route)

    def estimate(self, route: VehicleRoute) -> float:
        """
        Estimate the radius from ``sample_count`` random activity pairs.

        Args:
            route: Route to sample activities from

        Returns:
            ``max(0, (mean - min) * radius_factor)``, or 0.0 when nothing can be sampled
        """
        if route.is_empty or self.sample_count == 0:
            return 0.0

        minimum = float("inf")
        total = 0.0
        for _ in range(self.sample_count):
            act_a = next_item(route.activities, self.rng)
            act_b = next_item(route.activities, self.rng)
            cost = self.costs.get_transport_cost(
                act_a.location, act_b.location, 0.0, None, route.vehicle
            )
            minimum = min(minimum, cost)
            total += cost

        average = total / self.sample_count
        radius = max(0.0, (average - minimum) * self.radius_factor)
        logger.debug(
            "Estimated clustering radius",
            samples=self.sample_count,
            average=average,
            minimum=minimum,
            radius=radius,
        )
        return radius
