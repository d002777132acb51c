"""
Distance between jobs derived from transport costs.
"""
from typing import Dict, List

from routeclusters.core.costs import TransportCosts
from routeclusters.core.exceptions import InvalidJobPointError, UnknownPointError
from routeclusters.core.models import JobPoint


class JobDistance:
    """
    Average transport cost between every location of one job and every
    location of another.

    A pickup and delivery job is weighted by both of its stops rather than
    by a single representative location. Points are addressed by their
    ``point_id`` so the clustering engine never sees domain types.
    """

    def __init__(self, points: List[JobPoint], costs: TransportCosts):
        self.costs = costs
        self.points: Dict[int, JobPoint] = {p.point_id: p for p in points}

    def __call__(self, a_id: int, b_id: int) -> float:
        return self.distance(self._lookup(a_id), self._lookup(b_id))

    def _lookup(self, point_id: int) -> JobPoint:
        try:
            return self.points[point_id]
        except KeyError:
            raise UnknownPointError(point_id) from None

    def distance(self, a: JobPoint, b: JobPoint) -> float:
        """
        Mean cost over all ordered location pairs of ``a`` and ``b``.

        Raises:
            InvalidJobPointError: If either point has no locations
        """
        for point in (a, b):
            if not point.locations:
                raise InvalidJobPointError(
                    f"Job point {point.point_id} (job {point.job.id}) has no locations"
                )

        total = 0.0
        count = 0
        for loc_a in a.locations:
            for loc_b in b.locations:
                total += self.costs.get_transport_cost(loc_a, loc_b, 0.0, None, None)
                count += 1
        return total / count
