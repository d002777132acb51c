"""
Transport cost contract and a coordinate based implementation.
"""
import math
from typing import Any, Optional, Protocol, runtime_checkable

from routeclusters.core.exceptions import ConfigurationError, CostCalculationError
from routeclusters.core.models import Location, Vehicle


@runtime_checkable
class TransportCosts(Protocol):
    """
    Cost of travelling between two locations.

    Implementations must return a non-negative value and accept ``None``
    for the driver and vehicle context.
    """

    def get_transport_cost(
        self,
        from_location: Location,
        to_location: Location,
        departure_time: float,
        driver: Optional[Any],
        vehicle: Optional[Vehicle],
    ) -> float:
        ...


class EuclideanCosts:
    """
    Straight-line costs between location coordinates.

    Args:
        speed: Distance units travelled per cost unit.
        detour_factor: Multiplier applied to the straight-line distance to
            approximate the road network.
    """

    def __init__(self, speed: float = 1.0, detour_factor: float = 1.0):
        if speed <= 0:
            raise ConfigurationError(f"speed must be positive, got {speed}")
        if detour_factor <= 0:
            raise ConfigurationError(f"detour_factor must be positive, got {detour_factor}")
        self.speed = speed
        self.detour_factor = detour_factor

    def get_distance(self, from_location: Location, to_location: Location) -> float:
        if from_location.coordinate is None or to_location.coordinate is None:
            raise CostCalculationError(
                f"Cannot compute euclidean distance between {from_location.id} and "
                f"{to_location.id}: missing coordinate"
            )
        (x1, y1), (x2, y2) = from_location.coordinate, to_location.coordinate
        return math.hypot(x2 - x1, y2 - y1) * self.detour_factor

    def get_transport_cost(
        self,
        from_location: Location,
        to_location: Location,
        departure_time: float = 0.0,
        driver: Optional[Any] = None,
        vehicle: Optional[Vehicle] = None,
    ) -> float:
        return self.get_distance(from_location, to_location) / self.speed

    def __repr__(self) -> str:
        return f"EuclideanCosts(speed={self.speed}, detour_factor={self.detour_factor})"
