"""
Shared fixtures and route builders for the test suite.
"""
from typing import List, Optional, Tuple

import pytest

from routeclusters.core.costs import EuclideanCosts
from routeclusters.core.models import Job, Location, TourActivity, Vehicle, VehicleRoute


class RecordingCosts(EuclideanCosts):
    """Euclidean costs that remember every query."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls: List[Tuple] = []

    def get_transport_cost(self, from_location, to_location, departure_time=0.0, driver=None, vehicle=None):
        self.calls.append((from_location, to_location, departure_time, driver, vehicle))
        return super().get_transport_cost(from_location, to_location, departure_time, driver, vehicle)


def make_route(stops: List[Tuple[Optional[str], float, float]], vehicle_id: str = "v1") -> VehicleRoute:
    """
    Build a route from (job_id, x, y) stops.
    A job id of None creates an activity without a job.
    """
    jobs = {}
    activities = []
    for job_id, x, y in stops:
        job = None
        if job_id is not None:
            job = jobs.setdefault(job_id, Job(id=job_id))
        activities.append(TourActivity(location=Location.of(x, y), job=job))
    return VehicleRoute(vehicle=Vehicle(id=vehicle_id), activities=activities)


@pytest.fixture
def costs():
    return EuclideanCosts()


@pytest.fixture
def recording_costs():
    return RecordingCosts()


@pytest.fixture
def empty_route():
    return VehicleRoute(vehicle=Vehicle(id="v1"))


@pytest.fixture
def three_job_route():
    """J1 and J2 one unit apart, J3 ten units away."""
    return make_route([
        ("J1", 0.0, 0.0),
        ("J2", 1.0, 0.0),
        ("J3", 10.0, 0.0),
    ])


@pytest.fixture
def route_builder():
    return make_route
