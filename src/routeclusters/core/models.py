"""
Pydantic models for type-safe route handling.
Defines the route snapshot that gets clustered and the per-run job points.
"""
from typing import Optional, List, Tuple
from pydantic import BaseModel, Field, field_validator, ConfigDict


class Location(BaseModel):
    """Geographic point an activity takes place at."""

    id: str = Field(..., min_length=1, description="Unique location identifier")
    coordinate: Optional[Tuple[float, float]] = Field(
        None,
        description="(x, y) coordinate, required by coordinate based costs"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, x: float, y: float, id: Optional[str] = None) -> "Location":
        """Build a location from a coordinate, using the coordinate as id if none is given."""
        return cls(id=id or f"[x={x}][y={y}]", coordinate=(x, y))


class Job(BaseModel):
    """
    Task to be served on a route, e.g. a service or a shipment.
    Jobs are hashable and compare by value, so ids must be unique.
    """

    id: str = Field(..., min_length=1, description="Unique job identifier")
    name: Optional[str] = Field(None, description="Human readable name")

    model_config = ConfigDict(frozen=True)


class Vehicle(BaseModel):
    """Vehicle serving a route, passed to cost functions as context."""

    id: str = Field(..., min_length=1, description="Unique vehicle identifier")
    start_location: Optional[Location] = Field(None, description="Depot the vehicle starts at")

    model_config = ConfigDict(frozen=True)


class TourActivity(BaseModel):
    """
    One stop on a route.
    Job activities reference their job; travel or break legs carry none.
    """

    location: Location = Field(..., description="Where the activity happens")
    job: Optional[Job] = Field(None, description="Job served by this activity")
    type: str = Field(default="service", description="Activity type, e.g. pickup or delivery")

    model_config = ConfigDict(frozen=True)

    @property
    def is_job_activity(self) -> bool:
        """Check if this activity serves a job."""
        return self.job is not None


class VehicleRoute(BaseModel):
    """
    Ordered activities of a single vehicle.
    Treated as a read-only snapshot by the clustering code.
    """

    vehicle: Vehicle = Field(..., description="Vehicle serving the route")
    activities: List[TourActivity] = Field(default_factory=list, description="Activities in tour order")

    model_config = ConfigDict(validate_assignment=True)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no activities."""
        return len(self.activities) == 0

    @property
    def jobs(self) -> List[Job]:
        """Distinct jobs on the route in first-seen order."""
        seen = {}
        for act in self.activities:
            if act.job is not None and act.job not in seen:
                seen[act.job] = None
        return list(seen)


class JobPoint(BaseModel):
    """
    A job as a point in the clustering space.

    Carries every location the job is served at on the route. The
    ``point_id`` is only a lookup key for the distance metric and is unique
    within one clustering run.
    """

    point_id: int = Field(..., ge=1, description="Run-unique identifier")
    job: Job = Field(..., description="Job this point represents")
    locations: Tuple[Location, ...] = Field(..., description="Locations the job is served at")

    model_config = ConfigDict(frozen=True)

    @field_validator("locations")
    @classmethod
    def validate_locations(cls, v: Tuple[Location, ...]) -> Tuple[Location, ...]:
        """Ensure the point has at least one location."""
        if len(v) == 0:
            raise ValueError("Job point needs at least one location")
        return v
