"""Conversion of route activities into job points."""
from typing import Dict, List

from routeclusters.core.models import Job, JobPoint, Location, VehicleRoute


def extract_job_points(route: VehicleRoute) -> List[JobPoint]:
    """
    Build one job point per distinct job on the route.

    Locations are collected in activity order and points are emitted in the
    order their jobs are first seen. Identifiers start at 1 for every call.
    """
    job_locations: Dict[Job, List[Location]] = {}
    for act in route.activities:
        if act.job is None:
            continue
        job_locations.setdefault(act.job, []).append(act.location)

    return [
        JobPoint(point_id=point_id, job=job, locations=tuple(locations))
        for point_id, (job, locations) in enumerate(job_locations.items(), start=1)
    ]
