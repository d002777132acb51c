"""
Clustering module for grouping route jobs using DBSCAN.
Provides a transport cost metric with a radius sampled from the route.
"""

from routeclusters.clustering.clusterer import DBSCANJobClusterer, ClusterStats
from routeclusters.clustering.dbscan import DBSCAN, NOISE, group_by_label
from routeclusters.clustering.metric import JobDistance
from routeclusters.clustering.points import extract_job_points
from routeclusters.clustering.radius import RadiusEstimator

__all__ = [
    "DBSCANJobClusterer",
    "ClusterStats",
    "DBSCAN",
    "NOISE",
    "group_by_label",
    "JobDistance",
    "extract_job_points",
    "RadiusEstimator",
]
