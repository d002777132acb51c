"""
routeclusters - Density-based clustering of the jobs on a vehicle route.

This package groups the jobs served by a route into spatially coherent
clusters, using transport costs as the distance, for ruin-and-recreate
style route search.
"""

__version__ = "0.1.0"

from routeclusters.config import settings
from routeclusters.clustering import DBSCANJobClusterer

__all__ = [
    "settings",
    "DBSCANJobClusterer",
    "__version__",
]
