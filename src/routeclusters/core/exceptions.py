"""
Custom exceptions for the routeclusters package.
"""


class RouteClustersError(Exception):
    """Base exception for all routeclusters errors."""
    pass


class ConfigurationError(RouteClustersError):
    """Raised when clusterer parameters are invalid."""
    pass


class InvalidJobPointError(RouteClustersError):
    """Raised when a job point without locations reaches the distance metric."""
    pass


class UnknownPointError(RouteClustersError, KeyError):
    """Raised when a point identifier is not known to the distance metric."""
    pass


class CostCalculationError(RouteClustersError):
    """Raised when a transport cost cannot be computed."""
    pass
