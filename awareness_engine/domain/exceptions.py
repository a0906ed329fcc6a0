"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPeriodError(DomainException):
    """Requested spending period is not one of the supported windows"""

    pass


class SnapshotSourceError(DomainException):
    """Upstream data source returned an error or is unavailable"""

    pass
