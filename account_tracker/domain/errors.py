"""Typed failures raised by the projection core.

All errors derive from ``ValueError`` so callers that only distinguish bad
input from infrastructure failures can keep doing so.
"""


class ProjectionError(ValueError):
    """Base class for invalid projection input."""


class InvalidRecurrencePattern(ProjectionError):
    """Recurring pattern has an unknown frequency or a non-positive interval."""


class InvalidWindow(ProjectionError):
    """Requested date range or month is malformed or too large."""


class InvalidConfig(ProjectionError):
    """Account configuration is missing fields or holds bad values."""


class InvalidTransaction(ProjectionError):
    """Transaction template has missing or malformed fields."""


__all__ = [
    "ProjectionError",
    "InvalidRecurrencePattern",
    "InvalidWindow",
    "InvalidConfig",
    "InvalidTransaction",
]
