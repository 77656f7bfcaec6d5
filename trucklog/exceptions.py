# -----------------------------
# Error taxonomy
# -----------------------------
GENERIC_NETWORK_ERROR = 'Network error. Please check your Django backend.'
GENERIC_SERVICE_ERROR = 'Failed to generate logs'


class TripPlannerError(Exception):
    """Base class for failures that end up on the error banner."""

    default_message = GENERIC_NETWORK_ERROR

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TransportError(TripPlannerError):
    """The request never completed (connection, timeout, unreadable body)."""


class ServiceError(TripPlannerError):
    """The service answered but reported failure (success=false or non-2xx)."""

    default_message = GENERIC_SERVICE_ERROR

    def __init__(self, message=None, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class ContractViolation(Exception):
    """Programmer or integration error. Never shown to the driver."""
