"""Domain errors raised by the service layer.

Routers never catch these; the handlers registered in ``main`` turn them
into JSON error responses.
"""


class FitnessTrackerError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FitnessTrackerError):
    """Input is malformed or not allowed for the requested operation."""

    status_code = 400


class DuplicateEmailError(ValidationError):
    """Another user already owns the email address."""

    status_code = 409


class NotFoundError(FitnessTrackerError):
    """A referenced entity does not exist."""

    status_code = 404
