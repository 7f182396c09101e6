"""Dashboard errors. Each carries the HTTP status and the user-facing message."""


class DashboardError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DashboardError):
    """Missing or malformed required input."""

    status_code = 400


class DuplicateNameError(DashboardError):
    """A live dashboard already uses the requested name."""

    status_code = 400


class ReferenceNotFoundError(DashboardError):
    """The referenced statistics (ESD) record does not exist."""

    status_code = 400


class NotFoundError(DashboardError):
    status_code = 404


class StoreError(DashboardError):
    """The database or filesystem failed underneath an operation."""

    status_code = 500
