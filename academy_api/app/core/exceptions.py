"""
Errors raised by the service layer.

Services never build HTTP responses themselves.  They raise one of
the exceptions below and the endpoint handlers translate them into
``HTTPException`` with the matching status code (400 or 404).
Storage errors such as ``sqlite3.IntegrityError`` are not wrapped.
"""


class ServiceError(Exception):
    """Base class for business rule failures carrying a readable message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Missing or malformed input, detected before any write."""

    status_code = 400


class NotFoundError(ServiceError):
    """The requested identifier does not exist in storage."""

    status_code = 404
