"""
Custom exception classes for the application.

Handlers and commands raise these; the fault boundary registered in
catalog.utils.error_handler turns them into an error page carrying the
message and the exception's http_status.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for the error page.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a requested entity id does not resolve.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when a store failure has to be reported with an application
    level message instead of the raw SQLAlchemy error.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
