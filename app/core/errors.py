"""Application error taxonomy.

Services raise these; the exception handlers registered in ``app.main`` turn
them into ``{"success": false, "message": ...}`` responses.
"""


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(AppError):
    """Input passed schema checks but is still unacceptable (e.g. amount <= 0)."""

    status_code = 400


class UnauthorizedError(AppError):
    """Missing credential or wrong username/password."""

    status_code = 401


class ForbiddenError(AppError):
    """Credential present but invalid, expired, or carrying the wrong role."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Unique constraint violated in the store."""

    status_code = 409


class InternalError(AppError):
    """Unexpected store or runtime failure; the message is safe to show clients."""

    status_code = 500
