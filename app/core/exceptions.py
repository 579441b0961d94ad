from fastapi import status

class AppError(Exception):
    """
    Base error rendered as the standard failure envelope.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code

class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

class ServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
