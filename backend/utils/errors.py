from fastapi import status


class ServiceError(Exception):
    """
    Base for every condition a handler reports back to the caller.
    The message is surfaced verbatim as a single line of text.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DuplicateError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
