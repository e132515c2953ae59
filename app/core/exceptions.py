"""Domain exceptions raised by the service layer and rendered by app.main"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a client-facing response"""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(AppError):
    """A required field is missing or holds a value outside its domain"""


class DuplicateKeyError(AppError):
    """A unique field (invoice number, username) is already taken"""


class NoCustomersError(AppError):
    """Monthly generation was requested with an empty customer roster"""

    def __init__(self, message: str = "No customers found"):
        super().__init__(message)


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
