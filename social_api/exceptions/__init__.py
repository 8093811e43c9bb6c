from .base import AppError, StoreUnavailableError
from .auth_exceptions import InvalidCredentialError, UnauthenticatedError, UnknownSubjectError
from .user_exceptions import (
    DuplicateRequestError,
    MissingParameterError,
    NoSuchRequestError,
    NotFoundError,
    SelfRequestError,
)
from .handlers import register_exception_handlers

__all__ = [
    "AppError",
    "StoreUnavailableError",
    "UnauthenticatedError",
    "InvalidCredentialError",
    "UnknownSubjectError",
    "MissingParameterError",
    "NotFoundError",
    "DuplicateRequestError",
    "NoSuchRequestError",
    "SelfRequestError",
    "register_exception_handlers",
]
