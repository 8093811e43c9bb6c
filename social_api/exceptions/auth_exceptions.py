from fastapi import status

from .base import AppError


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "No token, authorization denied"


class InvalidCredentialError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Authentication failed"


class UnknownSubjectError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "User not found"
