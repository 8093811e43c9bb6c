from fastapi import status

from .base import AppError


class MissingParameterError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Friend ID is required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "User not found"


class DuplicateRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Friend request already sent"


class NoSuchRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "No friend request from this user"


class SelfRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Cannot send a friend request to yourself"
