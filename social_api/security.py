import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .exceptions import InvalidCredentialError, UnauthenticatedError, UnknownSubjectError
from .models import UserView
from .services import UserRepository, UserService, jwt_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class AuthGate:
    """
    Xác minh bearer token và nạp người dùng tương ứng.
    Khóa bí mật được truyền vào khi khởi tạo, không đọc từ biến toàn cục.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("SECRET_KEY is not set.")
        self.secret_key = secret_key
        self.algorithm = algorithm

    async def authenticate(self, token: Optional[str], repository: UserRepository) -> UserView:
        if not token:
            raise UnauthenticatedError()

        try:
            token_data = jwt_service.decode_access_token(token, self.secret_key, self.algorithm)
        except jwt_service.JWTError as e:
            logger.warning("Token verification failed: %s", e)
            raise InvalidCredentialError()

        if not token_data.user_id:
            logger.warning("Token has no subject claim")
            raise InvalidCredentialError()

        user = await repository.get_view(token_data.user_id)
        if user is None:
            logger.warning("User not found with ID: %s", token_data.user_id)
            raise UnknownSubjectError()

        return user


def get_user_repository() -> UserRepository:
    return UserRepository()


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth_gate


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: AuthGate = Depends(get_auth_gate),
    repository: UserRepository = Depends(get_user_repository),
) -> UserView:
    token = credentials.credentials if credentials else None
    user = await gate.authenticate(token, repository)
    # Gắn người dùng vào ngữ cảnh request cho các bước xử lý sau
    request.state.user = user
    return user


async def get_current_user_id(current_user: UserView = Depends(get_current_user)) -> str:
    return str(current_user.id)
