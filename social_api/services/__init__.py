from .jwt_service import decode_access_token
from .user_repository import UserRepository, build_recommendation_pipeline, build_search_filter, canonical_id
from .user_service import UserService

__all__ = [
    "decode_access_token",
    "UserRepository",
    "build_recommendation_pipeline",
    "build_search_filter",
    "canonical_id",
    "UserService"
]
