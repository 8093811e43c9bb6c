import logging
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from ..exceptions import AppError, StoreUnavailableError
from ..schemas import FriendRequestCreate, MessageResponse, Recommendation, UserProfile, UserPublic, UserSummary
from ..security import get_current_user_id, get_user_service
from ..services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User"])

# Lấy hồ sơ của người dùng hiện tại
@router.get("/profile", response_model=UserProfile)
async def get_user_profile(
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """
    Lấy hồ sơ của người dùng hiện được xác thực.
    """
    try:
        return await service.get_profile(current_user_id)
    except AppError:
        raise
    except Exception:
        logger.exception("Error fetching user profile")
        raise StoreUnavailableError("Server error")

# Tìm kiếm người dùng
@router.get("/search", response_model=List[UserPublic])
async def search_users(
    query: Optional[str] = Query(None),
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """
    Tìm kiếm người dùng theo username.
    """
    try:
        return await service.search_users(query)
    except AppError:
        raise
    except Exception:
        logger.exception("Error searching users")
        raise StoreUnavailableError("Error searching users")

# Gửi yêu cầu kết bạn
@router.post("/friend-request", response_model=MessageResponse)
async def send_friend_request(
    request_data: FriendRequestCreate,
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        await service.send_friend_request(current_user_id, request_data.friendId)
        return {"message": "Friend request sent successfully"}
    except AppError:
        raise
    except Exception:
        logger.exception("Error sending friend request")
        raise StoreUnavailableError("Error sending friend request")

# Chấp nhận yêu cầu kết bạn
@router.post("/friend-request/accept", response_model=MessageResponse)
async def accept_friend_request(
    request_data: FriendRequestCreate,
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        await service.accept_friend_request(current_user_id, request_data.friendId)
        return {"message": "Friend request accepted"}
    except AppError:
        raise
    except Exception:
        logger.exception("Error accepting friend request")
        raise StoreUnavailableError("Error accepting friend request")

# Từ chối yêu cầu kết bạn
@router.post("/friend-request/reject", response_model=MessageResponse)
async def reject_friend_request(
    request_data: FriendRequestCreate,
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        await service.reject_friend_request(current_user_id, request_data.friendId)
        return {"message": "Friend request rejected"}
    except AppError:
        raise
    except Exception:
        logger.exception("Error rejecting friend request")
        raise StoreUnavailableError("Error rejecting friend request")

# Hủy kết bạn
@router.post("/unfriend", response_model=MessageResponse)
async def unfriend(
    request_data: FriendRequestCreate,
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        await service.unfriend(current_user_id, request_data.friendId)
        return {"message": "Friend removed successfully"}
    except AppError:
        raise
    except Exception:
        logger.exception("Error removing friend")
        raise StoreUnavailableError("Error removing friend")

# Lấy danh sách bạn bè
@router.get("/friends", response_model=List[UserSummary])
async def get_friends(
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        return await service.get_friends(current_user_id)
    except AppError:
        raise
    except Exception:
        logger.exception("Error getting friends")
        raise StoreUnavailableError("Error getting friends")

# Lấy danh sách lời mời kết bạn đang chờ
@router.get("/friend-requests", response_model=List[UserSummary])
async def get_friend_requests(
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    try:
        return await service.get_friend_requests(current_user_id)
    except AppError:
        raise
    except Exception:
        logger.exception("Error getting friend requests")
        raise StoreUnavailableError("Error getting friend requests")

# Gợi ý kết bạn
@router.get("/recommendations", response_model=List[Recommendation])
async def get_recommendations(
    current_user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """
    Gợi ý tối đa 5 người dùng theo số bạn chung.
    """
    try:
        return await service.get_recommendations(current_user_id)
    except AppError:
        raise
    except Exception:
        logger.exception("Error getting recommendations")
        raise StoreUnavailableError("Error getting recommendations")
