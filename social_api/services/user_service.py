import logging
from typing import List, Optional

from ..exceptions import (
    DuplicateRequestError,
    MissingParameterError,
    NoSuchRequestError,
    NotFoundError,
    SelfRequestError,
    UnauthenticatedError,
)
from .user_repository import UserRepository, canonical_id

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 5


class UserService:
    """
    Hồ sơ, tìm kiếm và quan hệ bạn bè giữa các người dùng.

    Các thao tác cập nhật hai bản ghi (chấp nhận lời mời, hủy kết bạn) lưu lần
    lượt từng bản ghi. Nếu lần lưu thứ hai thất bại, quan hệ bạn bè sẽ bị lệch
    một phía; không có bước bù trừ.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def _load(self, user_id: str, detail: str = "User not found"):
        user = await self.repository.get(user_id)
        if not user:
            raise NotFoundError(detail)
        return user

    async def get_profile(self, user_id: str) -> dict:
        """
        Lấy hồ sơ của người dùng hiện tại (không có mật khẩu).
        """
        user = await self.repository.get_view(user_id)
        if not user:
            raise NotFoundError()
        return {
            "username": user.username,
            "mood": user.mood,
            "interests": user.interests,
        }

    async def search_users(self, query: Optional[str]) -> List[dict]:
        """
        Tìm kiếm người dùng theo username, không phân biệt hoa thường.
        """
        users = await self.repository.search(query or "")
        return [
            {
                "id": str(user.id),
                "username": user.username,
                "mood": user.mood,
                "interests": user.interests,
                "friends": user.friends,
                "friendRequests": user.friendRequests,
            } for user in users
        ]

    async def send_friend_request(self, sender_id: Optional[str], target_id: Optional[str]):
        """
        Gửi một yêu cầu kết bạn. Chỉ bản ghi của người nhận bị thay đổi.
        """
        logger.info("Received friend request: sender=%s target=%s", sender_id, target_id)

        if not sender_id:
            raise UnauthenticatedError("Authentication failed")
        if not target_id:
            raise MissingParameterError()

        sender = await self._load(sender_id)
        target = await self._load(target_id, "Friend not found")
        # So sánh bằng ID đã nạp, không dùng chuỗi thô từ request
        sender_id = str(sender.id)
        if sender_id == str(target.id):
            raise SelfRequestError()

        if sender_id in target.friendRequests:
            raise DuplicateRequestError()

        target.friendRequests.append(sender_id)
        await self.repository.save(target)

        logger.info("Friend request sent successfully: sender=%s target=%s", sender_id, target_id)

    async def accept_friend_request(self, accepter_id: str, requester_id: Optional[str]):
        """
        Chấp nhận lời mời kết bạn và thêm bạn bè cho cả hai phía.
        """
        if not requester_id:
            raise MissingParameterError()

        accepter = await self._load(accepter_id)
        requester = await self._load(requester_id)
        accepter_id = str(accepter.id)
        requester_id = str(requester.id)

        if requester_id not in accepter.friendRequests:
            raise NoSuchRequestError()

        accepter.friendRequests = [uid for uid in accepter.friendRequests if uid != requester_id]
        # Không thêm trùng nếu đã là bạn bè
        if requester_id not in accepter.friends:
            accepter.friends.append(requester_id)
        if accepter_id not in requester.friends:
            requester.friends.append(accepter_id)

        await self.repository.save(accepter)
        await self.repository.save(requester)

        logger.info("Friend request accepted: accepter=%s requester=%s", accepter_id, requester_id)

    async def reject_friend_request(self, rejecter_id: str, requester_id: Optional[str]):
        """
        Từ chối lời mời kết bạn. Bản ghi của người gửi không bị thay đổi.
        """
        if not requester_id:
            raise MissingParameterError()

        rejecter = await self._load(rejecter_id)
        requester_id = canonical_id(requester_id)

        if requester_id not in rejecter.friendRequests:
            raise NoSuchRequestError()

        rejecter.friendRequests = [uid for uid in rejecter.friendRequests if uid != requester_id]
        await self.repository.save(rejecter)

        logger.info("Friend request rejected: rejecter=%s requester=%s", rejecter_id, requester_id)

    async def unfriend(self, user_id: str, friend_id: Optional[str]):
        """
        Hủy kết bạn ở cả hai phía. Không báo lỗi nếu hai người chưa là bạn.
        """
        if not friend_id:
            raise MissingParameterError()

        user = await self._load(user_id)
        friend = await self._load(friend_id)
        user_id = str(user.id)
        friend_id = str(friend.id)

        user.friends = [uid for uid in user.friends if uid != friend_id]
        friend.friends = [uid for uid in friend.friends if uid != user_id]

        await self.repository.save(user)
        await self.repository.save(friend)

        logger.info("Friend removed: user=%s friend=%s", user_id, friend_id)

    async def _list_related(self, user_id: str, field: str) -> List[dict]:
        user = await self.repository.get_view(user_id)
        if not user:
            raise NotFoundError()
        related = await self.repository.find_many(getattr(user, field))
        return [{"id": str(other.id), "username": other.username} for other in related]

    async def get_friends(self, user_id: str) -> List[dict]:
        return await self._list_related(user_id, "friends")

    async def get_friend_requests(self, user_id: str) -> List[dict]:
        return await self._list_related(user_id, "friendRequests")

    async def get_recommendations(self, user_id: str) -> List[dict]:
        """
        Gợi ý tối đa 5 người dùng chưa là bạn, xếp theo số bạn chung giảm dần.
        Thứ tự giữa các ứng viên có cùng số bạn chung do kho dữ liệu quyết định.
        """
        user = await self.repository.get_view(user_id)
        if not user:
            raise NotFoundError()
        rows = await self.repository.recommend(str(user.id), user.friends, RECOMMENDATION_LIMIT)
        return [
            {"username": row["username"], "mutualFriendsCount": row["mutualFriendsCount"]}
            for row in rows
        ]
