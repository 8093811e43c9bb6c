from typing import List, Optional

from bson import ObjectId

from ..models import User, UserView


def _object_id(user_id) -> Optional[ObjectId]:
    """Chuyển ID dạng chuỗi sang ObjectId, trả về None nếu sai định dạng."""
    if isinstance(user_id, ObjectId):
        return user_id
    if user_id is None or not ObjectId.is_valid(str(user_id)):
        return None
    return ObjectId(str(user_id))


def canonical_id(user_id) -> str:
    """Dạng chuỗi chuẩn (chữ thường) của một ObjectId; giữ nguyên nếu không hợp lệ."""
    oid = _object_id(user_id)
    return str(oid) if oid is not None else str(user_id)


def build_search_filter(pattern: str) -> dict:
    return {"username": {"$regex": pattern, "$options": "i"}}


def build_recommendation_pipeline(user_id: str, friend_ids: List[str], limit: int) -> list:
    """
    Pipeline gợi ý kết bạn: loại bỏ chính người dùng và bạn bè hiện tại,
    đếm số bạn chung rồi sắp xếp giảm dần.
    """
    excluded = [oid for oid in (_object_id(uid) for uid in [*friend_ids, user_id]) if oid is not None]
    return [
        {"$match": {"_id": {"$nin": excluded}}},
        {"$project": {
            "_id": 0,
            "username": 1,
            "mutualFriendsCount": {
                "$size": {"$setIntersection": [{"$ifNull": ["$friends", []]}, list(friend_ids)]}
            },
        }},
        {"$sort": {"mutualFriendsCount": -1}},
        {"$limit": limit},
    ]


class UserRepository:
    """
    Truy cập collection 'users' qua Beanie.
    Mỗi lời gọi là một round-trip độc lập, không dùng transaction.
    """

    async def get(self, user_id) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        return await User.get(oid)

    async def get_view(self, user_id) -> Optional[UserView]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        return await User.find_one({"_id": oid}).project(UserView)

    async def find_many(self, user_ids: List[str]) -> List[UserView]:
        object_ids = [oid for oid in (_object_id(uid) for uid in user_ids) if oid is not None]
        if not object_ids:
            return []
        return await User.find({"_id": {"$in": object_ids}}).project(UserView).to_list()

    async def search(self, pattern: str) -> List[UserView]:
        return await User.find(build_search_filter(pattern)).project(UserView).to_list()

    async def recommend(self, user_id: str, friend_ids: List[str], limit: int) -> List[dict]:
        pipeline = build_recommendation_pipeline(user_id, friend_ids, limit)
        return await User.aggregate(pipeline).to_list()

    async def save(self, user: User):
        await user.save()
