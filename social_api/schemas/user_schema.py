from pydantic import BaseModel
from typing import List, Optional

class FriendRequestCreate(BaseModel):
    # Để trống được; service sẽ trả về lỗi "Friend ID is required"
    friendId: Optional[str] = None

class MessageResponse(BaseModel):
    message: str

class UserProfile(BaseModel):
    username: str
    mood: Optional[str] = None
    interests: List[str] = []

class UserPublic(BaseModel):
    """Thông tin người dùng trả về cho client, không bao gồm mật khẩu."""
    id: str
    username: str
    mood: Optional[str] = None
    interests: List[str] = []
    friends: List[str] = []
    friendRequests: List[str] = []

class UserSummary(BaseModel):
    id: str
    username: str

class Recommendation(BaseModel):
    username: str
    mutualFriendsCount: int
