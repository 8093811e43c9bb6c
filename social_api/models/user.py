from beanie import Document, PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

class User(Document):
    """
    Đại diện cho một người dùng trong collection 'users'.
    """
    username: str = Field(..., description="Tên đăng nhập của người dùng, dùng để tìm kiếm và hiển thị.")
    password: str = Field(..., description="Mật khẩu đã được băm. Không bao giờ trả về cho client.")
    mood: Optional[str] = Field(default=None, description="Tâm trạng hiện tại của người dùng.")
    interests: List[str] = Field(default_factory=list, description="Danh sách sở thích.")
    friends: List[str] = Field(default_factory=list, description="Danh sách ID của bạn bè.")
    friendRequests: List[str] = Field(default_factory=list, description="Danh sách ID của những người đã gửi lời mời kết bạn đến người dùng này.")

    class Settings:
        name = "users"
        # Thêm các chỉ mục để tối ưu hóa truy vấn
        indexes = [
            "username",
        ]

class UserView(BaseModel):
    """
    Bản chiếu của User không có trường mật khẩu.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: PydanticObjectId = Field(..., alias="_id")
    username: str
    mood: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    friends: List[str] = Field(default_factory=list)
    friendRequests: List[str] = Field(default_factory=list)
