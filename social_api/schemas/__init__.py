from .user_schema import (
    FriendRequestCreate,
    MessageResponse,
    UserProfile,
    UserPublic,
    UserSummary,
    Recommendation
)
