from typing import Optional
from jose import JWTError, jwt
from pydantic import BaseModel

class TokenData(BaseModel):
    """Mô hình dữ liệu cho payload được giải mã từ token."""
    user_id: Optional[str] = None

def decode_access_token(token: str, secret_key: str, algorithm: str) -> TokenData:
    """
    Giải mã một token truy cập JWT và trả về payload của nó.

    Token được phát hành bởi một tiến trình khác; ở đây chỉ xác minh chữ ký và thời hạn.

    Args:
        token (str): Token JWT để giải mã.
        secret_key (str): Khóa bí mật dùng chung với tiến trình phát hành token.
        algorithm (str): Thuật toán ký.

    Returns:
        TokenData: user_id lấy từ claim 'userId' (hoặc 'sub').

    Raises:
        JWTError: Nếu chữ ký sai, token hết hạn hoặc sai định dạng.
    """
    payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    user_id = payload.get("userId") or payload.get("sub")
    return TokenData(user_id=str(user_id) if user_id is not None else None)

__all__ = ["TokenData", "decode_access_token", "JWTError"]
