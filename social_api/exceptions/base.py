from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Server error"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class StoreUnavailableError(AppError):
    """Lỗi hạ tầng: kho dữ liệu không phản hồi hoặc trả về lỗi."""
