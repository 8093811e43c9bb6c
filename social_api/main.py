from typing import Optional
from fastapi import FastAPI
from .configs import Settings, get_settings, configure_logging
from .exceptions import register_exception_handlers
from .models import init_db
from .routers import user_router
from .security import AuthGate

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Tạo ứng dụng FastAPI.

    Chạy bằng: uvicorn social_api.main:create_app --factory
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Social API",
        description="Hồ sơ người dùng, tìm kiếm, kết bạn và gợi ý bạn bè.",
        version="1.0.0"
    )
    app.state.settings = settings
    # Khóa bí mật được truyền thẳng vào AuthGate khi khởi động
    app.state.auth_gate = AuthGate(settings.secret_key, settings.algorithm)

    register_exception_handlers(app)

    # Kết nối với cơ sở dữ liệu khi khởi động
    @app.on_event("startup")
    async def startup_db_client():
        await init_db(settings)

    # Gắn các router
    app.include_router(user_router.router, prefix="/api/users", tags=["Người dùng"])

    @app.get("/")
    def read_root():
        return {"message": "Server is running"}

    return app
