# Nhập các thư viện cần thiết
import logging
from motor.motor_asyncio import AsyncIOMotorClient # Thư viện bất đồng bộ cho MongoDB
from beanie import init_beanie # ODM (Object-Document Mapper) cho MongoDB
from typing import Type

from .user import User
from ..configs import Settings

logger = logging.getLogger(__name__)

# Danh sách các model Beanie sẽ được khởi tạo
DOCUMENT_MODELS: list[Type] = [User]

client = None  # client global, dùng 1 lần suốt vòng đời app

async def init_db(settings: Settings):
    """
    Khởi tạo kết nối cơ sở dữ liệu và Beanie ODM.
    Đảm bảo chỉ tạo một client duy nhất.
    """
    global client

    # Nếu đã có client, bỏ qua
    if client is not None:
        return client

    if not settings.mongo_uri:
        raise ValueError("MONGO_URI is not set in the environment.")

    client = AsyncIOMotorClient(settings.mongo_uri)
    database = client.get_database(settings.mongo_db_name)

    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    logger.info("Connected to MongoDB database '%s'", settings.mongo_db_name)

    return client
