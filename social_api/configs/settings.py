import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Cấu hình tiến trình, đọc một lần từ biến môi trường."""
    mongo_uri: Optional[str] = None
    mongo_db_name: str = "social-app"
    secret_key: Optional[str] = None
    algorithm: str = "HS256"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # Tải các biến môi trường từ tệp .env
        load_dotenv()
        return cls(
            mongo_uri=os.getenv("MONGO_URI"),
            mongo_db_name=os.getenv("MONGO_DB_NAME", "social-app"),
            secret_key=os.getenv("SECRET_KEY"),
            algorithm=os.getenv("ALGORITHM", "HS256"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
