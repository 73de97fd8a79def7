import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    POINTER_PATH: str = os.getenv("CHECKHTTP_POINTER_PATH", "file.path")
    LOG_LEVEL: str = os.getenv("CHECKHTTP_LOG_LEVEL", "INFO")
    LOG_FILE: str | None = os.getenv("CHECKHTTP_LOG_FILE") or None


settings = Settings()
