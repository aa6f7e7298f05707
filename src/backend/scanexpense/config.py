from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # App
    APP_NAME: str = "ScanExpense"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173"]

    # OCR
    TESSERACT_CMD: str = "/usr/local/bin/tesseract"  # macOS default
    OCR_CONFIG: str = "--oem 3 --psm 6"

    # Upload
    MAX_UPLOAD_MB: int = 10

    # Expense form
    DEFAULT_CURRENCY: str = "CAD"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
