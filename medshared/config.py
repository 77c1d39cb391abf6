import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # IANA zone name; empty means process-local time
    TIMEZONE: str = os.getenv("MEDSHARED_TIMEZONE", "")


settings = Settings()
