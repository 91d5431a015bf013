from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "TinyLink"
    VERSION: str = "1.0.0"

    # "production" hides internal error details from clients
    ENVIRONMENT: str = "development"
    LOG_LEVEL: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    BASE_URL: str = "http://localhost:3000"

    # Create-flow retry bound
    MAX_GENERATION_ATTEMPTS: int = 10

    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "INFO" if self.is_production else "DEBUG"

    def short_url(self, short_code: str) -> str:
        return f"{self.BASE_URL.rstrip('/')}/{short_code}"

settings = Settings()
