"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "Finance Tracker"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Database
    DATABASE_URL: str = "sqlite:///./finance_tracker.db"
    DB_ECHO: bool = False
    
    # JWT
    SECRET_KEY: str = "secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24
    
    # Password hashing work factor (bcrypt log rounds)
    BCRYPT_ROUNDS: int = 12
    
    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["*"]
    
    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    # Client
    CLIENT_API_URL: str = "http://localhost:3000/api"
    CLIENT_SESSION_FILE: str = "~/.finance_tracker/session.json"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
