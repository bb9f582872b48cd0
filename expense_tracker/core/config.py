from pydantic_settings import BaseSettings
from pydantic import Field
import os


class Config(BaseSettings):
    # Database Configuration
    db_url: str = Field(
        default="sqlite+aiosqlite:///./expenses.db", alias="DB_URL"
    )
    db_echo: bool = Field(default=False, alias="DB_ECHO")
    auto_create_schema: bool = Field(default=True, alias="AUTO_CREATE_SCHEMA")

    # Expense input handling
    # When enabled, a malformed amount is rejected instead of stored as 0.0
    strict_amounts: bool = Field(default=False, alias="STRICT_AMOUNTS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    is_production: bool = os.getenv("ENVIRONMENT", "development").lower() == "production"

    # Path to .env file (for loading env vars)
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
config = Config()
