from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql+psycopg2://gradebook:gradebook@db:5432/gradebook"

    APP_TITLE: str = "Gradebook API"
    APP_VERSION: str = "0.1.0"

    # Comma-separated in .env, split by _split_origins rather than JSON-decoded
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Grading
    DEFAULT_GRADING_POLICY: Literal["fixed", "range_table"] = "fixed"
    # 1 or 2 decimal places on percentages
    PERCENT_DECIMALS: int = Field(default=1, ge=1, le=2)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v


settings = Settings()
