from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="HYDROPLAN_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="HYDROPLAN_LOG_FILE",
        description="Optional log file path; console only when unset",
    )
    default_race_distance_km: float = Field(
        default=5.0,
        gt=0,
        validation_alias="HYDROPLAN_DEFAULT_RACE_DISTANCE_KM",
        description="Distance assumed when race text carries no number",
    )
    free_text_max_length: int = Field(
        default=1000,
        gt=0,
        validation_alias="HYDROPLAN_FREE_TEXT_MAX_LENGTH",
        description="Maximum length kept by the free-text sanitizer",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid HYDROPLAN_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
