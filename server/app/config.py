from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_title: str = "Number Properties Calculator"
    api_version: str = "1.0.0"
    api_description: str = "Prime factorization, factorial, digit sum and perfect-square checks for a positive integer"

    # Server
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    reload: bool = False
    log_level: str = Field(default="INFO", description="Root logging level")

    # Calculation limits
    scientific_threshold_exponent: int = Field(
        default=100, ge=1, le=4000,
        description="Factorials above 10^exponent are shown in scientific notation"
    )
    max_input: int = Field(
        default=10 ** 12, ge=1,
        description="Largest number accepted for analysis"
    )
    max_factorial_input: int = Field(
        default=1000, ge=0, le=1500,
        description="Largest n for which n! is computed"
    )

    # Rate limiting (slowapi syntax)
    rate_limit: str = Field(default="120/minute", description="Rate limit for JSON endpoints")

    @validator("log_level")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def scientific_threshold(self) -> int:
        return 10 ** self.scientific_threshold_exponent

    class Config:
        env_file = ".env"
        validate_assignment = True


@lru_cache()
def get_settings():
    return Settings()
