"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
Argon2Cost = Annotated[int, Field(gt=0, le=2**32 - 1)]
Argon2Lanes = Annotated[int, Field(gt=0, le=2**24 - 1)]

# Argon2 requires at least 8 KiB of memory per lane.
_MIN_MEMORY_KIB_PER_LANE = 8


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    argon2_time_cost: Argon2Cost = Field(default=2, validation_alias="ARGON2_TIME_COST")
    argon2_memory_cost_kib: Argon2Cost = Field(
        default=19_456,
        validation_alias="ARGON2_MEMORY_COST_KIB",
    )
    argon2_parallelism: Argon2Lanes = Field(default=1, validation_alias="ARGON2_PARALLELISM")
    demo_locale: NonEmptyStr = Field(default="en", validation_alias="DEMO_LOCALE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_memory_covers_lanes(self) -> Self:
        minimum = _MIN_MEMORY_KIB_PER_LANE * self.argon2_parallelism
        if self.argon2_memory_cost_kib < minimum:
            raise ValueError(
                f"ARGON2_MEMORY_COST_KIB must be at least {minimum} "
                f"for ARGON2_PARALLELISM={self.argon2_parallelism}"
            )
        return self


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
