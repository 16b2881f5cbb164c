from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """
    Default configuration for new games.

    Values are read from the process environment (or a project ``.env`` file)
    and can always be overridden by passing explicit arguments to
    ``GameState``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="allow")

    grid_size: int = Field(
        default=4,
        ge=2,
        description="Number of rows and columns on the board",
        validation_alias="TILEMERGE_GRID_SIZE",
    )

    four_probability: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Probability that a spawned tile is a 4 instead of a 2",
        validation_alias="TILEMERGE_FOUR_PROBABILITY",
    )

    animation_seconds: float = Field(
        default=0.16,
        ge=0.0,
        description="Duration of one move's slide animation in seconds",
        validation_alias="TILEMERGE_ANIMATION_SECONDS",
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the default spawner's random generator",
        validation_alias="TILEMERGE_SEED",
    )

    initial_tiles: int = Field(
        default=2,
        ge=0,
        description="Number of tiles spawned at game start and on restart",
        validation_alias="TILEMERGE_INITIAL_TILES",
    )

    @model_validator(mode="after")
    def _initial_tiles_fit(self) -> GameSettings:
        if self.initial_tiles > self.grid_size * self.grid_size:
            raise ValueError(
                f"initial_tiles ({self.initial_tiles}) exceeds the {self.grid_size}x{self.grid_size} board"
            )
        return self


# Create a singleton instance
settings = GameSettings()


def get_settings() -> GameSettings:
    """Get the global settings instance."""
    return settings
