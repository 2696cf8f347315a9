"""
Configuration settings for the puzzle runner.

Uses Pydantic Settings to load environment variables for input/result
locations, logging, and the cube game limits used by day 2.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aoc.domain.models import Configuration


class Settings(BaseSettings):
    # Paths
    input_dir: str = Field("inputs", alias="AOC_INPUT_DIR")
    results_dir: str = Field("results", alias="AOC_RESULTS_DIR")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Day 2 bag limits
    game_max_red: int = Field(12, ge=0, alias="GAME_MAX_RED")
    game_max_green: int = Field(13, ge=0, alias="GAME_MAX_GREEN")
    game_max_blue: int = Field(14, ge=0, alias="GAME_MAX_BLUE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def game_configuration(self) -> Configuration:
        return Configuration(
            red=self.game_max_red,
            green=self.game_max_green,
            blue=self.game_max_blue,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
