"""
Configuration settings for Critical Mind.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Data Locations
    # ========================================
    catalog_path: Path | None = Field(
        default=None,
        description="Topic catalog JSON file (None = bundled catalog)",
    )
    user_data_path: Path = Field(
        default=Path.home() / ".critical_mind" / "user_data.json",
        description="Where likes, favorites, completions and points are persisted",
    )

    # ========================================
    # Progress Tuning
    # ========================================
    unlock_threshold: int = Field(
        default=2,
        ge=1,
        description="Completed topics required to unlock the Explore feed",
    )
    points_per_completion: int = Field(
        default=10,
        ge=1,
        description="Clarity points awarded the first time a topic is completed",
    )
    points_per_level: int = Field(
        default=100,
        ge=1,
        description="Points needed to advance one level",
    )
    recently_completed_count: int = Field(
        default=3,
        ge=0,
        description="Recently completed topics shown on the insights screen",
    )

    # ========================================
    # Ranking Tuning
    # ========================================
    recommended_count: int = Field(
        default=3,
        ge=0,
        description="Size of the 'recommended for you' feed",
    )
    liked_weight: int = Field(
        default=2,
        description="Category affinity added by a liked topic",
    )
    completed_weight: int = Field(
        default=1,
        description="Category affinity added by a completed topic",
    )
    explore_category_chips: int = Field(
        default=4,
        ge=0,
        description="Category chips shown in the explore filter row",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_ranking_config(self) -> dict[str, int]:
        """Get recommendation engine tunables as a dictionary."""
        return {
            "recommended_count": self.recommended_count,
            "liked_weight": self.liked_weight,
            "completed_weight": self.completed_weight,
            "explore_category_chips": self.explore_category_chips,
        }

    def get_progress_config(self) -> dict[str, int]:
        """Get progress model tunables as a dictionary."""
        return {
            "unlock_threshold": self.unlock_threshold,
            "points_per_completion": self.points_per_completion,
            "points_per_level": self.points_per_level,
            "recently_completed_count": self.recently_completed_count,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
