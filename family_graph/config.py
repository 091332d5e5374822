"""Configuration management for Family Graph.

Loads settings from environment variables and provides validated configuration.
"""

from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Identity subject ("the writer")
    subject_name: str = "Mats"
    subject_aliases: list[str] = [
        "skribenten",
        "jag",
        "författaren",
        "berättaren",
        "the writer",
        "i",
        "the author",
        "the narrator",
    ]

    # Banded grid layout
    horizontal_spacing: float = 150.0
    vertical_spacing: float = 120.0

    # Centered-radial layout
    radial_center_x: float = 250.0
    radial_center_y: float = 250.0
    radial_radius: float = 200.0

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
