"""
Configuration management for the gradebook service
"""

from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: list[str] = []

    # Seed data (defaults to the files shipped with the package)
    data_dir: Path | None = None

    # GraphQL
    graphiql: bool = True

    # Environment
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GRADEBOOK_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_data_dir(override: Path | None = None) -> Path:
    """Directory holding courses.json, students.json and grades.json."""
    if override is not None:
        return override
    if settings.data_dir is not None:
        return settings.data_dir
    return PACKAGE_DATA_DIR
