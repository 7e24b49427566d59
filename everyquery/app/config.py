"""App configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

from ..common.app import app_dirs


class AppConfig(BaseModel):
    """Defaults for the command-line interface."""

    dll_path: Path | None = Field(default=None, description="Path to Everything64.dll. Searched on PATH if unset.")
    default_limit: int = Field(default=100, ge=0, description="Number of results shown when no limit is given.")
    log_level: str = Field(default="WARNING", description="Logging level name.")


def load_config(path: Path | None = None) -> AppConfig:
    """Load the config file, or return defaults if there is none."""
    path = path or app_dirs.app_config_path
    if not path.exists():
        return AppConfig()
    return AppConfig.model_validate_json(path.read_text())


def save_config(config: AppConfig, path: Path | None = None) -> None:
    """Write the config file."""
    path = path or app_dirs.app_config_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2))
