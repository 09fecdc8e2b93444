"""
Core configuration module for the AI assessment service.
Loads configuration from YAML file and environment variables.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False


class DatabaseConfig(BaseModel):
    """Document store configuration."""

    path: str = "data/assessments.db"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    file: str = "app.log"
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size: int = 10  # MB
    backup_count: int = 5


class AIConfig(BaseSettings):
    """
    Generative model settings.

    Values from config.yaml win; anything omitted there falls back to
    AI_* environment variables (e.g. AI_API_KEY), then to these defaults.
    Sampling is pinned low so repeated grading of the same submission
    stays as stable as the backend allows.
    """

    model_config = SettingsConfigDict(env_prefix="AI_", protected_namespaces=())

    provider: str = "openai"
    model: str = "gpt-4o"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: int = 300
    temperature: float = 0.1
    top_p: float = 0.4
    max_tokens: int = 1000
    json_output: bool = True


class AppConfig(BaseModel):
    """Main application configuration."""

    server: ServerConfig = ServerConfig()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    ai: AIConfig = AIConfig()


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses ASSESSMENT_CONFIG
            or config.yaml in the project root.

    Returns:
        AppConfig instance with loaded configuration.
    """
    if config_path is None:
        config_path = os.environ.get("ASSESSMENT_CONFIG")
        if config_path is None:
            config_path = get_project_root() / "config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        ai_data = config_data.pop("ai", None) or {}
        return AppConfig(**config_data, ai=AIConfig(**ai_data))

    return AppConfig()


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _resolve_data_dir() -> Path:
    """
    Resolve the data directory path.

    Container mode uses the DATA_DIR environment variable (e.g. /app/data);
    local development uses project root/data.
    """
    data_dir_env = os.environ.get("DATA_DIR")
    if data_dir_env:
        return Path(data_dir_env).resolve()
    return (get_project_root() / "data").resolve()


def get_database_path() -> Path:
    """
    Get the absolute path to the SQLite file backing the document store.

    Only the filename of 'database.path' is kept; the directory always comes
    from _resolve_data_dir().
    """
    config = get_config()
    db_filename = Path(config.database.path).name

    db_path = (_resolve_data_dir() / db_filename).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


def get_log_path() -> Path:
    """
    Get the absolute path to the log file.

    Container: $LOGS_DIR/app.log. Local: project_root/logs/app.log.
    """
    config = get_config()

    logs_dir_env = os.environ.get("LOGS_DIR")
    if logs_dir_env:
        log_dir = Path(logs_dir_env)
    else:
        log_dir = get_project_root() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    # Use only the filename from config so logs never go outside logs/
    name = Path(config.logging.file).name or "app.log"
    return log_dir / name
