from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    content_root: Path = Path(".")
    schema_path: Path | None = None

    store_backend: str = "filesystem"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "content"
    db_username: str = "content"
    db_password: str = "secret"
    db_pool_max_size: int = 4

    telemetry_disabled: bool = False
    telemetry_endpoint: str = ""
    telemetry_timeout_seconds: int = 5

    def resolved_schema_path(self) -> Path:
        """Schema file location, defaulting to .contentaudit/schema.json under the content root."""
        if self.schema_path is not None:
            return self.schema_path
        return self.content_root / ".contentaudit" / "schema.json"
