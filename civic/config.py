"""Configuration loading from YAML and environment.

Secrets (admin password) are taken from environment variables or from files
(Docker secrets). Never put real credentials in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


class StorageConfig(BaseSettings):
    """Where the key-value slots live."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_", extra="ignore")

    backend: str = Field(default="file", description="file (one JSON file per slot) or memory")
    path: str = Field(default=".civic/storage", description="Directory for the file backend")


class AdminConfig(BaseSettings):
    """Admin panel credentials (demo only, not a real credential system)."""

    model_config = SettingsConfigDict(env_prefix="ADMIN_", extra="ignore")

    username: str = Field(default="admin", description="Admin login")
    password: str | None = Field(default=None, description="Admin password; prefer env or secret file")


class UIConfig(BaseSettings):
    """View defaults shared by every consumer."""

    model_config = SettingsConfigDict(env_prefix="UI_", extra="ignore")

    default_theme: str = Field(default="dark", description="light or dark")
    map_base_url: str = Field(
        default="https://www.google.com/maps",
        description="Map embed base URL; the location goes into the q parameter",
    )


class SeedConfig(BaseSettings):
    """Demo data seeding on boot."""

    model_config = SettingsConfigDict(env_prefix="SEED_", extra="ignore")

    enabled: bool = Field(default=True, description="Seed demo issues when the collection is empty")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    admin: AdminConfig = Field(default_factory=AdminConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def admin_password_resolved(self) -> str:
        """Resolve admin password from config, env or Docker secret file.

        Falls back to the demo password "admin".
        """
        p = self.admin.password
        if p and not p.startswith("${"):
            return p
        return _read_secret("ADMIN_PASSWORD", "ADMIN_PASSWORD_FILE") or "admin"


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: ADMIN_PASSWORD or ADMIN_PASSWORD_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    storage = StorageConfig(**(raw.get("storage") or {}))
    admin = AdminConfig(**(raw.get("admin") or {}))
    ui = UIConfig(**(raw.get("ui") or {}))
    seed = SeedConfig(**(raw.get("seed") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    return AppConfig(
        storage=storage,
        admin=admin,
        ui=ui,
        seed=seed,
        logging=logging,
    )
