"""Configuration loading for the portfolio app."""
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, field_validator

ENV_BACKEND_URL = "PORTFOLIO_BACKEND_URL"
ENV_THEME_STORE = "PORTFOLIO_THEME_STORE"
ENV_RESUME_PATH = "PORTFOLIO_RESUME_PATH"
ENV_LOG_LEVEL = "PORTFOLIO_LOG_LEVEL"

_ENV_FIELDS = {
    ENV_BACKEND_URL: "backend_url",
    ENV_THEME_STORE: "theme_store_path",
    ENV_RESUME_PATH: "resume_path",
    ENV_LOG_LEVEL: "log_level",
}


class Settings(BaseModel):
    backend_url: str = ""  # empty = same origin
    theme_store_path: str = "~/.portfolio/preferences.json"
    resume_path: str = "assets/resume.pdf"
    contact_timeout: Optional[float] = None
    log_level: str = "INFO"

    @field_validator("backend_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @property
    def resolved_resume_path(self) -> Path:
        p = Path(self.resume_path).expanduser()
        if p.is_absolute():
            return p
        return _project_root() / p

    @property
    def resolved_theme_store_path(self) -> Path:
        return Path(self.theme_store_path).expanduser()


def _project_root() -> Path:
    return Path(__file__).parent


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from YAML (if present), then apply environment overrides."""
    if config_path is None:
        config_path = _project_root() / "portfolio.yaml"

    raw: dict[str, Any] = {}
    if config_path.exists():
        raw = yaml.safe_load(config_path.read_text()) or {}

    for env, field in _ENV_FIELDS.items():
        if env in os.environ:
            raw[field] = os.environ[env]

    return Settings(**raw)
