"""Site configuration loaded from config.json and environment variables.

Loading order: defaults -> JSON file -> env vars.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from portfolio.logger import logger

CONFIG_FILENAME = "config.json"


class SiteConfig(BaseModel):
    site_name: str = "Portfolio"
    site_url: str = "https://example.com"
    site_description: str = "Personal portfolio and blog"
    default_description: str = "Writing, projects and notes."
    default_image: str = "/images/og-default.png"
    author: str = "Site Author"
    content_dir: str = "content"
    output_dir: str = "public"
    words_per_minute: int = 200
    excerpt_length: int = 150
    image_paths: dict[str, str] = Field(
        default_factory=lambda: {
            "blog": "/images/blog/",
            "project": "/images/projects/",
            "page": "/images/",
        }
    )

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def absolute_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.site_url}/{path.lstrip('/')}"


def load_config(path: str | Path | None = None) -> SiteConfig:
    """Read a JSON config file, falling back to defaults when it is absent."""
    config_path = Path(path or CONFIG_FILENAME)
    data: dict = {}

    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file {config_path}: expected an object")
        logger.debug(f"Config loaded from {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    if os.getenv("PORTFOLIO_SITE_URL"):
        data["site_url"] = os.environ["PORTFOLIO_SITE_URL"]
    if os.getenv("PORTFOLIO_CONTENT_DIR"):
        data["content_dir"] = os.environ["PORTFOLIO_CONTENT_DIR"]

    return SiteConfig(**data)
