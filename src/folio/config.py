"""Configuration management for Folio."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.render import DEFAULT_DATE_FORMAT, SiteInfo

logger = logging.getLogger(__name__)

SITE_ROOT = Path(os.environ.get("FOLIO_SITE", "."))
CONFIG_FILE = SITE_ROOT / "folio.conf"


@dataclass
class Config:
    """Folio site configuration."""

    site_title: str = "Home"
    site_description: str = ""
    base_url: str = ""
    author: str = ""
    # Directories are relative to the site root unless absolute
    root: str = "."
    content_dir: str = "content"
    output_dir: str = "public"
    static_dir: str = "static"
    shell_template: str = ""
    date_format: str = DEFAULT_DATE_FORMAT
    recent_posts: int = 5

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return Path(self.root).expanduser() / path

    @property
    def content_path(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.output_dir)

    @property
    def static_path(self) -> Path:
        return self._resolve(self.static_dir)

    @property
    def shell_template_path(self) -> Path | None:
        if not self.shell_template:
            return None
        return self._resolve(self.shell_template)

    def site_info(self) -> SiteInfo:
        """Site-wide values handed to the renderer."""
        return SiteInfo(
            title=self.site_title,
            description=self.site_description,
            base_url=self.base_url.rstrip("/"),
            author=self.author,
        )


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from a folio.conf file."""
    config_file = config_file or CONFIG_FILE
    config = Config(root=str(config_file.parent))

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "site_title":
                config.site_title = value
            case "site_description":
                config.site_description = value
            case "base_url":
                config.base_url = value
            case "author":
                config.author = value
            case "content_dir":
                config.content_dir = value
            case "output_dir":
                config.output_dir = value
            case "static_dir":
                config.static_dir = value
            case "shell_template":
                config.shell_template = value
            case "date_format":
                config.date_format = value
            case "recent_posts":
                try:
                    config.recent_posts = int(value)
                except ValueError:
                    logger.warning(f"Invalid RECENT_POSTS value: {value}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
