"""
Config helpers for the favicon crawler.
"""

from favicon_crawler.config.loader import get_crawler_settings, load_env_files
from favicon_crawler.config.models import ConfigurationError, CrawlerSettings

__all__ = [
    "ConfigurationError",
    "CrawlerSettings",
    "get_crawler_settings",
    "load_env_files",
]
