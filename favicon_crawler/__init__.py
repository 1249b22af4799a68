"""
Concurrent favicon URL resolution for large domain lists.
"""

from favicon_crawler.config import CrawlerSettings, get_crawler_settings
from favicon_crawler.pipeline import FaviconCrawlPipeline
from favicon_crawler.resolver import FaviconResolver
from favicon_crawler.types import CrawlSummary, DomainRecord, ResultRecord

__all__ = [
    "CrawlSummary",
    "CrawlerSettings",
    "DomainRecord",
    "FaviconCrawlPipeline",
    "FaviconResolver",
    "ResultRecord",
    "get_crawler_settings",
]
