"""
HTML parsing layer exports.
"""

from favicon_crawler.parsing.link_parser import find_icon_href, parse_document

__all__ = ["find_icon_href", "parse_document"]
