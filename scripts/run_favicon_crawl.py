"""
Run the favicon crawler from CLI.
"""

from __future__ import annotations

from favicon_crawler.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
