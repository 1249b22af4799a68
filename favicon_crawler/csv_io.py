"""
CSV input reader and output writer for crawl runs.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from favicon_crawler.constants import OUTPUT_FIELDNAMES
from favicon_crawler.types import DomainRecord, ResultRecord


class InputFileError(ValueError):
    """
    Raised when the input CSV is missing or contains a malformed row.
    """


def read_domain_records(path: str | Path, *, retries: int = 0) -> list[DomainRecord]:
    """
    Read headerless ``rank,url`` rows in file order.
    """

    input_path = Path(path)
    if not input_path.exists():
        raise InputFileError(f"Input file not found: {input_path}")

    records: list[DomainRecord] = []
    with input_path.open(newline="", encoding="utf-8-sig") as handle:
        for line_number, row in enumerate(csv.reader(handle), start=1):
            if not row or not any(cell.strip() for cell in row):
                continue
            if len(row) < 2:
                raise InputFileError(f"Line {line_number}: expected 'rank,url', got {row!r}")

            raw_rank, url = row[0].strip(), row[1].strip()
            try:
                rank = int(raw_rank)
            except ValueError as exc:
                raise InputFileError(
                    f"Line {line_number}: rank {raw_rank!r} is not an integer"
                ) from exc
            if not url:
                raise InputFileError(f"Line {line_number}: empty domain")

            records.append(DomainRecord(rank=rank, url=url, retries_remaining=max(0, retries)))
    return records


def write_results(path: str | Path, results: Iterable[ResultRecord]) -> int:
    """
    Write results with a ``rank,domain,favicon_url`` header; return row count.
    """

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(OUTPUT_FIELDNAMES))
        writer.writeheader()
        for result in results:
            writer.writerow(
                {
                    "rank": result.rank,
                    "domain": result.domain,
                    "favicon_url": result.favicon_url,
                }
            )
            written += 1
    return written
