from __future__ import annotations

import csv
from pathlib import Path

import pytest

from favicon_crawler.constants import FAILED_SENTINEL
from favicon_crawler.csv_io import InputFileError, read_domain_records, write_results
from favicon_crawler.types import ResultRecord


def test_reads_headerless_rows_in_file_order(tmp_path: Path) -> None:
    source = tmp_path / "domains.csv"
    source.write_text("3,c.com\n1,a.com\n\n2, b.com \n", encoding="utf-8")

    records = read_domain_records(source, retries=2)

    assert [(record.rank, record.url) for record in records] == [(3, "c.com"), (1, "a.com"), (2, "b.com")]
    assert {record.retries_remaining for record in records} == {2}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InputFileError):
        read_domain_records(tmp_path / "absent.csv")


@pytest.mark.parametrize("content", ["rank,domain\n", "1\n", "1,\n"])
def test_malformed_rows_raise_with_line_number(tmp_path: Path, content: str) -> None:
    source = tmp_path / "bad.csv"
    source.write_text(content, encoding="utf-8")

    with pytest.raises(InputFileError, match="Line 1"):
        read_domain_records(source)


def test_writes_header_and_rows(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "output.csv"
    results = [
        ResultRecord(rank=1, domain="a.com", favicon_url="https://www.a.com/favicon.ico"),
        ResultRecord(rank=2, domain="b.com", favicon_url=FAILED_SENTINEL),
    ]

    written = write_results(target, results)

    with target.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert written == 2
    assert rows == [
        ["rank", "domain", "favicon_url"],
        ["1", "a.com", "https://www.a.com/favicon.ico"],
        ["2", "b.com", "FAILED"],
    ]
