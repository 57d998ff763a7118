import logging

import pandas as pd
import pytest

from hkid.core.config import HKIDConfig
from hkid.ingestion.column_scan import RESULT_COLUMNS, HKIDColumnScanner


@pytest.fixture
def df():
    return pd.DataFrame(
        {
            "name": ["a", "b", "c", "d", "e"],
            "hkid": ["A123456(3)", "A123456(7)", "#$123456", None, " aa123456 "],
        },
        index=[10, 11, 12, 13, 14],
    )


def test_scan(df):
    results = HKIDColumnScanner().scan(df)

    assert list(results.columns) == RESULT_COLUMNS
    assert list(results.index) == [10, 11, 12, 13, 14]
    assert list(results["status"]) == [
        "valid", "invalid_check_digit", "invalid_format", "invalid_format", "valid",
    ]
    assert results.loc[10, "normalized"] == "A123456(3)"
    assert results.loc[14, "normalized"] == "AA123456(6)"
    assert bool(results.loc[10, "defined_prefix"]) is True
    assert bool(results.loc[14, "defined_prefix"]) is False
    assert pd.isna(results.loc[11, "prefix"])
    assert "A123456(7)" in results.loc[11, "error"]


def test_scan_logs_missing_values(df, caplog):
    with caplog.at_level(logging.WARNING, logger="hkid.ingestion.column_scan"):
        HKIDColumnScanner().scan(df)
    assert "1 missing value" in caplog.text


def test_scan_uses_configured_format_and_column():
    frame = pd.DataFrame({"id_no": ["A123456"]})
    config = HKIDConfig(output_format="without_parentheses", column="id_no")
    results = HKIDColumnScanner(config).scan(frame)
    assert results.loc[0, "normalized"] == "A1234563"


def test_scan_unknown_column(df):
    with pytest.raises(KeyError, match="Available columns"):
        HKIDColumnScanner().scan(df, column="id_no")


def test_summarize(df):
    scanner = HKIDColumnScanner()
    summary = scanner.summarize(scanner.scan(df))
    assert summary == {
        "total": 5,
        "valid": 2,
        "invalid_format": 2,
        "invalid_check_digit": 1,
        "undefined_prefix": 1,
        "valid_ratio": 0.4,
    }


def test_summarize_empty_frame():
    scanner = HKIDColumnScanner()
    results = scanner.scan(pd.DataFrame({"hkid": []}))
    assert scanner.summarize(results) == {
        "total": 0,
        "valid": 0,
        "invalid_format": 0,
        "invalid_check_digit": 0,
        "undefined_prefix": 0,
        "valid_ratio": 0.0,
    }


def test_scan_csv(tmp_path):
    csv_file = tmp_path / "people.csv"
    pd.DataFrame({"hkid": ["C1234569", "Z0000000"], "age": [30, 40]}).to_csv(csv_file, index=False)
    results = HKIDColumnScanner().scan_csv(csv_file)
    assert list(results["status"]) == ["valid", "invalid_check_digit"]
