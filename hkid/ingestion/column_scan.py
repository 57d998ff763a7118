"""
ingestion/column_scan.py
------------------------
Batch validation of a DataFrame column holding HKID numbers.

Each cell is parsed with :func:`~hkid.core.validation.parse_hkid`; the scan
returns one result row per input row, with the input index preserved, so the
outcome can be joined back onto the source frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from hkid.core.config import DEFAULT_CONFIG, HKIDConfig
from hkid.core.result_schema import ParseResult, ParseStatus
from hkid.core.validation import parse_hkid

logger = logging.getLogger(__name__)

RESULT_COLUMNS: List[str] = [
    "input",
    "status",
    "prefix",
    "numerals",
    "check_digit",
    "normalized",
    "defined_prefix",
    "error",
]


class HKIDColumnScanner:
    """
    Validates every value of one DataFrame column.

    Args:
        config: An :class:`~hkid.core.config.HKIDConfig` instance.
                Uses :data:`~hkid.core.config.DEFAULT_CONFIG` if omitted.

    Example::

        scanner = HKIDColumnScanner()
        results = scanner.scan(df, column="hkid")
        print(scanner.summarize(results))
    """

    def __init__(self, config: Optional[HKIDConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.config.validate()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self, df: pd.DataFrame, column: Optional[str] = None) -> pd.DataFrame:
        """
        Parse every cell of *column*.

        Missing cells are reported as ``invalid_format``.

        Args:
            df:     The frame to scan.
            column: Column name; defaults to ``config.column``.

        Returns:
            A DataFrame with :data:`RESULT_COLUMNS`, indexed like *df*.

        Raises:
            KeyError: If *column* is not in *df*.
        """
        column = column or self.config.column
        if column not in df.columns:
            raise KeyError(
                f"Column {column!r} not found. Available columns: {list(df.columns)}"
            )

        series = df[column]
        missing = int(series.isna().sum())
        if missing:
            logger.warning(
                "Column %r has %d missing value(s); reported as invalid_format.",
                column, missing,
            )

        fmt = self.config.format
        rows: List[Dict[str, Any]] = []
        for value in series:
            result = self._parse_cell(value)
            rows.append(result.to_dict(fmt))

        return pd.DataFrame(rows, index=series.index, columns=RESULT_COLUMNS)

    def scan_csv(self, filepath: Union[str, Path], column: Optional[str] = None) -> pd.DataFrame:
        """Read *filepath* as strings and :meth:`scan` the HKID column."""
        df = pd.read_csv(filepath, dtype=str, encoding=self.config.encoding)
        logger.debug("Loaded %d rows from %s", len(df), filepath)
        return self.scan(df, column=column)

    @staticmethod
    def summarize(results: pd.DataFrame) -> Dict[str, Any]:
        """
        Aggregate a :meth:`scan` result.

        Returns:
            Dict with ``total``, ``valid``, ``invalid_format``,
            ``invalid_check_digit``, ``undefined_prefix`` and ``valid_ratio``.
        """
        total = int(len(results))
        counts = results["status"].value_counts() if total else pd.Series(dtype=int)
        valid = int(counts.get(ParseStatus.VALID.value, 0))
        undefined = 0
        if total:
            is_valid = results["status"] == ParseStatus.VALID.value
            undefined = int((is_valid & ~results["defined_prefix"].astype(bool)).sum())

        return {
            "total": total,
            "valid": valid,
            "invalid_format": int(counts.get(ParseStatus.INVALID_FORMAT.value, 0)),
            "invalid_check_digit": int(counts.get(ParseStatus.INVALID_CHECK_DIGIT.value, 0)),
            "undefined_prefix": undefined,
            "valid_ratio": round(valid / total, 4) if total else 0.0,
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_cell(value: Any) -> ParseResult:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return parse_hkid(None)
        if not isinstance(value, str):
            value = str(value)
        return parse_hkid(value.strip())
