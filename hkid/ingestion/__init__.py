"""ingestion sub-package — batch validation of tabular HKID columns."""

from hkid.ingestion.column_scan import HKIDColumnScanner, RESULT_COLUMNS

__all__ = ["HKIDColumnScanner", "RESULT_COLUMNS"]
