"""
openpyxl-backed workbook.

Workbooks are opened with data_only=True so formula cells read their cached
results, which is what the upstream load-planning process leaves behind.
"""

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from trimsheet.errors import WorkbookDecodeError

from .base import Row

logger = logging.getLogger(__name__)

# Malformed XML parts raise SyntaxError subclasses (ElementTree ParseError, lxml XMLSyntaxError)
DECODE_ERRORS = (zipfile.BadZipFile, InvalidFileException, KeyError, ValueError, OSError, SyntaxError)


class ExcelWorkbook:
    """Workbook protocol implementation over an openpyxl Workbook."""

    def __init__(self, workbook: openpyxl.Workbook):
        self._workbook = workbook

    @classmethod
    def from_bytes(cls, data: bytes) -> "ExcelWorkbook":
        """
        Decode an .xlsx file held in memory.

        Raises:
            WorkbookDecodeError: If the bytes are not a readable workbook
        """
        return cls._load(BytesIO(data), name="upload")

    @classmethod
    def from_path(cls, path: str | Path) -> "ExcelWorkbook":
        """
        Open an .xlsx file from disk.

        Raises:
            WorkbookDecodeError: If the file is missing or unreadable
        """
        path = Path(path)
        if not path.is_file():
            raise WorkbookDecodeError(f"Workbook not found: {path}")
        return cls._load(str(path), name=str(path))

    @classmethod
    def _load(cls, source: BytesIO | str, name: str) -> "ExcelWorkbook":
        try:
            workbook = openpyxl.load_workbook(source, data_only=True)
        except DECODE_ERRORS as e:
            logger.warning(f"Failed to decode workbook from {name}: {e}")
            raise WorkbookDecodeError(f"Could not read Excel workbook: {e}") from e
        logger.debug(f"Decoded workbook from {name} with sheets {workbook.sheetnames}")
        return cls(workbook)

    @property
    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def has_sheet(self, name: str) -> bool:
        return name in self._workbook.sheetnames

    def rows(self, sheet: str) -> list[Row]:
        worksheet = self._workbook[sheet]
        return [tuple(row) for row in worksheet.iter_rows(values_only=True)]

    def cell(self, sheet: str, ref: str) -> Any:
        return self._workbook[sheet][ref].value
