"""
Errors raised while reading a load-planning workbook.

Every error a user can see derives from WorkbookError so callers can
surface the message verbatim and ask for a corrected file.
"""


class WorkbookError(Exception):
    """Base class for workbook ingestion failures."""


class WorkbookDecodeError(WorkbookError):
    """The uploaded bytes are not a readable .xlsx workbook."""


class MissingSheetsError(WorkbookError):
    """One or more required sheets are absent."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required sheets: {', '.join(self.missing)}")


class SheetNotFoundError(WorkbookError):
    """A specific sheet needed by an extractor is absent."""

    def __init__(self, sheet_name: str):
        self.sheet_name = sheet_name
        super().__init__(f"{sheet_name} sheet not found")


class LoadPlanParseError(WorkbookError):
    """Extraction failed; wraps the underlying cause."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Data parsing failed: {cause}")
