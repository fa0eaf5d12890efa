"""Custom exceptions for sheetlocales."""

from __future__ import annotations


class SheetLocalesError(Exception):
    """Base exception for all sheetlocales errors."""

    pass


class ValidationError(SheetLocalesError):
    """Raised when required inputs are missing or invalid."""

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)


class CatalogError(SheetLocalesError):
    """Raised when a language catalog file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid language catalog '{path}': {reason}")


class EmptySpreadsheetError(SheetLocalesError):
    """Raised when a spreadsheet has no sheets to process."""

    def __init__(self, spreadsheet_id: str) -> None:
        self.spreadsheet_id = spreadsheet_id
        super().__init__(f"Empty list of sheets in spreadsheet {spreadsheet_id}")


class RemoteFetchError(SheetLocalesError):
    """Base exception for failures talking to the spreadsheet service."""

    def __init__(
        self,
        message: str,
        spreadsheet_id: str | None = None,
        range_name: str | None = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.range_name = range_name
        super().__init__(message)


class AuthenticationError(RemoteFetchError):
    """Raised when authentication fails (401/403)."""


class NotFoundError(RemoteFetchError):
    """Raised when the spreadsheet or range is not found (404)."""


class APIError(RemoteFetchError):
    """Raised when the API returns any other error status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        spreadsheet_id: str | None = None,
        range_name: str | None = None,
    ) -> None:
        super().__init__(message, spreadsheet_id, range_name)
        self.status_code = status_code


class NoDataError(SheetLocalesError):
    """Raised when a sheet has no rows below its header."""

    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(f"No data found in sheet '{sheet_name}'")


class UnrecognizedLanguageError(SheetLocalesError):
    """Raised when a sheet name does not match any catalog language."""

    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(f"Incorrect ISO language name: {sheet_name}")


class DirectoryCreateError(SheetLocalesError):
    """Raised when the output directory cannot be created."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error creating directory {path}: {reason}")


class FileWriteError(SheetLocalesError):
    """Raised when a translation file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing file {path}: {reason}")
