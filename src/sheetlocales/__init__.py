"""sheetlocales - Generate i18n translation files from Google Sheets.

Each sheet of a spreadsheet holds one language; rows of
``namespace | key | translation`` become a nested JSON (or JS module)
file named after the language code.
"""

__version__ = "0.1.0"

from sheetlocales.client import (
    GenerateResult,
    LocalesClient,
    generate_files_from_spreadsheet,
)
from sheetlocales.exceptions import (
    APIError,
    AuthenticationError,
    CatalogError,
    DirectoryCreateError,
    EmptySpreadsheetError,
    FileWriteError,
    NoDataError,
    NotFoundError,
    RemoteFetchError,
    SheetLocalesError,
    UnrecognizedLanguageError,
    ValidationError,
)
from sheetlocales.languages import DEFAULT_CATALOG, LanguageCatalog, LanguageEntry
from sheetlocales.transformer import TranslationResult, build_translations, to_camel_case
from sheetlocales.transport import GoogleSheetsTransport, LocalFileTransport, Transport
from sheetlocales.writer import FileWriter, OutputFormat

__all__ = [
    "DEFAULT_CATALOG",
    "APIError",
    "AuthenticationError",
    "CatalogError",
    "DirectoryCreateError",
    "EmptySpreadsheetError",
    "FileWriteError",
    "FileWriter",
    "GenerateResult",
    "GoogleSheetsTransport",
    "LanguageCatalog",
    "LanguageEntry",
    "LocalFileTransport",
    "LocalesClient",
    "NoDataError",
    "NotFoundError",
    "OutputFormat",
    "RemoteFetchError",
    "SheetLocalesError",
    "TranslationResult",
    "Transport",
    "UnrecognizedLanguageError",
    "ValidationError",
    "__version__",
    "build_translations",
    "generate_files_from_spreadsheet",
    "to_camel_case",
]
