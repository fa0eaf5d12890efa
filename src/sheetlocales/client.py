"""LocalesClient - Main API for sheetlocales.

Lists the sheets of a spreadsheet and writes one translation file per
language sheet. Sheets are processed one after another; a failing sheet is
logged and skipped without stopping the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from sheetlocales.exceptions import (
    DirectoryCreateError,
    EmptySpreadsheetError,
    FileWriteError,
    NoDataError,
    RemoteFetchError,
    SheetLocalesError,
    UnrecognizedLanguageError,
    ValidationError,
)
from sheetlocales.languages import DEFAULT_CATALOG, LanguageCatalog
from sheetlocales.transformer import build_translations
from sheetlocales.transport import DEFAULT_TIMEOUT, GoogleSheetsTransport, Transport
from sheetlocales.writer import FileWriter, OutputFormat

# Errors that skip the current sheet instead of aborting the run
SHEET_ERRORS = (
    RemoteFetchError,
    NoDataError,
    DirectoryCreateError,
    FileWriteError,
)


@dataclass
class GenerateResult:
    """Result of a generate run."""

    spreadsheet_id: str
    written: list[Path] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)
    aborted: str | None = None

    @property
    def success(self) -> bool:
        """True if the run was not aborted and no sheet was skipped."""
        return self.aborted is None and not self.skipped


class LocalesClient:
    """Client for generating translation files from a spreadsheet.

    Example:
        >>> from sheetlocales.transport import GoogleSheetsTransport
        >>> transport = GoogleSheetsTransport(api_key="AIza...")
        >>> client = LocalesClient(transport)
        >>> await client.generate("1u2eumiwPFT4EevSiHDQCq83xDVkDyjehz5IJ0IfooJA", "./locales")
    """

    def __init__(
        self, transport: Transport, catalog: LanguageCatalog = DEFAULT_CATALOG
    ) -> None:
        """Initialize the client.

        Args:
            transport: Transport implementation for fetching spreadsheet data
            catalog: Language catalog used to resolve sheet names
        """
        self._transport = transport
        self._catalog = catalog

    async def generate(
        self,
        spreadsheet_id: str,
        output_dir: str | Path,
        *,
        output_format: OutputFormat = OutputFormat.JSON,
        beautify: int = 4,
    ) -> GenerateResult:
        """Write a translation file for every language sheet.

        Args:
            spreadsheet_id: The ID of the spreadsheet (from the URL)
            output_dir: Directory to write files to
            output_format: Format of generated files
            beautify: Number of spaces per indentation level

        Returns:
            GenerateResult listing written files and skipped sheets

        Raises:
            RemoteFetchError: If the sheet list cannot be fetched
            EmptySpreadsheetError: If the spreadsheet has no sheets
        """
        sheets = await self._transport.list_sheets(spreadsheet_id)
        if not sheets:
            raise EmptySpreadsheetError(spreadsheet_id)

        writer = FileWriter(output_dir)
        result = GenerateResult(spreadsheet_id=spreadsheet_id)

        for sheet_name in sheets:
            log = logger.bind(spreadsheet_id=spreadsheet_id, sheet=sheet_name)
            try:
                path = await self._generate_sheet(
                    spreadsheet_id, sheet_name, writer, output_format, beautify
                )
            except UnrecognizedLanguageError as e:
                log.warning("{}", e)
                result.skipped[sheet_name] = str(e)
            except SHEET_ERRORS as e:
                log.error("Skipping sheet {} of spreadsheet {}: {}", sheet_name, spreadsheet_id, e)
                result.skipped[sheet_name] = str(e)
            else:
                result.written.append(path)

        logger.bind(spreadsheet_id=spreadsheet_id).info(
            "Wrote {} file(s), skipped {} sheet(s)", len(result.written), len(result.skipped)
        )
        return result

    async def _generate_sheet(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        writer: FileWriter,
        output_format: OutputFormat,
        beautify: int,
    ) -> Path:
        rows = await self._transport.get_rows(spreadsheet_id, sheet_name)
        built = build_translations(rows, sheet_name, self._catalog)
        return writer.write_translations(
            built.translations, built.code, output_format, beautify
        )


def validate_inputs(
    spreadsheet_id: str | None, api_key: str | None, beautify: int = 4
) -> tuple[str, str]:
    """Check the required inputs of a run.

    Returns:
        The spreadsheet id and API key, both non-empty

    Raises:
        ValidationError: Naming the missing value(s)
    """
    if not spreadsheet_id and not api_key:
        raise ValidationError(
            "Spreadsheet ID and API key are required", ("spreadsheet_id", "api_key")
        )
    if not spreadsheet_id:
        raise ValidationError("Spreadsheet ID is required", ("spreadsheet_id",))
    if not api_key:
        raise ValidationError("API key is required", ("api_key",))
    if isinstance(beautify, bool) or not isinstance(beautify, int) or beautify < 0:
        raise ValidationError(f"Beautify must be a non-negative integer, got {beautify!r}")
    return spreadsheet_id, api_key


async def generate_files_from_spreadsheet(
    spreadsheet_id: str | None,
    api_key: str | None,
    output_dir: str | Path = "./locales",
    output_format: OutputFormat = OutputFormat.JSON,
    beautify: int = 4,
    *,
    catalog: LanguageCatalog = DEFAULT_CATALOG,
    transport: Transport | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> GenerateResult:
    """Generate translation files from a Google Sheets spreadsheet.

    Errors never propagate to the caller: fatal ones (missing inputs, a
    sheet list that cannot be fetched or is empty) are logged and recorded
    in ``GenerateResult.aborted``.

    Args:
        spreadsheet_id: Id of spreadsheet to parse
        api_key: Google Cloud API key
        output_dir: Path of output directory
        output_format: Format of generated files
        beautify: Number of spaces per indentation level
        catalog: Language catalog used to resolve sheet names
        transport: Transport to use instead of the Google Sheets API
        timeout: Request timeout in seconds for the Google Sheets API

    Returns:
        GenerateResult describing the run
    """
    result = GenerateResult(spreadsheet_id=spreadsheet_id or "")
    try:
        spreadsheet_id, api_key = validate_inputs(spreadsheet_id, api_key, beautify)
    except ValidationError as e:
        logger.error("{}", e)
        result.aborted = str(e)
        return result

    owns_transport = transport is None
    if transport is None:
        transport = GoogleSheetsTransport(api_key=api_key, timeout=timeout)

    client = LocalesClient(transport, catalog)
    try:
        return await client.generate(
            spreadsheet_id, output_dir, output_format=output_format, beautify=beautify
        )
    except SheetLocalesError as e:
        logger.bind(spreadsheet_id=spreadsheet_id).error("{}", e)
        result.aborted = str(e)
        return result
    finally:
        if owns_transport:
            await transport.close()
