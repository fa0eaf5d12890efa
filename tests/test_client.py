"""Tests for the generate workflow using golden files.

These tests use LocalFileTransport and a small in-memory transport so no
Google API calls are made.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sheetlocales.client import (
    GenerateResult,
    LocalesClient,
    generate_files_from_spreadsheet,
    validate_inputs,
)
from sheetlocales.exceptions import (
    EmptySpreadsheetError,
    NotFoundError,
    RemoteFetchError,
    ValidationError,
)
from sheetlocales.languages import LanguageCatalog, LanguageEntry
from sheetlocales.transport import LocalFileTransport, Transport
from sheetlocales.writer import OutputFormat


class MemoryTransport(Transport):
    """Transport serving sheets from a dict, recording calls."""

    def __init__(self, sheets: dict[str, list[list[str]]], fail_listing: bool = False) -> None:
        self._sheets = sheets
        self._fail_listing = fail_listing
        self.calls: list[str] = []
        self.closed = False

    async def list_sheets(self, spreadsheet_id: str) -> list[str]:
        self.calls.append("list")
        if self._fail_listing:
            raise RemoteFetchError("Error loading spreadsheet", spreadsheet_id)
        return list(self._sheets)

    async def get_rows(self, spreadsheet_id: str, range_name: str) -> list[list[str]]:
        self.calls.append(range_name)
        return self._sheets[range_name]

    async def close(self) -> None:
        self.closed = True


HEADER = ["Namespace", "Key", "Translation"]


class TestLocalesClientGenerate:
    """Tests for LocalesClient.generate()."""

    @pytest.mark.asyncio
    async def test_generate_golden_spreadsheet(
        self, local_transport: LocalFileTransport, tmp_path: Path
    ) -> None:
        client = LocalesClient(local_transport)

        result = await client.generate("translations", tmp_path, beautify=2)

        assert result.written == [tmp_path / "en.json", tmp_path / "de.json"]
        assert json.loads((tmp_path / "en.json").read_text(encoding="utf-8")) == {
            "ui": {"title": "Hello", "subTitle": "World"},
            "mainMenu": {"saveButton": "Save"},
        }
        assert json.loads((tmp_path / "de.json").read_text(encoding="utf-8")) == {
            "ui": {"title": "Hallo", "subTitle": "Welt"},
            "mainMenu": {"saveButton": "Speichern"},
        }
        assert sorted(result.skipped) == ["French", "Notes", "Spanish"]
        assert not result.success

    @pytest.mark.asyncio
    async def test_no_files_for_skipped_sheets(
        self, local_transport: LocalFileTransport, tmp_path: Path
    ) -> None:
        await LocalesClient(local_transport).generate("translations", tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["de.json", "en.json"]

    @pytest.mark.asyncio
    async def test_skip_reasons_logged(
        self,
        local_transport: LocalFileTransport,
        tmp_path: Path,
        log_messages: list[str],
    ) -> None:
        await LocalesClient(local_transport).generate("translations", tmp_path)

        assert "WARNING: Incorrect ISO language name: Notes" in log_messages
        assert any(
            m.startswith("ERROR: Skipping sheet French of spreadsheet translations")
            and "No data found" in m
            for m in log_messages
        )
        assert any(
            m.startswith("ERROR: Skipping sheet Spanish of spreadsheet translations")
            for m in log_messages
        )

    @pytest.mark.asyncio
    async def test_example_compact_output(self, tmp_path: Path) -> None:
        transport = MemoryTransport(
            {"English": [HEADER, ["ui", "title", "Hello"], ["ui", "sub-title", "World"]]}
        )
        catalog = LanguageCatalog([LanguageEntry(names=("English",), code="en")])

        result = await LocalesClient(transport, catalog).generate(
            "sheet123", tmp_path, beautify=0
        )

        assert result.success
        content = (tmp_path / "en.json").read_text(encoding="utf-8")
        assert content == '{"ui":{"title":"Hello","subTitle":"World"}}'

    @pytest.mark.asyncio
    async def test_esm_output(self, tmp_path: Path) -> None:
        transport = MemoryTransport({"English": [HEADER, ["ui", "title", "Hello"]]})

        await LocalesClient(transport).generate(
            "sheet123", tmp_path, output_format=OutputFormat.ESM, beautify=4
        )

        content = (tmp_path / "en.js").read_text(encoding="utf-8")
        assert content.startswith("export default ")
        assert json.loads(content.removeprefix("export default ")) == {
            "ui": {"title": "Hello"}
        }

    @pytest.mark.asyncio
    async def test_sheets_processed_in_order(self, tmp_path: Path) -> None:
        transport = MemoryTransport(
            {
                "German": [HEADER, ["ui", "title", "Hallo"]],
                "Notes": [["anything"]],
                "English": [HEADER, ["ui", "title", "Hello"]],
            }
        )

        result = await LocalesClient(transport).generate("sheet123", tmp_path)

        assert transport.calls == ["list", "German", "Notes", "English"]
        assert result.written == [tmp_path / "de.json", tmp_path / "en.json"]

    @pytest.mark.asyncio
    async def test_write_failure_continues(self, tmp_path: Path) -> None:
        (tmp_path / "de.json").mkdir()
        transport = MemoryTransport(
            {
                "German": [HEADER, ["ui", "title", "Hallo"]],
                "English": [HEADER, ["ui", "title", "Hello"]],
            }
        )

        result = await LocalesClient(transport).generate("sheet123", tmp_path)

        assert result.written == [tmp_path / "en.json"]
        assert "German" in result.skipped

    @pytest.mark.asyncio
    async def test_directory_failure_skips_sheet(self, tmp_path: Path) -> None:
        transport = MemoryTransport({"English": [HEADER, ["ui", "title", "Hello"]]})

        result = await LocalesClient(transport).generate(
            "sheet123", tmp_path / "missing" / "locales"
        )

        assert result.written == []
        assert "Error creating directory" in result.skipped["English"]

    @pytest.mark.asyncio
    async def test_later_sheet_overwrites_same_code(self, tmp_path: Path) -> None:
        transport = MemoryTransport(
            {
                "English": [HEADER, ["ui", "title", "First"]],
                "Engl": [HEADER, ["ui", "title", "Second"]],
            }
        )

        await LocalesClient(transport).generate("sheet123", tmp_path)

        assert json.loads((tmp_path / "en.json").read_text(encoding="utf-8")) == {
            "ui": {"title": "Second"}
        }

    @pytest.mark.asyncio
    async def test_empty_spreadsheet_raises(
        self, local_transport: LocalFileTransport, tmp_path: Path
    ) -> None:
        with pytest.raises(EmptySpreadsheetError):
            await LocalesClient(local_transport).generate("empty", tmp_path)

    @pytest.mark.asyncio
    async def test_listing_failure_raises(self, local_transport: LocalFileTransport, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            await LocalesClient(local_transport).generate("does-not-exist", tmp_path)


class TestValidateInputs:
    """Tests for validate_inputs."""

    @pytest.mark.parametrize(
        ("spreadsheet_id", "api_key", "message", "missing"),
        [
            ("", "", "Spreadsheet ID and API key are required", ("spreadsheet_id", "api_key")),
            (None, "key", "Spreadsheet ID is required", ("spreadsheet_id",)),
            ("sheet123", None, "API key is required", ("api_key",)),
        ],
    )
    def test_missing_inputs(
        self,
        spreadsheet_id: str | None,
        api_key: str | None,
        message: str,
        missing: tuple[str, ...],
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_inputs(spreadsheet_id, api_key)
        assert str(exc_info.value) == message
        assert exc_info.value.missing == missing

    @pytest.mark.parametrize("beautify", [-1, True])
    def test_invalid_beautify(self, beautify: int) -> None:
        with pytest.raises(ValidationError):
            validate_inputs("sheet123", "key", beautify)

    def test_valid_inputs(self) -> None:
        assert validate_inputs("sheet123", "key", 0) == ("sheet123", "key")


class TestGenerateFilesFromSpreadsheet:
    """Tests for the top-level entry point."""

    @pytest.mark.asyncio
    async def test_missing_inputs_abort_without_raising(
        self, tmp_path: Path, log_messages: list[str]
    ) -> None:
        transport = MemoryTransport({"English": [HEADER, ["ui", "title", "Hello"]]})

        result = await generate_files_from_spreadsheet(
            "", "", tmp_path, transport=transport
        )

        assert result.aborted == "Spreadsheet ID and API key are required"
        assert transport.calls == []
        assert "ERROR: Spreadsheet ID and API key are required" in log_messages

    @pytest.mark.asyncio
    async def test_listing_failure_aborts_without_raising(
        self, tmp_path: Path, log_messages: list[str]
    ) -> None:
        transport = MemoryTransport({}, fail_listing=True)

        result = await generate_files_from_spreadsheet(
            "sheet123", "key", tmp_path, transport=transport
        )

        assert result.aborted == "Error loading spreadsheet"
        assert result.written == []
        assert "ERROR: Error loading spreadsheet" in log_messages

    @pytest.mark.asyncio
    async def test_empty_spreadsheet_aborts(self, local_transport: LocalFileTransport, tmp_path: Path) -> None:
        result = await generate_files_from_spreadsheet(
            "empty", "key", tmp_path, transport=local_transport
        )

        assert result.aborted == "Empty list of sheets in spreadsheet empty"

    @pytest.mark.asyncio
    async def test_injected_transport_not_closed(self, tmp_path: Path) -> None:
        transport = MemoryTransport({"English": [HEADER, ["ui", "title", "Hello"]]})

        result = await generate_files_from_spreadsheet(
            "sheet123", "key", tmp_path, OutputFormat.CJS, 2, transport=transport
        )

        assert isinstance(result, GenerateResult)
        assert result.written == [tmp_path / "en.js"]
        assert not transport.closed
        content = (tmp_path / "en.js").read_text(encoding="utf-8")
        assert content.startswith("module.exports = {\n  ")

    @pytest.mark.asyncio
    async def test_unencodable_value_skips_sheet(
        self, tmp_path: Path, log_messages: list[str]
    ) -> None:
        transport = MemoryTransport(
            {
                "German": [HEADER, ["ui", "title", "bad \ud800 text"]],
                "English": [HEADER, ["ui", "title", "Hello"]],
            }
        )

        result = await generate_files_from_spreadsheet(
            "sheet123", "key", tmp_path, transport=transport
        )

        assert result.aborted is None
        assert result.written == [tmp_path / "en.json"]
        assert "German" in result.skipped
        assert not (tmp_path / "de.json").exists()
        assert any(m.startswith("ERROR: Skipping sheet German") for m in log_messages)
