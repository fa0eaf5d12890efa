"""Transport layer for fetching spreadsheet data.

Defines the Transport protocol and implementations:
- GoogleSheetsTransport: Production transport using Google Sheets API
- LocalFileTransport: Offline transport reading from local JSON files
"""

from __future__ import annotations

import json
import ssl
import urllib.parse
from abc import ABC, abstractmethod
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any

import certifi
import httpx
from loguru import logger

from sheetlocales.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RemoteFetchError,
)

# API constants
API_BASE = "https://sheets.googleapis.com/v4/spreadsheets"
DEFAULT_TIMEOUT = 60


class Transport(ABC):
    """Abstract base class for spreadsheet data transport.

    Implementations must provide methods to list the sheets of a
    spreadsheet and to fetch the rows of one sheet.
    """

    @abstractmethod
    async def list_sheets(self, spreadsheet_id: str) -> list[str]:
        """Fetch the ordered list of sheet titles.

        Args:
            spreadsheet_id: The spreadsheet identifier

        Returns:
            Sheet titles in spreadsheet order
        """
        ...

    @abstractmethod
    async def get_rows(self, spreadsheet_id: str, range_name: str) -> list[list[str]]:
        """Fetch all cell values of a range.

        Args:
            spreadsheet_id: The spreadsheet identifier
            range_name: Sheet title used as the cell range

        Returns:
            Grid of cell values, empty when the range has no data
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        ...


class GoogleSheetsTransport(Transport):
    """Production transport that fetches data from Google Sheets API.

    Authenticates with an API key passed as the ``key`` query parameter,
    which works for spreadsheets shared as "anyone with the link".
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            api_key: Google Cloud API key with the Sheets API enabled
            timeout: Request timeout in seconds
            client: Preconfigured HTTP client (used by tests)
        """
        self._api_key = api_key
        self._timeout = timeout
        if client is None:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            client = httpx.AsyncClient(
                timeout=timeout,
                verify=ssl_context,
                headers={"Accept": "application/json"},
            )
        self._client = client

    async def list_sheets(self, spreadsheet_id: str) -> list[str]:
        """Fetch sheet titles from the spreadsheet metadata endpoint."""
        url = f"{API_BASE}/{spreadsheet_id}"
        logger.info("Waiting for a list of sheets at the link: {}", url)
        response = await self._request(
            url,
            {"fields": "sheets.properties.title"},
            spreadsheet_id=spreadsheet_id,
        )
        titles = _parse_sheet_titles(response, spreadsheet_id)
        logger.info("List by spreadsheetId({}): {}", spreadsheet_id, ", ".join(titles))
        return titles

    async def get_rows(self, spreadsheet_id: str, range_name: str) -> list[list[str]]:
        """Fetch the values of one sheet from the values endpoint."""
        encoded_range = urllib.parse.quote(_escape_sheet_title(range_name), safe="")
        url = f"{API_BASE}/{spreadsheet_id}/values/{encoded_range}"
        logger.info("Waiting for data at the link: {} by range: {}", url, range_name)
        response = await self._request(
            url, {}, spreadsheet_id=spreadsheet_id, range_name=range_name
        )
        return _parse_values(response, spreadsheet_id, range_name)

    async def _request(
        self,
        url: str,
        params: dict[str, str],
        *,
        spreadsheet_id: str,
        range_name: str | None = None,
    ) -> dict[str, Any]:
        """Make a GET request authenticated with the API key."""
        context = f"spreadsheet {spreadsheet_id}"
        if range_name is not None:
            context += f" with range {range_name}"
        try:
            response = await self._client.get(url, params={**params, "key": self._api_key})
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                raise AuthenticationError(
                    f"Error loading {context}: invalid API key",
                    spreadsheet_id,
                    range_name,
                ) from e
            if status == 403:
                raise AuthenticationError(
                    f"Error loading {context}: access denied. "
                    "Check the API key and sharing permissions.",
                    spreadsheet_id,
                    range_name,
                ) from e
            if status == 404:
                raise NotFoundError(
                    f"Error loading {context}: not found. "
                    "Check the ID and sharing permissions.",
                    spreadsheet_id,
                    range_name,
                ) from e
            body = e.response.text
            raise APIError(
                f"Error loading {context}: API error ({status}): {body}",
                status_code=status,
                spreadsheet_id=spreadsheet_id,
                range_name=range_name,
            ) from e
        except httpx.RequestError as e:
            raise RemoteFetchError(
                f"Error loading {context}: network error: {e}",
                spreadsheet_id,
                range_name,
            ) from e
        except ValueError as e:
            raise RemoteFetchError(
                f"Error loading {context}: response is not valid JSON",
                spreadsheet_id,
                range_name,
            ) from e

        if not isinstance(result, dict):
            raise RemoteFetchError(
                f"Error loading {context}: unexpected response body",
                spreadsheet_id,
                range_name,
            )
        return result

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


class LocalFileTransport(Transport):
    """Transport that reads API responses saved as local files.

    Expected directory structure:
        base_dir/
            <spreadsheet_id>/
                metadata.json
                values/
                    <sheet title>.json
    """

    def __init__(self, base_dir: Path) -> None:
        """Initialize the transport.

        Args:
            base_dir: Directory containing saved spreadsheet responses
        """
        self._base_dir = base_dir

    async def list_sheets(self, spreadsheet_id: str) -> list[str]:
        """Read sheet titles from metadata.json."""
        path = self._base_dir / spreadsheet_id / "metadata.json"
        response = self._read_json(path, spreadsheet_id)
        return _parse_sheet_titles(response, spreadsheet_id)

    async def get_rows(self, spreadsheet_id: str, range_name: str) -> list[list[str]]:
        """Read the values of one sheet from values/<title>.json."""
        path = self._base_dir / spreadsheet_id / "values" / f"{range_name}.json"
        response = self._read_json(path, spreadsheet_id, range_name)
        return _parse_values(response, spreadsheet_id, range_name)

    def _read_json(
        self, path: Path, spreadsheet_id: str, range_name: str | None = None
    ) -> dict[str, Any]:
        if not path.exists():
            raise NotFoundError(f"File not found: {path}", spreadsheet_id, range_name)
        try:
            result = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise RemoteFetchError(
                f"Error reading {path}: {e}", spreadsheet_id, range_name
            ) from e

        if not isinstance(result, dict):
            raise RemoteFetchError(
                f"Error reading {path}: expected a JSON object", spreadsheet_id, range_name
            )
        return result

    async def close(self) -> None:
        """No-op for local file transport."""
        pass


def _parse_sheet_titles(response: dict[str, Any], spreadsheet_id: str) -> list[str]:
    """Extract sheet titles from a spreadsheet metadata response."""
    try:
        return [str(sheet["properties"]["title"]) for sheet in response.get("sheets", [])]
    except (KeyError, TypeError) as e:
        raise RemoteFetchError(
            f"Error loading spreadsheet {spreadsheet_id}: malformed sheet list",
            spreadsheet_id,
        ) from e


def _parse_values(
    response: dict[str, Any], spreadsheet_id: str, range_name: str
) -> list[list[str]]:
    """Extract the value grid from a values response.

    The API omits ``values`` entirely for empty ranges.
    """
    values = response.get("values", [])
    if not isinstance(values, list) or not all(isinstance(row, list) for row in values):
        raise RemoteFetchError(
            f"Error loading spreadsheet {spreadsheet_id} with range {range_name}: "
            "malformed values",
            spreadsheet_id,
            range_name,
        )
    return [[str(cell) for cell in row] for row in values]


def _escape_sheet_title(title: str) -> str:
    """Escape sheet title for use in A1 notation ranges.

    Sheet names containing spaces, special characters, or starting with
    digits need to be wrapped in single quotes.
    """
    needs_quoting = (
        " " in title
        or "'" in title
        or "!" in title
        or ":" in title
        or "(" in title
        or (len(title) > 0 and title[0].isdigit())
    )
    if needs_quoting:
        escaped = title.replace("'", "''")
        return f"'{escaped}'"
    return title
