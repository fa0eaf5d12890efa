"""
File writer utilities for sheetlocales.

Handles serializing translation maps and writing them to disk.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from loguru import logger

from sheetlocales.exceptions import DirectoryCreateError, FileWriteError


class OutputFormat(Enum):
    """Supported output file formats."""

    JSON = "json"
    CJS = "cjs"
    ESM = "esm"


@dataclass(frozen=True)
class FormatConfig:
    """File extension and data prefix for an output format."""

    file_extension: str
    data_prefix: str


FORMAT_CONFIG: dict[OutputFormat, FormatConfig] = {
    OutputFormat.JSON: FormatConfig(file_extension="json", data_prefix=""),
    OutputFormat.CJS: FormatConfig(file_extension="js", data_prefix="module.exports = "),
    OutputFormat.ESM: FormatConfig(file_extension="js", data_prefix="export default "),
}

# Wider indentation is clamped, as JSON.stringify does
MAX_INDENT = 10


def serialize_translations(
    translations: dict[str, Any],
    output_format: OutputFormat = OutputFormat.JSON,
    beautify: int = 4,
) -> str:
    """Serialize a translation map with the format's data prefix.

    Args:
        translations: Nested translation map
        output_format: Target file format
        beautify: Number of spaces per indentation level, capped at
            MAX_INDENT; 0 gives compact output

    Returns:
        File content
    """
    if beautify > 0:
        indent = min(beautify, MAX_INDENT)
        data = json.dumps(translations, indent=indent, ensure_ascii=False)
    else:
        data = json.dumps(translations, separators=(",", ":"), ensure_ascii=False)
    return f"{FORMAT_CONFIG[output_format].data_prefix}{data}"


class FileWriter:
    """Writes translation files to an output directory."""

    def __init__(self, base_path: str | Path) -> None:
        """Initialize the writer with an output directory.

        Args:
            base_path: Directory to write files to
        """
        self.base_path = Path(base_path)

    def ensure_directory(self) -> None:
        """Create the output directory if it does not exist.

        Parent directories are not created.

        Raises:
            DirectoryCreateError: If the directory cannot be created
        """
        if self.base_path.is_dir():
            return

        logger.info("Creating {} output directory", self.base_path)
        try:
            self.base_path.mkdir(exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(str(self.base_path), str(e)) from e
        logger.info("{} has been created", self.base_path)

    def path_for(self, code: str, output_format: OutputFormat) -> Path:
        """Path of the file written for a language code."""
        return self.base_path / f"{code}.{FORMAT_CONFIG[output_format].file_extension}"

    def write_translations(
        self,
        translations: dict[str, Any],
        code: str,
        output_format: OutputFormat = OutputFormat.JSON,
        beautify: int = 4,
    ) -> Path:
        """Write a translation file, replacing any existing one.

        Args:
            translations: Nested translation map
            code: Language code used as the file name
            output_format: Target file format
            beautify: Number of spaces per indentation level

        Returns:
            Path to written file

        Raises:
            DirectoryCreateError: If the output directory cannot be created
            FileWriteError: If the file cannot be written
        """
        self.ensure_directory()

        full_path = self.path_for(code, output_format)
        content = serialize_translations(translations, output_format, beautify)
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FileWriteError(str(full_path), str(e)) from e
        try:
            full_path.write_bytes(data)
        except OSError as e:
            raise FileWriteError(str(full_path), str(e)) from e

        logger.info("{} has been created", full_path)
        return full_path
