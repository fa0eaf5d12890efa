"""Transforms sheet rows into a nested translation map.

Each row below the header holds ``[namespace, key, value]``. The result maps
camel-cased namespaces to camel-cased keys to translated values.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sheetlocales.exceptions import NoDataError, UnrecognizedLanguageError
from sheetlocales.languages import DEFAULT_CATALOG, LanguageCatalog, LanguageEntry

Translations = dict[str, dict[str, str]]

SEPARATORS = frozenset("-_")


def _is_separator(char: str) -> bool:
    return char.isspace() or char in SEPARATORS


def to_camel_case(value: str) -> str:
    """Convert a string to camel case.

    A run of whitespace, hyphens or underscores followed by an ASCII letter
    or digit is dropped and that character is uppercased. Separators followed
    by anything else, or trailing at the end, are kept as-is.

    Examples:
        "sub-title" -> "subTitle"
        "main menu_item" -> "mainMenuItem"
        "trailing-" -> "trailing-"
    """
    result: list[str] = []
    pending: list[str] = []

    for char in value:
        if _is_separator(char):
            pending.append(char)
            continue
        if pending and char.isascii() and char.isalnum():
            result.append(char.upper())
        else:
            result.extend(pending)
            result.append(char)
        pending.clear()

    result.extend(pending)
    return "".join(result)


@dataclass(frozen=True)
class TranslationResult:
    """Translations built from one sheet."""

    sheet_name: str
    language: LanguageEntry
    translations: Translations = field(default_factory=dict)

    @property
    def code(self) -> str:
        """Output code used as the file name."""
        return self.language.code


def build_translations(
    rows: Sequence[Sequence[str]],
    sheet_name: str,
    catalog: LanguageCatalog = DEFAULT_CATALOG,
) -> TranslationResult:
    """Build the translation map for one sheet.

    Args:
        rows: Grid of cell values; row 0 is the header
        sheet_name: Title of the sheet, resolved against the catalog
        catalog: Language catalog to resolve the sheet name with

    Returns:
        TranslationResult holding the matched language and the map

    Raises:
        UnrecognizedLanguageError: If the sheet name matches no language
        NoDataError: If there are no rows below the header
    """
    language = catalog.resolve(sheet_name)
    if language is None:
        raise UnrecognizedLanguageError(sheet_name)

    if len(rows) < 2:
        raise NoDataError(sheet_name)

    translations: Translations = {}
    for row in rows[1:]:
        namespace, key, value = _first_three_cells(row)
        if not (namespace and key and value):
            continue
        translations.setdefault(to_camel_case(namespace), {})[to_camel_case(key)] = value

    return TranslationResult(
        sheet_name=sheet_name, language=language, translations=translations
    )


def _first_three_cells(row: Sequence[str]) -> tuple[str, str, str]:
    """Pad short rows; the API drops trailing empty cells."""
    cells = list(row[:3]) + [""] * (3 - len(row[:3]))
    return cells[0], cells[1], cells[2]
