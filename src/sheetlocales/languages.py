"""Language catalog used to map sheet names to output codes.

A sheet is resolved by substring containment: the first catalog entry one
of whose display names contains the sheet name wins. Catalog order decides
between overlapping names (for example "Malay" is contained in "Malayalam",
which is listed first).
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sheetlocales.exceptions import CatalogError


@dataclass(frozen=True)
class LanguageEntry:
    """A language known to the catalog."""

    names: tuple[str, ...]
    code: str

    @property
    def name(self) -> str:
        """Primary display name."""
        return self.names[0]

    def matches(self, sheet_name: str) -> bool:
        return bool(sheet_name) and any(sheet_name in name for name in self.names)


class LanguageCatalog:
    """Immutable, ordered table of language entries."""

    def __init__(self, entries: Iterable[LanguageEntry]) -> None:
        self._entries = tuple(entries)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, sheet_name: str) -> LanguageEntry | None:
        """Find the language for a sheet name.

        Args:
            sheet_name: Title of the sheet

        Returns:
            The first matching entry, or None if no display name contains
            the sheet name
        """
        for entry in self._entries:
            if entry.matches(sheet_name):
                return entry
        return None

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> LanguageCatalog:
        """Build a catalog from (names, code) pairs.

        Names are given as one string; variants are separated by "; ".
        """
        return cls(
            LanguageEntry(names=tuple(names.split("; ")), code=code)
            for names, code in pairs
        )

    @classmethod
    def from_file(cls, path: str | Path) -> LanguageCatalog:
        """Load a catalog from a JSON file.

        The file holds a list of objects with a ``name`` (string or list of
        strings) and a ``code``::

            [{"name": "English", "code": "en"},
             {"name": ["Spanish", "Castilian"], "code": "es"}]

        Raises:
            CatalogError: If the file is missing or malformed
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(str(path), str(e)) from e

        if not isinstance(data, list):
            raise CatalogError(str(path), "expected a list of language objects")
        return cls(_parse_entry(str(path), index, item) for index, item in enumerate(data))


def _parse_entry(path: str, index: int, item: Any) -> LanguageEntry:
    if not isinstance(item, dict):
        raise CatalogError(path, f"entry {index} is not an object")

    code = item.get("code")
    if not isinstance(code, str) or not code:
        raise CatalogError(path, f"entry {index} has no code")

    names = item.get("name")
    if isinstance(names, str):
        names = [names]
    if (
        not isinstance(names, list)
        or not names
        or not all(isinstance(n, str) and n for n in names)
    ):
        raise CatalogError(path, f"entry {index} has no valid name")
    return LanguageEntry(names=tuple(names), code=code)


# ISO 639-1 languages, ordered by code.
ISO_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("Afar", "aa"),
    ("Abkhazian", "ab"),
    ("Avestan", "ae"),
    ("Afrikaans", "af"),
    ("Akan", "ak"),
    ("Amharic", "am"),
    ("Aragonese", "an"),
    ("Arabic", "ar"),
    ("Assamese", "as"),
    ("Avaric", "av"),
    ("Aymara", "ay"),
    ("Azerbaijani", "az"),
    ("Bashkir", "ba"),
    ("Belarusian", "be"),
    ("Bulgarian", "bg"),
    ("Bislama", "bi"),
    ("Bambara", "bm"),
    ("Bengali; Bangla", "bn"),
    ("Tibetan", "bo"),
    ("Breton", "br"),
    ("Bosnian", "bs"),
    ("Catalan; Valencian", "ca"),
    ("Chechen", "ce"),
    ("Chamorro", "ch"),
    ("Corsican", "co"),
    ("Cree", "cr"),
    ("Czech", "cs"),
    ("Church Slavic", "cu"),
    ("Chuvash", "cv"),
    ("Welsh", "cy"),
    ("Danish", "da"),
    ("German", "de"),
    ("Divehi; Dhivehi; Maldivian", "dv"),
    ("Dzongkha", "dz"),
    ("Ewe", "ee"),
    ("Greek", "el"),
    ("English", "en"),
    ("Esperanto", "eo"),
    ("Spanish; Castilian", "es"),
    ("Estonian", "et"),
    ("Basque", "eu"),
    ("Persian; Farsi", "fa"),
    ("Fulah", "ff"),
    ("Finnish", "fi"),
    ("Fijian", "fj"),
    ("Faroese", "fo"),
    ("French", "fr"),
    ("Western Frisian", "fy"),
    ("Irish", "ga"),
    ("Gaelic; Scottish Gaelic", "gd"),
    ("Galician", "gl"),
    ("Guarani", "gn"),
    ("Gujarati", "gu"),
    ("Manx", "gv"),
    ("Hausa", "ha"),
    ("Hebrew", "he"),
    ("Hindi", "hi"),
    ("Hiri Motu", "ho"),
    ("Croatian", "hr"),
    ("Haitian; Haitian Creole", "ht"),
    ("Hungarian", "hu"),
    ("Armenian", "hy"),
    ("Herero", "hz"),
    ("Interlingua", "ia"),
    ("Indonesian", "id"),
    ("Interlingue; Occidental", "ie"),
    ("Igbo", "ig"),
    ("Sichuan Yi; Nuosu", "ii"),
    ("Inupiaq", "ik"),
    ("Ido", "io"),
    ("Icelandic", "is"),
    ("Italian", "it"),
    ("Inuktitut", "iu"),
    ("Japanese", "ja"),
    ("Javanese", "jv"),
    ("Georgian", "ka"),
    ("Kongo", "kg"),
    ("Kikuyu; Gikuyu", "ki"),
    ("Kuanyama; Kwanyama", "kj"),
    ("Kazakh", "kk"),
    ("Kalaallisut; Greenlandic", "kl"),
    ("Central Khmer", "km"),
    ("Kannada", "kn"),
    ("Korean", "ko"),
    ("Kanuri", "kr"),
    ("Kashmiri", "ks"),
    ("Kurdish", "ku"),
    ("Komi", "kv"),
    ("Cornish", "kw"),
    ("Kirghiz; Kyrgyz", "ky"),
    ("Latin", "la"),
    ("Luxembourgish; Letzeburgesch", "lb"),
    ("Ganda", "lg"),
    ("Limburgan; Limburger; Limburgish", "li"),
    ("Lingala", "ln"),
    ("Lao", "lo"),
    ("Lithuanian", "lt"),
    ("Luba-Katanga", "lu"),
    ("Latvian", "lv"),
    ("Malagasy", "mg"),
    ("Marshallese", "mh"),
    ("Maori", "mi"),
    ("Macedonian", "mk"),
    ("Malayalam", "ml"),
    ("Mongolian", "mn"),
    ("Marathi", "mr"),
    ("Malay", "ms"),
    ("Maltese", "mt"),
    ("Burmese", "my"),
    ("Nauru", "na"),
    ("Norwegian Bokmål", "nb"),
    ("North Ndebele", "nd"),
    ("Nepali", "ne"),
    ("Ndonga", "ng"),
    ("Dutch; Flemish", "nl"),
    ("Norwegian Nynorsk", "nn"),
    ("Norwegian", "no"),
    ("South Ndebele", "nr"),
    ("Navajo; Navaho", "nv"),
    ("Chichewa; Chewa; Nyanja", "ny"),
    ("Occitan", "oc"),
    ("Ojibwa", "oj"),
    ("Oromo", "om"),
    ("Oriya", "or"),
    ("Ossetian; Ossetic", "os"),
    ("Punjabi; Panjabi", "pa"),
    ("Pali", "pi"),
    ("Polish", "pl"),
    ("Pashto; Pushto", "ps"),
    ("Portuguese", "pt"),
    ("Quechua", "qu"),
    ("Romansh", "rm"),
    ("Rundi", "rn"),
    ("Romanian; Moldavian; Moldovan", "ro"),
    ("Russian", "ru"),
    ("Kinyarwanda", "rw"),
    ("Sanskrit", "sa"),
    ("Sardinian", "sc"),
    ("Sindhi", "sd"),
    ("Northern Sami", "se"),
    ("Sango", "sg"),
    ("Sinhala; Sinhalese", "si"),
    ("Slovak", "sk"),
    ("Slovenian", "sl"),
    ("Samoan", "sm"),
    ("Shona", "sn"),
    ("Somali", "so"),
    ("Albanian", "sq"),
    ("Serbian", "sr"),
    ("Swati", "ss"),
    ("Southern Sotho", "st"),
    ("Sundanese", "su"),
    ("Swedish", "sv"),
    ("Swahili", "sw"),
    ("Tamil", "ta"),
    ("Telugu", "te"),
    ("Tajik", "tg"),
    ("Thai", "th"),
    ("Tigrinya", "ti"),
    ("Turkmen", "tk"),
    ("Tagalog", "tl"),
    ("Tswana", "tn"),
    ("Tonga", "to"),
    ("Turkish", "tr"),
    ("Tsonga", "ts"),
    ("Tatar", "tt"),
    ("Twi", "tw"),
    ("Tahitian", "ty"),
    ("Uighur; Uyghur", "ug"),
    ("Ukrainian", "uk"),
    ("Urdu", "ur"),
    ("Uzbek", "uz"),
    ("Venda", "ve"),
    ("Vietnamese", "vi"),
    ("Volapük", "vo"),
    ("Walloon", "wa"),
    ("Wolof", "wo"),
    ("Xhosa", "xh"),
    ("Yiddish", "yi"),
    ("Yoruba", "yo"),
    ("Zhuang; Chuang", "za"),
    ("Chinese", "zh"),
    ("Zulu", "zu"),
)

DEFAULT_CATALOG = LanguageCatalog.from_pairs(ISO_LANGUAGES)
