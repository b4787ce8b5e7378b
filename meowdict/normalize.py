"""
Reshape a raw moedict response into DictionaryLookupResult.

Raw shape (fields are all optional and may have the wrong type):
{
  "h": [
    {
      "p": "zì diǎn",
      "b": "ㄗˋ ㄉㄧㄢˇ",
      "d": [
        {"type": "名", "f": "...", "q": ["..."], "e": ["..."], "l": ["..."]}
      ]
    }
  ],
  "translation": {"English": ["dictionary", "..."], "francais": ["..."]}
}

Each field is extracted on its own. A field with the wrong shape becomes None
and its siblings are still filled in.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .models import DictionaryEntry, DictionaryLookupResult

logger = logging.getLogger(__name__)

# mutable form built while walking the raw "d" array
RawDefinitions = Dict[str, List[List[str]]]

NO_TYPE = "notype"
EXTRA_KEYS = ("q", "e", "l")  # quotations, examples, links
MARKERS = ("~", "`")


def strip_markers(text: str) -> str:
    """Drop the service's emphasis markers (tilde and backtick)."""
    for marker in MARKERS:
        text = text.replace(marker, "")
    return text


def get_object(value: Any, key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    if key is not None:
        value = value.get(key) if isinstance(value, dict) else None
    return value if isinstance(value, dict) else None


def get_array(value: Any, key: Optional[str] = None) -> Optional[List[Any]]:
    if key is not None:
        value = value.get(key) if isinstance(value, dict) else None
    return value if isinstance(value, list) else None


def get_str(value: Any, key: Optional[str] = None) -> Optional[str]:
    if key is not None:
        value = value.get(key) if isinstance(value, dict) else None
    return value if isinstance(value, str) else None


def get_definitions(sense: Any) -> Optional[RawDefinitions]:
    items = get_array(sense, "d")
    if items is None:
        return None

    definitions: RawDefinitions = {}
    for item in items:
        tag = get_str(item, "type")
        if tag is None:
            tag = NO_TYPE
        # one group per raw item, even when the item carries no text
        group: List[str] = []
        definitions.setdefault(tag, []).append(group)

        text = get_str(item, "f")
        if text is not None:
            group.append(text)

        for key in EXTRA_KEYS:
            extras = get_array(item, key)
            if extras is None:
                continue
            group.extend(x for x in extras if isinstance(x, str))

    return definitions


def get_translations(raw: Any) -> Optional[Dict[str, List[str]]]:
    translation = get_object(raw, "translation")
    if translation is None:
        return None

    out: Dict[str, List[str]] = {}
    for lang, values in translation.items():
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            logger.debug("Dropping translations: %r is not a list of strings", lang)
            return None
        out[lang] = list(values)
    return out


def normalize_entry(sense: Any) -> DictionaryEntry:
    return DictionaryEntry(
        pinyin=get_str(sense, "p"),
        bopomofo=get_str(sense, "b"),
        definitions=get_definitions(sense),
    )


def normalize(raw: Dict[str, Any]) -> DictionaryLookupResult:
    senses = get_array(raw, "h")
    if senses is None:
        logger.debug("Response has no 'h' array; returning no entries")
        senses = []

    return DictionaryLookupResult(
        entries=[normalize_entry(s) for s in senses],
        translations=get_translations(raw),
    )
