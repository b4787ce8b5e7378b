from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Mapping, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


# tag -> groups; each group is (definition, quote/example/link, ...)
Definitions = Mapping[str, Tuple[Tuple[str, ...], ...]]
Translations = Mapping[str, Tuple[str, ...]]  # lang code -> strings, service order


def _freeze(value: Optional[Mapping]) -> Optional[Mapping]:
    return None if value is None else MappingProxyType(dict(value))


class DictionaryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    pinyin: Optional[str] = None
    bopomofo: Optional[str] = None
    definitions: Optional[Definitions] = None

    @field_validator("definitions")
    @classmethod
    def freeze_definitions(cls, value):
        return _freeze(value)


class DictionaryLookupResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: Tuple[DictionaryEntry, ...] = ()
    translations: Optional[Translations] = None

    @field_validator("translations")
    @classmethod
    def freeze_translations(cls, value):
        return _freeze(value)


class JyutpingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    segments: Tuple[Tuple[str, Optional[str]], ...]
