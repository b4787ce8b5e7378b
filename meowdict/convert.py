from __future__ import annotations

from enum import Enum
from functools import lru_cache

from opencc import OpenCC


class ConvertMode(str, Enum):
    S2T = "s2t"  # simplified -> traditional
    T2S = "t2s"  # traditional -> simplified


@lru_cache(maxsize=None)
def _converter(mode: ConvertMode) -> OpenCC:
    return OpenCC(mode.value)


def convert(text: str, mode: ConvertMode) -> str:
    if not text:
        return text
    return _converter(mode).convert(text)
