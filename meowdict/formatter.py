"""Terminal rendering of lookup results."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from termcolor import colored

from .convert import ConvertMode, convert
from .models import DictionaryLookupResult, JyutpingResult

INDENT = "    "

# part of output -> (color, attrs)
COLORS: Dict[str, Tuple[str, Optional[Sequence[str]]]] = {
    "headword": ("cyan", ["bold"]),
    "reading": ("yellow", None),
    "tag": ("green", None),
}


def _identity(s: str) -> str:
    return s


def _t2s(s: str) -> str:
    return convert(s, ConvertMode.T2S)


def _output_converter(result_t2s: bool) -> Callable[[str], str]:
    return _t2s if result_t2s else _identity


def paint(text: str, part: str, color: bool) -> str:
    if not color:
        return text
    fg, attrs = COLORS[part]
    return colored(text, fg, attrs=attrs, force_color=True)


def format_dict_result(
    word: str, result: DictionaryLookupResult, result_t2s: bool = False, color: bool = False
) -> str:
    c = _output_converter(result_t2s)
    lines: List[str] = [paint(c(word), "headword", color)]

    if not result.entries:
        lines.append(f"{INDENT}(no entries)")

    for i, entry in enumerate(result.entries, start=1):
        reading = " / ".join(x for x in (entry.pinyin, entry.bopomofo) if x)
        lines.append(f"{i}. {paint(reading, 'reading', color)}" if reading else f"{i}.")
        if not entry.definitions:
            continue
        for tag, groups in entry.definitions.items():
            lines.append(f"{INDENT}{paint(f'[{c(tag)}]', 'tag', color)}")
            for n, group in enumerate(groups, start=1):
                if not group:
                    continue
                lines.append(f"{INDENT}{n}. {c(group[0])}")
                for extra in group[1:]:
                    lines.append(f"{INDENT * 2}{c(extra)}")

    return "\n".join(lines)


def format_translation_result(
    word: str, result: DictionaryLookupResult, result_t2s: bool = False, color: bool = False
) -> str:
    c = _output_converter(result_t2s)
    headword = paint(c(word), "headword", color)
    if not result.translations:
        return f"{headword}: no translation found"

    lines = [headword]
    for lang, values in result.translations.items():
        lines.append(f"{INDENT}{paint(lang, 'tag', color)}: {', '.join(c(v) for v in values)}")
    return "\n".join(lines)


def format_jyutping_result(result: JyutpingResult, result_t2s: bool = False, color: bool = False) -> str:
    c = _output_converter(result_t2s)
    parts = [
        f"{c(chars)}({paint(jp, 'reading', color)})" if jp else c(chars)
        for chars, jp in result.segments
    ]
    return f"{paint(c(result.word), 'headword', color)}: {' '.join(parts)}"
