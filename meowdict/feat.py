"""
Query paths: look up every word of a command and print the results.

Words are looked up concurrently, but printed in the order they were typed.
A failure for one word is printed on its own line and the rest still run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, TypeVar, Union

from . import config
from .api import get_result
from .errors import MeowdictError
from .formatter import format_dict_result, format_jyutping_result, format_translation_result
from .jyutping import get_jyutping

logger = logging.getLogger(__name__)

T = TypeVar("T")


def lookup_all(words: Sequence[str], fetch: Callable[[str], T]) -> List[Union[T, MeowdictError]]:
    """Run fetch for every word; the i-th outcome belongs to words[i]."""

    def one(word: str) -> Union[T, MeowdictError]:
        try:
            return fetch(word)
        except MeowdictError as e:
            return e

    if len(words) <= 1:
        return [one(w) for w in words]
    with ThreadPoolExecutor(max_workers=min(config.MAX_WORKERS, len(words))) as pool:
        return list(pool.map(one, words))


def search_word_to_dict_result(words: List[str], result_t2s: bool, color: bool = False) -> None:
    for word, outcome in zip(words, lookup_all(words, get_result)):
        if isinstance(outcome, MeowdictError):
            print(outcome)
            continue
        print(format_dict_result(word, outcome, result_t2s, color=color))


def search_word_to_translation_result(words: List[str], result_t2s: bool, color: bool = False) -> None:
    for word, outcome in zip(words, lookup_all(words, get_result)):
        if isinstance(outcome, MeowdictError):
            print(outcome)
            continue
        print(format_translation_result(word, outcome, result_t2s, color=color))


def search_word_to_jyutping_result(words: List[str], result_t2s: bool, color: bool = False) -> None:
    for outcome in lookup_all(words, get_jyutping):
        if isinstance(outcome, MeowdictError):
            print(outcome)
            continue
        print(format_jyutping_result(outcome, result_t2s, color=color))


class Queries:
    """The three query paths, bound to one output setting."""

    def __init__(self, color: bool = False):
        self.color = color

    def dictionary(self, words: List[str], result_t2s: bool) -> None:
        search_word_to_dict_result(words, result_t2s, color=self.color)

    def translation(self, words: List[str], result_t2s: bool) -> None:
        search_word_to_translation_result(words, result_t2s, color=self.color)

    def jyutping(self, words: List[str], result_t2s: bool) -> None:
        search_word_to_jyutping_result(words, result_t2s, color=self.color)
