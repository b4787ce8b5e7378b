"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from meowdict.feat import Queries


@pytest.fixture
def moedict_response():
    """Raw moedict text for 字典, with emphasis markers still in it."""
    return """{
  "h": [
    {
      "b": "ㄗˋ ㄉㄧㄢˇ",
      "p": "zì diǎn",
      "d": [
        {"type": "名", "f": "`收集~`文字~，加以解釋的工具書。", "q": ["「字典」"], "e": ["如：康熙字典"]},
        {"type": "名", "f": "比喻學識豐富的人。"}
      ]
    }
  ],
  "t": "字典",
  "translation": {
    "English": ["dictionary", "character dictionary"],
    "francais": ["dictionnaire"]
  }
}"""


class RecordingQueries(Queries):
    """Records every query call instead of touching the network."""

    def __init__(self, color=False):
        super().__init__(color=color)
        self.calls = []

    def dictionary(self, words, result_t2s):
        self.calls.append(("dictionary", list(words), result_t2s))

    def translation(self, words, result_t2s):
        self.calls.append(("translation", list(words), result_t2s))

    def jyutping(self, words, result_t2s):
        self.calls.append(("jyutping", list(words), result_t2s))


@pytest.fixture
def queries():
    return RecordingQueries()


@pytest.fixture
def fake_convert():
    """Tag converted words so tests can see conversion happened."""

    def convert(text, mode):
        return f"{mode.value}:{text}"

    return convert
