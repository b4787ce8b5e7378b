"""
Interactive console.

Each line is split into flags (tokens starting with "-") and search words.
Per-command flags:
  -i, --input-s2t       convert the search words simplified -> traditional
  -r, --result-t2s      convert the results traditional -> simplified
  -t, --translation     show translations instead of definitions
  -j, --jyutping        show Cantonese jyutping instead of definitions

Session flags (stay in effect until unset):
  --set-mode-input-s2t / --unset-mode-input-s2t
  --set-mode-result-t2s / --unset-mode-result-t2s
  --unset-mode-all
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from . import config
from .convert import ConvertMode, convert
from .errors import InvalidArgumentError, MeowdictError
from .feat import Queries

logger = logging.getLogger(__name__)

Converter = Callable[[str, ConvertMode], str]

# flag -> name of the per-command switch it turns on
COMMAND_FLAGS = {
    "--input-s2t": "input_s2t",
    "-i": "input_s2t",
    "--result-t2s": "result_t2s",
    "-r": "result_t2s",
    "--translation": "translation",
    "-t": "translation",
    "--jyutping": "jyutping",
    "-j": "jyutping",
}

# flag -> [(mode, enable), ...]
SESSION_FLAGS = {
    "--set-mode-input-s2t": [(ConvertMode.S2T, True)],
    "--set-mode-result-t2s": [(ConvertMode.T2S, True)],
    "--unset-mode-input-s2t": [(ConvertMode.S2T, False)],
    "--unset-mode-result-t2s": [(ConvertMode.T2S, False)],
    "--unset-mode-all": [(ConvertMode.S2T, False), (ConvertMode.T2S, False)],
}


@dataclass
class SessionState:
    input_conversion_enabled: bool = False
    result_conversion_enabled: bool = False

    def set_mode(self, mode: ConvertMode, enable: bool) -> None:
        verb = "Setting" if enable else "Unsetting"
        if mode is ConvertMode.S2T:
            print(f"{verb} input mode...")
            self.input_conversion_enabled = enable
        else:
            print(f"{verb} result mode...")
            self.result_conversion_enabled = enable


def split_arguments(tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
    flags = [t for t in tokens if t.startswith("-")]
    words = [t for t in tokens if not t.startswith("-")]
    return flags, words


def run_command(
    tokens: Sequence[str],
    session: SessionState,
    *,
    queries: Optional[Queries] = None,
    converter: Optional[Converter] = None,
) -> None:
    """
    Apply one command line to session and run the selected query.

    Raises InvalidArgumentError on the first unknown flag; nothing from that
    command is applied and no words are looked up.
    """
    queries = queries or Queries()
    converter = converter or convert
    flags, words = split_arguments(tokens)

    switches = {"input_s2t": False, "result_t2s": False, "translation": False, "jyutping": False}
    pending: List[Tuple[ConvertMode, bool]] = []
    for flag in flags:
        if flag in COMMAND_FLAGS:
            switches[COMMAND_FLAGS[flag]] = True
        elif flag in SESSION_FLAGS:
            pending.extend(SESSION_FLAGS[flag])
        else:
            raise InvalidArgumentError(flag)

    for mode, enable in pending:
        session.set_mode(mode, enable)

    if not words:
        return

    if session.input_conversion_enabled or switches["input_s2t"]:
        words = [converter(w, ConvertMode.S2T) for w in words]
    result_t2s = session.result_conversion_enabled or switches["result_t2s"]

    logger.debug("Query words=%s result_t2s=%s switches=%s", words, result_t2s, switches)
    if switches["translation"]:
        queries.translation(words, result_t2s)
    elif switches["jyutping"]:
        queries.jyutping(words, result_t2s)
    else:
        queries.dictionary(words, result_t2s)


class MeowdictConsole:
    def __init__(
        self,
        session: Optional[SessionState] = None,
        queries: Optional[Queries] = None,
        prompt: str = config.PROMPT,
    ):
        self.session = session or SessionState()
        self.queries = queries or Queries()
        self.prompt = prompt

    def handle_line(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        try:
            run_command(tokens, self.session, queries=self.queries)
        except MeowdictError as e:
            print(e)

    def create_console(self) -> None:
        reader: PromptSession = PromptSession(history=InMemoryHistory())
        while True:
            try:
                line = reader.prompt(self.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            self.handle_line(line.strip())
