"""
meowdict CLI.

Usage:
    meowdict 字典 辭典
    meowdict -i -r 汉字
    meowdict -t 貓
    meowdict -j 廣東話
    meowdict --console
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from . import __version__, config
from .console import MeowdictConsole, SessionState, run_command
from .errors import InvalidArgumentError
from .feat import Queries

logger = logging.getLogger(__name__)


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meowdict",
        description="Look up words in the moedict.tw dictionary.",
    )
    parser.add_argument("words", nargs="*", help="Words to look up.")
    parser.add_argument(
        "-c",
        "--console",
        action="store_true",
        help="Start the interactive console.",
    )
    parser.add_argument(
        "-i",
        "--input-s2t",
        action="store_true",
        help="Convert the search words from simplified to traditional Chinese.",
    )
    parser.add_argument(
        "-r",
        "--result-t2s",
        action="store_true",
        help="Convert the results from traditional to simplified Chinese.",
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-t",
        "--translation",
        action="store_true",
        help="Show translations instead of definitions.",
    )
    mode_group.add_argument(
        "-j",
        "--jyutping",
        action="store_true",
        help="Show Cantonese jyutping instead of definitions.",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print results without terminal colors (colors are also off when stdout is not a terminal).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: MEOWDICT_LOG_LEVEL or WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _to_tokens(args: argparse.Namespace) -> List[str]:
    """Turn parsed options back into console tokens so both paths share one dispatcher."""
    tokens: List[str] = []
    if args.input_s2t:
        tokens.append("--input-s2t")
    if args.result_t2s:
        tokens.append("--result-t2s")
    if args.translation:
        tokens.append("--translation")
    if args.jyutping:
        tokens.append("--jyutping")
    return tokens + list(args.words)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    level = logging.getLevelName(args.log_level) if args.log_level else config.LOG_LEVEL
    configure_logging(level)

    lookup_flags = args.input_s2t or args.result_t2s or args.translation or args.jyutping
    if lookup_flags and not args.words:
        parser.error("-i/-r/-t/-j need at least one word; use --console for the interactive console")

    queries = Queries(color=not args.no_color and sys.stdout.isatty())
    if args.console or not args.words:
        MeowdictConsole(queries=queries).create_console()
        return 0

    try:
        run_command(_to_tokens(args), SessionState(), queries=queries)
    except InvalidArgumentError as e:
        print(e, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
