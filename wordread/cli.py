"""Read two files into words and write what was found into the HTML log."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from wordread.colors import LogColor
from wordread.htmllog import DEFAULT_LOG_PATH, HtmlLog
from wordread.htmlstyle import DEFAULT_BACKGROUND_IMAGE
from wordread.words import Word, WordConversionError, read_words


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordread",
        description="Split files into words and log them, with positions, as HTML.",
    )
    parser.add_argument(
        "numbers", nargs="?", default="tests/test1.txt",
        help="file whose words are read as numbers",
    )
    parser.add_argument(
        "words", nargs="?", default="tests/test2.txt",
        help="file whose words are logged as text",
    )
    parser.add_argument("--log", default=DEFAULT_LOG_PATH, help="HTML log file to write")
    parser.add_argument(
        "--background", default=DEFAULT_BACKGROUND_IMAGE,
        help="background image of the log page",
    )
    return parser.parse_args(argv)


def _load(path: str) -> List[Word]:
    try:
        return read_words(path)
    except OSError:
        print(f"failed open '{path}'.", file=sys.stderr)
        return []


def _log_entry(log: HtmlLog, index: int, body: str) -> None:
    log.log(LogColor.YELLOW, f"word[{index}] = \n{{")
    log.log(LogColor.GREEN, body)
    log.log(LogColor.YELLOW, "}\n\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = _parse_args(argv)
    print("Start")

    try:
        with HtmlLog(args.log, args.background) as log:
            numbers = _load(args.numbers)
            log.log(LogColor.RED, "First Test Result\n\n")
            log.log(LogColor.BLUE, f"size = '{len(numbers)}'\n")
            for index, word in enumerate(numbers):
                value = word.to_double()
                _log_entry(
                    log,
                    index,
                    f"\tint word = '{value:f}'\n\tlen = {len(word)}\n"
                    f"\t{args.numbers}:{word.line}:{word.column}\n",
                )

            for _ in range(3):
                log.log(LogColor.WHITE, "\n")

            words = _load(args.words)
            log.log(LogColor.RED, "Second Test Result\n\n")
            log.log(LogColor.BLUE, f"size = '{len(words)}'\n")
            for index, word in enumerate(words):
                _log_entry(
                    log,
                    index,
                    f"\tword = '{word.text}'\n\tlen = {len(word)}\n"
                    f"\t{args.words}:{word.line}:{word.column}\n",
                )
    except WordConversionError as error:
        print(error, file=sys.stderr)
        return 1

    print("\nEnd")
    return 0


if __name__ == "__main__":
    sys.exit(main())