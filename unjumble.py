"""Command-line entry point: list dictionary words buildable from a jumble of letters."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from models import ErrorCode, UnjumbleError
from solver import Unjumbler
from utils import MSG_USAGE, build_options, default_dictionary_path, load_config, setup_logging

logger = logging.getLogger(__name__)


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UnjumbleError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        logger.info("Rejected arguments: %s", message)
        raise UnjumbleError(ErrorCode.PARAMS, MSG_USAGE)

    def parse_args(self, args=None, namespace=None):  # type: ignore[override]
        args = sys.argv[1:] if args is None else list(args)
        self._check_options_lead(args)
        return super().parse_args(args, namespace)

    def _check_options_lead(self, args: list[str]) -> None:
        """Options must all come before the letters."""
        expect_value = False
        seen_positional = False
        for arg in args:
            if expect_value:
                expect_value = False
            elif arg.startswith("-"):
                if seen_positional:
                    self.error(f"option {arg} after letters")
                expect_value = arg == "-include"
            else:
                seen_positional = True


class StoreOnce(argparse.Action):
    """Store an option value, rejecting a second option with the same dest."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            parser.error(f"{option_string} repeats an earlier option")
        setattr(namespace, self.dest, self.const if self.nargs == 0 else values)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog="unjumble",
        usage=MSG_USAGE[len("Usage: "):],
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument("-alpha", dest="sort", action=StoreOnce, nargs=0, const="alphabetical",
                        help="sort matches alphabetically")
    parser.add_argument("-len", dest="sort", action=StoreOnce, nargs=0, const="by-length",
                        help="sort matches longest first")
    parser.add_argument("-longest", dest="sort", action=StoreOnce, nargs=0, const="longest",
                        help="only print the longest matches")
    parser.add_argument("-include", action=StoreOnce, metavar="letter",
                        help="only print words containing this letter")
    parser.add_argument("letters", help="letters available to build words from")
    parser.add_argument("dictionary", nargs="?", help="word list, one word per line")
    return parser


def run(argv: Sequence[str] | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Run the tool and return its exit code."""
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    try:
        args = build_parser().parse_args(argv)
        options = build_options(args.sort, args.include)
        unjumbler = Unjumbler(args.letters)
    except UnjumbleError as exc:
        if exc.message:
            print(exc.message, file=err)
        return int(exc.code)

    dictionary = args.dictionary or default_dictionary_path(load_config())
    try:
        report = unjumbler.run_file(dictionary, options)
    except OSError:
        logger.exception("Failed reading dictionary %s", dictionary)
        print(f'unjumble: file "{dictionary}" can not be opened', file=err)
        return int(ErrorCode.INVALID_FILE)

    for line in report.lines:
        out.write(line + "\n")

    if report.no_matches:
        return int(ErrorCode.NO_MATCHES)
    return int(ErrorCode.OK)


def main() -> None:
    setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
