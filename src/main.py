#!/usr/bin/env python3
"""
Run minishell interactively.

Reads one line at a time from standard input, runs it and prompts again
until `exit` or end of input.
"""
import argparse
import logging
import os
import sys

from constants import DEFAULT_PROMPT
from shell import Shell

PROMPT_ENV = "MINISHELL_PROMPT"
DEBUG_ENV = "MINISHELL_DEBUG"


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="A small shell with I/O redirection and pipes"
    )
    parser.add_argument(
        "--prompt",
        default=os.environ.get(PROMPT_ENV, DEFAULT_PROMPT),
        help=f"Prompt printed before each line (default: ${PROMPT_ENV} or {DEFAULT_PROMPT!r})"
    )
    parser.add_argument(
        "--lenient-quotes",
        action="store_true",
        help="Keep the text of an unterminated quote instead of rejecting the line"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=os.environ.get(DEBUG_ENV, "") not in ("", "0"),
        help=f"Log forks, pipes and reaps to stderr (also ${DEBUG_ENV}=1)"
    )
    return parser


def configure_logging(debug: bool):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s[%(process)d] %(levelname)s: %(message)s",
    )


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.debug)

    sh = Shell(prompt=args.prompt, strict_quotes=not args.lenient_quotes)
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
