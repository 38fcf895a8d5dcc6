""" Implement the core of the shell. """
import sys

from constants import DEFAULT_PROMPT, SHELL_NAME
from exceptions import ShellError
from parser import parse_line
from pipeline import execute
from shell_builtins import BUILTINS


def read_command(prompt=DEFAULT_PROMPT):
    """ Read one line, without its newline. Raises EOFError at end of input. """
    return input(prompt)


class Shell:
    def __init__(self, prompt=DEFAULT_PROMPT, builtins=BUILTINS, strict_quotes=True):
        self.prompt = prompt
        self.builtins = builtins
        self.strict_quotes = strict_quotes
        self.last_status = 0

    def run_line(self, line: str) -> int:
        """ Parse and run one line; return the continuation signal. """
        segments = parse_line(line, strict=self.strict_quotes)
        result = execute(segments, self.builtins)
        if result.status is not None:
            self.last_status = result.status
        return result.proceed

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
                if not self.run_line(line):
                    return 0

            except ShellError as e:
                print(f"{SHELL_NAME}: {e}", file=sys.stderr)

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
