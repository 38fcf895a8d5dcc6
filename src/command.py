""" Command to be executed. """
from lexer import Token, TokenKind


class Segment:
    """ One command of a pipeline: its words plus any redirections. """
    def __init__(self, tokens):
        self.tokens: list[Token] = list(tokens)

    @property
    def argv(self) -> list[str]:
        """ Command words, leaving out redirection operators and their filenames. """
        args = []
        skip_next = False
        for tok in self.tokens:
            if skip_next:
                skip_next = False
            elif tok.is_redirect:
                skip_next = True
            else:
                args.append(tok.text)
        return args

    @property
    def name(self):
        args = self.argv
        return args[0] if args else None

    @property
    def has_redirection(self) -> bool:
        return any(tok.is_redirect for tok in self.tokens)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.tokens == other.tokens

    def __repr__(self):
        return f"Segment({' '.join(tok.text for tok in self.tokens)!r})"


class Redirection:
    """ Bind fd 0 or fd 1 to a named file. """
    def __init__(self, direction: TokenKind, filename: str):
        self.direction = direction
        self.filename = filename

    @property
    def is_input(self) -> bool:
        return self.direction is TokenKind.REDIRECT_IN

    @property
    def append(self) -> bool:
        return self.direction is TokenKind.REDIRECT_APPEND

    def __eq__(self, other):
        if not isinstance(other, Redirection):
            return NotImplemented
        return (self.direction, self.filename) == (other.direction, other.filename)

    def __repr__(self):
        return f"Redirection({self.direction.value!r}, {self.filename!r})"


class ExecResult:
    """
    Outcome of running a line.

    proceed is the continuation signal: non-zero keeps the shell reading
    lines, zero ends it. status is the exit status of the last process
    reaped, or None when nothing was forked.
    """
    def __init__(self, proceed=1, status=None):
        self.proceed = proceed
        self.status = status

    def __repr__(self):
        return f"ExecResult(proceed={self.proceed}, status={self.status})"
