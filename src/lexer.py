""" Lexical analysis for shell commands. """
import enum
from typing import NamedTuple

from constants import (ESCAPE_CHAR, PIPE_TOKEN, QUOTE_CHARS, REDIRECT_INPUT,
                       REDIRECT_OUTPUT, REDIRECT_OUTPUT_APPEND)
from exceptions import UnterminatedQuote


class TokenKind(enum.Enum):
    WORD = "word"
    REDIRECT_IN = REDIRECT_INPUT
    REDIRECT_OUT = REDIRECT_OUTPUT
    REDIRECT_APPEND = REDIRECT_OUTPUT_APPEND
    PIPE = PIPE_TOKEN
    END = "end"


REDIRECT_KINDS = frozenset({
    TokenKind.REDIRECT_IN,
    TokenKind.REDIRECT_OUT,
    TokenKind.REDIRECT_APPEND,
})

# single-character operators; ">>" is matched before these
_OPERATORS = {
    REDIRECT_INPUT: TokenKind.REDIRECT_IN,
    REDIRECT_OUTPUT: TokenKind.REDIRECT_OUT,
    PIPE_TOKEN: TokenKind.PIPE,
}


class Token(NamedTuple):
    kind: TokenKind
    text: str

    @property
    def is_redirect(self) -> bool:
        return self.kind in REDIRECT_KINDS


END_TOKEN = Token(TokenKind.END, "")


def word(text: str) -> Token:
    return Token(TokenKind.WORD, text)


def _flush_word(tokens: list[Token], line: str, start: int, end: int):
    if end > start:
        tokens.append(word(line[start:end]))


def tokenize(line: str, strict: bool = True) -> tuple[Token, ...]:
    """
    Split a command line into words and the operators <, >, >> and |.

    Text between matching single or double quotes becomes one WORD, even when
    empty or when it holds spaces or operator characters. A quote preceded by
    a backslash is literal. Backslashes are kept as typed.

    An unterminated quote raises UnterminatedQuote. With strict=False the
    text after the opening quote is kept as a final WORD instead.

    The result always ends with END_TOKEN.
    """
    tokens = []
    quote = None
    start = 0
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]

        if ch in QUOTE_CHARS and (i == 0 or line[i - 1] != ESCAPE_CHAR):
            if quote is None:
                _flush_word(tokens, line, start, i)
                quote = ch
                start = i + 1
            elif ch == quote:
                tokens.append(word(line[start:i]))
                quote = None
                start = i + 1
            i += 1
            continue

        if quote is not None:
            i += 1
            continue

        if line.startswith(REDIRECT_OUTPUT_APPEND, i):
            _flush_word(tokens, line, start, i)
            tokens.append(Token(TokenKind.REDIRECT_APPEND, REDIRECT_OUTPUT_APPEND))
            i += len(REDIRECT_OUTPUT_APPEND)
            start = i
            continue

        kind = _OPERATORS.get(ch)
        if kind is not None:
            _flush_word(tokens, line, start, i)
            tokens.append(Token(kind, ch))
            i += 1
            start = i
            continue

        if ch.isspace():
            _flush_word(tokens, line, start, i)
            start = i + 1

        i += 1

    if quote is not None and strict:
        raise UnterminatedQuote(quote)
    _flush_word(tokens, line, start, n)

    tokens.append(END_TOKEN)
    return tuple(tokens)
