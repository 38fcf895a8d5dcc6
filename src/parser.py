""" Split a token stream into pipeline segments. """
from command import Segment
from exceptions import EmptySegment
from lexer import Token, TokenKind, tokenize


def split_segments(tokens) -> list[Segment]:
    """
    Split tokens on | into segments, left to right.

    Each segment keeps its redirection operators for the resolver. A pipe
    with nothing on one side raises EmptySegment. A line with no tokens
    gives no segments.
    """
    segments = []
    current: list[Token] = []
    saw_pipe = False

    for position, tok in enumerate(tokens):
        if tok.kind is TokenKind.END:
            break
        if tok.kind is TokenKind.PIPE:
            if not current:
                raise EmptySegment(position)
            segments.append(Segment(current))
            current = []
            saw_pipe = True
        else:
            current.append(tok)

    if current:
        segments.append(Segment(current))
    elif saw_pipe:
        raise EmptySegment(len(tokens))

    return segments


def parse_line(line: str, strict: bool = True) -> list[Segment]:
    return split_segments(tokenize(line, strict=strict))
