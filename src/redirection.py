""" Resolve < > >> redirections inside a forked child. """
import os

from command import Redirection, Segment
from constants import CREATE_MODE, STDIN_FILENO, STDOUT_FILENO
from exceptions import DescriptorRebindFailed, MissingFilename, OpenFailed
from lexer import TokenKind

_OPEN_FLAGS = {
    TokenKind.REDIRECT_IN: os.O_RDONLY,
    TokenKind.REDIRECT_OUT: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    TokenKind.REDIRECT_APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


def extract_redirections(tokens):
    """
    Separate command words from redirection directives.

    Returns (words, directives), both in their original order. Raises
    MissingFilename when an operator is not followed by a word.
    """
    words = []
    directives = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind is TokenKind.END:
            break
        if tok.is_redirect:
            target = tokens[i + 1] if i + 1 < len(tokens) else None
            if target is None or target.kind is not TokenKind.WORD:
                raise MissingFilename(tok.text)
            directives.append(Redirection(tok.kind, target.text))
            i += 2
            continue
        words.append(tok)
        i += 1
    return words, directives


def open_redirection(directive: Redirection) -> int:
    try:
        return os.open(directive.filename, _OPEN_FLAGS[directive.direction], CREATE_MODE)
    except OSError as e:
        raise OpenFailed(directive.filename, e) from e


def rebind(fd: int, target_fd: int):
    """ Make target_fd refer to fd's open file, then close fd. """
    try:
        os.dup2(fd, target_fd)
    except OSError as e:
        raise DescriptorRebindFailed(target_fd, e) from e
    finally:
        if fd != target_fd:
            os.close(fd)


def resolve(segment: Segment):
    """
    Apply the segment's redirections to this process's fd 0 and fd 1.

    Directives are applied left to right, so the last one per direction
    wins; earlier output files are still created. Operators and filenames
    are removed from the segment. Only call this in a forked child.
    """
    words, directives = extract_redirections(segment.tokens)
    for directive in directives:
        fd = open_redirection(directive)
        rebind(fd, STDIN_FILENO if directive.is_input else STDOUT_FILENO)
    segment.tokens = words
