""" Execute a single shell command in a child process. """
import contextlib
import logging
import os
import signal
import sys
import traceback

from command import ExecResult, Segment
from constants import (EXIT_FAILURE, EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND,
                       EXIT_SUCCESS, SHELL_NAME, STDIN_FILENO, STDOUT_FILENO)
from exceptions import (ExecFailed, ForkFailed, ProgramNotFound, ShellError,
                        WaitFailed)
from redirection import rebind, resolve
from shell_builtins import BUILTINS

logger = logging.getLogger(__name__)


def report(error):
    print(f"{SHELL_NAME}: {error}", file=sys.stderr)


def flush_std_streams():
    """ Flush Python-level buffers so a fork does not duplicate them. """
    for stream in (sys.stdout, sys.stderr):
        # a reader may already be gone (broken pipe) or the stream closed
        with contextlib.suppress(OSError, ValueError):
            stream.flush()


def exec_program(argv):
    """ Replace this process with argv[0], searched for on PATH. """
    flush_std_streams()
    try:
        os.execvp(argv[0], argv)
    except FileNotFoundError as e:
        raise ProgramNotFound(argv[0]) from e
    except OSError as e:
        raise ExecFailed(argv[0], e) from e


def run_in_child(segment: Segment, builtins) -> int:
    """
    Resolve redirections, then run a builtin or exec a program.

    Returns an exit status only for builtins and redirection-only
    segments; a successful exec never returns.
    """
    resolve(segment)
    argv = segment.argv
    if not argv:
        return EXIT_SUCCESS

    handler = builtins.get(argv[0])
    if handler is not None:
        # sys.stdout may not wrap fd 1 (it can be replaced); print where fd 1 now points
        sys.stdout = open(STDOUT_FILENO, "w", closefd=False)
        return EXIT_SUCCESS if handler(argv) else EXIT_FAILURE

    exec_program(argv)
    return EXIT_FAILURE


def restore_signals():
    """ Put back the default actions Python ignores at startup; ignored signals survive exec. """
    for name in ("SIGPIPE", "SIGXFSZ"):
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, signal.SIG_DFL)


def _child_main(segment, builtins, stdin_fd, stdout_fd, close_fds):
    status = EXIT_FAILURE
    try:
        restore_signals()
        for fd in close_fds:
            os.close(fd)
        # pipe ends first, so a redirection in the segment overrides them
        if stdin_fd is not None:
            rebind(stdin_fd, STDIN_FILENO)
        if stdout_fd is not None:
            rebind(stdout_fd, STDOUT_FILENO)
        status = run_in_child(segment, builtins)
    except ProgramNotFound as e:
        report(e)
        status = EXIT_NOT_FOUND
    except ExecFailed as e:
        report(e)
        status = EXIT_NOT_EXECUTABLE
    except ShellError as e:
        report(e)
    except Exception:
        traceback.print_exc()
    finally:
        flush_std_streams()
        os._exit(status)


def spawn(segment: Segment, builtins=BUILTINS, stdin_fd=None, stdout_fd=None, close_fds=()) -> int:
    """
    Fork a child that runs segment and return its pid.

    In the child, stdin_fd and stdout_fd (pipe ends) are bound to fd 0 and
    fd 1 and every fd in close_fds is closed. The child never returns from
    this call.
    """
    flush_std_streams()
    try:
        pid = os.fork()
    except OSError as e:
        raise ForkFailed(e) from e

    if pid == 0:
        _child_main(segment, builtins, stdin_fd, stdout_fd, close_fds)

    logger.debug("forked pid %d for %r", pid, segment)
    return pid


def wait_for(pid: int) -> int:
    """
    Reap pid and return its exit status.

    Stop notifications are ignored and the wait repeated. A child killed
    by a signal reports 128 + the signal number.
    """
    while True:
        try:
            _, status = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # the child got the same SIGINT; it still has to be reaped
            continue
        except OSError as e:
            raise WaitFailed(pid, e) from e

        if os.WIFEXITED(status):
            code = os.WEXITSTATUS(status)
            break
        if os.WIFSIGNALED(status):
            code = 128 + os.WTERMSIG(status)
            break

    logger.debug("reaped pid %d with status %d", pid, code)
    return code


def run_segment(segment: Segment, builtins=BUILTINS) -> ExecResult:
    """
    Run one command with no pipes.

    A builtin without redirection runs in this process and its return
    value becomes the continuation signal. Anything else runs in a forked
    child, which keeps redirections out of the shell's own descriptors.
    """
    argv = segment.argv
    if not argv and not segment.has_redirection:
        return ExecResult()

    handler = builtins.get(argv[0]) if argv else None
    if handler is not None and not segment.has_redirection:
        return ExecResult(proceed=handler(argv))

    pid = spawn(segment, builtins)
    return ExecResult(status=wait_for(pid))
