""" Connect the segments of a pipeline and run them together. """
import logging
import os

from command import ExecResult
from exceptions import PipeCreateFailed, WaitFailed
from runner import run_segment, spawn, wait_for
from shell_builtins import BUILTINS

logger = logging.getLogger(__name__)


def _close_if_open(fd):
    if fd is not None:
        os.close(fd)


def _reap_all(pids):
    """ Wait for every pid, even after one wait fails; re-raise the first failure. """
    statuses = []
    failure = None
    for pid in pids:
        try:
            statuses.append(wait_for(pid))
        except WaitFailed as e:
            if failure is None:
                failure = e
    if failure is not None:
        raise failure
    return statuses


def run_pipeline(segments, builtins=BUILTINS) -> ExecResult:
    """
    Run two or more segments with each one's stdout piped to the next one's stdin.

    All children are forked left to right and run concurrently. The shell
    closes each pipe end as soon as the child that needs it is forked, so
    readers see end-of-stream when their writer exits. Every child is then
    reaped exactly once, left to right. The pipeline's status is that of
    its last segment.

    If a pipe or fork fails part way, the children already started are
    still reaped before the error propagates.
    """
    if len(segments) < 2:
        raise ValueError("a pipeline needs at least two segments")

    pids = []
    read_end = None
    next_read = write_end = None
    try:
        last = len(segments) - 1
        for index, segment in enumerate(segments):
            next_read = write_end = None
            if index < last:
                try:
                    next_read, write_end = os.pipe()
                except OSError as e:
                    raise PipeCreateFailed(e) from e
                logger.debug("pipe %d -> %d between segments %d and %d",
                             write_end, next_read, index, index + 1)

            close_in_child = (next_read,) if next_read is not None else ()
            pids.append(spawn(segment, builtins,
                              stdin_fd=read_end, stdout_fd=write_end,
                              close_fds=close_in_child))

            _close_if_open(read_end)
            _close_if_open(write_end)
            read_end = next_read
            next_read = write_end = None
    finally:
        _close_if_open(read_end)
        _close_if_open(next_read)
        _close_if_open(write_end)
        statuses = _reap_all(pids)

    return ExecResult(status=statuses[-1])


def execute(segments, builtins=BUILTINS) -> ExecResult:
    """ Run a parsed line: nothing, a single command, or a pipeline. """
    if not segments:
        return ExecResult()
    if len(segments) == 1:
        return run_segment(segments[0], builtins)
    return run_pipeline(segments, builtins)
