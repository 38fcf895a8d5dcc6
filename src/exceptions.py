""" Errors raised while lexing, planning and running a command line. """


class ShellError(Exception):
    """ Base class for every error the shell reports and survives. """


class LexError(ShellError):
    pass


class UnterminatedQuote(LexError):
    def __init__(self, quote_char):
        self.quote_char = quote_char
        super().__init__(f"syntax error: unterminated quote {quote_char}")


class PlanError(ShellError):
    pass


class EmptySegment(PlanError):
    def __init__(self, position):
        self.position = position
        super().__init__("syntax error: missing command near '|'")


class RedirError(ShellError):
    pass


class MissingFilename(RedirError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"expected file after {operator}")


class OpenFailed(RedirError):
    def __init__(self, filename, cause):
        self.filename = filename
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot open {filename}: {reason}")


class DescriptorRebindFailed(RedirError):
    def __init__(self, fd, cause):
        self.fd = fd
        self.cause = cause
        super().__init__(f"failed to redirect descriptor {fd}: {cause.strerror or cause}")


class ExecError(ShellError):
    pass


class ProgramNotFound(ExecError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"{name}: command not found")


class ExecFailed(ExecError):
    def __init__(self, name, cause):
        self.name = name
        self.cause = cause
        super().__init__(f"{name}: {cause.strerror or cause}")


class ProcessError(ShellError):
    pass


class ForkFailed(ProcessError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"fork failed: {cause.strerror or cause}")


class PipeCreateFailed(ProcessError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"pipe failed: {cause.strerror or cause}")


class WaitFailed(ProcessError):
    def __init__(self, pid, cause):
        self.pid = pid
        self.cause = cause
        super().__init__(f"wait for process {pid} failed: {cause.strerror or cause}")
