""" Registry of builtin commands. """
import os
import sys
import types

from constants import (PIPE_TOKEN, REDIRECT_INPUT, REDIRECT_OUTPUT,
                       REDIRECT_OUTPUT_APPEND, SHELL_NAME)

_registry = {}

# Read-only view; handlers take the full argv and return the continuation
# signal: non-zero keeps the shell running, zero ends it.
BUILTINS = types.MappingProxyType(_registry)

CONTINUE = 1
TERMINATE = 0


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        _registry[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(argv):
    if len(argv) < 2:
        print(f"{SHELL_NAME}: expected argument to \"cd\"", file=sys.stderr)
        return CONTINUE

    try:
        os.chdir(argv[1])
    except OSError as e:
        print(f"{SHELL_NAME}: cd: {argv[1]}: {e.strerror}", file=sys.stderr)
    return CONTINUE


@builtin("help")
def builtin_help(argv):
    print(f"\t  __{SHELL_NAME}__\n")
    print("Type program names and arguments, and hit enter.")
    print("The following are built in:")
    for name in BUILTINS:
        print(f"  {name}")

    print("\nUse redirection symbols:")
    print(f"  {REDIRECT_INPUT} to redirect input")
    print(f"  {REDIRECT_OUTPUT} to redirect output (overwrites file)")
    print(f"  {REDIRECT_OUTPUT_APPEND} to append output to file")
    print(f"Use {PIPE_TOKEN} to pipe commands together.")
    print("Use the man command for information on other programs.")
    return CONTINUE


@builtin("exit")
def builtin_exit(argv):
    return TERMINATE


@builtin("pwd")
def builtin_pwd(argv):
    try:
        print(os.getcwd())
    except OSError as e:
        print(f"{SHELL_NAME}: pwd: {e.strerror}", file=sys.stderr)
    return CONTINUE


@builtin("echo")
def builtin_echo(argv) -> int:
    print(" ".join(argv[1:]))
    return CONTINUE
