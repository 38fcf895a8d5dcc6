REDIRECT_INPUT = "<"
REDIRECT_OUTPUT = ">"
REDIRECT_OUTPUT_APPEND = ">>"
PIPE_TOKEN = "|"

QUOTE_CHARS = ("\"", "'")
ESCAPE_CHAR = "\\"

DEFAULT_PROMPT = "minishell> "
SHELL_NAME = "minishell"

STDIN_FILENO = 0
STDOUT_FILENO = 1

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# exit statuses for exec failures, as POSIX shells report them
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

# file creation mode for > and >>, before the umask is applied
CREATE_MODE = 0o666
