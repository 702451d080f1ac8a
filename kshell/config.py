SHELL_NAME = "kshell"

# History lives directly under the user's home directory
HISTORY_FILENAME = ".kshell_history"

PROMPT_FORMAT = "{user}@{hostname}:{cwd}$ "

# Diagnostic logging level (DEBUG, INFO, WARNING, ...)
LOG_LEVEL_ENV = "KSHELL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
