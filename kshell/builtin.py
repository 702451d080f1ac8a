import logging
import os
import sys

from kshell.history import save_history
from kshell.parser import tokenize
from kshell.path_resolver import resolve

logger = logging.getLogger(__name__)

RECALL = "!!"
COMMENT = "#"

SUMMARY = """kshell help:
 Type program names and arguments, and hit <enter>.
 Type `help name` to find out more about the command `name`.

 Built-in commands:
  cd [dir]        : change directory
  exit [n]        : exit shell
  which name ...  : locate a command
  help [name]     : print this help
  history         : show command history
  # ...           : comment, does nothing
  !!              : run the last command again
"""

TOPICS = {
    "cd": """cd: cd [dir]
    Change the shell working directory.

    The default dir is your home directory.
    `cd ~` goes to the home directory, `cd -` back to the previous one.
""",
    "exit": """exit: exit [n]
    Exit the shell with status n (0-255).

    Without n the status is that of the last command. History is saved first.
""",
    "which": """which: which name ...
    Locate a command.

    Prints every file matching each name in the search path, in search order.
""",
    "help": """help: help [name]
    Print the command summary, or the usage of one command.
""",
    "history": """history: history
    Display the history list with line numbers.
""",
    COMMENT: """#: # [text ...]
    Comment. The line is recorded in history and nothing else happens.
""",
    RECALL: """!!: !!
    Print the most recent command and run it again.
""",
}


def builtin_cd(shell, args):
    """Change directory"""
    state = shell.state
    target = args[1] if len(args) > 1 else ""

    if target in ("", "~"):
        target = state.home_directory
    elif target == "-":
        target = state.previous_directory
    elif target.startswith("~/"):
        target = os.path.join(state.home_directory, target[2:])

    state.change_directory(target)
    return 0


def builtin_exit(shell, args):
    """Save history and leave the shell"""
    state = shell.state
    code = state.last_status
    if len(args) > 1:
        try:
            code = int(args[1])
        except ValueError:
            code = None
        if code is None or not 0 <= code <= 255:
            print(f"Warning: exit: {args[1]}: expected a status between 0 and 255, using 0",
                  file=sys.stderr)
            code = 0

    save_history(shell.history_store, state.command_history)
    logger.debug("exit with status %d", code)
    raise SystemExit(code)


def builtin_which(shell, args):
    """Print every match of each name in the search path"""
    for name in args[1:]:
        for path in resolve(name, shell.state.search_path):
            print(path, file=shell.stdout)
    return 0


def builtin_help(shell, args):
    """Print help message"""
    topic = args[1] if len(args) > 1 else None
    print(TOPICS.get(topic, SUMMARY), file=shell.stdout, end="")
    return 0


def builtin_history(shell, args):
    """Show command history"""
    for i, line in enumerate(shell.state.command_history, start=1):
        print(f"{i}: {line}", file=shell.stdout)
    return 0


def builtin_comment(shell, args):
    return 0


def builtin_recall(shell, args):
    """Run the most recent non-recall history entry again"""
    for line in reversed(shell.state.command_history):
        if tokenize(line)[0] != RECALL:
            break
    else:
        return 0

    print(line, file=shell.stdout)
    outcome = shell.dispatch(line)
    if outcome.error is not None:
        # Let the outer dispatch report it like any other failure
        raise outcome.error
    return outcome.status


BUILTINS = {
    "cd": builtin_cd,
    "exit": builtin_exit,
    "which": builtin_which,
    "help": builtin_help,
    "history": builtin_history,
    COMMENT: builtin_comment,
    RECALL: builtin_recall,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(shell, args):
    """
    Execute the built-in named by args[0].
    Returns: exit code of the handler
    """
    handler = BUILTINS[args[0]]
    logger.debug("builtin %s", args[0])
    return handler(shell, args)
