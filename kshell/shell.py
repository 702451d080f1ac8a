import logging
import sys

from kshell.config import PROMPT_FORMAT, SHELL_NAME
from kshell.dispatcher import Dispatcher
from kshell.history import HistoryStore, init_readline, load_history, save_history
from kshell.logging import setup_logging
from kshell.state import SessionState

logger = logging.getLogger(__name__)


def prompt(state):
    """Generate shell prompt"""
    return PROMPT_FORMAT.format(
        user=state.user,
        hostname=state.hostname,
        cwd=state.current_directory,
    )


def report(message, stdout=None):
    print(f"{SHELL_NAME}: {message}", file=stdout or sys.stdout)


def main_loop(dispatcher, read_line=input):
    """
    Main shell loop.
    Only `exit` (SystemExit) and end of input leave the loop.
    Returns: status to exit the process with
    """
    state = dispatcher.state

    while True:
        try:
            line = read_line(prompt(state))
        except EOFError:
            print(file=dispatcher.stdout)
            break
        except KeyboardInterrupt:
            print(file=dispatcher.stdout)
            continue

        if not line.strip():
            continue

        try:
            outcome = dispatcher.dispatch(line)
        except KeyboardInterrupt:
            print(file=dispatcher.stdout)
            continue
        except Exception as e:
            logger.debug("unexpected failure", exc_info=True)
            report(e, dispatcher.stdout)
            state.last_status = 1
            continue

        if outcome.ok:
            state.last_status = 0
        else:
            report(outcome.error, dispatcher.stdout)
            state.last_status = 1

    save_history(dispatcher.history_store, state.command_history)
    return state.last_status


def main():
    setup_logging()

    state = SessionState.from_environment()
    store = HistoryStore.for_home(state.home_directory)
    state.command_history = load_history(store)
    init_readline(state.command_history)

    return main_loop(Dispatcher(state, store))
