"""
Dispatcher: turns one raw input line into a builtin call or a child process.

Failures of a single command are returned as an ExecutionOutcome carrying
the ShellError instead of being raised, so the REPL has one place to report
them.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from kshell.builtin import execute_builtin, is_builtin
from kshell.errors import CommandNotFound, ShellError
from kshell.executor import run_external
from kshell.parser import join_arguments, tokenize
from kshell.path_resolver import resolve_command

logger = logging.getLogger(__name__)


@dataclass
class ExecutionOutcome:
    status: int = 0
    error: Optional[ShellError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Dispatcher:
    def __init__(self, state, history_store, stdout=None):
        self.state = state
        self.history_store = history_store
        self.stdout = stdout or sys.stdout

    def dispatch(self, raw_line: str) -> ExecutionOutcome:
        """Run one line and record it in history, whatever the result."""
        args = tokenize(raw_line)
        try:
            if is_builtin(args[0]):
                status = execute_builtin(self, args)
            else:
                status = self.run_external(args)
            return ExecutionOutcome(status=status or 0)
        except ShellError as e:
            logger.debug("dispatch of %r failed: %s", raw_line, e)
            return ExecutionOutcome(status=1, error=e)
        finally:
            self.state.command_history.append(raw_line)

    def run_external(self, args):
        matches = resolve_command(args[0], self.state.search_path, self.state.current_directory)
        if not matches:
            raise CommandNotFound(args[0])

        # The child's status is reported by run_external but not kept as ours
        run_external(
            matches[0],
            join_arguments(args[1:]),
            cwd=self.state.current_directory,
            stdout=self.stdout,
        )
        return 0
