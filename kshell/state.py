"""
Session state shared by the dispatcher and the builtin commands.
"""

import os
import socket
from dataclasses import dataclass, field
from typing import List

import psutil

from kshell.errors import DirectoryChangeError


def current_user():
    """Name of the user owning this process."""
    return psutil.Process().username()


def split_search_path(value):
    """Split a PATH-style string, dropping empty entries."""
    return [p for p in (value or "").split(os.pathsep) if p]


@dataclass
class SessionState:
    user: str
    hostname: str
    home_directory: str
    current_directory: str
    previous_directory: str
    search_path: List[str] = field(default_factory=list)
    command_history: List[str] = field(default_factory=list)
    last_status: int = 0

    @classmethod
    def from_environment(cls, environ=None):
        """Capture the session state once at startup."""
        environ = os.environ if environ is None else environ
        cwd = os.getcwd()
        return cls(
            user=current_user(),
            hostname=socket.gethostname(),
            home_directory=os.path.expanduser("~"),
            current_directory=cwd,
            previous_directory=cwd,
            search_path=split_search_path(environ.get("PATH")),
        )

    def change_directory(self, target):
        """
        Move the process to ``target`` (absolute or relative to the current
        directory) and update current/previous directory.
        Raises DirectoryChangeError and leaves both untouched on failure.
        """
        new_dir = os.path.normpath(os.path.join(self.current_directory, target))
        if not os.path.exists(new_dir):
            raise DirectoryChangeError(target)
        if not os.path.isdir(new_dir):
            raise DirectoryChangeError(target, "Not a directory")

        try:
            os.chdir(new_dir)
        except OSError as e:
            raise DirectoryChangeError(target, e.strerror or str(e)) from e

        self.previous_directory = self.current_directory
        self.current_directory = os.getcwd()
        return self.current_directory
