class ShellError(Exception):
    """Base class for failures reported to the user without ending the session."""


class CommandNotFound(ShellError):
    def __init__(self, name):
        super().__init__(f"{name}: command not found")
        self.name = name


class DirectoryChangeError(ShellError):
    def __init__(self, target, reason="No such file or directory"):
        super().__init__(f"cd: {target}: {reason}")
        self.target = target


class SpawnError(ShellError):
    """The child process could not be started (permission, exec format...)."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path


class HistoryIOError(ShellError):
    def __init__(self, path, reason):
        super().__init__(f"history: {path}: {reason}")
        self.path = path
