import logging
import subprocess
import sys

from kshell.config import SHELL_NAME
from kshell.errors import SpawnError
from kshell.parser import split_arguments

logger = logging.getLogger(__name__)


def run_external(path, argument_string, cwd=None, stdout=None):
    """
    Run an external program and wait for it.
    stdout and stderr of the child are captured and written to ``stdout``
    (the shell's own standard output by default) once the child has exited.
    Returns: the child's exit code
    """
    stdout = stdout or sys.stdout
    try:
        args = [path] + split_arguments(argument_string)
    except ValueError as e:
        raise SpawnError(path, e) from e

    try:
        proc = subprocess.Popen(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except PermissionError as e:
        raise SpawnError(path, "Permission denied") from e
    except OSError as e:
        # ENOEXEC, ENOENT for a vanished file, ...
        raise SpawnError(path, e.strerror or e) from e

    logger.debug("spawned pid %d: %s", proc.pid, args)
    with proc:
        out, _ = proc.communicate()
    exit_code = proc.returncode
    logger.debug("pid %d exited with %d", proc.pid, exit_code)

    if out:
        stdout.write(out.decode(errors="replace"))
        stdout.flush()

    if exit_code != 0:
        print(f"{SHELL_NAME}: process exited with code {exit_code}", file=stdout)

    return exit_code
