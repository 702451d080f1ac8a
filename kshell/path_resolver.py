import logging
import os

logger = logging.getLogger(__name__)


def resolve(name, search_path):
    """
    Find every file called ``name`` in the search path directories.
    Returns: list of absolute paths, in search path order (may be empty)
    """
    # Only plain file names are looked up
    if not name or os.sep in name:
        return []

    matches = []
    for directory in search_path:
        candidate = os.path.join(directory, name)
        # Missing directories simply produce no match
        if os.path.isfile(candidate):
            matches.append(os.path.abspath(candidate))

    logger.debug("resolve %r -> %s", name, matches)
    return matches


def resolve_command(name, search_path, cwd):
    """
    Locate the program a command name refers to.
    A name with a slash is a path relative to ``cwd``, anything else is
    looked up in the search path.
    Returns: list of candidate paths, best first
    """
    if os.sep in name:
        candidate = os.path.abspath(os.path.join(cwd, name))
        return [candidate] if os.path.isfile(candidate) else []
    return resolve(name, search_path)
