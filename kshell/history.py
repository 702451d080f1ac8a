import logging
import os
import sys

from kshell.config import HISTORY_FILENAME
from kshell.errors import HistoryIOError

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Line-delimited history file: one raw command line per line, verbatim.
    Blank entries are kept so that save() followed by load() is lossless.
    """

    def __init__(self, path):
        self.path = path

    @classmethod
    def for_home(cls, home_directory):
        return cls(os.path.join(home_directory, HISTORY_FILENAME))

    def load(self):
        """Read the history file. A missing file means an empty history."""
        if not os.path.exists(self.path):
            return []
        try:
            # newline="" keeps a '\r' inside an entry instead of splitting on it
            with open(self.path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
                content = f.read()
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(self.path, e) from e

        if not content:
            return []
        entries = content.split("\n")
        # Drop the empty piece after the final newline
        if entries[-1] == "":
            entries.pop()
        logger.debug("loaded %d history entries from %s", len(entries), self.path)
        return entries

    def save(self, entries):
        """
        Overwrite the history file with ``entries``.
        The data goes to a temporary file first, so a failed save leaves the
        previous history in place.
        """
        tmp_path = self.path + ".tmp"
        try:
            data = "".join(entry + "\n" for entry in entries).encode("utf-8", "surrogateescape")
            with open(tmp_path, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeError) as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise HistoryIOError(self.path, e) from e
        logger.debug("saved %d history entries to %s", len(entries), self.path)


def load_history(store):
    """Load history, degrading to an empty list on I/O errors."""
    try:
        return store.load()
    except HistoryIOError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)
        return []


def save_history(store, entries):
    """Save history; failures are reported, never raised."""
    try:
        store.save(entries)
        return True
    except HistoryIOError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)
        return False


def init_readline(entries):
    """Seed readline with the loaded history so arrow keys can recall it"""
    if not sys.stdin.isatty():
        return
    try:
        import readline

        readline.clear_history()
        for entry in entries:
            if entry:
                readline.add_history(entry)
        readline.parse_and_bind("set editing-mode emacs")
    except (ImportError, OSError) as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
