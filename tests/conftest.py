import io
import os
import stat

import pytest

from kshell.dispatcher import Dispatcher
from kshell.history import HistoryStore
from kshell.state import SessionState

ARGS_SCRIPT = """#!/bin/sh
for a in "$@"; do
    echo "[$a]"
done
"""


def make_executable(directory, name, body):
    path = directory / name
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def bin_dir(tmp_path):
    d = tmp_path / "bin"
    d.mkdir()
    make_executable(d, "args", ARGS_SCRIPT)
    make_executable(d, "fail", "#!/bin/sh\necho oops >&2\nexit 3\n")
    return d


@pytest.fixture
def home(tmp_path):
    d = tmp_path / "home"
    d.mkdir()
    return d


@pytest.fixture
def state(tmp_path, home, bin_dir, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    # monkeypatch restores the real cwd after each test
    monkeypatch.chdir(work)
    return SessionState(
        user="alice",
        hostname="box",
        home_directory=str(home),
        current_directory=os.getcwd(),
        previous_directory=os.getcwd(),
        search_path=[str(bin_dir)],
    )


@pytest.fixture
def store(home):
    return HistoryStore.for_home(str(home))


@pytest.fixture
def shell(state, store):
    return Dispatcher(state, store, stdout=io.StringIO())
