from kshell.path_resolver import resolve, resolve_command

from conftest import make_executable


def test_no_match_is_empty(bin_dir):
    assert resolve("bogus123", [str(bin_dir)]) == []


def test_returns_every_match_in_search_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    make_executable(second, "tool", "#!/bin/sh\n")
    make_executable(first, "tool", "#!/bin/sh\n")

    assert resolve("tool", [str(first), str(second)]) == [
        str(first / "tool"),
        str(second / "tool"),
    ]


def test_missing_directories_are_skipped(tmp_path, bin_dir):
    missing = str(tmp_path / "nope")
    assert resolve("args", [missing, str(bin_dir)]) == [str(bin_dir / "args")]


def test_exact_name_only(bin_dir):
    assert resolve("arg", [str(bin_dir)]) == []
    assert resolve("args.sh", [str(bin_dir)]) == []


def test_no_executable_bit_check(tmp_path):
    (tmp_path / "data").write_text("not a program")
    assert resolve("data", [str(tmp_path)]) == [str(tmp_path / "data")]


def test_directories_do_not_match(tmp_path):
    (tmp_path / "sub").mkdir()
    assert resolve("sub", [str(tmp_path)]) == []


def test_name_with_slash_is_not_searched(tmp_path, bin_dir):
    assert resolve("bin/args", [str(tmp_path)]) == []
    assert resolve("./args", [str(bin_dir)]) == []


def test_command_with_slash_is_a_path(tmp_path, bin_dir):
    assert resolve_command("bin/args", [], str(tmp_path)) == [str(bin_dir / "args")]
    assert resolve_command("bin/none", [str(bin_dir)], str(tmp_path)) == []


def test_command_without_slash_uses_search_path(tmp_path, bin_dir):
    assert resolve_command("args", [str(bin_dir)], str(tmp_path)) == [str(bin_dir / "args")]


def test_empty_name():
    assert resolve("", ["/usr/bin"]) == []
