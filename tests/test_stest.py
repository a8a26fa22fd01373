import io
import os

import pytest

from tilewm.stest import StestOptions, main, matches, parse_args, run


def opts(letters, newer=None, older=None):
    return StestOptions(frozenset(letters), newer, older)


@pytest.fixture
def regular(tmp_path):
    path = tmp_path / "file"
    path.write_text("data")
    return path


def test_parse_single_flags_and_paths():
    options, paths = parse_args(["-f", "-x", "a", "b"])
    assert options.flags == frozenset("fx")
    assert paths == ["a", "b"]


def test_parse_combined_flags():
    options, paths = parse_args(["-dlq", "dir"])
    assert options.flags == frozenset("dlq")
    assert paths == ["dir"]


def test_double_dash_ends_options():
    options, paths = parse_args(["--", "-f"])
    assert options.flags == frozenset()
    assert paths == ["-f"]


def test_lone_dash_is_a_path():
    options, paths = parse_args(["-", "x"])
    assert paths == ["-", "x"]
    assert options.flags == frozenset()


def test_unknown_flag_raises():
    with pytest.raises(ValueError):
        parse_args(["-z"])


def test_missing_option_argument_raises():
    with pytest.raises(ValueError):
        parse_args(["-n"])


def test_newer_reference_separate_and_attached(regular):
    os.utime(regular, (1000, 1000))
    separate, rest = parse_args(["-n", str(regular), "x"])
    attached, _ = parse_args(["-o" + str(regular)])
    assert separate.newer == 1000
    assert rest == ["x"]
    assert attached.older == 1000
    assert attached.newer is None


def test_missing_reference_file_reports_and_unsets(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    options, _ = parse_args(["-n", missing])
    assert options.newer is None
    assert missing in capsys.readouterr().err


def test_regular_file_and_directory(tmp_path, regular):
    assert matches(str(regular), "file", opts("f")) is True
    assert matches(str(tmp_path), "dir", opts("f")) is False
    assert matches(str(tmp_path), "dir", opts("d")) is True


def test_hidden_names_need_a(tmp_path):
    hidden = tmp_path / ".hidden"
    hidden.write_text("x")
    assert matches(str(hidden), ".hidden", opts("")) is False
    assert matches(str(hidden), ".hidden", opts("a")) is True


def test_invert_and_missing_file(tmp_path, regular):
    missing = str(tmp_path / "missing")
    assert matches(missing, "missing", opts("")) is False
    assert matches(missing, "missing", opts("v")) is True
    assert matches(str(regular), "file", opts("fv")) is False


def test_size_flag(tmp_path, regular):
    empty = tmp_path / "empty"
    empty.write_text("")
    assert matches(str(empty), "empty", opts("s")) is False
    assert matches(str(regular), "file", opts("s")) is True


def test_symlink_flag(tmp_path, regular):
    link = tmp_path / "link"
    os.symlink(regular, link)
    assert matches(str(link), "link", opts("h")) is True
    assert matches(str(regular), "file", opts("h")) is False


def test_executable_flag(tmp_path, regular):
    script = tmp_path / "script"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    regular.chmod(0o644)
    assert matches(str(script), "script", opts("x")) is True
    assert matches(str(regular), "file", opts("x")) is False


def test_newer_and_older_are_strict(tmp_path):
    old = tmp_path / "old"
    new = tmp_path / "new"
    old.write_text("a")
    new.write_text("b")
    os.utime(old, (1000, 1000))
    os.utime(new, (2000, 2000))
    newer, _ = parse_args(["-n", str(old)])
    older, _ = parse_args(["-o", str(new)])
    assert matches(str(new), "new", newer) is True
    assert matches(str(old), "old", newer) is False
    assert matches(str(old), "old", older) is True
    assert matches(str(new), "new", older) is False


def test_run_paths_prints_passing_names(tmp_path, regular):
    out = io.StringIO()
    code = run([str(regular), str(tmp_path)], opts("f"), io.StringIO(), out)
    assert code == 0
    assert out.getvalue() == str(regular) + "\n"


def test_run_without_match_returns_one(tmp_path):
    out = io.StringIO()
    code = run([str(tmp_path)], opts("f"), io.StringIO(), out)
    assert code == 1
    assert out.getvalue() == ""


def test_run_reads_stdin(tmp_path, regular):
    missing = str(tmp_path / "missing")
    stdin = io.StringIO(f"{regular}\n{missing}\n")
    out = io.StringIO()
    assert run([], opts("e"), stdin, out) == 0
    assert out.getvalue().splitlines() == [str(regular)]


def test_run_lists_directory_contents(tmp_path):
    (tmp_path / "a").write_text("1")
    (tmp_path / "b").write_text("2")
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    assert run([str(tmp_path)], opts("lf"), io.StringIO(), out) == 0
    assert sorted(out.getvalue().splitlines()) == ["a", "b"]


def test_run_list_flag_on_file_tests_file(regular):
    out = io.StringIO()
    assert run([str(regular)], opts("lf"), io.StringIO(), out) == 0
    assert out.getvalue().splitlines() == [str(regular)]


def test_quiet_stops_at_first_match(tmp_path, regular):
    other = tmp_path / "other"
    other.write_text("x")
    out = io.StringIO()
    assert run([str(regular), str(other)], opts("fq"), io.StringIO(), out) == 0
    assert out.getvalue() == ""


def test_main_usage_error(capsys):
    assert main(["-z"]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_runs(regular, capsys):
    assert main(["-f", str(regular)]) == 0
    assert capsys.readouterr().out == str(regular) + "\n"