import pytest

from pixelcircle.filesearch import executable_name, find_file_path, search_paths

UNIQUE = "pixelcircle_probe_3f9a1c.bin"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_executable_name_strips_directories():
    assert executable_name("/usr/local/bin/deviceQuery") == "deviceQuery"


def test_executable_name_plain_name_unchanged():
    assert executable_name("deviceQuery") == "deviceQuery"


def test_executable_name_none():
    assert executable_name(None) is None


def test_search_paths_without_executable_skip_placeholders():
    paths = search_paths(None)
    assert paths[0] == "./"
    assert all("<executable_name>" not in p for p in paths)
    assert "./data/" in paths
    assert "./src/" in paths


def test_search_paths_fill_in_name():
    paths = search_paths("/opt/app/deviceQuery")
    assert "./src/deviceQuery/data/" in paths
    assert "./deviceQuery_data_files/" in paths
    assert all("<executable_name>" not in p for p in paths)


def test_search_paths_without_name_are_subsequence():
    with_name = search_paths("/bin/tool")
    without = search_paths(None)
    assert len(without) < len(with_name)
    it = iter(with_name)
    assert all(p in it for p in without)


def test_search_paths_all_end_with_slash():
    assert all(p.endswith("/") for p in search_paths("tool"))


def test_find_in_current_directory(workdir):
    (workdir / UNIQUE).write_bytes(b"x")
    assert find_file_path(UNIQUE, None) == "./" + UNIQUE


def test_find_in_data_subdirectory(workdir):
    (workdir / "data").mkdir()
    (workdir / "data" / UNIQUE).write_bytes(b"x")
    assert find_file_path(UNIQUE, None) == "./data/" + UNIQUE


def test_current_directory_takes_priority(workdir):
    (workdir / "data").mkdir()
    (workdir / "data" / UNIQUE).write_bytes(b"x")
    (workdir / UNIQUE).write_bytes(b"y")
    assert find_file_path(UNIQUE, None) == "./" + UNIQUE


def test_executable_specific_directory_needs_path(workdir):
    target = workdir / "src" / "tool" / "data"
    target.mkdir(parents=True)
    (target / UNIQUE).write_bytes(b"x")
    assert find_file_path(UNIQUE, None) is None
    assert find_file_path(UNIQUE, "/some/where/tool") == "./src/tool/data/" + UNIQUE


def test_missing_file_returns_none(workdir):
    assert find_file_path(UNIQUE, "/bin/tool") is None


def test_directory_with_that_name_is_not_a_hit(workdir):
    (workdir / UNIQUE).mkdir()
    (workdir / "common").mkdir()
    (workdir / "common" / UNIQUE).write_bytes(b"x")
    assert find_file_path(UNIQUE, None) == "./common/" + UNIQUE