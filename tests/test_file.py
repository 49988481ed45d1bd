import pytest

from tfproviderdocs.check.file import (
    REGISTRY_MAXIMUM_SIZE_OF_FILE,
    CheckError,
    FileCheck,
    FileOptions,
    MultiCheckError,
    file_size_check,
)


def _sized_file(tmp_path, size):
    path = tmp_path / "TestFileSizeCheck"
    with open(path, "wb") as handle:
        handle.truncate(size)
    return str(path)


def test_file_size_under_limit(tmp_path):
    path = _sized_file(tmp_path, REGISTRY_MAXIMUM_SIZE_OF_FILE - 1)
    assert file_size_check(path) == REGISTRY_MAXIMUM_SIZE_OF_FILE - 1


@pytest.mark.parametrize("size", [REGISTRY_MAXIMUM_SIZE_OF_FILE, REGISTRY_MAXIMUM_SIZE_OF_FILE + 1])
def test_file_size_at_or_over_limit(tmp_path, size):
    path = _sized_file(tmp_path, size)
    with pytest.raises(CheckError, match=f"exceeded maximum \\(500000\\) size .*: {size}"):
        file_size_check(path)


def test_file_size_missing_file(tmp_path):
    with pytest.raises(CheckError):
        file_size_check(str(tmp_path / "missing.md"))


@pytest.mark.parametrize(
    "options, path, expected",
    [
        (FileOptions(), "docs/resources/thing.md", "docs/resources/thing.md"),
        (FileOptions(base_path="/full/path/to"), "docs/resources/thing.md", "/full/path/to/docs/resources/thing.md"),
    ],
)
def test_full_path(options, path, expected):
    assert options.full_path(path) == expected


def test_multi_error_single_format():
    assert str(MultiCheckError([CheckError("a")])) == "1 error occurred:\n\t* a\n\n"


def test_multi_error_several_format():
    error = MultiCheckError([CheckError("a"), CheckError("b")])
    assert str(error) == "2 errors occurred:\n\t* a\n\t* b\n\n"


def test_multi_error_flattens_nested():
    inner = MultiCheckError([CheckError("a"), CheckError("b")])
    outer = MultiCheckError([inner, CheckError("c")])
    assert [str(error) for error in outer.errors] == ["a", "b", "c"]


class _RecordingCheck(FileCheck):
    def __init__(self):
        self.visited = []

    def run(self, path):
        self.visited.append(path)
        if "bad" in path:
            raise CheckError(f"{path}: bad")


def test_run_all_visits_every_file():
    check = _RecordingCheck()
    FileCheck.run_all(check, ["one.md", "two.md"])
    assert check.visited == ["one.md", "two.md"]


def test_run_all_collects_errors():
    check = _RecordingCheck()
    with pytest.raises(MultiCheckError) as info:
        FileCheck.run_all(check, ["ok.md", "bad1.md", "bad2.md"])
    assert [str(error) for error in info.value.errors] == ["bad1.md: bad", "bad2.md: bad"]
    assert check.visited == ["ok.md", "bad1.md", "bad2.md"]