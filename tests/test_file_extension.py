import re

import pytest

from tfproviderdocs.check.file import CheckError
from tfproviderdocs.check.file_extension import (
    VALID_LEGACY_FILE_EXTENSIONS,
    VALID_REGISTRY_FILE_EXTENSIONS,
    file_path_ends_with_extension_from,
    legacy_file_extension_check,
    registry_file_extension_check,
    trim_file_extension,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", ""),
        ("file.md", "file"),
        ("file.html.markdown", "file"),
        ("docs/resource/thing.md", "thing"),
        ("website/docs/r/thing.html.markdown", "thing"),
    ],
)
def test_trim_file_extension(path, expected):
    assert trim_file_extension(path) == expected


def test_trim_file_extension_keeps_leading_dot():
    assert trim_file_extension("docs/.hidden") == ".hidden"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("thing.html.markdown", True),
        ("thing.html.md", True),
        ("thing.markdown", True),
        ("thing.md", True),
        ("thing.txt", False),
    ],
)
def test_legacy_extensions(path, expected):
    assert file_path_ends_with_extension_from(path, VALID_LEGACY_FILE_EXTENSIONS) is expected


@pytest.mark.parametrize("path, expected", [("thing.md", True), ("thing.markdown", False)])
def test_registry_extensions(path, expected):
    assert file_path_ends_with_extension_from(path, VALID_REGISTRY_FILE_EXTENSIONS) is expected


def test_legacy_file_extension_check_error():
    message = "file does not end with a valid extension, valid extensions: [.html.markdown .html.md .markdown .md]"
    with pytest.raises(CheckError, match=re.escape(message)):
        legacy_file_extension_check("resource_invalid_extension.txt")


def test_registry_file_extension_check_error():
    message = "file does not end with a valid extension, valid extensions: [.md]"
    with pytest.raises(CheckError, match=re.escape(message)):
        registry_file_extension_check("resource_invalid_extension.markdown")