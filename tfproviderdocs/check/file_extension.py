"""Documentation file extension rules."""

from __future__ import annotations

import os
from typing import Sequence

from tfproviderdocs.check.file import CheckError

FILE_EXTENSION_HTML_MARKDOWN = ".html.markdown"
FILE_EXTENSION_HTML_MD = ".html.md"
FILE_EXTENSION_MARKDOWN = ".markdown"
FILE_EXTENSION_MD = ".md"

VALID_LEGACY_FILE_EXTENSIONS = (
    FILE_EXTENSION_HTML_MARKDOWN,
    FILE_EXTENSION_HTML_MD,
    FILE_EXTENSION_MARKDOWN,
    FILE_EXTENSION_MD,
)

VALID_REGISTRY_FILE_EXTENSIONS = (FILE_EXTENSION_MD,)


def _check_extension(path: str, valid_extensions: Sequence[str]) -> None:
    if not file_path_ends_with_extension_from(path, valid_extensions):
        listed = " ".join(valid_extensions)
        raise CheckError(f"file does not end with a valid extension, valid extensions: [{listed}]")


def legacy_file_extension_check(path: str) -> None:
    """Raise CheckError unless the path has a legacy documentation extension."""
    _check_extension(path, VALID_LEGACY_FILE_EXTENSIONS)


def registry_file_extension_check(path: str) -> None:
    """Raise CheckError unless the path has a Registry documentation extension."""
    _check_extension(path, VALID_REGISTRY_FILE_EXTENSIONS)


def file_path_ends_with_extension_from(path: str, valid_extensions: Sequence[str]) -> bool:
    """Whether the path ends with any of the given extensions."""
    return any(path.endswith(extension) for extension in valid_extensions)


def trim_file_extension(path: str) -> str:
    """Return the file name without any extensions, including multi-part ones."""
    if not path:
        return ""
    filename = os.path.basename(os.path.normpath(path)) or os.sep
    if filename == ".":
        return ""
    dot_index = filename.find(".")
    if dot_index > 0:
        return filename[:dot_index]
    return filename