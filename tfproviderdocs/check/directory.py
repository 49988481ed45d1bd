"""Documentation directory layout checks and discovery."""

from __future__ import annotations

import logging
import os
import posixpath
from typing import Iterator, Mapping, Sequence

from tfproviderdocs.check.file import REGISTRY_MAXIMUM_NUMBER_OF_FILES, CheckError

logger = logging.getLogger(__name__)

CDKTF_INDEX_DIRECTORY = "cdktf"

DOCUMENTATION_GLOB_PATTERN = (
    "{docs/index.md,docs/{,cdktf/}{data-sources,guides,resources},website/docs}/**/*"
)

LEGACY_INDEX_DIRECTORY = "website/docs"
LEGACY_DATA_SOURCES_DIRECTORY = "d"
LEGACY_GUIDES_DIRECTORY = "guides"
LEGACY_RESOURCES_DIRECTORY = "r"

REGISTRY_INDEX_DIRECTORY = "docs"
REGISTRY_DATA_SOURCES_DIRECTORY = "data-sources"
REGISTRY_GUIDES_DIRECTORY = "guides"
REGISTRY_RESOURCES_DIRECTORY = "resources"

VALID_LEGACY_SUBDIRECTORIES = (
    LEGACY_DATA_SOURCES_DIRECTORY,
    LEGACY_GUIDES_DIRECTORY,
    LEGACY_RESOURCES_DIRECTORY,
)

VALID_REGISTRY_SUBDIRECTORIES = (
    REGISTRY_DATA_SOURCES_DIRECTORY,
    REGISTRY_GUIDES_DIRECTORY,
    REGISTRY_RESOURCES_DIRECTORY,
)

VALID_LEGACY_DIRECTORIES = (LEGACY_INDEX_DIRECTORY,) + tuple(
    f"{LEGACY_INDEX_DIRECTORY}/{sub}" for sub in VALID_LEGACY_SUBDIRECTORIES
)

VALID_REGISTRY_DIRECTORIES = (REGISTRY_INDEX_DIRECTORY,) + tuple(
    f"{REGISTRY_INDEX_DIRECTORY}/{sub}" for sub in VALID_REGISTRY_SUBDIRECTORIES
)

VALID_CDKTF_LANGUAGES = ("csharp", "go", "java", "python", "typescript")

_GLOB_SUFFIX = "/**/*"


def _cdktf_directories() -> frozenset[str]:
    directories = {
        f"{LEGACY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}",
        f"{REGISTRY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}",
    }
    for language in VALID_CDKTF_LANGUAGES:
        legacy = f"{LEGACY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}/{language}"
        registry = f"{REGISTRY_INDEX_DIRECTORY}/{CDKTF_INDEX_DIRECTORY}/{language}"
        directories.update((legacy, registry))
        directories.update(f"{legacy}/{sub}" for sub in VALID_LEGACY_SUBDIRECTORIES)
        directories.update(f"{registry}/{sub}" for sub in VALID_REGISTRY_SUBDIRECTORIES)
    return frozenset(directories)


_VALID_CDKTF_DIRECTORIES = _cdktf_directories()


def is_valid_legacy_directory(directory: str) -> bool:
    """Whether the directory is one of the legacy documentation directories."""
    return directory in VALID_LEGACY_DIRECTORIES


def is_valid_registry_directory(directory: str) -> bool:
    """Whether the directory is one of the Registry documentation directories."""
    return directory in VALID_REGISTRY_DIRECTORIES


def is_valid_cdktf_directory(directory: str) -> bool:
    """Whether the directory is one of the CDK for Terraform documentation directories."""
    return directory in _VALID_CDKTF_DIRECTORIES


def invalid_directories_check(directories: Mapping[str, Sequence[str]]) -> None:
    """Raise CheckError for the first directory outside the known layouts."""
    for directory in directories:
        if not (
            is_valid_registry_directory(directory)
            or is_valid_legacy_directory(directory)
            or is_valid_cdktf_directory(directory)
        ):
            raise CheckError(f"invalid Terraform Provider documentation directory found: {directory}")


def mixed_directories_check(directories: Mapping[str, Sequence[str]]) -> None:
    """Raise CheckError when both legacy and Registry layouts are in use."""
    legacy_found = False
    registry_found = False
    message = (
        "mixed Terraform Provider documentation directory layouts found, "
        "must use only legacy or registry layout"
    )

    for directory in directories:
        # docs/ on its own may sit beside the legacy layout.
        if is_valid_registry_directory(directory) and directory != REGISTRY_INDEX_DIRECTORY:
            registry_found = True
            if legacy_found:
                raise CheckError(message)

        if is_valid_legacy_directory(directory):
            legacy_found = True
            if registry_found:
                raise CheckError(message)


def number_of_files_check(directories: Mapping[str, Sequence[str]]) -> int:
    """Return the number of files, raising CheckError at or above the Registry limit.

    CDK for Terraform directories are not counted, as the limit is per language.
    """
    total = 0
    for directory, files in directories.items():
        if is_valid_cdktf_directory(directory):
            continue
        logger.debug("Found %d documentation files in directory: %s", len(files), directory)
        total += len(files)

    logger.debug(
        "Found %d documentation files with limit of %d", total, REGISTRY_MAXIMUM_NUMBER_OF_FILES
    )
    if total >= REGISTRY_MAXIMUM_NUMBER_OF_FILES:
        raise CheckError(
            f"exceeded maximum ({REGISTRY_MAXIMUM_NUMBER_OF_FILES}) number of documentation "
            f"files for Terraform Registry: {total}"
        )
    return total


def _expand_braces(pattern: str) -> list[str]:
    start = pattern.find("{")
    if start < 0:
        return [pattern]

    depth = 0
    alternatives: list[str] = []
    current = start + 1
    for offset, char in enumerate(pattern[start:]):
        index = start + offset
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                alternatives.append(pattern[current:index])
                prefix, suffix = pattern[:start], pattern[index + 1 :]
                return [
                    expanded
                    for alternative in alternatives
                    for expanded in _expand_braces(prefix + alternative + suffix)
                ]
        elif char == "," and depth == 1:
            alternatives.append(pattern[current:index])
            current = index + 1
    raise ValueError(f"unbalanced braces in pattern: {pattern}")


def _descendants(root: str) -> Iterator[str]:
    try:
        entries = sorted(os.scandir(root), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        path = f"{root}/{entry.name}"
        yield path
        if entry.is_dir(follow_symlinks=False):
            yield from _descendants(path)


def _documentation_roots() -> list[str]:
    roots = []
    for expanded in _expand_braces(DOCUMENTATION_GLOB_PATTERN):
        if not expanded.endswith(_GLOB_SUFFIX):
            raise ValueError(f"unsupported documentation pattern: {expanded}")
        roots.append(expanded.removesuffix(_GLOB_SUFFIX))
    return roots


def get_directories(basepath: str = "") -> dict[str, list[str]]:
    """Find documentation files under the base path, grouped by directory.

    Paths are relative to the base path and use forward slashes.
    """
    directories: dict[str, list[str]] = {}

    for root in _documentation_roots():
        search_root = f"{basepath}/{root}" if basepath else root
        for found in _descendants(search_root):
            file = found
            if basepath:
                file = os.path.relpath(found, basepath).replace(os.sep, "/")

            if (
                is_valid_registry_directory(file)
                or is_valid_legacy_directory(file)
                or is_valid_cdktf_directory(file)
            ):
                continue

            directories.setdefault(posixpath.dirname(file), []).append(file)

    return directories