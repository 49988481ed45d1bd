"""Checks of files in the legacy ``website/docs`` documentation layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterable

from tfproviderdocs.check.contents_check import ContentsCheck, ContentsOptions
from tfproviderdocs.check.file import (
    CheckError,
    FileCheck,
    FileOptions,
    MultiCheckError,
    file_size_check,
)
from tfproviderdocs.check.file_extension import legacy_file_extension_check
from tfproviderdocs.check.frontmatter import FrontMatterCheck, FrontMatterData, FrontMatterOptions

logger = logging.getLogger(__name__)

_LEGACY_FRONT_MATTER_FLAGS = {
    "no_sidebar_current": True,
    "require_description": True,
    "require_layout": True,
    "require_page_title": True,
}


def _with_flags(front_matter: FrontMatterOptions | None, **flags: bool) -> FrontMatterOptions:
    base = front_matter if front_matter is not None else FrontMatterOptions()
    return replace(base, **flags)


def _check_documentation_file(
    path: str,
    file_options: FileOptions,
    extension_check: Callable[[str], None],
    front_matter: FrontMatterOptions,
) -> tuple[str, FrontMatterData]:
    """Check extension, size and front matter; return the full path and front matter."""
    fullpath = file_options.full_path(path)
    logger.debug("Checking file: %s", fullpath)

    try:
        extension_check(path)
    except CheckError as err:
        raise CheckError(f"{path}: error checking file extension: {err}") from err

    try:
        file_size_check(fullpath)
    except CheckError as err:
        raise CheckError(f"{path}: error checking file size: {err}") from err

    try:
        content = Path(fullpath).read_bytes()
    except OSError as err:
        raise CheckError(f"{path}: error reading file: {err}") from err

    try:
        data = FrontMatterCheck(front_matter).run(content)
    except CheckError as err:
        raise CheckError(f"{path}: error checking file frontmatter: {err}") from err

    return fullpath, data


def _check_contents(path: str, fullpath: str, contents: ContentsOptions, example_language: str) -> None:
    try:
        ContentsCheck(contents).run(fullpath, example_language)
    except CheckError as err:
        raise CheckError(f"{path}: error checking file contents: {err}") from err


def _run_each(run: Callable[[str, str], object], files: Iterable[str], example_language: str) -> None:
    errors = []
    for file in files:
        try:
            run(file, example_language)
        except CheckError as err:
            errors.append(err)
    if errors:
        raise MultiCheckError(errors)


def _resource_contents(contents: ContentsOptions | None, provider_name: str) -> ContentsOptions:
    contents = contents if contents is not None else ContentsOptions()
    if not contents.provider_name:
        contents.provider_name = provider_name
    return contents


@dataclass
class LegacyDataSourceFileOptions(FileOptions):
    """Options for legacy data source documentation files."""

    front_matter: FrontMatterOptions | None = None


class LegacyDataSourceFileCheck(FileCheck):
    """Checks a legacy data source documentation file."""

    def __init__(self, options: LegacyDataSourceFileOptions | None = None) -> None:
        self.options = options if options is not None else LegacyDataSourceFileOptions()
        self.options.front_matter = _with_flags(self.options.front_matter, **_LEGACY_FRONT_MATTER_FLAGS)

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, legacy_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class LegacyGuideFileOptions(FileOptions):
    """Options for legacy guide documentation files."""

    front_matter: FrontMatterOptions | None = None


class LegacyGuideFileCheck(FileCheck):
    """Checks a legacy guide documentation file."""

    def __init__(self, options: LegacyGuideFileOptions | None = None) -> None:
        self.options = options if options is not None else LegacyGuideFileOptions()
        self.options.front_matter = _with_flags(self.options.front_matter, **_LEGACY_FRONT_MATTER_FLAGS)

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, legacy_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class LegacyIndexFileOptions(FileOptions):
    """Options for the legacy index documentation file."""

    front_matter: FrontMatterOptions | None = None


class LegacyIndexFileCheck(FileCheck):
    """Checks the legacy index documentation file."""

    def __init__(self, options: LegacyIndexFileOptions | None = None) -> None:
        self.options = options if options is not None else LegacyIndexFileOptions()
        self.options.front_matter = _with_flags(
            self.options.front_matter, no_subcategory=True, **_LEGACY_FRONT_MATTER_FLAGS
        )

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, legacy_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class LegacyResourceFileOptions(FileOptions):
    """Options for legacy resource documentation files."""

    contents: ContentsOptions | None = None
    front_matter: FrontMatterOptions | None = None
    provider_name: str = ""


class LegacyResourceFileCheck:
    """Checks a legacy resource documentation file, including its contents."""

    def __init__(self, options: LegacyResourceFileOptions | None = None) -> None:
        self.options = options if options is not None else LegacyResourceFileOptions()
        self.options.contents = _resource_contents(self.options.contents, self.options.provider_name)
        self.options.front_matter = _with_flags(self.options.front_matter, **_LEGACY_FRONT_MATTER_FLAGS)

    def run(self, path: str, example_language: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        fullpath, data = _check_documentation_file(
            path, self.options, legacy_file_extension_check, self.options.front_matter
        )
        _check_contents(path, fullpath, self.options.contents, example_language)
        return data

    def run_all(self, files: Iterable[str], example_language: str) -> None:
        """Check every file, raising MultiCheckError with all failures."""
        _run_each(self.run, files, example_language)