"""Checks of files in the Registry ``docs`` documentation layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tfproviderdocs.check.contents_check import ContentsOptions
from tfproviderdocs.check.file import FileCheck, FileOptions
from tfproviderdocs.check.file_extension import registry_file_extension_check
from tfproviderdocs.check.frontmatter import FrontMatterData, FrontMatterOptions
from tfproviderdocs.check.legacy import (
    _check_contents,
    _check_documentation_file,
    _resource_contents,
    _run_each,
    _with_flags,
)

_REGISTRY_FRONT_MATTER_FLAGS = {
    "no_layout": True,
    "no_sidebar_current": True,
}


@dataclass
class RegistryDataSourceFileOptions(FileOptions):
    """Options for Registry data source documentation files."""

    front_matter: FrontMatterOptions | None = None


class RegistryDataSourceFileCheck(FileCheck):
    """Checks a Registry data source documentation file."""

    def __init__(self, options: RegistryDataSourceFileOptions | None = None) -> None:
        self.options = options if options is not None else RegistryDataSourceFileOptions()
        self.options.front_matter = _with_flags(self.options.front_matter, **_REGISTRY_FRONT_MATTER_FLAGS)

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, registry_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class RegistryGuideFileOptions(FileOptions):
    """Options for Registry guide documentation files."""

    front_matter: FrontMatterOptions | None = None


class RegistryGuideFileCheck(FileCheck):
    """Checks a Registry guide documentation file."""

    def __init__(self, options: RegistryGuideFileOptions | None = None) -> None:
        self.options = options if options is not None else RegistryGuideFileOptions()
        self.options.front_matter = _with_flags(
            self.options.front_matter, require_page_title=True, **_REGISTRY_FRONT_MATTER_FLAGS
        )

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, registry_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class RegistryIndexFileOptions(FileOptions):
    """Options for the Registry index documentation file."""

    front_matter: FrontMatterOptions | None = None


class RegistryIndexFileCheck(FileCheck):
    """Checks the Registry index documentation file."""

    def __init__(self, options: RegistryIndexFileOptions | None = None) -> None:
        self.options = options if options is not None else RegistryIndexFileOptions()
        self.options.front_matter = _with_flags(
            self.options.front_matter, no_subcategory=True, **_REGISTRY_FRONT_MATTER_FLAGS
        )

    def run(self, path: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        _, data = _check_documentation_file(
            path, self.options, registry_file_extension_check, self.options.front_matter
        )
        return data


@dataclass
class RegistryResourceFileOptions(FileOptions):
    """Options for Registry resource documentation files."""

    contents: ContentsOptions | None = None
    front_matter: FrontMatterOptions | None = None
    provider_name: str = ""


class RegistryResourceFileCheck:
    """Checks a Registry resource documentation file, including its contents."""

    def __init__(self, options: RegistryResourceFileOptions | None = None) -> None:
        self.options = options if options is not None else RegistryResourceFileOptions()
        self.options.contents = _resource_contents(self.options.contents, self.options.provider_name)
        self.options.front_matter = _with_flags(self.options.front_matter, **_REGISTRY_FRONT_MATTER_FLAGS)

    def run(self, path: str, example_language: str) -> FrontMatterData:
        """Check the file, returning its front matter."""
        fullpath, data = _check_documentation_file(
            path, self.options, registry_file_extension_check, self.options.front_matter
        )
        _check_contents(path, fullpath, self.options.contents, example_language)
        return data

    def run_all(self, files: Iterable[str], example_language: str) -> None:
        """Check every file, raising MultiCheckError with all failures."""
        _run_each(self.run, files, example_language)