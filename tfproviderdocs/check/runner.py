"""Runs every documentation check over a provider's documentation directories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from tfproviderdocs.check.directory import (
    CDKTF_INDEX_DIRECTORY,
    LEGACY_DATA_SOURCES_DIRECTORY,
    LEGACY_GUIDES_DIRECTORY,
    LEGACY_INDEX_DIRECTORY,
    LEGACY_RESOURCES_DIRECTORY,
    REGISTRY_DATA_SOURCES_DIRECTORY,
    REGISTRY_GUIDES_DIRECTORY,
    REGISTRY_INDEX_DIRECTORY,
    REGISTRY_RESOURCES_DIRECTORY,
    VALID_CDKTF_LANGUAGES,
    invalid_directories_check,
    mixed_directories_check,
    number_of_files_check,
)
from tfproviderdocs.check.file import CheckError, MultiCheckError
from tfproviderdocs.check.file_mismatch import FileMismatchCheck, FileMismatchOptions
from tfproviderdocs.check.legacy import (
    LegacyDataSourceFileCheck,
    LegacyDataSourceFileOptions,
    LegacyGuideFileCheck,
    LegacyGuideFileOptions,
    LegacyIndexFileCheck,
    LegacyIndexFileOptions,
    LegacyResourceFileCheck,
    LegacyResourceFileOptions,
)
from tfproviderdocs.check.registry import (
    RegistryDataSourceFileCheck,
    RegistryDataSourceFileOptions,
    RegistryGuideFileCheck,
    RegistryGuideFileOptions,
    RegistryIndexFileCheck,
    RegistryIndexFileOptions,
    RegistryResourceFileCheck,
    RegistryResourceFileOptions,
)
from tfproviderdocs.markdown import FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM

RESOURCE_TYPE_DATA_SOURCE = "data source"
RESOURCE_TYPE_RESOURCE = "resource"


@dataclass
class CheckOptions:
    """Options for every check of a documentation tree."""

    data_source_file_mismatch: FileMismatchOptions | None = None

    legacy_data_source_file: LegacyDataSourceFileOptions | None = None
    legacy_guide_file: LegacyGuideFileOptions | None = None
    legacy_index_file: LegacyIndexFileOptions | None = None
    legacy_resource_file: LegacyResourceFileOptions | None = None

    provider_name: str = ""
    provider_source: str = ""

    registry_data_source_file: RegistryDataSourceFileOptions | None = None
    registry_guide_file: RegistryGuideFileOptions | None = None
    registry_index_file: RegistryIndexFileOptions | None = None
    registry_resource_file: RegistryResourceFileOptions | None = None

    resource_file_mismatch: FileMismatchOptions | None = None

    ignore_cdktf_missing_files: bool = False


@dataclass
class _Layout:
    index: str
    data_sources: str
    guides: str
    resources: str
    data_source_check: object
    guide_check: object
    index_check: object
    resource_check: object


class Check:
    """Checks directory layout, file limits, file mismatches and each file."""

    def __init__(self, options: CheckOptions | None = None) -> None:
        self.options = options if options is not None else CheckOptions()

    def run(self, directories: Mapping[str, Sequence[str]]) -> int:
        """Check the directories, returning the number of files counted toward the limit.

        Layout and limit failures raise CheckError at once; all other failures
        are collected and raised together, sorted, as MultiCheckError.
        """
        invalid_directories_check(directories)
        mixed_directories_check(directories)
        number_of_files = number_of_files_check(directories)

        errors: list[CheckError] = []

        def attempt(action: Callable[..., object], *args: object) -> None:
            try:
                action(*args)
            except CheckError as err:
                errors.append(err)

        opts = self.options
        layouts = (
            _Layout(
                REGISTRY_INDEX_DIRECTORY,
                REGISTRY_DATA_SOURCES_DIRECTORY,
                REGISTRY_GUIDES_DIRECTORY,
                REGISTRY_RESOURCES_DIRECTORY,
                RegistryDataSourceFileCheck(opts.registry_data_source_file),
                RegistryGuideFileCheck(opts.registry_guide_file),
                RegistryIndexFileCheck(opts.registry_index_file),
                RegistryResourceFileCheck(opts.registry_resource_file),
            ),
            _Layout(
                LEGACY_INDEX_DIRECTORY,
                LEGACY_DATA_SOURCES_DIRECTORY,
                LEGACY_GUIDES_DIRECTORY,
                LEGACY_RESOURCES_DIRECTORY,
                LegacyDataSourceFileCheck(opts.legacy_data_source_file),
                LegacyGuideFileCheck(opts.legacy_guide_file),
                LegacyIndexFileCheck(opts.legacy_index_file),
                LegacyResourceFileCheck(opts.legacy_resource_file),
            ),
        )
        for layout in layouts:
            self._run_layout(directories, layout, attempt)

        if errors:
            flattened = MultiCheckError(errors).errors
            raise MultiCheckError(sorted(flattened, key=str))

        return number_of_files

    def _run_layout(
        self,
        directories: Mapping[str, Sequence[str]],
        layout: _Layout,
        attempt: Callable[..., None],
    ) -> None:
        opts = self.options

        data_sources_key = f"{layout.index}/{layout.data_sources}"
        if data_sources_key in directories:
            files = directories[data_sources_key]
            attempt(FileMismatchCheck(opts.data_source_file_mismatch).run, files)
            attempt(layout.data_source_check.run_all, files)

        guides_key = f"{layout.index}/{layout.guides}"
        if guides_key in directories:
            attempt(layout.guide_check.run_all, directories[guides_key])

        if layout.index in directories:
            attempt(layout.index_check.run_all, directories[layout.index])

        resources_key = f"{layout.index}/{layout.resources}"
        if resources_key in directories:
            files = directories[resources_key]
            attempt(FileMismatchCheck(opts.resource_file_mismatch).run, files)
            attempt(layout.resource_check.run_all, files, FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM)

        for language in VALID_CDKTF_LANGUAGES:
            prefix = f"{layout.index}/{CDKTF_INDEX_DIRECTORY}/{language}"

            cdktf_data_sources = f"{prefix}/{layout.data_sources}"
            if cdktf_data_sources in directories:
                files = directories[cdktf_data_sources]
                if not opts.ignore_cdktf_missing_files:
                    attempt(FileMismatchCheck(opts.data_source_file_mismatch).run, files)
                attempt(layout.data_source_check.run_all, files)

            cdktf_resources = f"{prefix}/{layout.resources}"
            if cdktf_resources in directories:
                files = directories[cdktf_resources]
                if not opts.ignore_cdktf_missing_files:
                    attempt(FileMismatchCheck(opts.resource_file_mismatch).run, files)
                attempt(layout.resource_check.run_all, files, language)