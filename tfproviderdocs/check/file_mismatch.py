"""Checks that documentation files and provider schema entries match."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from tfproviderdocs.check.file import CheckError, FileOptions, MultiCheckError
from tfproviderdocs.check.file_extension import trim_file_extension

logger = logging.getLogger(__name__)


@dataclass
class FileMismatchOptions(FileOptions):
    """Schemas to compare against and names to leave out of the comparison."""

    ignore_file_mismatch: list[str] = field(default_factory=list)
    ignore_file_missing: list[str] = field(default_factory=list)
    provider_name: str = ""
    resource_type: str = ""
    schemas: dict[str, Any] = field(default_factory=dict)


def file_resource_name(provider_name: str, file_name: str) -> str:
    """Return the resource name a documentation file stands for."""
    return f"{provider_name}_{trim_file_extension(file_name)}"


def file_has_resource(schema_resources: Mapping[str, Any], provider_name: str, file: str) -> bool:
    """Whether the file's resource name is among the schemas."""
    return file_resource_name(provider_name, file) in schema_resources


def resource_has_file(files: Sequence[str], provider_name: str, resource_name: str) -> bool:
    """Whether any of the files documents the resource."""
    return any(file_resource_name(provider_name, file) == resource_name for file in files)


def resource_names(resources: Mapping[str, Any]) -> list[str]:
    """Return the resource names, sorted."""
    return sorted(resources)


class FileMismatchCheck:
    """Finds extraneous and missing documentation files."""

    def __init__(self, options: FileMismatchOptions | None = None) -> None:
        self.options = options if options is not None else FileMismatchOptions()

    def run(self, files: Sequence[str] | None) -> None:
        """Raise MultiCheckError listing extraneous files and missing resources."""
        options = self.options
        if not files:
            logger.debug("Skipping %s file mismatch checks due to missing file list", options.resource_type)
            return
        if not options.schemas:
            logger.debug("Skipping %s file mismatch checks due to missing schemas", options.resource_type)
            return

        extra_files = [
            file
            for file in files
            if not file_has_resource(options.schemas, options.provider_name, file)
            and not self.ignore_file_mismatch(file)
        ]
        missing = [
            name
            for name in resource_names(options.schemas)
            if not resource_has_file(files, options.provider_name, name)
            and not self.ignore_file_missing(name)
        ]

        errors = [
            CheckError(
                f"matching {options.resource_type} for documentation file ({file}) not found, "
                "file is extraneous or incorrectly named"
            )
            for file in extra_files
        ]
        errors.extend(
            CheckError(f"missing documentation file for {options.resource_type}: {name}") for name in missing
        )
        if errors:
            raise MultiCheckError(errors)

    def ignore_file_mismatch(self, file: str) -> bool:
        """Whether an extraneous file is to be ignored."""
        return file_resource_name(self.options.provider_name, file) in self.options.ignore_file_mismatch

    def ignore_file_missing(self, resource_name: str) -> bool:
        """Whether a resource without a file is to be ignored."""
        return resource_name in self.options.ignore_file_missing