"""The ``check`` command."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from tfproviderdocs.check.contents_check import ContentsOptions
from tfproviderdocs.check.directory import get_directories
from tfproviderdocs.check.file import CheckError
from tfproviderdocs.check.file_mismatch import FileMismatchOptions
from tfproviderdocs.check.frontmatter import FrontMatterOptions
from tfproviderdocs.check.legacy import (
    LegacyDataSourceFileOptions,
    LegacyGuideFileOptions,
    LegacyIndexFileOptions,
    LegacyResourceFileOptions,
)
from tfproviderdocs.check.registry import (
    RegistryDataSourceFileOptions,
    RegistryGuideFileOptions,
    RegistryIndexFileOptions,
    RegistryResourceFileOptions,
)
from tfproviderdocs.check.runner import (
    RESOURCE_TYPE_DATA_SOURCE,
    RESOURCE_TYPE_RESOURCE,
    Check,
    CheckOptions,
)
from tfproviderdocs.command.output import (
    DEFAULT_LOG_LEVEL,
    Ui,
    add_log_level_argument,
    configure_logging,
    log_level_help,
)
from tfproviderdocs.command.schemas import (
    SchemaError,
    allowed_subcategories_file,
    provider_name_from_current_directory,
    provider_name_from_path,
    provider_schemas,
    provider_schemas_data_sources,
    provider_schemas_resources,
)

logger = logging.getLogger(__name__)

_OPTION_HELP = (
    ("-allowed-guide-subcategories", "Comma separated list of allowed guide frontmatter subcategories."),
    (
        "-allowed-guide-subcategories-file",
        "Path to newline separated file of allowed guide frontmatter subcategories.",
    ),
    (
        "-allowed-resource-subcategories",
        "Comma separated list of allowed data source and resource frontmatter subcategories.",
    ),
    (
        "-allowed-resource-subcategories-file",
        "Path to newline separated file of allowed data source and resource frontmatter subcategories.",
    ),
    ("-enable-contents-check", "(Experimental) Enable contents checking."),
    (
        "-ignore-cdktf-missing-files",
        "Ignore checks for missing CDK for Terraform documentation files when iteratively "
        "introducing them in large providers.",
    ),
    ("-ignore-file-mismatch-data-sources", "Comma separated list of data sources to ignore mismatched/extra files."),
    ("-ignore-file-mismatch-resources", "Comma separated list of resources to ignore mismatched/extra files."),
    ("-ignore-file-missing-data-sources", "Comma separated list of data sources to ignore missing files."),
    ("-ignore-file-missing-resources", "Comma separated list of resources to ignore missing files."),
    (
        "-provider-name",
        "Terraform Provider short name (e.g. aws). Automatically determined if -provider-source is "
        "given or if current working directory or provided path is prefixed with terraform-provider-*.",
    ),
    (
        "-provider-source",
        "Terraform Provider source address (e.g. registry.terraform.io/hashicorp/aws) for Terraform "
        "CLI 0.13 and later -providers-schema-json. Automatically sets -provider-name by dropping "
        "hostname and namespace prefix.",
    ),
    ("-providers-schema-json", "Path to terraform providers schema -json file. Enables enhanced validations."),
    ("-require-guide-subcategory", "Require guide frontmatter subcategory."),
    ("-require-resource-subcategory", "Require data source and resource frontmatter subcategory."),
    (
        "-require-schema-ordering",
        "Require schema attribute lists to be alphabetically ordered (requires -enable-contents-check).",
    ),
)

_STRING_FLAGS = (
    "allowed-guide-subcategories",
    "allowed-guide-subcategories-file",
    "allowed-resource-subcategories",
    "allowed-resource-subcategories-file",
    "ignore-file-mismatch-data-sources",
    "ignore-file-mismatch-resources",
    "ignore-file-missing-data-sources",
    "ignore-file-missing-resources",
    "provider-name",
    "provider-source",
    "providers-schema-json",
)

_BOOL_FLAGS = (
    "enable-contents-check",
    "ignore-cdktf-missing-files",
    "require-guide-subcategory",
    "require-resource-subcategory",
    "require-schema-ordering",
)

_UNKNOWN_PROVIDER_MESSAGE = """Unknown provider name for enabling Terraform Provider schema checks.

Check that the current working directory or provided path is prefixed with terraform-provider-*."""


@dataclass
class CheckCommandConfig:
    """Settings of one run of the check command."""

    allowed_guide_subcategories: str = ""
    allowed_guide_subcategories_file: str = ""
    allowed_resource_subcategories: str = ""
    allowed_resource_subcategories_file: str = ""
    enable_contents_check: bool = False
    ignore_cdktf_missing_files: bool = False
    ignore_file_mismatch_data_sources: str = ""
    ignore_file_mismatch_resources: str = ""
    ignore_file_missing_data_sources: str = ""
    ignore_file_missing_resources: str = ""
    log_level: str = DEFAULT_LOG_LEVEL
    path: str = ""
    provider_name: str = ""
    provider_source: str = ""
    providers_schema_json: str = ""
    require_guide_subcategory: bool = False
    require_resource_subcategory: bool = False
    require_schema_ordering: bool = False


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest=argparse.SUPPRESS, nargs=0, default=argparse.SUPPRESS)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        raise _UsageError("")


def _tabulate(rows: Sequence[tuple[str, str]]) -> str:
    cells = [(f"  {name}", description) for name, description in rows]
    name_width = max(len(name) for name, _ in cells) + 1
    description_width = max(len(description) for _, description in cells) + 1
    return "".join(f"{name:<{name_width}}{description:<{description_width}}\n" for name, description in cells)


def _split(value: str) -> list[str]:
    return value.split(",") if value else []


class CheckCommand:
    """Checks the documentation of a Terraform Provider codebase."""

    def __init__(self, ui: Ui) -> None:
        self.ui = ui

    def help(self) -> str:
        """Return the usage text of the command."""
        options = _tabulate((log_level_help(),) + _OPTION_HELP)
        text = f"""
Usage: tfproviderdocs check [options] [PATH]

  Performs documentation directory and file checks against the given Terraform Provider codebase.

Options:

{options}
"""
        return text.strip()

    def name(self) -> str:
        return "check"

    def synopsis(self) -> str:
        return "Checks Terraform Provider documentation"

    def _parser(self) -> argparse.ArgumentParser:
        parser = _ArgumentParser(prog=self.name(), add_help=False, allow_abbrev=False)
        parser.add_argument("-h", "-help", "--help", action=_HelpAction)
        add_log_level_argument(parser)
        for flag in _STRING_FLAGS:
            parser.add_argument(f"-{flag}", f"--{flag}", dest=flag.replace("-", "_"), default="")
        for flag in _BOOL_FLAGS:
            parser.add_argument(f"-{flag}", f"--{flag}", dest=flag.replace("-", "_"), action="store_true")
        parser.add_argument("paths", nargs="*")
        return parser

    def run(self, args: Sequence[str]) -> int:
        """Run the checks, returning the exit status."""
        try:
            namespace = self._parser().parse_args(list(args))
        except _UsageError as err:
            if str(err):
                self.ui.error(str(err))
            self.ui.info(self.help())
            return 1

        values = vars(namespace)
        paths = values.pop("paths")
        config = CheckCommandConfig(**values)
        if len(paths) == 1:
            config.path = paths[0]

        configure_logging(self.name(), config.log_level)
        self._resolve_provider_name(config)

        try:
            directories = get_directories(config.path)
        except (OSError, ValueError) as err:
            self.ui.error(f"Error getting Terraform Provider documentation directories: {err}")
            return 1

        if not directories:
            if config.path:
                self.ui.error(f"No Terraform Provider documentation directories found in path: {config.path}")
            else:
                self.ui.error("No Terraform Provider documentation directories found in current path")
            return 1

        try:
            allowed_guide = self._allowed(config.allowed_guide_subcategories, config.allowed_guide_subcategories_file)
        except SchemaError as err:
            self.ui.error(f"Error getting allowed guide subcategories: {err}")
            return 1

        try:
            allowed_resource = self._allowed(
                config.allowed_resource_subcategories, config.allowed_resource_subcategories_file
            )
        except SchemaError as err:
            self.ui.error(f"Error getting allowed resource subcategories: {err}")
            return 1

        schema_data_sources: dict[str, Any] | None = None
        schema_resources: dict[str, Any] | None = None
        if config.providers_schema_json:
            try:
                ps = provider_schemas(config.providers_schema_json)
            except SchemaError as err:
                self.ui.error(f"Error enabling Terraform Provider schema checks: {err}")
                return 1

            if not config.provider_name:
                self.ui.error(_UNKNOWN_PROVIDER_MESSAGE)
                return 1

            schema_data_sources = provider_schemas_data_sources(ps, config.provider_name, config.provider_source)
            schema_resources = provider_schemas_resources(ps, config.provider_name, config.provider_source)

        options = self._check_options(config, allowed_guide, allowed_resource, schema_data_sources, schema_resources)

        try:
            Check(options).run(directories)
        except CheckError as err:
            self.ui.error(f"Error checking Terraform Provider documentation: {err}")
            return 1

        return 0

    @staticmethod
    def _resolve_provider_name(config: CheckCommandConfig) -> None:
        if not config.provider_name and config.provider_source:
            config.provider_name = config.provider_source.split("/")[-1]

        if not config.provider_name:
            if config.path:
                config.provider_name = provider_name_from_path(config.path)
            else:
                config.provider_name = provider_name_from_current_directory()

        if config.provider_name:
            logger.debug("Found provider name: %s", config.provider_name)
        else:
            logger.warning("Unable to determine provider name. Contents and enhanced validations may fail.")

    @staticmethod
    def _allowed(listed: str, file_path: str) -> list[str]:
        if file_path:
            return allowed_subcategories_file(file_path)
        return _split(listed)

    @staticmethod
    def _check_options(
        config: CheckCommandConfig,
        allowed_guide: list[str],
        allowed_resource: list[str],
        schema_data_sources: dict[str, Any] | None,
        schema_resources: dict[str, Any] | None,
    ) -> CheckOptions:
        base_path = config.path

        def guide_front_matter() -> FrontMatterOptions:
            return FrontMatterOptions(
                allowed_subcategories=list(allowed_guide),
                require_subcategory=config.require_guide_subcategory,
            )

        def resource_front_matter() -> FrontMatterOptions:
            return FrontMatterOptions(
                allowed_subcategories=list(allowed_resource),
                require_subcategory=config.require_resource_subcategory,
            )

        def contents() -> ContentsOptions:
            return ContentsOptions(
                enable=config.enable_contents_check,
                require_schema_ordering=config.require_schema_ordering,
            )

        return CheckOptions(
            data_source_file_mismatch=FileMismatchOptions(
                ignore_file_mismatch=_split(config.ignore_file_mismatch_data_sources),
                ignore_file_missing=_split(config.ignore_file_missing_data_sources),
                provider_name=config.provider_name,
                resource_type=RESOURCE_TYPE_DATA_SOURCE,
                schemas=schema_data_sources or {},
            ),
            legacy_data_source_file=LegacyDataSourceFileOptions(
                base_path=base_path, front_matter=resource_front_matter()
            ),
            legacy_guide_file=LegacyGuideFileOptions(base_path=base_path, front_matter=guide_front_matter()),
            legacy_index_file=LegacyIndexFileOptions(base_path=base_path),
            legacy_resource_file=LegacyResourceFileOptions(
                base_path=base_path,
                contents=contents(),
                front_matter=resource_front_matter(),
                provider_name=config.provider_name,
            ),
            provider_name=config.provider_name,
            provider_source=config.provider_source,
            registry_data_source_file=RegistryDataSourceFileOptions(
                base_path=base_path, front_matter=resource_front_matter()
            ),
            registry_guide_file=RegistryGuideFileOptions(base_path=base_path, front_matter=guide_front_matter()),
            registry_index_file=RegistryIndexFileOptions(base_path=base_path),
            registry_resource_file=RegistryResourceFileOptions(
                base_path=base_path,
                contents=contents(),
                front_matter=resource_front_matter(),
                provider_name=config.provider_name,
            ),
            resource_file_mismatch=FileMismatchOptions(
                ignore_file_mismatch=_split(config.ignore_file_mismatch_resources),
                ignore_file_missing=_split(config.ignore_file_missing_resources),
                provider_name=config.provider_name,
                resource_type=RESOURCE_TYPE_RESOURCE,
                schemas=schema_resources or {},
            ),
            ignore_cdktf_missing_files=config.ignore_cdktf_missing_files,
        )