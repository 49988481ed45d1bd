"""Checks of the contents of a resource documentation page."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from tfproviderdocs import markdown
from tfproviderdocs.contents.sections import Sections, TimeoutsSection, walk_sections
from tfproviderdocs.markdown import (
    FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM,
    Heading,
    fenced_code_block_language,
    fenced_code_block_text,
)

ATTRIBUTES_SECTION_BYLINES = (
    "In addition to all arguments above, the following attributes are exported:",
    "No additional attributes are exported.",
)


class ContentsError(Exception):
    """A documentation page does not have the expected contents."""


@dataclass
class CheckArgumentsSectionOptions:
    """Options for checking the arguments section."""

    require_schema_ordering: bool = False


@dataclass
class CheckAttributesSectionOptions:
    """Options for checking the attributes section."""

    require_schema_ordering: bool = False


@dataclass
class CheckExamplesSectionOptions:
    """Options for checking the example section."""

    expected_code_block_language: str = FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM


@dataclass
class CheckOptions:
    """Options for checking all sections of a page."""

    arguments_section: CheckArgumentsSectionOptions | None = None
    attributes_section: CheckAttributesSectionOptions | None = None
    examples_section: CheckExamplesSectionOptions | None = None


def resource_name(provider_name: str, file_name: str) -> str:
    """Return ``<provider>_<file name up to its first period>``."""
    stem, dot, _ = file_name.partition(".")
    if not dot:
        raise ValueError(f"file name has no extension: {file_name}")
    return f"{provider_name}_{stem}"


def _quote(text: str) -> str:
    return json.dumps(text)


class Document:
    """A resource documentation page and the checks of its sections."""

    def __init__(self, path: str, provider_name: str) -> None:
        self.provider_name = provider_name
        self.resource_name = resource_name(provider_name, os.path.basename(path))
        self.path = path
        self.check_options: CheckOptions | None = None
        self.sections = Sections()
        self.metadata: dict[str, Any] = {}
        self.source = b""
        self.document: Any = None

    def parse(self) -> None:
        """Read the file and split it into sections."""
        try:
            with open(self.path, "rb") as handle:
                self.source = handle.read()
        except OSError as err:
            raise ContentsError(f"error reading file ({self.path}): {err}") from err

        self.document, self.metadata = markdown.parse(self.source)

        try:
            self.sections = walk_sections(self.document, self.resource_name)
        except ValueError as err:
            raise ContentsError(f"error parsing file ({self.path}) sections: {err}") from err

    def check(self, options: CheckOptions | None) -> None:
        """Run every section check, raising ContentsError on the first failure."""
        self.check_options = options
        self.check_title_section()
        self.check_example_section()
        self.check_arguments_section()
        self.check_attributes_section()
        self.check_timeouts_section()
        self.check_import_section()

    @staticmethod
    def _check_heading(label: str, heading: Heading, expected_text: str) -> None:
        if heading.level != 2:
            raise ContentsError(f"{label} section heading level ({heading.level}) should be: 2")
        if heading.text != expected_text:
            raise ContentsError(f"{label} section heading ({heading.text}) should be: {expected_text}")

    def check_title_section(self) -> None:
        """Check the top heading names the resource with the expected prefix."""
        section = self.sections.title
        if section is None:
            raise ContentsError(f"missing title section: # Resource: {self.resource_name}")

        heading = section.heading
        if heading.level != 1:
            raise ContentsError(f"title section heading level ({heading.level}) should be: 1")

        text = heading.text
        if not text.startswith(("Data Source: ", "Resource: ")):
            raise ContentsError(
                f'title section heading ({text}) should have prefix: "Data Source: " or "Resource: "'
            )

        if section.fenced_code_blocks:
            raise ContentsError("title section code examples should be in Example Usage section")

    def check_example_section(self) -> None:
        """Check the Example Usage heading and its code blocks."""
        options = CheckExamplesSectionOptions()
        if self.check_options is not None and self.check_options.examples_section is not None:
            options = self.check_options.examples_section

        section = self.sections.example
        if section is None:
            raise ContentsError("missing example section: ## Example Usage")

        self._check_heading("example", section.heading, "Example Usage")

        # Converted examples may keep original terraform blocks when conversion fails.
        if options.expected_code_block_language != FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM:
            return

        for block in section.fenced_code_blocks:
            language = fenced_code_block_language(block)
            if language != options.expected_code_block_language:
                raise ContentsError(
                    f"example section code block language ({language}) should be: "
                    f"```{options.expected_code_block_language}"
                )
            if self.resource_name not in fenced_code_block_text(block):
                raise ContentsError(
                    f"example section code block text should contain resource name: {self.resource_name}"
                )

    def check_arguments_section(self) -> None:
        """Check the Argument Reference heading and, optionally, list ordering."""
        options = CheckArgumentsSectionOptions()
        if self.check_options is not None and self.check_options.arguments_section is not None:
            options = self.check_options.arguments_section

        section = self.sections.arguments
        if section is None:
            raise ContentsError("missing arguments section: ## Argument Reference")

        self._check_heading("arguments", section.heading, "Argument Reference")

        if options.require_schema_ordering and not all(
            attribute_list.is_sorted_by_name() for attribute_list in section.schema_attribute_lists
        ):
            raise ContentsError("arguments section is not sorted by name")

    def check_attributes_section(self) -> None:
        """Check the Attributes Reference heading, byline and, optionally, ordering."""
        options = CheckAttributesSectionOptions()
        if self.check_options is not None and self.check_options.attributes_section is not None:
            options = self.check_options.attributes_section

        section = self.sections.attributes
        if section is None:
            raise ContentsError("missing attributes section: ## Attributes Reference")

        self._check_heading("attributes", section.heading, "Attributes Reference")

        first, second = ATTRIBUTES_SECTION_BYLINES
        if not section.paragraphs:
            raise ContentsError(f"attributes section byline should be: {_quote(first)} or {_quote(second)}")
        if len(section.paragraphs) == 1:
            text = section.paragraphs[0].text
            if text not in ATTRIBUTES_SECTION_BYLINES:
                raise ContentsError(
                    f"attributes section byline ({text}) should be: {_quote(first)} or {_quote(second)}"
                )

        if options.require_schema_ordering and not all(
            attribute_list.is_sorted_by_name() for attribute_list in section.schema_attribute_lists
        ):
            raise ContentsError("attributes section is not sorted by name")

    def check_timeouts_section(self) -> TimeoutsSection | None:
        """Accept any form of timeouts section and return it, or None if absent."""
        section = self.sections.timeouts
        if section is None:
            return None
        return section

    def check_import_section(self) -> None:
        """Check the optional Import heading and that its code names the resource."""
        section = self.sections.import_
        if section is None:
            return

        self._check_heading("import", section.heading, "Import")

        for block in section.fenced_code_blocks:
            if self.resource_name not in fenced_code_block_text(block):
                raise ContentsError(
                    f"import section code block text should contain resource name: {self.resource_name}"
                )