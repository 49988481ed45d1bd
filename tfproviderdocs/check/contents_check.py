"""Contents checking of resource documentation files."""

from __future__ import annotations

from dataclasses import dataclass

from tfproviderdocs.check.file import CheckError, FileOptions
from tfproviderdocs.contents import document as contents


@dataclass
class ContentsOptions(FileOptions):
    """Whether contents are checked, and how."""

    enable: bool = False
    provider_name: str = ""
    require_schema_ordering: bool = False


class ContentsCheck:
    """Checks the section structure of a resource documentation file."""

    def __init__(self, options: ContentsOptions | None = None) -> None:
        self.options = options if options is not None else ContentsOptions()

    def run(self, path: str, example_language: str) -> None:
        """Check the file at the path, raising CheckError on failure."""
        if not self.options.enable:
            return

        check_options = contents.CheckOptions(
            arguments_section=contents.CheckArgumentsSectionOptions(
                require_schema_ordering=self.options.require_schema_ordering,
            ),
            attributes_section=contents.CheckAttributesSectionOptions(
                require_schema_ordering=self.options.require_schema_ordering,
            ),
            examples_section=contents.CheckExamplesSectionOptions(
                expected_code_block_language=example_language,
            ),
        )

        try:
            doc = contents.Document(path, self.options.provider_name)
            doc.parse()
        except (contents.ContentsError, ValueError) as err:
            raise CheckError(f"error parsing file: {err}") from err

        try:
            doc.check(check_options)
        except contents.ContentsError as err:
            raise CheckError(str(err)) from err