"""Splitting a resource documentation page into its expected sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Union

from tfproviderdocs.markdown import FencedCodeBlock, Heading, _Node


@dataclass
class SchemaAttributeListItem:
    """One documented argument or attribute: ``name`` - (traits) description."""

    description: str = ""
    force_new: bool = False
    name: str = ""
    optional: bool = False
    required: bool = False
    type: str = ""


@dataclass
class SchemaAttributeList:
    """A root or nested list of documented arguments or attributes."""

    items: list[SchemaAttributeListItem] = field(default_factory=list)

    def is_sorted_by_name(self) -> bool:
        """Whether the items are in ascending order of name."""
        return all(earlier.name <= later.name for earlier, later in pairwise(self.items))


@dataclass
class SchemaAttributeSection:
    """An arguments or attributes section."""

    heading: Heading | None = None
    children: list[SchemaAttributeSection] = field(default_factory=list)
    fenced_code_blocks: list[FencedCodeBlock] = field(default_factory=list)
    lists: list[_Node] = field(default_factory=list)
    schema_attribute_lists: list[SchemaAttributeList] = field(default_factory=list)
    paragraphs: list[_Node] = field(default_factory=list)


@dataclass
class ExampleSection:
    """The example usage section."""

    heading: Heading | None = None
    children: list[ExampleSection] = field(default_factory=list)
    fenced_code_blocks: list[FencedCodeBlock] = field(default_factory=list)
    paragraphs: list[_Node] = field(default_factory=list)


@dataclass
class ImportSection:
    """The import section."""

    heading: Heading | None = None
    fenced_code_blocks: list[FencedCodeBlock] = field(default_factory=list)
    paragraphs: list[_Node] = field(default_factory=list)


@dataclass
class TimeoutsSection:
    """The timeouts section."""

    heading: Heading | None = None
    fenced_code_blocks: list[FencedCodeBlock] = field(default_factory=list)
    lists: list[_Node] = field(default_factory=list)
    paragraphs: list[_Node] = field(default_factory=list)


@dataclass
class TitleSection:
    """The top section of the page."""

    heading: Heading | None = None
    fenced_code_blocks: list[FencedCodeBlock] = field(default_factory=list)
    paragraphs: list[_Node] = field(default_factory=list)


@dataclass
class Sections:
    """All expected sections of a resource documentation page."""

    attributes: SchemaAttributeSection | None = None
    arguments: SchemaAttributeSection | None = None
    example: ExampleSection | None = None
    import_: ImportSection | None = None
    timeouts: TimeoutsSection | None = None
    title: TitleSection | None = None


_Section = Union[SchemaAttributeSection, ExampleSection, ImportSection, TimeoutsSection, TitleSection]


def parse_schema_attribute_list_item(node: _Node) -> SchemaAttributeListItem:
    """Read a list item of the form ``name - (Required/Optional[, ...]) description``."""
    item = SchemaAttributeListItem()

    for block in node.walk():
        if block.kind != "text_block":
            continue

        name, separator, full_description = block.text.partition(" - ")
        if not separator:
            continue

        item.name = name
        if not full_description.startswith("("):
            item.description = full_description
            break

        traits_end = full_description.find(")")
        if traits_end < 0:
            raise ValueError(f"unterminated traits in schema attribute list item: {block.text}")

        item.description = full_description[traits_end + 1 :]
        for trait in full_description[1:traits_end].split(", "):
            if trait in ("Boolean", "Number", "String"):
                item.type = trait
            elif trait in ("Forces new", "Forces new resource"):
                item.force_new = True
            elif trait == "Optional":
                item.optional = True
            elif trait == "Required":
                item.required = True
        break

    return item


def parse_schema_attribute_list(node: _Node) -> SchemaAttributeList:
    """Read every item of a list, nested items included, in document order."""
    return SchemaAttributeList(
        [parse_schema_attribute_list_item(child) for child in node.walk() if child.kind == "list_item"]
    )


class _SectionWalker:
    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name
        self.sections = Sections()
        self.current: _Section | None = None
        self.starting_level = 0

    def visit(self, node: _Node) -> None:
        if isinstance(node, FencedCodeBlock):
            if self.current is not None:
                self.current.fenced_code_blocks.append(node)
            return

        if isinstance(node, Heading):
            self._heading(node)
            return

        if node.kind == "list":
            if isinstance(self.current, SchemaAttributeSection):
                self.current.lists.append(node)
                self.current.schema_attribute_lists.append(parse_schema_attribute_list(node))
            elif isinstance(self.current, TimeoutsSection):
                self.current.lists.append(node)
            return

        if node.kind == "paragraph":
            if self.current is not None:
                self.current.paragraphs.append(node)
            return

        for child in node.children:
            self.visit(child)

    def _start(self, section: _Section, heading: Heading) -> None:
        self.current = section
        self.starting_level = heading.level

    def _heading(self, heading: Heading) -> None:
        sections = self.sections
        text = heading.text

        if heading.level == self.starting_level:
            self.current = None

        if sections.title is None and self.resource_name in text:
            sections.title = TitleSection(heading=heading)
            self._start(sections.title, heading)
        elif sections.example is None and text.startswith("Example"):
            sections.example = ExampleSection(heading=heading)
            self._start(sections.example, heading)
        elif sections.arguments is None and text.startswith("Argument"):
            sections.arguments = SchemaAttributeSection(heading=heading)
            self._start(sections.arguments, heading)
        elif sections.attributes is None and text.startswith("Attribute"):
            sections.attributes = SchemaAttributeSection(heading=heading)
            self._start(sections.attributes, heading)
        elif sections.timeouts is None and text.startswith("Timeout"):
            sections.timeouts = TimeoutsSection(heading=heading)
            self._start(sections.timeouts, heading)
        elif sections.import_ is None and text.startswith("Import"):
            sections.import_ = ImportSection(heading=heading)
            self._start(sections.import_, heading)
        else:
            self.current = None


def walk_sections(document: _Node, resource_name: str) -> Sections:
    """Collect the title, example, arguments, attributes, timeouts and import sections."""
    walker = _SectionWalker(resource_name)
    walker.visit(document)
    return walker.sections