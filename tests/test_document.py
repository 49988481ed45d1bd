import re

import pytest

from tfproviderdocs.contents.document import (
    CheckArgumentsSectionOptions,
    CheckAttributesSectionOptions,
    CheckExamplesSectionOptions,
    CheckOptions,
    ContentsError,
    Document,
    resource_name,
)
from tfproviderdocs.markdown import fenced_code_block_language

FULL = '''---
subcategory: "Example"
layout: "test"
page_title: "Test: test_thing"
description: |-
  Manages a thing.
---

# Resource: test_thing

Manages a thing.

## Example Usage

```terraform
resource "test_thing" "example" {
  name = "example"
}
```

## Argument Reference

The following arguments are supported:

* `name` - (Required) Name of the thing.
* `tags` - (Optional) Tags of the thing.

## Attributes Reference

In addition to all arguments above, the following attributes are exported:

* `id` - Identifier of the thing.

## Timeouts

* `create` - (Default `10m`) How long to wait for creation.

## Import

Things can be imported using the `name`, e.g.

```
$ terraform import test_thing.example example
```
'''

ARGUMENTS_LIST = "* `name` - (Required) Name of the thing.\n* `tags` - (Optional) Tags of the thing.\n"
BYLINE = "In addition to all arguments above, the following attributes are exported:"


def _variant(*replacements):
    content = FULL
    for old, new in replacements:
        assert old in content
        content = content.replace(old, new)
    return content


def _document(tmp_path, content, provider_name="test", name="thing.md"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    doc = Document(str(path), provider_name)
    doc.parse()
    return doc


# Document construction and parsing


def test_new_document():
    doc = Document("docs/r/thing.md", "test")
    assert doc.provider_name == "test"
    assert doc.resource_name == "test_thing"
    assert doc.path == "docs/r/thing.md"
    assert doc.check_options is None


def test_resource_name_multiple_extensions():
    assert resource_name("test", "thing.html.markdown") == "test_thing"


def test_resource_name_without_extension():
    with pytest.raises(ValueError):
        resource_name("test", "thing")


def test_parse_empty(tmp_path):
    doc = _document(tmp_path, "")
    assert doc.metadata == {}
    assert doc.sections.title is None
    assert doc.sections.arguments is None


def test_parse_full(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.metadata["page_title"] == "Test: test_thing"
    assert doc.sections.title.heading.text == "Resource: test_thing"
    names = [item.name for item in doc.sections.arguments.schema_attribute_lists[0].items]
    assert names == ["name", "tags"]


def test_parse_missing_file(tmp_path):
    doc = Document(str(tmp_path / "missing.md"), "test")
    with pytest.raises(ContentsError, match="error reading file"):
        doc.parse()


def test_parse_unterminated_traits(tmp_path):
    content = _variant(("(Required) Name of the thing.", "(Required Name of the thing."))
    with pytest.raises(ContentsError, match="sections"):
        _document(tmp_path, content)


# Full check


def test_check_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check(None) is None
    assert doc.check_options is None


def test_check_passing_with_options(tmp_path):
    doc = _document(tmp_path, FULL)
    options = CheckOptions(
        arguments_section=CheckArgumentsSectionOptions(require_schema_ordering=True),
        attributes_section=CheckAttributesSectionOptions(require_schema_ordering=True),
        examples_section=CheckExamplesSectionOptions("terraform"),
    )
    assert doc.check(options) is None
    assert doc.check_options is options


def test_check_reports_first_failure(tmp_path):
    doc = _document(tmp_path, _variant(("## Argument Reference\n\n", "")))
    with pytest.raises(ContentsError, match="missing arguments section"):
        doc.check(None)


# Arguments section


def test_arguments_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_arguments_section() is None
    assert doc.sections.arguments.heading.text == "Argument Reference"


@pytest.mark.parametrize(
    "replacements, message",
    [
        ((("## Argument Reference\n\n", ""),), "missing arguments section: ## Argument Reference"),
        (
            (("## Argument Reference", "### Argument Reference"),),
            "arguments section heading level (3) should be: 2",
        ),
        (
            (("## Argument Reference", "## Arguments"),),
            "arguments section heading (Arguments) should be: Argument Reference",
        ),
    ],
)
def test_arguments_errors(tmp_path, replacements, message):
    doc = _document(tmp_path, _variant(*replacements))
    with pytest.raises(ContentsError, match=re.escape(message)):
        doc.check_arguments_section()


def _wrong_argument_order():
    reversed_list = "* `tags` - (Optional) Tags of the thing.\n* `name` - (Required) Name of the thing.\n"
    return _variant((ARGUMENTS_LIST, reversed_list))


def test_arguments_wrong_list_order_without_option(tmp_path):
    doc = _document(tmp_path, _wrong_argument_order())
    assert doc.check_arguments_section() is None
    assert not doc.sections.arguments.schema_attribute_lists[0].is_sorted_by_name()


def test_arguments_wrong_list_order_with_option(tmp_path):
    doc = _document(tmp_path, _wrong_argument_order())
    doc.check_options = CheckOptions(
        arguments_section=CheckArgumentsSectionOptions(require_schema_ordering=True)
    )
    with pytest.raises(ContentsError, match="arguments section is not sorted by name"):
        doc.check_arguments_section()


# Attributes section


def test_attributes_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_attributes_section() is None
    assert doc.sections.attributes.paragraphs[0].text == BYLINE


def test_attributes_passing_alternate_byline(tmp_path):
    doc = _document(tmp_path, _variant((BYLINE, "No additional attributes are exported.")))
    assert doc.check_attributes_section() is None
    assert doc.sections.attributes.paragraphs[0].text == "No additional attributes are exported."


@pytest.mark.parametrize(
    "replacements, message",
    [
        ((( BYLINE + "\n\n", ""),), "attributes section byline should be:"),
        ((("## Attributes Reference\n\n", ""),), "missing attributes section: ## Attributes Reference"),
        (
            ((BYLINE, "The following attributes are exported:"),),
            "attributes section byline (The following attributes are exported:) should be:",
        ),
        (
            (("## Attributes Reference", "### Attributes Reference"),),
            "attributes section heading level (3) should be: 2",
        ),
        (
            (("## Attributes Reference", "## Attribute Reference"),),
            "attributes section heading (Attribute Reference) should be: Attributes Reference",
        ),
    ],
)
def test_attributes_errors(tmp_path, replacements, message):
    doc = _document(tmp_path, _variant(*replacements))
    with pytest.raises(ContentsError, match=re.escape(message)):
        doc.check_attributes_section()


def _wrong_attribute_order():
    return _variant(
        (
            "* `id` - Identifier of the thing.\n",
            "* `id` - Identifier of the thing.\n* `arn` - ARN of the thing.\n",
        )
    )


def test_attributes_wrong_list_order_without_option(tmp_path):
    doc = _document(tmp_path, _wrong_attribute_order())
    assert doc.check_attributes_section() is None
    assert [item.name for item in doc.sections.attributes.schema_attribute_lists[0].items] == ["id", "arn"]


def test_attributes_wrong_list_order_with_option(tmp_path):
    doc = _document(tmp_path, _wrong_attribute_order())
    doc.check_options = CheckOptions(
        attributes_section=CheckAttributesSectionOptions(require_schema_ordering=True)
    )
    with pytest.raises(ContentsError, match="attributes section is not sorted by name"):
        doc.check_attributes_section()


# Example section


def test_example_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_example_section() is None
    assert fenced_code_block_language(doc.sections.example.fenced_code_blocks[0]) == "terraform"


@pytest.mark.parametrize(
    "replacements, message",
    [
        ((("```terraform", "```"),), "example section code block language (MISSING) should be: ```terraform"),
        ((("## Example Usage\n\n", ""),), "missing example section: ## Example Usage"),
        ((("## Example Usage", "### Example Usage"),), "example section heading level (3) should be: 2"),
        (
            (("## Example Usage", "## Examples"),),
            "example section heading (Examples) should be: Example Usage",
        ),
        ((("```terraform", "```hcl"),), "example section code block language (hcl) should be: ```terraform"),
        (
            (('resource "test_thing" "example"', 'resource "test_other" "example"'),),
            "example section code block text should contain resource name: test_thing",
        ),
    ],
)
def test_example_errors(tmp_path, replacements, message):
    doc = _document(tmp_path, _variant(*replacements))
    with pytest.raises(ContentsError, match=re.escape(message)):
        doc.check_example_section()


def test_example_other_language_skips_code_block_checks(tmp_path):
    doc = _document(tmp_path, _variant(("```terraform", "```hcl")))
    doc.check_options = CheckOptions(examples_section=CheckExamplesSectionOptions("typescript"))
    assert doc.check_example_section() is None
    assert fenced_code_block_language(doc.sections.example.fenced_code_blocks[0]) == "hcl"


# Import section


def test_import_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_import_section() is None
    assert doc.sections.import_.heading.text == "Import"


def test_import_absent(tmp_path):
    doc = _document(tmp_path, FULL.split("## Import")[0])
    assert doc.check_import_section() is None
    assert doc.sections.import_ is None


@pytest.mark.parametrize(
    "replacements, message",
    [
        (
            (("terraform import test_thing.example", "terraform import test_other.example"),),
            "import section code block text should contain resource name: test_thing",
        ),
        ((("## Import", "### Import"),), "import section heading level (3) should be: 2"),
        ((("## Import", "## Imports"),), "import section heading (Imports) should be: Import"),
    ],
)
def test_import_errors(tmp_path, replacements, message):
    doc = _document(tmp_path, _variant(*replacements))
    with pytest.raises(ContentsError, match=re.escape(message)):
        doc.check_import_section()


# Timeouts section


def test_timeouts_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_timeouts_section() is None
    assert len(doc.sections.timeouts.lists) == 1


# Title section


def test_title_passing(tmp_path):
    doc = _document(tmp_path, FULL)
    assert doc.check_title_section() is None
    assert doc.sections.title.heading.level == 1


def test_title_passing_data_source(tmp_path):
    doc = _document(tmp_path, _variant(("# Resource: test_thing", "# Data Source: test_thing")))
    assert doc.check_title_section() is None
    assert doc.sections.title.heading.text == "Data Source: test_thing"


@pytest.mark.parametrize(
    "replacements, message",
    [
        ((("# Resource: test_thing\n\n", ""),), "missing title section: # Resource: test_thing"),
        (
            (("# Resource: test_thing", "# test_thing"),),
            'title section heading (test_thing) should have prefix: "Data Source: " or "Resource: "',
        ),
        ((("# Resource: test_thing", "## Resource: test_thing"),), "title section heading level (2) should be: 1"),
        ((("# Resource: test_thing", "# Resource: test_other"),), "missing title section: # Resource: test_thing"),
        (
            (
                (
                    "# Resource: test_thing\n\n",
                    '# Resource: test_thing\n\n```terraform\nresource "test_thing" "x" {}\n```\n\n',
                ),
            ),
            "title section code examples should be in Example Usage section",
        ),
    ],
)
def test_title_errors(tmp_path, replacements, message):
    doc = _document(tmp_path, _variant(*replacements))
    with pytest.raises(ContentsError, match=re.escape(message)):
        doc.check_title_section()