"""Checks of the YAML front matter of documentation files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

import yaml

from tfproviderdocs.check.file import CheckError


@dataclass
class FrontMatterData:
    """The known front matter keys; None where a key is absent."""

    description: str | None = None
    layout: str | None = None
    page_title: str | None = None
    sidebar_current: str | None = None
    subcategory: str | None = None


@dataclass
class FrontMatterOptions:
    """Which front matter keys are forbidden, required or restricted."""

    allowed_subcategories: list[str] = field(default_factory=list)
    no_description: bool = False
    no_layout: bool = False
    no_page_title: bool = False
    no_sidebar_current: bool = False
    no_subcategory: bool = False
    require_description: bool = False
    require_layout: bool = False
    require_page_title: bool = False
    require_subcategory: bool = False


def _scalar_text(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise CheckError(f"error parsing YAML frontmatter: cannot read {key} of type {type(value).__name__} as text")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _load(src: bytes | str) -> FrontMatterData:
    try:
        text = src.decode("utf-8") if isinstance(src, bytes) else src
        first = next(yaml.safe_load_all(text), None)
    except (UnicodeDecodeError, yaml.YAMLError) as err:
        raise CheckError(f"error parsing YAML frontmatter: {err}") from err

    if first is None:
        return FrontMatterData()
    if not isinstance(first, dict):
        raise CheckError(
            f"error parsing YAML frontmatter: cannot read {type(first).__name__} as front matter"
        )
    values = {item.name: _scalar_text(item.name, first.get(item.name)) for item in fields(FrontMatterData)}
    return FrontMatterData(**values)


def is_allowed_subcategory(subcategory: str, allowed_subcategories: list[str]) -> bool:
    """Whether the subcategory is one of the allowed ones."""
    return subcategory in allowed_subcategories


class FrontMatterCheck:
    """Checks front matter against a set of options."""

    def __init__(self, options: FrontMatterOptions | None = None) -> None:
        self.options = options if options is not None else FrontMatterOptions()

    def run(self, src: bytes | str) -> FrontMatterData:
        """Parse and check the front matter, returning its data."""
        data = _load(src)
        options = self.options

        forbidden = [
            (options.no_description, data.description, "description"),
            (options.no_layout, data.layout, "layout"),
            (options.no_page_title, data.page_title, "page_title"),
            (options.no_sidebar_current, data.sidebar_current, "sidebar_current"),
            (options.no_subcategory, data.subcategory, "subcategory"),
        ]
        for enabled, value, key in forbidden:
            if enabled and value is not None:
                raise CheckError(f"YAML frontmatter should not contain {key}")

        required = [
            (options.require_description, data.description, "description"),
            (options.require_layout, data.layout, "layout"),
            (options.require_page_title, data.page_title, "page_title"),
            (options.require_subcategory, data.subcategory, "subcategory"),
        ]
        for enabled, value, key in required:
            if enabled and value is None:
                raise CheckError(f"YAML frontmatter missing required {key}")

        allowed = options.allowed_subcategories
        if allowed and data.subcategory is not None and not is_allowed_subcategory(data.subcategory, allowed):
            listed = ", ".join(json.dumps(item) for item in allowed)
            raise CheckError(
                f"YAML frontmatter subcategory ({data.subcategory}) does not match allowed "
                f"subcategories ([]string{{{listed}}})"
            )

        return data