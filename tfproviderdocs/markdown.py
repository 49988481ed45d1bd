"""Markdown parsing into a small block tree, with YAML front matter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

import yaml
from markdown_it import MarkdownIt
from markdown_it.token import Token

FENCED_CODE_BLOCK_LANGUAGE_HCL = "hcl"
FENCED_CODE_BLOCK_LANGUAGE_MISSING = "MISSING"
FENCED_CODE_BLOCK_LANGUAGE_TERRAFORM = "terraform"

_MARKDOWN = MarkdownIt("commonmark")

_BLOCK_KINDS = {
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "list_item",
    "blockquote": "blockquote",
    "paragraph": "paragraph",
}


@dataclass(eq=False)
class _Node:
    """A block of a parsed document.

    ``kind`` is one of ``document``, ``heading``, ``paragraph``, ``text_block``
    (a paragraph of a tight list item), ``list``, ``list_item``, ``blockquote``,
    ``fenced_code_block`` or the name of another block type.
    """

    kind: str
    text: str = ""
    children: list[_Node] = field(default_factory=list)

    def walk(self) -> Iterator[_Node]:
        """Yield this node and all its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class Heading(_Node):
    """An ATX or setext heading; ``text`` is its plain inline text."""

    kind: str = "heading"
    level: int = 0


@dataclass(eq=False)
class FencedCodeBlock(_Node):
    """A fenced code block with its info string and raw content."""

    kind: str = "fenced_code_block"
    info: str = ""
    content: str = ""

    @property
    def language(self) -> str:
        """The first word of the info string, or an empty string."""
        words = self.info.split()
        return words[0] if words else ""


def _is_separator(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= 3 and set(stripped) == {"-"}


def _split_front_matter(text: str) -> tuple[str, dict[str, Any]]:
    lines = text.splitlines(keepends=True)
    if not lines or not _is_separator(lines[0]):
        return text, {}

    closing = next(
        (index for index, line in enumerate(lines[1:], start=1) if _is_separator(line)),
        len(lines),
    )
    meta_text = "".join(lines[1:closing])
    body = "".join(lines[closing + 1 :])

    try:
        loaded = yaml.safe_load(meta_text)
    except yaml.YAMLError:
        loaded = None
    return body, loaded if isinstance(loaded, dict) else {}


def _inline_text(tokens: list[Token]) -> str:
    parts = []
    for token in tokens:
        if token.type in ("text", "code_inline"):
            parts.append(token.content)
        elif token.type == "image":
            parts.append(_inline_text(token.children or []))
    return "".join(parts)


def _open_node(token: Token) -> _Node:
    if token.type == "heading_open":
        return Heading(level=int(token.tag[1:]))
    base = token.type.removesuffix("_open")
    if base == "paragraph" and token.hidden:
        return _Node("text_block")
    return _Node(_BLOCK_KINDS.get(base, base))


def parse(source: str | bytes) -> tuple[_Node, dict[str, Any]]:
    """Parse Markdown into a document tree and its front matter metadata."""
    text = source.decode("utf-8", errors="replace") if isinstance(source, bytes) else source
    body, metadata = _split_front_matter(text)

    document = _Node("document")
    stack = [document]
    for token in _MARKDOWN.parse(body):
        if token.nesting == 1:
            node = _open_node(token)
            stack[-1].children.append(node)
            stack.append(node)
        elif token.nesting == -1:
            stack.pop()
        elif token.type == "inline":
            stack[-1].text = _inline_text(token.children or [])
        elif token.type == "fence":
            stack[-1].children.append(FencedCodeBlock(info=token.info.strip(), content=token.content))
        else:
            stack[-1].children.append(_Node(token.type))
    return document, metadata


def fenced_code_block_language(block: FencedCodeBlock | None) -> str:
    """Return the block's language, or ``MISSING`` when there is none."""
    if block is None or not block.language:
        return FENCED_CODE_BLOCK_LANGUAGE_MISSING
    return block.language


def fenced_code_block_text(block: FencedCodeBlock | None) -> str:
    """Return the block's text with surrounding whitespace removed."""
    if block is None:
        return ""
    return block.content.strip()