"""
Document model for issue descriptions (ADF subset).

Typed views over already-parsed JSON values. Nothing here builds nodes;
the validator recognizes a raw value and hands it back under these types.
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict

# --- Variant Sets ---
# Ordered: diagnostics enumerate them in this order.

VALID_BLOCK_TYPES: tuple[str, ...] = (
    "paragraph",
    "heading",
    "bulletList",
    "orderedList",
    "codeBlock",
    "listItem",
)
VALID_INLINE_TYPES: tuple[str, ...] = ("text", "hardBreak")
VALID_MARK_TYPES: tuple[str, ...] = ("strong", "em", "code", "link")

HeadingLevel = Literal[1, 2, 3, 4, 5, 6]

# --- Marks ---


class StrongMark(TypedDict):
    type: Literal["strong"]


class EmMark(TypedDict):
    type: Literal["em"]


class CodeMark(TypedDict):
    type: Literal["code"]


class LinkAttrs(TypedDict):
    href: str
    title: NotRequired[str]


class LinkMark(TypedDict):
    type: Literal["link"]
    attrs: LinkAttrs


ADFMark = StrongMark | EmMark | CodeMark | LinkMark

# --- Inline Nodes ---


class TextNode(TypedDict):
    type: Literal["text"]
    text: str
    marks: NotRequired[list[ADFMark]]


class HardBreakNode(TypedDict):
    type: Literal["hardBreak"]


ADFInlineNode = TextNode | HardBreakNode

# --- Block Nodes ---


class ParagraphNode(TypedDict):
    type: Literal["paragraph"]
    content: NotRequired[list[ADFInlineNode]]


class HeadingAttrs(TypedDict):
    level: HeadingLevel


class HeadingNode(TypedDict):
    type: Literal["heading"]
    attrs: HeadingAttrs
    content: NotRequired[list[ADFInlineNode]]


class CodeBlockAttrs(TypedDict, total=False):
    language: str


class CodeBlockNode(TypedDict):
    type: Literal["codeBlock"]
    attrs: NotRequired[CodeBlockAttrs]
    # Plain text only, never marked.
    content: NotRequired[list[TextNode]]


class ListItemNode(TypedDict):
    type: Literal["listItem"]
    content: list[ADFBlockNode]


class BulletListNode(TypedDict):
    type: Literal["bulletList"]
    content: list[ListItemNode]


class OrderedListNode(TypedDict):
    type: Literal["orderedList"]
    content: list[ListItemNode]


ADFBlockNode = (
    ParagraphNode
    | HeadingNode
    | BulletListNode
    | OrderedListNode
    | CodeBlockNode
    | ListItemNode
)

# --- Root ---


class ADFDocument(TypedDict):
    type: Literal["doc"]
    version: Literal[1]
    content: list[ADFBlockNode]


def is_adf_version(value: Any) -> bool:
    """True only for the integer 1 (bools are ints in Python)."""
    return isinstance(value, int) and not isinstance(value, bool) and value == 1


def is_adf_document(value: Any) -> bool:
    """
    Recognize the minimal root shape: tag, version and a content list.

    Nested nodes are not inspected; use ``validate_adf`` for the full grammar.
    """
    return (
        isinstance(value, dict)
        and value.get("type") == "doc"
        and is_adf_version(value.get("version"))
        and isinstance(value.get("content"), list)
    )
