"""
ADF component core - strict structural validation of issue descriptions.

Takes an arbitrary, untrusted value (the deserialized form of a JSON
document) and either returns it typed as an ``ADFDocument`` or raises a
single ``ADFValidationError`` describing the first violation found.

Key behaviors:
- Depth-first, left-to-right, fail-fast: the first violation in document
  order is the one reported
- Shape checks (is it an object? an array? a string?) come before
  semantic checks (is the type known? is the level in range?)
- Errors are addressed by path: ``root``, ``content[0]``,
  ``content[0].content[1].marks[0]``, ``content[2].attrs.level``
- The input is returned as-is; nothing is copied, normalized or repaired

Messages are read by automated callers, so they name the offending
value and show the expected shape.
"""

from __future__ import annotations

from typing import Any, cast

from src.domain.adf import (
    VALID_BLOCK_TYPES,
    VALID_INLINE_TYPES,
    VALID_MARK_TYPES,
    ADFDocument,
    is_adf_document,
    is_adf_version,
)

# --- Errors ---


class ADFValidationError(Exception):
    """Raised for the first grammar violation in a document."""

    def __init__(self, message: str, path: str, details: str | None = None) -> None:
        self.message = message
        self.path = path
        self.details = details
        rendered = f"ADF validation failed at {path}: {message}"
        if details:
            rendered += f". {details}"
        super().__init__(rendered)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"message": self.message, "path": self.path, "details": self.details}


# --- Value Description Helpers ---

_MISSING = object()


def _kind(value: Any) -> str:
    """JSON kind of a value, as a caller would name it."""
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _show(value: Any) -> str:
    """Short rendering of an offending value."""
    if isinstance(value, str):
        return f"'{value}'"
    if value is _MISSING or value is None or isinstance(value, (dict, list)):
        return _kind(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _get(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key, _MISSING)
    return _MISSING


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _enumerate(types: tuple[str, ...]) -> str:
    return ", ".join(types)


def _with_integer_hint(details: str, value: Any, name: str) -> str:
    """Append guidance when a whole number arrives as a float (2.0)."""
    if isinstance(value, float) and value.is_integer():
        return f"{details.rstrip('.')}. {name} must be an integer: use {int(value)}, not {value}"
    return details


# --- Root ---


def validate_adf(doc: Any) -> ADFDocument:
    """
    Validate a complete document.

    Returns the same object, typed. Raises ADFValidationError on the first
    violation encountered.
    """
    if not isinstance(doc, dict):
        raise ADFValidationError(
            "Root must be an object",
            "root",
            f"Received {_kind(doc)}. "
            "Expected a JSON object like {type: 'doc', version: 1, content: []}",
        )

    if not is_adf_document(doc):
        issues: list[str] = []
        doc_type = doc.get("type", _MISSING)
        if doc_type != "doc":
            issues.append(f"type must be 'doc', got {_show(doc_type)}")
        version = doc.get("version", _MISSING)
        if not is_adf_version(version):
            issues.append(f"version must be 1, got {_show(version)}")
        content = doc.get("content", _MISSING)
        if not isinstance(content, list):
            issues.append(f"content must be an array, got {_kind(content)}")

        raise ADFValidationError(
            f"Invalid root structure: {'; '.join(issues)}",
            "root",
            _with_integer_hint(
                "Required structure: {type: 'doc', version: 1, content: []}",
                version,
                "version",
            ),
        )

    for index, node in enumerate(doc["content"]):
        _validate_block_node(node, f"content[{index}]")

    return cast(ADFDocument, doc)


# --- Block Nodes ---


def _validate_block_node(node: Any, path: str) -> None:
    if not isinstance(node, dict):
        raise ADFValidationError(
            "Block node must be an object",
            path,
            f"Received {_kind(node)}",
        )

    node_type = node.get("type")
    if not node_type or not isinstance(node_type, str):
        raise ADFValidationError(
            "Missing or invalid 'type' property",
            path,
            "Each node must have a 'type' string property. "
            f"Valid block types: {_enumerate(VALID_BLOCK_TYPES)}",
        )

    validator = _BLOCK_VALIDATORS.get(node_type)
    if validator is None:
        raise ADFValidationError(
            f"Invalid block node type '{node_type}'",
            path,
            f"Valid block types are: {_enumerate(VALID_BLOCK_TYPES)}",
        )

    validator(node, path)


def _validate_inline_content(node: dict[str, Any], path: str, label: str) -> None:
    """Optional inline content shared by paragraphs and headings."""
    if "content" not in node:
        return

    content = node["content"]
    if not isinstance(content, list):
        raise ADFValidationError(
            f"{label} 'content' must be an array of inline nodes",
            path,
            f"Got {_kind(content)}",
        )
    for index, inline in enumerate(content):
        _validate_inline_node(inline, f"{path}.content[{index}]")


def _validate_paragraph(node: dict[str, Any], path: str) -> None:
    _validate_inline_content(node, path, "Paragraph")


def _validate_heading(node: dict[str, Any], path: str) -> None:
    attrs = node.get("attrs")
    if not isinstance(attrs, dict):
        raise ADFValidationError(
            "Heading must have 'attrs' object",
            path,
            "Example: {type: 'heading', attrs: {level: 2}, content: [...]}",
        )

    level = attrs.get("level", _MISSING)
    if not _is_int(level) or not 1 <= level <= 6:
        raise ADFValidationError(
            "Heading level must be a number between 1 and 6",
            f"{path}.attrs.level",
            _with_integer_hint(
                f"Got: {_show(level)}. Use level 1 for h1, 2 for h2, etc.",
                level,
                "Level",
            ),
        )

    _validate_inline_content(node, path, "Heading")


def _validate_list(node: dict[str, Any], path: str, label: str, node_type: str) -> None:
    """Bullet and ordered lists: a non-empty array of listItem nodes."""
    content = node.get("content", _MISSING)
    if not isinstance(content, list):
        raise ADFValidationError(
            f"{label} 'content' must be an array of listItem nodes",
            path,
            f"Got {_kind(content)}. "
            f"Example: {{type: '{node_type}', content: [{{type: 'listItem', content: [...]}}]}}",
        )

    if not content:
        raise ADFValidationError(
            f"{label} must have at least one listItem",
            path,
            "Empty lists are not allowed",
        )

    for index, item in enumerate(content):
        item_path = f"{path}.content[{index}]"
        item_type = _get(item, "type")
        if item_type != "listItem":
            raise ADFValidationError(
                f"{label} can only contain listItem nodes",
                item_path,
                f"Got type {_show(item_type)}. Expected 'listItem'",
            )
        _validate_list_item(item, item_path)


def _validate_bullet_list(node: dict[str, Any], path: str) -> None:
    _validate_list(node, path, "Bullet list", "bulletList")


def _validate_ordered_list(node: dict[str, Any], path: str) -> None:
    _validate_list(node, path, "Ordered list", "orderedList")


def _validate_list_item(node: dict[str, Any], path: str) -> None:
    content = node.get("content", _MISSING)
    if not isinstance(content, list):
        raise ADFValidationError(
            "List item 'content' must be an array of block nodes",
            path,
            f"Got {_kind(content)}. List items typically contain paragraph nodes",
        )

    if not content:
        raise ADFValidationError(
            "List item must have at least one block node",
            path,
            "Empty list items are not allowed",
        )

    for index, block in enumerate(content):
        _validate_block_node(block, f"{path}.content[{index}]")


def _validate_code_block(node: dict[str, Any], path: str) -> None:
    if "attrs" in node:
        attrs = node["attrs"]
        if not isinstance(attrs, dict):
            raise ADFValidationError(
                "Code block 'attrs' must be an object",
                path,
                f"Got {_kind(attrs)}. Optional attrs: {{language: 'javascript'}}",
            )
        if "language" in attrs and not isinstance(attrs["language"], str):
            raise ADFValidationError(
                "Code block language must be a string",
                f"{path}.attrs.language",
                f"Got {_kind(attrs['language'])}. Example: 'javascript', 'python', 'bash'",
            )

    if "content" not in node:
        return

    content = node["content"]
    if not isinstance(content, list):
        raise ADFValidationError(
            "Code block 'content' must be an array",
            path,
            f"Got {_kind(content)}",
        )

    for index, text_node in enumerate(content):
        text_path = f"{path}.content[{index}]"
        text_type = _get(text_node, "type")
        if text_type != "text":
            raise ADFValidationError(
                "Code block can only contain text nodes",
                text_path,
                f"Got type {_show(text_type)}. Code blocks can only have plain text nodes",
            )
        _validate_text_node(text_node, text_path, allow_marks=False)


_BLOCK_VALIDATORS = {
    "paragraph": _validate_paragraph,
    "heading": _validate_heading,
    "bulletList": _validate_bullet_list,
    "orderedList": _validate_ordered_list,
    "codeBlock": _validate_code_block,
    "listItem": _validate_list_item,
}

# --- Inline Nodes ---


def _validate_inline_node(node: Any, path: str) -> None:
    if not isinstance(node, dict):
        raise ADFValidationError(
            "Inline node must be an object",
            path,
            f"Received {_kind(node)}",
        )

    node_type = node.get("type")
    if not node_type or not isinstance(node_type, str):
        raise ADFValidationError(
            "Missing or invalid 'type' property",
            path,
            "Each inline node must have a 'type' string. "
            f"Valid inline types: {_enumerate(VALID_INLINE_TYPES)}",
        )

    if node_type not in VALID_INLINE_TYPES:
        raise ADFValidationError(
            f"Invalid inline node type '{node_type}'",
            path,
            f"Valid inline types are: {_enumerate(VALID_INLINE_TYPES)}",
        )

    if node_type == "text":
        _validate_text_node(node, path, allow_marks=True)
    # hardBreak carries nothing beyond its type


def _validate_text_node(node: dict[str, Any], path: str, *, allow_marks: bool) -> None:
    text = node.get("text", _MISSING)
    if not isinstance(text, str):
        raise ADFValidationError(
            "Text node must have a 'text' property with string value",
            path,
            f"Got: {_kind(text)}. Example: {{type: 'text', text: 'Hello world'}}",
        )

    if "marks" not in node:
        return

    if not allow_marks:
        raise ADFValidationError(
            "Text node in this context cannot have marks",
            path,
            "Marks (bold, italic, etc.) are not allowed here",
        )

    marks = node["marks"]
    if not isinstance(marks, list):
        raise ADFValidationError(
            "Text node 'marks' must be an array",
            path,
            f"Got {_kind(marks)}. Example: marks: [{{type: 'strong'}}, {{type: 'em'}}]",
        )

    for index, mark in enumerate(marks):
        _validate_mark(mark, f"{path}.marks[{index}]")


# --- Marks ---


def _validate_mark(mark: Any, path: str) -> None:
    if not isinstance(mark, dict):
        raise ADFValidationError(
            "Mark must be an object",
            path,
            f"Received {_kind(mark)}",
        )

    mark_type = mark.get("type")
    if not mark_type or not isinstance(mark_type, str):
        raise ADFValidationError(
            "Mark must have a 'type' property",
            path,
            f"Valid mark types: {_enumerate(VALID_MARK_TYPES)}",
        )

    if mark_type not in VALID_MARK_TYPES:
        raise ADFValidationError(
            f"Invalid mark type '{mark_type}'",
            path,
            "Valid mark types are: 'strong' (bold), 'em' (italic), "
            "'code' (inline code), 'link' (hyperlink)",
        )

    if mark_type != "link":
        return

    attrs = mark.get("attrs")
    if not isinstance(attrs, dict):
        raise ADFValidationError(
            "Link mark must have 'attrs' object",
            path,
            "Example: {type: 'link', attrs: {href: 'https://example.com'}}",
        )

    href = attrs.get("href", _MISSING)
    if not isinstance(href, str):
        raise ADFValidationError(
            "Link mark must have 'attrs.href' string",
            path,
            f"Got {_kind(href)}. Example: attrs: {{href: 'https://example.com'}}",
        )
