"""
ADF component unit tests.

Tests for validation output conversion and upstream size/depth caps.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from src.components.adf import (
    CheckLimitsInput,
    ValidateADFInput,
    ValidateADFOutput,
    check_limits,
    measure_depth,
    run,
    run_check_limits,
    run_validate,
)

# --- Mock Rules Port ---


class MockRules:
    """Fixed limits for testing."""

    def __init__(self, max_json_bytes: int = 400_000, max_depth: int = 64) -> None:
        self._max_json_bytes = max_json_bytes
        self._max_depth = max_depth

    def get_max_json_bytes(self) -> int:
        return self._max_json_bytes

    def get_max_depth(self) -> int:
        return self._max_depth


# --- Helpers ---


def nested_list(depth: int) -> dict[str, Any]:
    """Bullet lists nested ``depth`` times, innermost holding a paragraph."""
    node: dict[str, Any] = {"type": "paragraph", "content": [{"type": "text", "text": "leaf"}]}
    for _ in range(depth):
        node = {"type": "bulletList", "content": [{"type": "listItem", "content": [node]}]}
    return node


def deep_attrs(depth: int) -> dict[str, Any]:
    """Code block whose attrs hide ``depth`` levels of nested objects."""
    attrs: dict[str, Any] = {}
    for _ in range(depth):
        attrs = {"nested": attrs}
    return {"type": "codeBlock", "attrs": attrs}


# --- Fixtures ---


@pytest.fixture
def valid_doc() -> dict[str, Any]:
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "Hello", "marks": [{"type": "strong"}]},
                ],
            }
        ],
    }


@pytest.fixture
def invalid_doc() -> dict[str, Any]:
    return {
        "type": "doc",
        "version": 1,
        "content": [{"type": "heading", "content": []}],
    }


# --- Validation ---


class TestRunValidate:
    """run_validate converts the core error into an output."""

    def test_valid_document(self, valid_doc: dict[str, Any]) -> None:
        result = run_validate(ValidateADFInput(document=valid_doc))

        assert result.is_valid is True
        assert result.success is True
        assert result.error is None
        assert result.document is valid_doc

    def test_invalid_document(self, invalid_doc: dict[str, Any]) -> None:
        result = run_validate(ValidateADFInput(document=invalid_doc))

        assert result.is_valid is False
        assert result.document is None
        assert result.error is not None
        assert result.error.message == "Heading must have 'attrs' object"
        assert result.error.path == "content[0]"
        assert result.error.details is not None

    def test_non_object_document(self) -> None:
        result = run_validate(ValidateADFInput(document="doc"))

        assert result.is_valid is False
        assert result.error is not None
        assert result.error.path == "root"

    def test_failure_logged(
        self, invalid_doc: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="src.components.adf.component"):
            run_validate(ValidateADFInput(document=invalid_doc))

        assert "ADF validation failed" in caplog.text

    def test_limits_applied_with_rules(self, valid_doc: dict[str, Any]) -> None:
        """An otherwise valid document over the size cap is rejected."""
        result = run_validate(
            ValidateADFInput(document=valid_doc), rules=MockRules(max_json_bytes=10)
        )

        assert result.is_valid is False
        assert result.error is not None
        assert result.error.path == "root"
        assert "exceeds limit 10B" in result.error.message

    def test_limits_skipped_without_rules(self) -> None:
        value = {"type": "doc", "version": 1, "content": [nested_list(50)]}
        result = run_validate(ValidateADFInput(document=value))
        assert result.is_valid is True

    def test_hidden_deep_nesting_with_rules(self) -> None:
        value = {"type": "doc", "version": 1, "content": [deep_attrs(100_000)]}
        result = run_validate(ValidateADFInput(document=value), rules=MockRules())

        assert result.is_valid is False
        assert result.error is not None
        assert result.error.path == "root"

    def test_grammar_checked_after_limits(self, invalid_doc: dict[str, Any]) -> None:
        result = run_validate(ValidateADFInput(document=invalid_doc), rules=MockRules())
        assert result.error is not None
        assert result.error.message == "Heading must have 'attrs' object"


# --- Limits ---


class TestMeasureDepth:
    """Depth counts content/marks nesting below the root."""

    def test_empty_document(self) -> None:
        assert measure_depth({"type": "doc", "version": 1, "content": []}) == 0

    def test_paragraph_with_mark(self, valid_doc: dict[str, Any]) -> None:
        # paragraph (1) -> text (2) -> mark (3)
        assert measure_depth(valid_doc) == 3

    def test_nested_lists(self) -> None:
        value = {"type": "doc", "version": 1, "content": [nested_list(2)]}
        # list, item, list, item, paragraph, text
        assert measure_depth(value) == 6

    def test_non_object(self) -> None:
        assert measure_depth("not a doc") == 0

    def test_deep_input_does_not_recurse(self) -> None:
        """Far beyond the interpreter recursion limit."""
        value = {"type": "doc", "version": 1, "content": [nested_list(2000)]}
        assert measure_depth(value) == 4002

    def test_nesting_outside_content_not_counted(self) -> None:
        value = {"type": "doc", "version": 1, "content": [deep_attrs(10)]}
        assert measure_depth(value) == 1


class TestCheckLimits:
    """Size and depth caps."""

    def test_within_limits(self, valid_doc: dict[str, Any]) -> None:
        assert check_limits(valid_doc, max_json_bytes=10_000, max_depth=10) is None

    def test_depth_exceeded_path(self) -> None:
        value = {"type": "doc", "version": 1, "content": [nested_list(2)]}
        issue = check_limits(value, max_json_bytes=10_000, max_depth=2)

        assert issue is not None
        assert issue.path == "content[0].content[0].content[0]"
        assert "maximum depth of 2" in issue.message

    def test_depth_checked_before_size(self) -> None:
        value = {"type": "doc", "version": 1, "content": [nested_list(3)]}
        issue = check_limits(value, max_json_bytes=1, max_depth=1)

        assert issue is not None
        assert "depth" in issue.message

    def test_size_exceeded(self, valid_doc: dict[str, Any]) -> None:
        issue = check_limits(valid_doc, max_json_bytes=20, max_depth=10)

        assert issue is not None
        assert issue.path == "root"
        assert "exceeds limit 20B" in issue.message

    def test_size_counts_utf8_bytes(self) -> None:
        """Non-ASCII text is measured as compact UTF-8, not \\u escapes."""
        value = {
            "type": "doc",
            "version": 1,
            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "日" * 1000}]}],
        }
        # 91 bytes of structure, 3000 of text, 6 closing
        assert check_limits(value, max_json_bytes=3097, max_depth=64) is None

        issue = check_limits(value, max_json_bytes=3096, max_depth=64)
        assert issue is not None
        assert issue.message == "Document 3097B exceeds limit 3096B"

    def test_hidden_deep_nesting(self) -> None:
        """Nesting under attrs is reported, not raised."""
        value = {"type": "doc", "version": 1, "content": [deep_attrs(100_000)]}
        issue = check_limits(value, max_json_bytes=400_000, max_depth=64)

        assert issue is not None
        assert issue.path == "root"
        assert issue.message == "Document nesting is too deep to serialize"

    def test_not_serializable(self) -> None:
        value = {"type": "doc", "version": 1, "content": [{"type": "paragraph", "x": object()}]}
        issue = check_limits(value, max_json_bytes=10_000, max_depth=10)

        assert issue is not None
        assert issue.message == "Document is not JSON serializable"


class TestRunCheckLimits:
    """run_check_limits reports depth alongside the result."""

    def test_within_limits(self, valid_doc: dict[str, Any]) -> None:
        result = run_check_limits(CheckLimitsInput(document=valid_doc), rules=MockRules())

        assert result.within_limits is True
        assert result.depth == 3
        assert result.error is None

    def test_exceeded(self, valid_doc: dict[str, Any]) -> None:
        result = run_check_limits(
            CheckLimitsInput(document=valid_doc), rules=MockRules(max_depth=2)
        )

        assert result.within_limits is False
        assert result.error is not None
        assert result.error.path == "content[0].content[0].marks[0]"


# --- Dispatcher ---


class TestRun:
    """run dispatches on input type."""

    def test_validate_input(self, valid_doc: dict[str, Any]) -> None:
        result = run(ValidateADFInput(document=valid_doc))
        assert isinstance(result, ValidateADFOutput)
        assert result.is_valid is True

    def test_limits_input_requires_rules(self, valid_doc: dict[str, Any]) -> None:
        with pytest.raises(ValueError, match="requires a rules port"):
            run(CheckLimitsInput(document=valid_doc))

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]
