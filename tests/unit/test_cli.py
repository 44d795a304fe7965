"""
Tests for the command line interface.
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from src.app_shell.cli import main


def _write(tmp_path: Path, value: object, name: str = "doc.json") -> str:
    path = tmp_path / name
    path.write_text(json.dumps(value))
    return str(path)


class TestValidateCommand:
    """cli validate."""

    def test_valid(
        self, tmp_path: Path, rules_path: Path, sample_doc: dict, capsys: pytest.CaptureFixture
    ) -> None:
        path = _write(tmp_path, sample_doc)

        code = main(["--rules", str(rules_path), "validate", path])

        assert code == 0
        assert "valid" in capsys.readouterr().out

    def test_invalid(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = _write(tmp_path, {"type": "doc", "version": 1, "content": [{"type": "table"}]})

        code = main(["validate", "--no-limits", path])

        out = capsys.readouterr().out
        assert code == 1
        assert "invalid at content[0]: Invalid block node type 'table'" in out

    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = _write(tmp_path, {"type": "page"})

        code = main(["validate", "--no-limits", "--json", path])

        assert code == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["path"] == "root"
        assert "type must be 'doc'" in payload["message"]

    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, sample_doc: dict, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(sample_doc)))

        assert main(["validate", "--no-limits", "-"]) == 0

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(SystemExit) as exc:
            main(["validate", "--no-limits", str(path)])
        assert exc.value.code == 2

    def test_missing_rules(self, tmp_path: Path, sample_doc: dict) -> None:
        path = _write(tmp_path, sample_doc)

        with pytest.raises(SystemExit) as exc:
            main(["--rules", str(tmp_path / "absent.yaml"), "validate", path])
        assert exc.value.code == 1


class TestLimitsCommand:
    """cli limits."""

    def test_within(
        self, tmp_path: Path, rules_path: Path, sample_doc: dict, capsys: pytest.CaptureFixture
    ) -> None:
        path = _write(tmp_path, sample_doc)

        code = main(["--rules", str(rules_path), "limits", path])

        assert code == 0
        assert "depth 4" in capsys.readouterr().out

    def test_exceeded(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        rules = tmp_path / "rules.yaml"
        rules.write_text("project:\n  slug: t\n  rules_version: '1'\nadf:\n  max_depth: 1\n")
        paragraph = {"type": "paragraph", "content": [{"type": "text", "text": "x"}]}
        path = _write(tmp_path, {"type": "doc", "version": 1, "content": [paragraph]})

        code = main(["--rules", str(rules), "limits", path])

        out = capsys.readouterr().out
        assert code == 1
        assert "content[0].content[0]" in out
