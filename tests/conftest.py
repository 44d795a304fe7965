from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The project's real rules file."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def sample_doc() -> dict:
    """Issue description exercising headings, marks and lists."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "heading",
                "attrs": {"level": 2},
                "content": [{"type": "text", "text": "Problem"}],
            },
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "The API returns ", "marks": []},
                    {"type": "text", "text": "500 errors", "marks": [{"type": "strong"}]},
                ],
            },
            {
                "type": "bulletList",
                "content": [
                    {
                        "type": "listItem",
                        "content": [
                            {
                                "type": "paragraph",
                                "content": [{"type": "text", "text": "Item 1"}],
                            }
                        ],
                    }
                ],
            },
        ],
    }
