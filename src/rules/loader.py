from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

_FENCE_OPEN = "```yaml"
_FENCE = "```"


def _extract_yaml(content: str) -> str:
    """
    Body of the first ```yaml fenced block, or the whole text if there is none.
    """
    lines = content.splitlines()
    start = next(
        (i for i, line in enumerate(lines) if line.strip().startswith(_FENCE_OPEN)),
        None,
    )
    if start is None:
        return content

    body: list[str] = []
    for line in lines[start + 1 :]:
        if line.strip().startswith(_FENCE):
            break
        body.append(line)
    return "\n".join(body)


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the file is empty, or the YAML or schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(_extract_yaml(path.read_text(encoding="utf-8")))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        raise ValueError(f"Rules file is empty: {path}")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
