import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.issue_tracker_stub import InMemoryIssueTracker
from src.adapters.rules_adapter import RulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("LAB_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


def get_rules_adapter(rules: Rules = Depends(get_rules)) -> RulesAdapter:
    return RulesAdapter(rules)


# --- Tracker ---
# Process-wide: the stub keeps issues in memory between requests.
@lru_cache
def get_issue_tracker() -> InMemoryIssueTracker:
    return InMemoryIssueTracker()
